"""Pydantic models for evaluation requests and results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class EvaluationRequest(BaseModel):
    """A single line of infix input."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Arithmetic expression as a string")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class EvaluationResult(BaseModel):
    """Outcome of evaluating one expression: either a value or an error."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    postfix: Optional[str] = Field(default=None, description="Expression rendered in postfix order")
    result: Optional[int] = Field(default=None, description="Evaluated integer result")
    error: Optional[str] = Field(default=None, description="Error message when evaluation failed")
    error_code: Optional[str] = Field(default=None, description="Stable code of the error")

    @model_validator(mode="after")
    def result_xor_error(self) -> "EvaluationResult":
        """Exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def format(self) -> str:
        """Render as a results line, e.g. ``3 + 4 = 7`` or ``3 + -> ERROR: ...``."""
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
