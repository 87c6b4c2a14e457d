"""Token and symbol types shared by the lexer, the converter and the evaluator."""
from enum import Enum
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field


INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


class Operator(str, Enum):
    """Binary operators, valued by their literal."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# Higher binds tighter, equal ranks are resolved left to right
PRECEDENCE: Dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
}


class BracketKind(str, Enum):
    OPEN = "("
    CLOSE = ")"


class NumberToken(BaseModel):
    """Integer literal."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Signed 32-bit value")


class OperatorToken(BaseModel):
    """One of the four binary operators."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Operator carried by the token")

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.operator]


class BracketToken(BaseModel):
    """Opening or closing parenthesis."""

    model_config = ConfigDict(frozen=True)

    kind: BracketKind = Field(..., description="Which parenthesis")


Token = Union[NumberToken, OperatorToken, BracketToken]

# Flat alphabet of the evaluator: an operator or a plain integer
Symbol = Union[Operator, int]

OPEN_BRACKET = BracketToken(kind=BracketKind.OPEN)
CLOSE_BRACKET = BracketToken(kind=BracketKind.CLOSE)
