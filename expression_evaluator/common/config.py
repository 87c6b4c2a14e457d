"""Runtime configuration loaded from environment variables."""
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Settings of the expression evaluator.

    Every field can be overridden with an environment variable prefixed with
    ``EXPRESSION_EVALUATOR_`` (e.g. ``EXPRESSION_EVALUATOR_MAX_DEPTH=64``).
    """

    model_config = SettingsConfigDict(env_prefix="EXPRESSION_EVALUATOR_", extra="ignore")

    log_level: LogLevel = Field(default="WARNING", description="Logging level of the application logger")
    # Each nesting level costs one interpreter frame, keep well below the recursion limit
    max_depth: int = Field(default=256, ge=1, le=500, description="Maximum operator nesting depth")
    prompt: str = Field(
        default="Input an equation or 'exit' to exit: ",
        description="Prompt printed by the interactive shell",
    )
    exit_command: str = Field(default="exit", description="Line that stops the interactive shell")

    @field_validator("log_level", mode="before")
    def log_level_upper_case(cls, v):
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


settings = Settings()
