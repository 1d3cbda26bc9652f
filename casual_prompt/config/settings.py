from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Runtime settings loaded from environment / .env file.

    Everything here is presentation or process policy. What to ask and how
    to validate it always comes from the call site, never from config.
    """

    # ------------------------------------------------------------------
    # Diagnostics
    # Written to the line source after a parse or validation failure.
    # `{raw}` is replaced by the trimmed line that was rejected.
    # ------------------------------------------------------------------
    diagnostic_template: str = Field(
        default="error: invalid value '{raw}'",
        alias="CASUAL_DIAGNOSTIC_TEMPLATE",
    )

    # ------------------------------------------------------------------
    # Fatal entry points (get / confirm) exit with this status on
    # end-of-input.
    # ------------------------------------------------------------------
    abort_exit_code: int = Field(
        default=1,
        alias="CASUAL_ABORT_EXIT_CODE",
        ge=1,
        le=255,
    )

    # ------------------------------------------------------------------
    # Optional YAML file replacing the default yes/no vocabulary:
    #   yes: [y, yes]
    #   no:  [n, no]
    # ------------------------------------------------------------------
    confirm_policy_path: Path | None = Field(
        default=None,
        alias="CASUAL_CONFIRM_POLICY",
    )

    model_config = {
        "env_file": ".env",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("diagnostic_template")
    @classmethod
    def require_raw_placeholder(cls, v: str) -> str:
        if "{raw}" not in v:
            raise ValueError("diagnostic_template must contain '{raw}'")
        return v

    def format_diagnostic(self, raw: str) -> str:
        # str.replace keeps stray braces in user input from being interpreted
        return self.diagnostic_template.replace("{raw}", raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
