"""Application settings.

Centralises environment variables (pydantic-settings) so that the CLI
and the store read configuration the same way.  Command-line flags are
applied on top as explicit overrides.

Environment
-----------
``ANIMAL_RECORDS_ROOT``
    Collection root directory (default ``animals``).
``ANIMAL_RECORDS_LOG_LEVEL``
    Minimum log level written to stderr (default ``WARNING``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from animal_records.exceptions import InvalidArgumentError

ENV_PREFIX: str = "ANIMAL_RECORDS_"

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Central configuration of the application."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
    )

    root: Path = Field(
        default=Path("animals"),
        description="Directory under which the per-kind collections live.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum log level written to stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment with explicit *overrides*.

    ``None`` overrides are ignored so that absent CLI flags fall back
    to the environment.

    Raises
    ------
    InvalidArgumentError
        If a setting fails validation.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidArgumentError(
            f"Invalid configuration: {errors}",
            hint=f"Check the {ENV_PREFIX}* environment variables.",
        ) from exc
