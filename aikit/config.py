"""Parser settings read from the environment."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from aikit.errors import ConfigError

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ParserSettings(BaseModel):
    """Knobs for the extraction pipeline. All have safe defaults."""
    strict: bool = Field(
        default=False,
        description="Decode in pydantic strict mode (no str-to-int style coercion)",
    )
    log_preview_chars: int = Field(
        default=200,
        ge=0,
        description="Max characters of a payload shown in debug logs",
    )
    log_level: str = Field(default="INFO", description="Level used by setup_logging")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env: Optional[dict] = None) -> ParserSettings:
    """
    Build settings from AIKIT_* environment variables.

    ``env`` overrides individual values without touching os.environ.
    """
    values = {
        "strict": _env_bool("AIKIT_STRICT_DECODE", False),
        "log_preview_chars": os.getenv("AIKIT_LOG_PREVIEW_CHARS", "200"),
        "log_level": os.getenv("AIKIT_LOG_LEVEL", "INFO"),
    }
    if env:
        values.update(env)
    try:
        return ParserSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid aikit settings: {e}") from e
