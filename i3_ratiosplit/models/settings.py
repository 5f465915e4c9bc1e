"""Daemon settings model."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_RATIO = 0.33
DEFAULT_LOG_PATH = "~/.config/i3/ratiosplit.log"


class LogLevel(str, Enum):
    """Log severity names accepted in the config file."""

    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @classmethod
    def from_str(cls, value: str) -> "LogLevel":
        """Parse level from string (case-insensitive, ``warning`` is an alias of ``warn``).

        Raises:
            ValueError: If value is not a valid level
        """
        normalized = value.strip().lower()
        if normalized == "warning":
            normalized = "warn"
        try:
            return cls(normalized)
        except ValueError:
            valid_levels = ", ".join(level.value for level in cls)
            raise ValueError(
                f"Invalid log level: {value!r}. Must be one of: {valid_levels}"
            )

    def to_logging_level(self) -> Optional[int]:
        """Standard logging level, or None when the sink is switched off."""
        return {
            LogLevel.OFF: None,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            # Python logging has no level below DEBUG in common use
            LogLevel.TRACE: logging.DEBUG,
        }[self]


class Settings(BaseModel):
    """Process-wide settings, loaded once at startup and never reloaded."""

    ratio: float = Field(DEFAULT_RATIO, description="Fraction of the split given to the new window", gt=0, lt=1)
    log_file: Path = Field(Path(DEFAULT_LOG_PATH).expanduser(), description="Append-only log file")
    log_file_level: LogLevel = Field(LogLevel.INFO, description="File sink level")
    log_console_level: LogLevel = Field(LogLevel.OFF, description="Console sink level")

    model_config = {"frozen": True}

    @field_validator("log_file_level", "log_console_level", mode="before")
    @classmethod
    def parse_level(cls, v):
        if isinstance(v, str):
            return LogLevel.from_str(v)
        return v

    @property
    def ratio_percent(self) -> int:
        """Ratio as an i3 ppt value (0.33 -> 33), kept within 1..99."""
        return min(max(round(self.ratio * 100), 1), 99)
