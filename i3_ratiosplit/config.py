"""Configuration loader for the ratio split daemon.

Reads ``~/.config/i3/ratiosplit.ini``:

    [main]
    ratio = 0.33
    log_file = ~/.config/i3/ratiosplit.log
    log_file_level = info
    log_console_level = off

A missing file, a missing ``[main]`` section, or an unparsable value falls back
to the default for that value. Configuration problems are never fatal.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional

from .models.settings import DEFAULT_LOG_PATH, DEFAULT_RATIO, LogLevel, Settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/i3/ratiosplit.ini"
MAIN_SECTION = "main"


def expand_path(value: str) -> Path:
    """Expand ``~`` and environment variables in a configured path."""
    return Path(os.path.expandvars(os.path.expanduser(value)))


def default_settings() -> Settings:
    return Settings(
        ratio=DEFAULT_RATIO,
        log_file=expand_path(DEFAULT_LOG_PATH),
        log_file_level=LogLevel.INFO,
        log_console_level=LogLevel.OFF,
    )


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from the INI file.

    Args:
        config_file: Path to the INI file (defaults to ~/.config/i3/ratiosplit.ini)

    Returns:
        Settings with every unreadable value replaced by its default
    """
    if config_file is None:
        config_file = expand_path(DEFAULT_CONFIG_PATH)

    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        read_files = parser.read(config_file, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning(f"Error {e} loading settings from {config_file}, using defaults")
        return default_settings()

    if not read_files:
        logger.warning(f"Settings file {config_file} not found, using defaults")
        return default_settings()

    if not parser.has_section(MAIN_SECTION):
        logger.warning(f"No [{MAIN_SECTION}] section found in {config_file}, using defaults")
        return default_settings()

    section = parser[MAIN_SECTION]

    settings = Settings(
        ratio=_get_ratio(section),
        log_file=expand_path(section.get("log_file", DEFAULT_LOG_PATH)),
        log_file_level=_get_level(section, "log_file_level", LogLevel.INFO),
        log_console_level=_get_level(section, "log_console_level", LogLevel.OFF),
    )
    logger.debug(f"Loaded settings from {config_file}: {settings}")
    return settings


def _get_ratio(section: configparser.SectionProxy) -> float:
    raw = section.get("ratio")
    if raw is None:
        return DEFAULT_RATIO

    try:
        ratio = float(raw)
    except ValueError:
        logger.warning(f"Invalid ratio {raw!r}, using default {DEFAULT_RATIO}")
        return DEFAULT_RATIO

    if not 0 < ratio < 1:
        logger.warning(f"Ratio {ratio} outside (0, 1), using default {DEFAULT_RATIO}")
        return DEFAULT_RATIO

    return ratio


def _get_level(section: configparser.SectionProxy, key: str, default: LogLevel) -> LogLevel:
    raw = section.get(key)
    if raw is None:
        return default

    try:
        return LogLevel.from_str(raw)
    except ValueError as e:
        logger.warning(f"{e}; using default {key}={default.value}")
        return default
