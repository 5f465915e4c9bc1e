"""Logging setup: append-only log file plus optional console output."""

import logging
import sys
from typing import List

from .models.settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> List[logging.Handler]:
    """Attach file and console handlers to the root logger.

    The file sink is skipped (with a note on stderr) if the log file cannot be
    opened. A sink whose level is ``off`` is not created at all.

    Args:
        settings: Loaded daemon settings

    Returns:
        The handlers that were installed
    """
    root_logger = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    file_level = settings.log_file_level.to_logging_level()
    if file_level is not None:
        try:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
        except OSError as e:
            print(f"Cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        else:
            file_handler.setLevel(file_level)
            handlers.append(file_handler)

    console_level = settings.log_console_level.to_logging_level()
    if console_level is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        handlers.append(console_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if handlers:
        root_logger.setLevel(min(handler.level for handler in handlers))
    else:
        # Both sinks off: drop everything instead of falling back to lastResort
        root_logger.addHandler(logging.NullHandler())

    logger.info(f"Using settings {settings}")
    return handlers
