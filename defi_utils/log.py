"""Logging setup for the defi_utils command line."""

import logging
import sys
from typing import Optional

from defi_utils.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant, INFO if unknown."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: Optional[Config] = None, log_level: Optional[str] = None) -> None:
    """Send defi_utils log records to stdout.

    Library modules only create loggers; the CLI calls this once.

    Args:
        config: Config object (uses log_level from config if provided)
        log_level: Override log level (takes precedence over config)
    """
    logging.basicConfig(
        level=resolve_level(log_level or (config.log_level if config else None)),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
