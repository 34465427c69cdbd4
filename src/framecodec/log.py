"""Logging configuration using structlog.

Lines are rendered as 'HH:MM:SS LVL event key=value ...':
    12:30:45 INF encoded image format=nv21 width=720 height=720
    12:30:45 DBG conversion complete time_ms=12
    12:30:46 ERR invalid image check=buffer_length
"""

import logging
import sys
from datetime import datetime
from typing import TextIO

import structlog

# 3-letter level names keep the event column aligned
LEVEL_NAMES = {
    "debug": "DBG",
    "info": "INF",
    "warning": "WRN",
    "error": "ERR",
    "critical": "CRT",
}

_debug_enabled = False


def _stamp(logger, method_name, event_dict):
    """Add wall-clock time and the short level name."""
    level = event_dict.get("level", method_name)
    event_dict["level"] = LEVEL_NAMES.get(level, level.upper()[:3])
    event_dict["timestamp"] = datetime.now().strftime("%H:%M:%S")
    return event_dict


def _format_value(value) -> str:
    if isinstance(value, str) and " " in value:
        return f'"{value}"'
    return str(value)


def _render(logger, method_name, event_dict):
    """Render the event dict as a single console line."""
    head = [event_dict.pop("timestamp", ""), event_dict.pop("level", "???"), event_dict.pop("event", "")]
    fields = [f"{key}={_format_value(value)}" for key, value in event_dict.items() if not key.startswith("_")]
    return " ".join(head + fields)


def configure(level: str = "INFO", debug: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog for console output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        debug: If True, overrides level with DEBUG.
        stream: Where to write lines. Defaults to the current sys.stdout.
    """
    global _debug_enabled
    if debug:
        level = "DEBUG"
    _debug_enabled = level.upper() == "DEBUG"

    structlog.configure(
        processors=[structlog.stdlib.add_log_level, _stamp, _render],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, bound to a component name if one is given."""
    logger = structlog.get_logger()
    if name:
        return logger.bind(logger=name)
    return logger


def is_debug_enabled() -> bool:
    """Check if debug logging is enabled."""
    return _debug_enabled
