"""
Logging configuration for admin-forms.

All modules log through named standard-library loggers
(``admin-forms`` for the engine, ``admin-forms-mcp`` for the MCP server).
This module wires them to the console and, optionally, to a JSON Lines
file for later analysis.
"""

import json
import logging

LOGGER_NAMES = ("admin-forms", "admin-forms-mcp")


class JsonLinesFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    level: str | int = "INFO",
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure logging for admin-forms.

    Args:
        level: Log level for the admin-forms loggers.
        console: Whether to log to the console (stderr).
        verbose: Whether to include DEBUG records such as per-form validation outcomes.
        file_path: Optional file path to write JSON Lines records to.

    Example:
        >>> from admin_forms.logs import setup_logging
        >>> setup_logging(verbose=True, file_path="admin-forms.jsonl")
    """
    handlers: list[logging.Handler] = []

    if console:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        handlers.append(handler)

    if file_path:
        handler = logging.FileHandler(file_path)
        handler.setFormatter(JsonLinesFormatter())
        handlers.append(handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG if verbose else level)
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = not handlers


def disable_logging() -> None:
    """Silence all admin-forms loggers."""
    for name in LOGGER_NAMES:
        logging.getLogger(name).disabled = True


def enable_logging() -> None:
    """Re-enable admin-forms loggers after ``disable_logging``."""
    for name in LOGGER_NAMES:
        logging.getLogger(name).disabled = False
