"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and an optional file handler.  Two formats are supported: the
plain text format (timestamp, logger name, level and message) and a
JSON lines format whose records carry only ``message`` and ``level``,
which is the shape of the events emitted by the request handlers.
This module ensures that logging is set up exactly once per process.
"""

import json
import logging
from pathlib import Path
from typing import Optional


class JsonFormatter(logging.Formatter):
    """Render a record as ``{"message": ..., "level": ...}``."""

    def format(self, record: logging.LogRecord) -> str:
        event = {"message": record.getMessage(), "level": record.levelname.lower()}
        if record.exc_info:
            event["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(event, ensure_ascii=False)


def build_formatter(fmt: str = "text") -> logging.Formatter:
    """Return the formatter for ``fmt`` (``"text"`` or ``"json"``)."""
    if fmt.lower() == "json":
        return JsonFormatter()
    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, fmt: str = "text") -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.  Paths are resolved relative to the
        current working directory.  With several worker processes
        every replica appends to the same file.
    fmt : str
        ``"text"`` or ``"json"``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. by pytest or by an earlier
        # ``create_app`` call in the same process.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = build_formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
