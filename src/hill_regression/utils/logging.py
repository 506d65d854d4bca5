import json
import logging
import os
import sys
import time
from logging import Logger
from typing import List, Optional

PACKAGE_LOGGER = "hill_regression"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, timestamped in UTC."""

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def resolve_level(level: Optional[str] = None) -> int:
    """Explicit level, else LOG_LEVEL, else INFO. Unknown names map to INFO."""
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: Optional[str] = None, json_output: bool = False, log_file: Optional[str] = None) -> None:
    """
    Route all records to stdout (and optionally a file) with either the text or JSON layout.

    Replaces any handlers already installed on the root logger.
    """
    formatter: logging.Formatter = (
        JsonFormatter() if json_output else logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    )
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=resolve_level(level), handlers=handlers, force=True)


def get_logger(name: str) -> Logger:
    """Return a logger namespaced under the package logger."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
