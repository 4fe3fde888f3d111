"""Logging configuration helpers."""

import logging
import os
from typing import Any, Mapping, Optional, Sequence

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ACCESS_LOGGER_NAME = "dataplot.access"


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler used by the service process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a configured logger for the backend service."""
    logger = logging.getLogger(name or "dataplot")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def get_access_logger(log_path: str) -> logging.Logger:
    """Return the request logger appending to ``log_path``.

    Lines are written verbatim; formatting is done by
    :func:`format_access_line`. Each log file gets its own logger, so
    applications writing to different files never share a handler.
    """
    file_path = os.path.abspath(log_path)
    logger = logging.getLogger(f"{ACCESS_LOGGER_NAME}.{file_path}")
    if not logger.handlers:
        handler = logging.FileHandler(file_path, mode="a", encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def format_access_line(fields: Sequence[str], values: Mapping[str, Any]) -> str:
    """Join the requested ``fields`` of ``values``; unknown fields become ``-``."""
    parts = []
    for name in fields:
        value = values.get(name)
        parts.append("-" if value is None or value == "" else str(value))
    return " ".join(parts)
