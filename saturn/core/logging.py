"""Logging setup for the client and the HTTP service."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(
    level: str | int = logging.INFO,
    log_file: str | None = None,
    logger_name: str = "saturn",
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger.

    Existing handlers are replaced so repeated calls do not duplicate output.
    """

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
