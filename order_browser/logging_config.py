from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "ORDER_BROWSER_LOG_FORMAT"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_log_format(force_format: Optional[str] = None) -> str:
    if force_format is not None:
        return force_format.lower()
    return os.getenv(LOG_FORMAT_ENV, "json").lower()


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the app

    Modes:
    - JSON (default) in prod, structured `extra` fields end up as JSON keys
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var ORDER_BROWSER_LOG_FORMAT
        3) default = "json"
    """
    format_mode = resolve_log_format(force_format)

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT)

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
