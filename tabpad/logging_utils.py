from __future__ import annotations

import logging
import sys

from tabpad.utils.constants import DEFAULT_LOG_LEVEL

LOG_LEVEL_OPTIONS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "[%(levelname)s] [%(asctime)s] [%(name)s] %(message)s"


def normalize_log_level_name(value: object, default: str = DEFAULT_LOG_LEVEL) -> str:
    text = str(value or "").strip().upper()
    return text if text in LOG_LEVEL_OPTIONS else str(default).strip().upper()


def configure_logging(level: object = DEFAULT_LOG_LEVEL) -> str:
    """Attach one stderr handler to the root logger. Safe to call repeatedly."""
    level_name = normalize_log_level_name(level)
    root_logger = logging.getLogger()
    handler = None
    for existing in root_logger.handlers:
        if getattr(existing, "_tabpad_handler", False):
            handler = existing
            break
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler._tabpad_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level_name))
    return level_name
