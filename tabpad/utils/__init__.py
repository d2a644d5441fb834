"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SUFFIX,
    FILE_FILTER,
    MAX_RECENTS,
    RECENTS_FILE_NAME,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "MAX_RECENTS",
    "RECENTS_FILE_NAME",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_LOG_LEVEL",
    "FILE_FILTER",
    "DEFAULT_SUFFIX",
]
