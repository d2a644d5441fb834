"""Domain layer: interfaces, result values and the per-tab document model."""

from .interfaces import IAppConfig, IConfigService, IFileService, ITextBuffer
from .models import DocumentState, StringBuffer, same_path
from .results import CANCELLED, OK, IoError, Ok, Result, UserCancelled

__all__ = [
    "ITextBuffer",
    "IFileService",
    "IConfigService",
    "IAppConfig",
    "DocumentState",
    "StringBuffer",
    "same_path",
    "Ok",
    "IoError",
    "UserCancelled",
    "Result",
    "OK",
    "CANCELLED",
]
