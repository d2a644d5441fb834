from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import Answer, IMessageService
from .view import IWorkspaceView

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "IWorkspaceView",
    "Answer",
]
