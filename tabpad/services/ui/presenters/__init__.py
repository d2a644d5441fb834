from __future__ import annotations

from .workspace_presenter import WorkspacePresenter

__all__ = ["WorkspacePresenter"]
