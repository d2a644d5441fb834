from __future__ import annotations

from typing import Protocol, runtime_checkable

from tabpad.domain.interfaces import ITextBuffer
from tabpad.domain.models import DocumentState


@runtime_checkable
class IWorkspaceView(Protocol):
    """Passive tabbed view driven by WorkspacePresenter (implemented by the Qt MainWindow)."""

    # tabs
    def create_buffer(self) -> ITextBuffer:
        """Create a fresh editor widget for a document that is about to get a tab."""
        ...

    def discard_buffer(self, buffer: ITextBuffer) -> None:
        """Release a buffer that never made it into a tab."""
        ...

    def add_tab(self, doc: DocumentState, label: str) -> None: ...
    def remove_tab(self, doc: DocumentState) -> None: ...
    def activate_tab(self, doc: DocumentState) -> None: ...
    def set_tab_label(self, doc: DocumentState, label: str) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_document_actions_enabled(self, enabled: bool) -> None: ...

    # recents
    def set_recents(self, items: list[str]) -> None: ...
