from __future__ import annotations

import logging
from pathlib import Path

from tabpad.domain.interfaces import IFileService
from tabpad.domain.models import DIRTY_MARK, UNTITLED, DocumentState
from tabpad.domain.results import CANCELLED, IoError, Result
from tabpad.services.recent_files import RecentFiles
from tabpad.services.ui.ports.dialogs import IFileDialogService
from tabpad.services.ui.ports.messages import Answer, IMessageService
from tabpad.services.ui.ports.view import IWorkspaceView
from tabpad.utils.constants import APP_NAME, DEFAULT_SUFFIX, FILE_FILTER

log = logging.getLogger(__name__)


class WorkspacePresenter:
    """
    Owns the open documents (one per tab) and coordinates them with the
    recent-files list and the UI ports.

    The view only forwards user gestures here; every decision about opening,
    saving and closing tabs is made by this class.
    """

    def __init__(
        self,
        view: IWorkspaceView,
        files: IFileService,
        recent: RecentFiles,
        messages: IMessageService,
        dialogs: IFileDialogService,
    ) -> None:
        self.view = view
        self.files = files
        self.recent = recent
        self.messages = messages
        self.dialogs = dialogs

        self.documents: list[DocumentState] = []
        self._active: DocumentState | None = None
        self._untitled_counter = 1

        self.refresh_recents()
        self._update_chrome()

    # ---------- queries ----------
    @property
    def active(self) -> DocumentState | None:
        return self._active

    @property
    def has_documents(self) -> bool:
        return bool(self.documents)

    def find(self, path: Path | str) -> DocumentState | None:
        for doc in self.documents:
            if doc.same_file(path):
                return doc
        return None

    # ---------- tab lifecycle ----------
    def new_document(self) -> DocumentState:
        doc = DocumentState(
            self.view.create_buffer(), self.files, untitled_index=self._untitled_counter
        )
        self._untitled_counter += 1
        self._add(doc)
        return doc

    def open_document(self, path: Path) -> DocumentState | None:
        existing = self.find(path)
        if existing is not None:
            self.activate(existing)
            return existing

        doc = DocumentState(self.view.create_buffer(), self.files)
        result = doc.open(Path(path))
        if isinstance(result, IoError):
            self.view.discard_buffer(doc.buffer)
            self.messages.error(self.view, "Open Error", f"Failed to open file:\n{result.message}")
            return None
        self._add(doc)
        self._remember(doc)
        return doc

    def open_via_dialog(self) -> DocumentState | None:
        start = str(self._active.path.parent) if self._active and self._active.path else None
        path = self.dialogs.get_open_file(self.view, "Open", start, FILE_FILTER)
        if path is None:
            return None
        return self.open_document(path)

    def open_recent(self, index: int) -> DocumentState | None:
        items = self.recent.list()
        if not 0 <= index < len(items):
            return None
        return self.open_document(Path(items[index]))

    def activate(self, doc: DocumentState) -> None:
        self._active = doc
        self.view.activate_tab(doc)
        self._update_chrome()

    def on_tab_activated(self, doc: DocumentState | None) -> None:
        """The view switched tabs on its own (click, keyboard, tab removal)."""
        self._active = doc
        self._update_chrome()

    def on_text_changed(self, doc: DocumentState) -> None:
        if doc.dirty:
            return
        doc.mark_dirty()
        self._refresh_label(doc)

    # ---------- saving ----------
    def save_document(self, doc: DocumentState | None = None) -> Result:
        doc = doc or self._active
        if doc is None:
            return CANCELLED
        return self._after_save(doc, doc.save(self._pick_destination))

    def save_document_as(self, doc: DocumentState | None = None) -> Result:
        doc = doc or self._active
        if doc is None:
            return CANCELLED
        dest = self._pick_destination(doc)
        if dest is None:
            return CANCELLED
        return self._after_save(doc, doc.save_as(dest))

    def _pick_destination(self, doc: DocumentState) -> Path | None:
        if doc.path is not None:
            start = str(doc.path)
        else:
            start = f"{UNTITLED} {doc.untitled_index}{DEFAULT_SUFFIX}"
        return self.dialogs.get_save_file(self.view, "Save As", start, FILE_FILTER)

    def _after_save(self, doc: DocumentState, result: Result) -> Result:
        if result.ok:
            self._refresh_label(doc)
            self._remember(doc)
        elif isinstance(result, IoError):
            self.messages.error(self.view, "Save Error", f"Failed to save file:\n{result.message}")
        return result

    # ---------- closing ----------
    def close_document(self, doc: DocumentState) -> bool:
        """
        Close one tab, asking about unsaved changes first.

        Returns False when the close was aborted: the user cancelled the
        prompt or the save picker, or the save failed.
        """
        if not doc.dirty:
            self._remove(doc)
            return True

        self.activate(doc)
        name = doc.display_name().rstrip(DIRTY_MARK)
        answer = self.messages.ask_save_changes(
            self.view, "Save changes", f'Save changes to "{name}"?'
        )
        if answer is Answer.CANCEL:
            log.info("Close of %s cancelled by user", name)
            return False
        if answer is Answer.YES and not self.save_document(doc).ok:
            log.info("Close of %s aborted: document was not saved", name)
            return False
        self._remove(doc)
        return True

    def close_active(self) -> bool:
        if self._active is None:
            return True
        return self.close_document(self._active)

    def close_all(self) -> bool:
        """Run the close flow on every tab; stop at the first aborted close."""
        for doc in list(self.documents):
            if not self.close_document(doc):
                return False
        self.recent.persist()
        return True

    # ---------- recents ----------
    def refresh_recents(self) -> None:
        self.view.set_recents(self.recent.list())

    def clear_recents(self) -> None:
        self.recent.clear()
        self.refresh_recents()

    # ---------- internals ----------
    def _add(self, doc: DocumentState) -> None:
        self.documents.append(doc)
        self.view.add_tab(doc, doc.display_name())
        self.activate(doc)

    def _remove(self, doc: DocumentState) -> None:
        idx = self.documents.index(doc)
        self.documents.remove(doc)
        self.view.remove_tab(doc)
        if self._active is doc or self._active not in self.documents:
            if self.documents:
                self.activate(self.documents[min(idx, len(self.documents) - 1)])
                return
            self._active = None
        self._update_chrome()

    def _remember(self, doc: DocumentState) -> None:
        if doc.path is not None:
            self.recent.add(doc.path)
            self.refresh_recents()

    def _refresh_label(self, doc: DocumentState) -> None:
        self.view.set_tab_label(doc, doc.display_name())
        if doc is self._active:
            self._update_chrome()

    def _update_chrome(self) -> None:
        if self._active is None:
            self.view.set_title(APP_NAME)
        else:
            self.view.set_title(f"{self._active.display_name()} - {APP_NAME}")
        self.view.set_document_actions_enabled(self.has_documents)
