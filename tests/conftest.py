from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from tabpad.domain.models import DocumentState, StringBuffer  # noqa: E402
from tabpad.services.file_service import FileService  # noqa: E402
from tabpad.services.recent_files import RecentFiles  # noqa: E402
from tabpad.services.ui.ports.messages import Answer  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeView:
    """In-memory IWorkspaceView: records what the presenter asked it to show."""

    def __init__(self) -> None:
        self.tabs: list[DocumentState] = []
        self.labels: dict[int, str] = {}
        self.current: DocumentState | None = None
        self.title = ""
        self.actions_enabled: bool | None = None
        self.recents: list[str] = []
        self.discarded: list[StringBuffer] = []

    def create_buffer(self) -> StringBuffer:
        return StringBuffer()

    def discard_buffer(self, buffer: StringBuffer) -> None:
        self.discarded.append(buffer)

    def add_tab(self, doc: DocumentState, label: str) -> None:
        self.tabs.append(doc)
        self.labels[id(doc)] = label

    def remove_tab(self, doc: DocumentState) -> None:
        self.tabs.remove(doc)
        self.labels.pop(id(doc), None)

    def activate_tab(self, doc: DocumentState) -> None:
        self.current = doc

    def set_tab_label(self, doc: DocumentState, label: str) -> None:
        self.labels[id(doc)] = label

    def label_of(self, doc: DocumentState) -> str:
        return self.labels[id(doc)]

    def set_title(self, title: str) -> None:
        self.title = title

    def set_document_actions_enabled(self, enabled: bool) -> None:
        self.actions_enabled = enabled

    def set_recents(self, items: list[str]) -> None:
        self.recents = list(items)


class FakeMessages:
    """IMessageService that answers prompts from a queue and records errors."""

    def __init__(self, answers: list[Answer] | None = None) -> None:
        self.answers = list(answers or [])
        self.asked: list[str] = []
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask_save_changes(self, parent, title: str, text: str) -> Answer:
        self.asked.append(text)
        return self.answers.pop(0) if self.answers else Answer.CANCEL


class FakeDialogs:
    """IFileDialogService returning preset paths; None means the picker was cancelled."""

    def __init__(self, open_path: Path | None = None, save_paths: list[Path | None] | None = None):
        self.open_path = open_path
        self.save_paths = list(save_paths or [])
        self.save_calls: list[str | None] = []

    def get_open_file(self, parent, caption, start_dir, filter_str) -> Path | None:
        return self.open_path

    def get_save_file(self, parent, caption, start_path, filter_str) -> Path | None:
        self.save_calls.append(start_path)
        return self.save_paths.pop(0) if self.save_paths else None


# --- Other common fixtures ---


@pytest.fixture(autouse=True)
def _no_real_user_dirs(monkeypatch, tmp_path: Path):
    """Keep every test away from the real per-user data directory."""
    monkeypatch.setattr(
        "tabpad.services.recent_files.user_data_dir",
        lambda appname, appauthor=None: str(tmp_path / "user-data" / appname),
    )


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def recents_path(tmp_path: Path) -> Path:
    return tmp_path / "appdata" / "recent_files.txt"


@pytest.fixture()
def recent(recents_path: Path) -> RecentFiles:
    return RecentFiles(recents_path)


@pytest.fixture()
def make_doc(file_service: FileService):
    def _make(text: str = "", untitled_index: int = 1) -> DocumentState:
        return DocumentState(StringBuffer(text), file_service, untitled_index=untitled_index)

    return _make


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()
