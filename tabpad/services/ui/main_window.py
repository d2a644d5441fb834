from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow,
    QMenu,
    QPlainTextEdit,
    QStatusBar,
    QTabWidget,
)

from tabpad.domain.models import DocumentState
from tabpad.services.ui.adapters.qt_text_buffer import QtTextBuffer
from tabpad.services.ui.presenters.workspace_presenter import WorkspacePresenter
from tabpad.utils.constants import APP_NAME, DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE


class MainWindow(QMainWindow):
    """Thin tabbed window; every decision is delegated to the attached WorkspacePresenter."""

    def __init__(
        self,
        *,
        app_title: str = APP_NAME,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 650)

        self._presenter: WorkspacePresenter | None = None
        self._font = QFont(font_family, font_size)
        self._docs: dict[int, DocumentState] = {}

        self.tabs = QTabWidget(self)
        self.tabs.setTabsClosable(True)
        self.tabs.setDocumentMode(True)
        self.tabs.tabCloseRequested.connect(self._on_tab_close_requested)
        self.tabs.currentChanged.connect(self._on_current_changed)
        self.setCentralWidget(self.tabs)

        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        self.setAcceptDrops(True)

    @property
    def presenter(self) -> WorkspacePresenter | None:
        return self._presenter

    def attach_presenter(self, presenter: WorkspacePresenter) -> None:
        self._presenter = presenter

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_close_tab = QAction(
            "Close Tab", self, shortcut=QKeySequence.StandardKey.Close, triggered=self._close_tab
        )
        self.act_clear_recent = QAction("Clear Recent", self, triggered=self._clear_recent)
        self.act_exit = QAction(
            "&Exit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

        self.recent_menu = QMenu("Open Recent", self)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addAction(self.act_close_tab)
        filem.addSeparator()
        filem.addAction(self.act_exit)
        self.set_recents([])

    # ---------- IWorkspaceView ----------
    def create_buffer(self) -> QtTextBuffer:
        edit = QPlainTextEdit()
        edit.setFont(self._font)
        edit.setTabStopDistance(4 * edit.fontMetrics().horizontalAdvance(" "))
        return QtTextBuffer(edit)

    def discard_buffer(self, buffer: QtTextBuffer) -> None:
        buffer.widget.deleteLater()

    def add_tab(self, doc: DocumentState, label: str) -> None:
        widget = self._widget_of(doc)
        self._docs[id(widget)] = doc
        idx = self.tabs.addTab(widget, label)
        self.tabs.setTabToolTip(idx, str(doc.path or ""))
        widget.textChanged.connect(lambda d=doc: self._on_text_changed(d))

    def remove_tab(self, doc: DocumentState) -> None:
        widget = self._widget_of(doc)
        idx = self.tabs.indexOf(widget)
        self._docs.pop(id(widget), None)
        if idx >= 0:
            self.tabs.removeTab(idx)
        widget.deleteLater()

    def activate_tab(self, doc: DocumentState) -> None:
        idx = self.tabs.indexOf(self._widget_of(doc))
        if idx >= 0:
            self.tabs.setCurrentIndex(idx)

    def set_tab_label(self, doc: DocumentState, label: str) -> None:
        idx = self.tabs.indexOf(self._widget_of(doc))
        if idx >= 0:
            self.tabs.setTabText(idx, label)
            self.tabs.setTabToolTip(idx, str(doc.path or ""))

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_document_actions_enabled(self, enabled: bool) -> None:
        for a in (self.act_save, self.act_save_as, self.act_close_tab):
            a.setEnabled(enabled)

    def set_recents(self, items: list[str]) -> None:
        self.recent_menu.clear()
        if not items:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for i, p in enumerate(items):
            act = QAction(
                f"{i + 1}. {Path(p).name}",
                self,
                triggered=lambda chk=False, x=i: self._open_recent(x),
            )
            act.setToolTip(p)
            act.setStatusTip(p)
            self.recent_menu.addAction(act)
        self.recent_menu.addSeparator()
        self.recent_menu.addAction(self.act_clear_recent)

    # ---------- helpers ----------
    @staticmethod
    def _widget_of(doc: DocumentState) -> QPlainTextEdit:
        return doc.buffer.widget  # type: ignore[attr-defined]

    def doc_at(self, index: int) -> DocumentState | None:
        widget = self.tabs.widget(index)
        return self._docs.get(id(widget)) if widget is not None else None

    # ---------- Actions ----------
    def _new_file(self):
        if self._presenter:
            self._presenter.new_document()

    def _open_dialog(self):
        if self._presenter:
            self._presenter.open_via_dialog()

    def _open_recent(self, index: int):
        if self._presenter:
            self._presenter.open_recent(index)

    def _clear_recent(self):
        if self._presenter:
            self._presenter.clear_recents()

    def _save(self):
        if self._presenter and self._presenter.save_document().ok:
            self.statusBar().showMessage(f"Saved: {self._presenter.active.path}", 3000)

    def _save_as(self):
        if self._presenter and self._presenter.save_document_as().ok:
            self.statusBar().showMessage(f"Saved: {self._presenter.active.path}", 3000)

    def _close_tab(self):
        if self._presenter:
            self._presenter.close_active()

    def _on_tab_close_requested(self, index: int):
        doc = self.doc_at(index)
        if self._presenter and doc is not None:
            self._presenter.close_document(doc)

    def _on_current_changed(self, index: int):
        if self._presenter:
            self._presenter.on_tab_activated(self.doc_at(index))

    def _on_text_changed(self, doc: DocumentState):
        if self._presenter:
            self._presenter.on_text_changed(doc)

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        if not self._presenter:
            return
        for url in e.mimeData().urls():
            local = url.toLocalFile()
            if local:
                self._presenter.open_document(Path(local))

    # ---------- Close ----------
    def closeEvent(self, event):
        if self._presenter is None or self._presenter.close_all():
            event.accept()
        else:
            event.ignore()
