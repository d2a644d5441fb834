from __future__ import annotations

from pathlib import Path

from tabpad.domain.interfaces import IAppConfig, IFileService
from tabpad.services.config.app_config import build_app_config
from tabpad.services.file_service import FileService
from tabpad.services.recent_files import RecentFiles, default_recents_path
from tabpad.services.ui.adapters import QtFileDialogService, QtMessageService
from tabpad.services.ui.main_window import MainWindow
from tabpad.services.ui.ports.dialogs import IFileDialogService
from tabpad.services.ui.ports.messages import IMessageService
from tabpad.services.ui.presenters.workspace_presenter import WorkspacePresenter
from tabpad.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the single RecentFiles instance for the process
      - Builds the main window with its presenter attached
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        recent: RecentFiles | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config if config is not None else build_app_config()
        self.file_service: IFileService = files if files is not None else FileService()
        if recent is None:
            recent = RecentFiles(
                default_recents_path(self.config.recent_file_name()),
                max_entries=self.config.recent_max_entries(),
            )
        # kept as given even when empty; RecentFiles is falsy with no entries
        self.recent_files: RecentFiles = recent
        self.dialogs: IFileDialogService = dialogs if dialogs is not None else QtFileDialogService()
        self.messages: IMessageService = messages if messages is not None else QtMessageService()

    # ---------- UI factories ----------

    def build_presenter(self, view) -> WorkspacePresenter:
        return WorkspacePresenter(
            view=view,
            files=self.file_service,
            recent=self.recent_files,
            messages=self.messages,
            dialogs=self.dialogs,
        )

    def build_main_window(
        self,
        *,
        start_paths: list[Path] | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach its presenter, and open any start files.
        With no start files the window starts with one untitled tab.
        """
        window = MainWindow(
            app_title=app_title,
            font_family=self.config.font_family(),
            font_size=self.config.font_size(),
        )
        presenter = self.build_presenter(window)
        window.attach_presenter(presenter)

        for p in start_paths or []:
            presenter.open_document(p)
        if not presenter.has_documents:
            presenter.new_document()
        return window
