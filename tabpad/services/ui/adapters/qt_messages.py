from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from tabpad.services.ui.ports.messages import Answer, IMessageService

_ANSWERS = {
    QMessageBox.StandardButton.Yes: Answer.YES,
    QMessageBox.StandardButton.No: Answer.NO,
}


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> Answer:
        resp = QMessageBox.question(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        # Escape / window close come back as Cancel
        return _ANSWERS.get(resp, Answer.CANCEL)
