from PyQt6.QtWidgets import QPlainTextEdit

from tabpad.domain.interfaces import ITextBuffer


class QtTextBuffer(ITextBuffer):
    """Narrow adapter that lets a DocumentState read and write a QPlainTextEdit."""

    def __init__(self, edit: QPlainTextEdit):
        self._e = edit

    @property
    def widget(self) -> QPlainTextEdit:
        return self._e

    def get_text(self) -> str:
        return self._e.toPlainText()

    def set_text(self, text: str) -> None:
        self._e.setPlainText(text)
