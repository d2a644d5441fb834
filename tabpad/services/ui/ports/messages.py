from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class Answer(Enum):
    """Reply to a yes/no/cancel prompt."""

    YES = auto()
    NO = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> Answer:
        """Yes saves, No discards, Cancel (or closing the prompt) aborts."""
        ...
