from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from tabpad.domain.interfaces import IFileService, ITextBuffer
from tabpad.domain.results import CANCELLED, OK, IoError, Result

log = logging.getLogger(__name__)

UNTITLED = "Untitled"
DIRTY_MARK = "*"

DestinationPicker = Callable[["DocumentState"], Optional[Path]]


class StringBuffer(ITextBuffer):
    """In-memory text buffer for documents that have no widget attached."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text


def same_path(a: Path | str, b: Path | str) -> bool:
    """Case-insensitive path equality."""
    return str(a).casefold() == str(b).casefold()


class DocumentState:
    """
    State of one open tab: where it lives on disk, whether it has unsaved
    changes, and the text held by the bound buffer.

    I/O never raises out of this class; failures come back as `IoError`.
    """

    def __init__(
        self,
        buffer: ITextBuffer,
        files: IFileService,
        *,
        untitled_index: int = 1,
    ) -> None:
        self._buffer = buffer
        self._files = files
        self.path: Path | None = None
        self.dirty = False
        self.untitled_index = untitled_index

    # ---------- text ----------
    @property
    def text(self) -> str:
        return self._buffer.get_text()

    @text.setter
    def text(self, value: str) -> None:
        self._buffer.set_text(value)
        self.dirty = True

    @property
    def buffer(self) -> ITextBuffer:
        return self._buffer

    def mark_dirty(self) -> None:
        self.dirty = True

    # ---------- naming ----------
    @property
    def has_name(self) -> bool:
        return self.path is not None

    def same_file(self, path: Path | str) -> bool:
        return self.path is not None and same_path(self.path, path)

    def display_name(self) -> str:
        name = self.path.name if self.path else f"{UNTITLED} {self.untitled_index}"
        if self.dirty:
            name += DIRTY_MARK
        return name

    # ---------- file ops ----------
    def open(self, path: Path) -> Result:
        try:
            text = self._files.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Failed to open %s: %s", path, e)
            return IoError(path=path, message=str(e))
        self._buffer.set_text(text)
        self.path = path
        self.dirty = False
        return OK

    def save(self, pick_destination: DestinationPicker | None = None) -> Result:
        """
        Write the buffer to `path`. Without a path, ask `pick_destination`
        for one and continue as `save_as`; no picker or a `None` answer
        cancels the save.
        """
        if self.path is None:
            dest = pick_destination(self) if pick_destination is not None else None
            if dest is None:
                return CANCELLED
            return self.save_as(dest)
        return self._write(self.path)

    def save_as(self, new_path: Path) -> Result:
        """Non-interactive rename-and-save. The old path is kept if the write fails."""
        previous = self.path
        self.path = new_path
        result = self._write(new_path)
        if not result.ok:
            self.path = previous
        return result

    def _write(self, path: Path) -> Result:
        try:
            self._files.write_text(path, self.text)
        except (OSError, UnicodeError) as e:
            log.warning("Failed to save %s: %s", path, e)
            return IoError(path=path, message=str(e))
        self.dirty = False
        log.debug("Saved %s", path)
        return OK

    def __repr__(self) -> str:
        return f"DocumentState(path={self.path!r}, dirty={self.dirty})"
