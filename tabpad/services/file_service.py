from __future__ import annotations

from pathlib import Path

from tabpad.domain.interfaces import IFileService


class FileService(IFileService):
    """Whole-file UTF-8 reads and in-place overwrites."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        # encode before opening so a bad character can't truncate the target
        data = text.encode("utf-8")
        Path(path).write_bytes(data)
