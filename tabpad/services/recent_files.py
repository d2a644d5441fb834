from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_data_dir

from tabpad.domain.models import same_path
from tabpad.utils.constants import APP_NAME, MAX_RECENTS, RECENTS_FILE_NAME

log = logging.getLogger(__name__)


def default_recents_path(file_name: str = RECENTS_FILE_NAME) -> Path:
    """Per-user data location, e.g. ~/.local/share/tabpad/recent_files.txt."""
    return Path(user_data_dir(APP_NAME, appauthor=False)) / file_name


def _dedupe(paths: list[str]) -> list[str]:
    out: list[str] = []
    for p in paths:
        if not any(same_path(p, seen) for seen in out):
            out.append(p)
    return out


class RecentFiles:
    """
    Most-recently-used file list, persisted as one path per line.

    Re-adding a path moves it to the front. Comparison ignores case, the list
    never grows past `max_entries`, and paths that vanished from disk are
    dropped whenever the list is read. Persistence is best-effort: failures are
    logged, never raised.
    """

    def __init__(
        self,
        storage_path: Path | None = None,
        max_entries: int = MAX_RECENTS,
        *,
        autoload: bool = True,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._storage_path = Path(storage_path) if storage_path else default_recents_path()
        self._max = max_entries
        self._entries: list[str] = []
        if autoload:
            self.load()

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    @property
    def max_entries(self) -> int:
        return self._max

    def add(self, path: Path | str) -> None:
        p = str(path) if path else ""
        if not p:
            return
        self._entries = [e for e in self._entries if not same_path(e, p)]
        self._entries.insert(0, p)
        del self._entries[self._max :]
        self.persist()

    def list(self) -> list[str]:
        self._entries = [e for e in self._entries if os.path.exists(e)]
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []
        self.persist()

    def load(self) -> None:
        self._entries = []
        if not self._storage_path.exists():
            return
        try:
            lines = self._storage_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Could not load recent files from %s: %s", self._storage_path, e)
            return
        kept = [ln.strip() for ln in lines if ln.strip() and os.path.exists(ln.strip())]
        self._entries = _dedupe(kept)[: self._max]

    def persist(self) -> None:
        try:
            self._storage_path.parent.mkdir(parents=True, exist_ok=True)
            body = "".join(f"{e}\n" for e in self._entries)
            self._storage_path.write_text(body, encoding="utf-8")
        except OSError as e:
            log.warning("Could not save recent files to %s: %s", self._storage_path, e)

    def __len__(self) -> int:
        return len(self._entries)
