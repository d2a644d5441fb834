from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ITextBuffer(Protocol):
    """Gettable/settable text bound to whatever widget displays it."""

    def get_text(self) -> str: ...
    def set_text(self, text: str) -> None: ...


class IFileService(Protocol):
    """Read/write whole text files. Writes are plain overwrites, not atomic."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Typed lookups over an INI-style configuration source."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...


class IAppConfig(IConfigService, Protocol):
    """Application-level settings resolved from the config service."""

    def recent_max_entries(self) -> int: ...
    def recent_file_name(self) -> str: ...
    def font_family(self) -> str: ...
    def font_size(self) -> int: ...
    def log_level(self) -> str: ...
