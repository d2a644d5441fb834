from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from tabpad.domain.interfaces import IAppConfig
from tabpad.services.config.ini_config_service import IniConfigService
from tabpad.utils.constants import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LOG_LEVEL,
    MAX_RECENTS,
    RECENTS_FILE_NAME,
)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # tabpad/services/config/app_config.py -> repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed view over IniConfigService.

    Recognised keys:
      [recent]  max_entries, file_name
      [editor]  font_family, font_size
      [logging] level
    """

    ini: IniConfigService

    def recent_max_entries(self) -> int:
        """Configured list length; the config can lower the cap but never raise it."""
        n = self.ini.get_int("recent", "max_entries", MAX_RECENTS)
        if n is None or n < 1:
            return MAX_RECENTS
        return min(n, MAX_RECENTS)

    def recent_file_name(self) -> str:
        name = (self.ini.get("recent", "file_name", "") or "").strip()
        return name or RECENTS_FILE_NAME

    def font_family(self) -> str:
        family = (self.ini.get("editor", "font_family", "") or "").strip()
        return family or DEFAULT_FONT_FAMILY

    def font_size(self) -> int:
        size = self.ini.get_int("editor", "font_size", DEFAULT_FONT_SIZE)
        return size if size is not None and size > 0 else DEFAULT_FONT_SIZE

    def log_level(self) -> str:
        level = (self.ini.get("logging", "level", "") or "").strip()
        return level.upper() or DEFAULT_LOG_LEVEL

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
