"""Concrete service implementations."""

from .file_service import FileService
from .recent_files import RecentFiles, default_recents_path

__all__ = ["FileService", "RecentFiles", "default_recents_path"]
