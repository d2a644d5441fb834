"""tabpad: a small multi-tab plain-text editor built on PyQt6."""

__version__ = "1.0.0"
