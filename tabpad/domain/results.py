from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Union


@dataclass(frozen=True)
class Ok:
    """The operation completed."""

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class IoError:
    """A file could not be read or written. `message` is shown to the user as-is."""

    path: Path
    message: str

    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class UserCancelled:
    """A picker or confirmation prompt was dismissed."""

    ok: ClassVar[bool] = False


Result = Union[Ok, IoError, UserCancelled]

OK = Ok()
CANCELLED = UserCancelled()
