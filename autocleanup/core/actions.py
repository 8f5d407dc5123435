"""Pending removal actions held by a CleanupList."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from autocleanup.utils.cleanup import remove_directory, remove_file

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _owned_path(path: PathInput) -> Path:
    return Path(os.fsdecode(path))


@dataclass(frozen=True)
class RemoveFile:
    """A single file to delete at teardown.

    Built from any str, bytes or os.PathLike; stored as an owned Path.
    """

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _owned_path(self.path))

    def execute(self) -> bool:
        """Unlink the file; True if it was removed. Never raises."""
        return remove_file(self.path, ignore_errors=True)


@dataclass(frozen=True)
class RemoveDirectory:
    """A single directory to delete at teardown. Not recursive.

    Built from any str, bytes or os.PathLike; stored as an owned Path.
    """

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _owned_path(self.path))

    def execute(self) -> bool:
        """Rmdir the directory; True if it was removed. Never raises."""
        return remove_directory(self.path, ignore_errors=True)


CleanupAction = RemoveFile | RemoveDirectory
