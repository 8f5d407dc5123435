"""Removal primitives for single files and empty directories."""
from __future__ import annotations

import os
from pathlib import Path


class CleanupError(RuntimeError):
    """Raised when a removal fails and errors are not ignored."""


def remove_file(
    path: str | bytes | os.PathLike[str] | os.PathLike[bytes],
    *,
    ignore_errors: bool = False,
) -> bool:
    """
    Remove a single file.

    Returns True if the file was removed, False if it didn't exist.
    Raises CleanupError on any other failure unless ignore_errors is True.
    """
    try:
        Path(os.fsdecode(path)).unlink()
        return True
    except FileNotFoundError:
        return False
    except Exception as exc:
        if ignore_errors:
            return False
        raise CleanupError(f"Failed to remove file {path}: {exc}") from exc


def remove_directory(
    path: str | bytes | os.PathLike[str] | os.PathLike[bytes],
    *,
    ignore_errors: bool = False,
) -> bool:
    """
    Remove an empty directory. Contents are never touched.

    Returns True if the directory was removed, False if it didn't exist.
    Raises CleanupError on any other failure (including a non-empty
    directory) unless ignore_errors is True.
    """
    try:
        Path(os.fsdecode(path)).rmdir()
        return True
    except FileNotFoundError:
        return False
    except Exception as exc:
        if ignore_errors:
            return False
        raise CleanupError(f"Failed to remove directory {path}: {exc}") from exc
