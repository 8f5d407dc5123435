"""Scope-bound cleanup of scratch files and directories."""

from autocleanup.core.actions import CleanupAction, RemoveDirectory, RemoveFile
from autocleanup.core.cleanup_list import CleanupList
from autocleanup.core.scope import cleanup_scope, with_cleanup_scope
from autocleanup.utils.cleanup import CleanupError, remove_directory, remove_file

__all__ = [
    "CleanupAction",
    "CleanupError",
    "CleanupList",
    "RemoveDirectory",
    "RemoveFile",
    "cleanup_scope",
    "remove_directory",
    "remove_file",
    "with_cleanup_scope",
]
