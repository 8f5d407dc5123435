"""Scope-bound list of paths removed when the owning scope ends."""
from __future__ import annotations

import weakref

from autocleanup.core.actions import CleanupAction, PathInput, RemoveDirectory, RemoveFile
from autocleanup.utils.logging import Timer, get_logger

logger = get_logger(__name__)


def _teardown(actions: list[CleanupAction]) -> None:
    # Must not reference the CleanupList itself, or weakref.finalize never fires.
    if not actions:
        return
    with Timer(f"Cleanup of {len(actions)} paths", logger, level="debug"):
        for action in reversed(actions):
            action.execute()


class CleanupList:
    """
    Ordered paths to remove, last registered first, when the scope ends.

    Use it as a context manager; teardown runs when the outermost ``with``
    block exits, whether normally or through an exception. A list that is
    never entered is torn down when it is garbage collected, or at
    interpreter exit if still alive. Teardown runs at most once either way.

    Removal failures are discarded. Directories are removed with rmdir, so a
    non-empty directory is left in place.

    Example:
        with CleanupList() as cleanup:
            cleanup.push_file(socket_path)
            cleanup.push_dir(scratch_dir)
            ...
    """

    def __init__(self) -> None:
        self._actions: list[CleanupAction] = []
        self._depth = 0
        self._finalizer = weakref.finalize(self, _teardown, self._actions)

    def __enter__(self) -> CleanupList:
        self._depth += 1
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._depth -= 1
        if self._depth <= 0:
            self._depth = 0
            self._finalizer()

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"<CleanupList {state} actions={len(self._actions)}>"

    @property
    def active(self) -> bool:
        """False once teardown has run."""
        return self._finalizer.alive

    @property
    def actions(self) -> tuple[CleanupAction, ...]:
        """Snapshot of registered actions in registration order."""
        return tuple(self._actions)

    def push(self, action: CleanupAction) -> None:
        if not self.active:
            logger.debug("Ignoring %r registered after teardown", action)
            return
        self._actions.append(action)

    def push_file(self, path: PathInput) -> None:
        """Register a file to remove when the scope ends."""
        self.push(RemoveFile(path))

    def push_dir(self, path: PathInput) -> None:
        """Register a directory to remove when the scope ends.

        Only the directory itself is registered; its contents are not.
        """
        self.push(RemoveDirectory(path))
