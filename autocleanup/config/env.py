"""Environment loading helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


class EnvConfigError(RuntimeError):
    """Raised when a required .env file cannot be found."""


def load_env(
    dotenv_path: str | os.PathLike[str] | None = None,
    *,
    required: bool = False,
    override: bool = False,
) -> bool:
    """Load a .env file into the process environment.

    Without dotenv_path the nearest .env above the working directory is used.
    Values already present in the environment win unless override=True.
    Returns True when a file was loaded. When required=True and no file
    exists, raise EnvConfigError so scripts don't silently run with defaults.
    """
    if dotenv_path is None:
        found = find_dotenv(usecwd=True)
        path = Path(found) if found else None
    else:
        path = Path(dotenv_path)

    if path is None or not path.is_file():
        if required:
            raise EnvConfigError(f"No .env file found (looked for {path or '.env'})")
        return False

    load_dotenv(path, override=override)
    return True
