"""Shared logging utilities for autocleanup."""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Callable


LEVEL_ENV_VARS = ("AUTOCLEANUP_LOG_LEVEL", "LOG_LEVEL")
DEFAULT_LOGGER_NAME = "autocleanup"

_HANDLER: logging.Handler | None = None


def _resolve_level() -> int:
    for var in LEVEL_ENV_VARS:
        level_name = os.environ.get(var)
        if not level_name:
            continue
        level = getattr(logging, level_name.upper(), None)
        if isinstance(level, int):
            return level
    return logging.INFO


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger writing to stdout in the project format.

    The level is re-read from the environment on every call, so loading a
    .env file after import still takes effect for later loggers.
    """
    global _HANDLER

    level = _resolve_level()

    if _HANDLER is None:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        _HANDLER = handler
    _HANDLER.setLevel(level)

    logger = logging.getLogger(name or DEFAULT_LOGGER_NAME)
    logger.setLevel(level)
    if _HANDLER not in logger.handlers:
        logger.addHandler(_HANDLER)
    logger.propagate = False
    return logger


class Timer:
    """Context manager that logs how long a block took."""

    def __init__(
        self,
        label: str,
        logger: logging.Logger,
        *,
        level: str = "info",
    ) -> None:
        self._label = label
        self._logger = logger
        self._level = level
        self._start: float | None = None
        self.elapsed: float | None = None

    def __enter__(self) -> Timer:
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is None:
            self.elapsed = 0.0
        else:
            self.elapsed = time.perf_counter() - self._start
        log_fn: Callable[..., None] = getattr(self._logger, self._level, self._logger.info)
        log_fn("%s took %.3fs", self._label, self.elapsed)
