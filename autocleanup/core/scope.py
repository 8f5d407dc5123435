"""Helpers that bind a fresh CleanupList to a block or a call."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from autocleanup.core.cleanup_list import CleanupList

T = TypeVar("T")


@contextmanager
def cleanup_scope() -> Iterator[CleanupList]:
    """Yield a new CleanupList that is torn down when the block exits."""
    with CleanupList() as cleanup:
        yield cleanup


def with_cleanup_scope(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Call fn(cleanup, *args, **kwargs) with a new CleanupList.

    Teardown runs after fn returns or raises. fn's result is returned and its
    exception, if any, propagates unchanged.
    """
    with CleanupList() as cleanup:
        return fn(cleanup, *args, **kwargs)
