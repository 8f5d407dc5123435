from __future__ import annotations

from pathlib import Path

import pytest

from autocleanup import CleanupList, cleanup_scope, with_cleanup_scope


def test_cleanup_scope_removes_registered_paths(tmp_path: Path) -> None:
    dir_path = tmp_path / "scratch"
    dir_path.mkdir()
    file_path = dir_path / "server.sock"
    file_path.write_text("")

    with cleanup_scope() as cleanup:
        assert isinstance(cleanup, CleanupList)
        cleanup.push_dir(dir_path)
        cleanup.push_file(file_path)

    assert not file_path.exists()
    assert not dir_path.exists()
    assert cleanup.active is False


def test_cleanup_scope_runs_on_exception(tmp_path: Path) -> None:
    file_path = tmp_path / "lock"
    file_path.write_text("")

    with pytest.raises(RuntimeError, match="failed"):
        with cleanup_scope() as cleanup:
            cleanup.push_file(file_path)
            raise RuntimeError("failed")

    assert not file_path.exists()


def test_with_cleanup_scope_returns_result(tmp_path: Path) -> None:
    file_path = tmp_path / "out.tmp"

    def work(cleanup: CleanupList, name: str, *, suffix: str) -> str:
        file_path.write_text(name)
        cleanup.push_file(file_path)
        return name + suffix

    result = with_cleanup_scope(work, "job", suffix="-ok")

    assert result == "job-ok"
    assert not file_path.exists()


def test_with_cleanup_scope_propagates_error(tmp_path: Path) -> None:
    file_path = tmp_path / "partial.tmp"
    file_path.write_text("")

    def work(cleanup: CleanupList) -> None:
        cleanup.push_file(file_path)
        cleanup.push_dir("/nonexistent")
        raise KeyError("missing")

    with pytest.raises(KeyError):
        with_cleanup_scope(work)

    assert not file_path.exists()
