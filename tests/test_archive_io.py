"""Unit tests for adapters/archive_io.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from adapters.archive_io import read_archive, resolve_filename, write_archive
from core.domain.errors import LocalIOError


# ---------------------------------------------------------------------------
# resolve_filename — pure function tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("project", "override", "expected"),
    [
        ("myproj", "", "myproj.zip"),
        ("myproj", None, "myproj.zip"),
        ("myproj", "backup", "backup.zip"),
        ("myproj", "backup.zip", "backup.zip"),
        ("myproj", "dir/backup", "dir/backup.zip"),
        ("myproj", "backup.tar", "backup.tar.zip"),
        ("myproj", "backup.ZIP", "backup.ZIP.zip"),
    ],
)
def test_resolve_filename(project: str, override: str | None, expected: str) -> None:
    assert resolve_filename(project, override) == expected


@pytest.mark.parametrize("project", ["p", "my-project-123", "a.b"])
def test_default_name_is_project_plus_zip(project: str) -> None:
    assert resolve_filename(project, "") == project + ".zip"


@pytest.mark.parametrize("override", ["x", "agent.backup", "archive.zi", ".zip.bak"])
def test_override_without_suffix_gets_zip_appended(override: str) -> None:
    assert resolve_filename("ignored", override) == override + ".zip"


@pytest.mark.parametrize("override", ["x.zip", ".zip", "a/b/c.zip"])
def test_override_with_suffix_is_unchanged(override: str) -> None:
    assert resolve_filename("ignored", override) == override


def test_resolved_name_always_ends_in_zip() -> None:
    for override in ("", "a", "a.zip", "a.zip.zip", "zip"):
        assert resolve_filename("proj", override).endswith(".zip")


# ---------------------------------------------------------------------------
# read_archive / write_archive — file-system tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "payload",
    [b"", b"PK\x03\x04", bytes(range(256)), b"\x00" * 4096],
)
def test_write_then_read_returns_same_bytes(tmp_path: Path, payload: bytes) -> None:
    path = tmp_path / "agent.zip"
    assert write_archive(path, payload) == path
    assert read_archive(path) == payload


def test_write_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "agent.zip"
    path.write_bytes(b"a much longer previous archive")
    write_archive(path, b"new")
    assert path.read_bytes() == b"new"


def test_read_missing_file_raises_local_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.zip"
    with pytest.raises(LocalIOError) as excinfo:
        read_archive(missing)
    assert excinfo.value.path == missing
    assert str(missing) in excinfo.value.message


def test_write_into_missing_directory_raises_local_io_error(tmp_path: Path) -> None:
    target = tmp_path / "nope" / "agent.zip"
    with pytest.raises(LocalIOError) as excinfo:
        write_archive(target, b"data")
    assert excinfo.value.path == target
    assert not target.exists()


def test_read_directory_raises_local_io_error(tmp_path: Path) -> None:
    with pytest.raises(LocalIOError):
        read_archive(tmp_path)
