"""
Summary: Validate the host-backed provider against real temporary directories.
Why: The local provider must surface OS failures as the port documents.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from pathops.features.paths import LocalFileSystemProvider, PathPresence


@pytest.fixture
def provider() -> LocalFileSystemProvider:
    return LocalFileSystemProvider()


def test_exists_reports_kind(provider: LocalFileSystemProvider, tmp_path: Path) -> None:
    file_path = tmp_path / "file.txt"
    _ = file_path.write_bytes(b"1")

    assert provider.exists(tmp_path) == PathPresence(exists=True, is_directory=True)
    assert provider.exists(file_path) == PathPresence(exists=True, is_directory=False)
    assert provider.exists(tmp_path / "nope") == PathPresence.missing()


def test_exists_treats_dangling_symlink_as_missing(
    provider: LocalFileSystemProvider, tmp_path: Path
) -> None:
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "target-that-never-existed", link)

    assert provider.exists(link) == PathPresence.missing()


def test_exists_handles_embedded_nul(provider: LocalFileSystemProvider) -> None:
    assert provider.exists("bad\x00name") == PathPresence.missing()


def test_create_file_writes_and_overwrites(provider: LocalFileSystemProvider, tmp_path: Path) -> None:
    target = tmp_path / "data.bin"

    assert provider.create_file(target, b"abc") is True
    assert target.read_bytes() == b"abc"

    assert provider.create_file(target, None) is True
    assert target.read_bytes() == b""


def test_create_file_returns_false_and_logs_on_failure(
    provider: LocalFileSystemProvider, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="pathops")

    assert provider.create_file(tmp_path / "missing-parent" / "x.txt", b"1") is False

    failures = [record for record in caplog.records if "File creation failed" in record.getMessage()]
    assert failures
    assert getattr(failures[0], "fs_operation") == "create_file"
    assert getattr(failures[0], "fs_path").endswith("x.txt")


def test_create_directory_without_intermediates_requires_parent(
    provider: LocalFileSystemProvider, tmp_path: Path
) -> None:
    with pytest.raises(FileNotFoundError):
        provider.create_directory(tmp_path / "a" / "b", create_intermediates=False)

    provider.create_directory(tmp_path / "a", create_intermediates=False)
    assert (tmp_path / "a").is_dir()

    with pytest.raises(FileExistsError):
        provider.create_directory(tmp_path / "a", create_intermediates=False)


def test_remove_refuses_non_empty_directory(provider: LocalFileSystemProvider, tmp_path: Path) -> None:
    folder = tmp_path / "folder"
    folder.mkdir()
    _ = (folder / "inner.txt").write_text("x")

    with pytest.raises(OSError):
        provider.remove(folder)

    provider.remove(folder / "inner.txt")
    provider.remove(folder)
    assert not folder.exists()


def test_remove_deletes_symlink_not_target(provider: LocalFileSystemProvider, tmp_path: Path) -> None:
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "alias"
    os.symlink(target, link)

    provider.remove(link)

    assert not link.exists()
    assert target.is_dir()
