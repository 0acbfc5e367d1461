"""
Summary: File-system provider backed by the host operating system.
Why: Give PathUtility the real file system through the same port the fakes implement.
"""

from __future__ import annotations

import os
import stat

from pathops.platform.logging import logger

from ..usecases.ports import FileSystemProvider, PathPresence, StrPath


class LocalFileSystemProvider(FileSystemProvider):
    """Thin wrapper around ``os`` file-system calls."""

    def exists(self, path: StrPath) -> PathPresence:
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return PathPresence.missing()
        return PathPresence(exists=True, is_directory=stat.S_ISDIR(st.st_mode))

    def remove(self, path: StrPath) -> None:
        # Directories must be empty; nothing is removed recursively.
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
        logger.debug("Removed path", extra={"fs_operation": "remove", "fs_path": os.fspath(path)})

    def create_file(self, path: StrPath, contents: bytes | None = None) -> bool:
        try:
            with open(path, "wb") as handle:
                if contents:
                    _ = handle.write(contents)
        except OSError as exc:
            logger.debug(
                "File creation failed: %s",
                exc,
                extra={"fs_operation": "create_file", "fs_path": os.fspath(path)},
            )
            return False
        logger.debug("Created file", extra={"fs_operation": "create_file", "fs_path": os.fspath(path)})
        return True

    def create_directory(self, path: StrPath, create_intermediates: bool = True) -> None:
        if create_intermediates:
            os.makedirs(path, exist_ok=True)
        else:
            os.mkdir(path)
        logger.debug(
            "Ensured directory",
            extra={"fs_operation": "create_directory", "fs_path": os.fspath(path)},
        )


__all__ = ["LocalFileSystemProvider"]
