"""
Summary: In-memory file-system provider used as a substitute for the host file system.
Why: Let tests and dry runs exercise PathUtility without touching the disk.
"""

from __future__ import annotations

import errno
import os
import posixpath
from collections.abc import Iterable, Mapping

from ..usecases.ports import FileSystemProvider, PathPresence, StrPath

ROOT: str = "/"


def _os_error(code: int, path: StrPath) -> OSError:
    # OSError picks the matching subclass (FileNotFoundError, ...) from errno.
    return OSError(code, os.strerror(code), os.fspath(path))


class InMemoryFileSystemProvider(FileSystemProvider):
    """POSIX-style namespace kept in a set of directories and a mapping of files.

    Relative paths resolve against ``cwd``. The root and ``cwd`` always exist.
    Paths are walked one component at a time the way the kernel does it:
    every component before the last must be an existing directory, so
    ``missing/../real`` does not exist, and a trailing ``/`` only matches a
    directory. Failures raise the same ``OSError`` subclasses the host would.
    Not thread-safe.
    """

    def __init__(
        self,
        *,
        cwd: str = ROOT,
        files: Mapping[str, bytes] | None = None,
        directories: Iterable[str] = (),
    ) -> None:
        if not posixpath.isabs(cwd):
            raise ValueError(f"cwd must be absolute: {cwd!r}")
        self._cwd = posixpath.normpath(cwd)
        self._directories: set[str] = {ROOT}
        self._files: dict[str, bytes] = {}
        self._add_directory_chain(self._cwd)
        for directory in directories:
            self.add_directory(directory)
        for path, data in (files or {}).items():
            self.add_file(path, data)

    @property
    def cwd(self) -> str:
        return self._cwd

    # Port -------------------------------------------------------------------

    def exists(self, path: StrPath) -> PathPresence:
        try:
            key, directory_only = self._walk(path)
        except (OSError, ValueError):
            return PathPresence.missing()
        if key in self._directories:
            return PathPresence(exists=True, is_directory=True)
        if key in self._files and not directory_only:
            return PathPresence(exists=True, is_directory=False)
        return PathPresence.missing()

    def remove(self, path: StrPath) -> None:
        key, directory_only = self._walk(path)
        if key in self._files:
            if directory_only:
                raise _os_error(errno.ENOTDIR, path)
            del self._files[key]
            return
        if key not in self._directories:
            raise _os_error(errno.ENOENT, path)
        if key == ROOT or key == self._cwd:
            raise _os_error(errno.EBUSY, path)
        if any(self._parent(child) == key for child in self._entries()):
            raise _os_error(errno.ENOTEMPTY, path)
        self._directories.discard(key)

    def create_file(self, path: StrPath, contents: bytes | None = None) -> bool:
        try:
            key, directory_only = self._walk(path)
        except OSError:
            return False
        # A trailing slash names a directory, which ``open`` cannot create.
        if directory_only or key in self._directories:
            return False
        self._files[key] = bytes(contents or b"")
        return True

    def create_directory(self, path: StrPath, create_intermediates: bool = True) -> None:
        if create_intermediates:
            self._make_directories(path)
            return

        key, _ = self._walk(path)
        if key in self._files or key in self._directories:
            raise _os_error(errno.EEXIST, path)
        self._directories.add(key)

    # Inspection helpers -----------------------------------------------------

    def read_bytes(self, path: StrPath) -> bytes:
        """Return the contents of the file at ``path``."""

        key, directory_only = self._walk(path)
        if key in self._directories:
            raise _os_error(errno.EISDIR, path)
        if key not in self._files:
            raise _os_error(errno.ENOENT, path)
        if directory_only:
            raise _os_error(errno.ENOTDIR, path)
        return self._files[key]

    def add_file(self, path: StrPath, data: bytes = b"") -> None:
        """Seed a file, creating its parent chain."""

        key = self._lexical(path)
        if key in self._directories:
            raise _os_error(errno.EISDIR, path)
        self._add_directory_chain(self._parent(key))
        self._files[key] = bytes(data)

    def add_directory(self, path: StrPath) -> None:
        """Seed a directory and its parent chain."""

        self._add_directory_chain(self._lexical(path))

    def snapshot(self) -> dict[str, bytes | None]:
        """Return every entry keyed by absolute path; directories map to ``None``."""

        entries: dict[str, bytes | None] = {directory: None for directory in self._directories}
        entries.update(self._files)
        return dict(sorted(entries.items()))

    # Internals --------------------------------------------------------------

    def _split(self, path: StrPath) -> tuple[str, list[str], bool]:
        raw = os.fspath(path)
        if "\x00" in raw:
            raise ValueError("embedded null byte")
        if not raw:
            raise _os_error(errno.ENOENT, path)
        start = ROOT if raw.startswith("/") else self._cwd
        return start, [part for part in raw.split("/") if part], raw.endswith("/")

    def _step(self, current: str, part: str) -> str:
        if part == ".":
            return current
        if part == "..":
            return posixpath.dirname(current)
        return posixpath.join(current, part)

    def _walk(self, path: StrPath) -> tuple[str, bool]:
        """Resolve ``path`` to an absolute key and whether it must be a directory.

        Raises:
            FileNotFoundError: A component before the last does not exist.
            NotADirectoryError: A component before the last is a file.
        """

        current, parts, trailing_slash = self._split(path)
        for part in parts:
            if current in self._files:
                raise _os_error(errno.ENOTDIR, path)
            if current not in self._directories:
                raise _os_error(errno.ENOENT, path)
            current = self._step(current, part)
        directory_only = trailing_slash or (bool(parts) and parts[-1] in (".", ".."))
        return current, directory_only

    def _make_directories(self, path: StrPath) -> None:
        # Same outcome as os.makedirs(exist_ok=True): every named component is
        # created on the way, including ones later undone by "..".
        current, parts, _ = self._split(path)
        for part in parts:
            current = self._step(current, part)
            if current in self._files:
                raise _os_error(errno.EEXIST, path)
            self._directories.add(current)

    def _lexical(self, path: StrPath) -> str:
        raw = os.fspath(path)
        if not raw or "\x00" in raw:
            raise _os_error(errno.ENOENT, path)
        return posixpath.normpath(posixpath.join(self._cwd, raw))

    def _entries(self) -> Iterable[str]:
        yield from self._directories
        yield from self._files

    @staticmethod
    def _parent(key: str) -> str:
        return posixpath.dirname(key)

    @staticmethod
    def _ancestors(key: str) -> list[str]:
        ancestors: list[str] = []
        current = key
        while current != ROOT:
            current = posixpath.dirname(current)
            ancestors.append(current)
        return ancestors

    def _add_directory_chain(self, key: str) -> None:
        self._directories.add(key)
        self._directories.update(self._ancestors(key))


__all__ = ["InMemoryFileSystemProvider"]
