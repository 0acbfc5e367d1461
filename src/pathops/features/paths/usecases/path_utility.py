"""
Summary: Presence, deletion and creation helpers layered over a file-system provider.
Why: Give callers file-vs-directory semantics without binding them to the host file system.
"""

from __future__ import annotations

import os
from pathlib import Path

from .ports import FileSystemProvider, StrPath


def containing_directory(path: StrPath) -> str:
    """Return ``path`` with its last component removed.

    Follows ``pathlib`` splitting: a bare name yields ``"."`` and the root
    stays the root.
    """

    return os.fspath(Path(path).parent)


class PathUtility:
    """Thin semantic wrapper over a ``FileSystemProvider``.

    Every method performs exactly one provider call (``create_file`` performs
    two) and lets provider errors propagate unchanged.
    """

    def __init__(self, provider: FileSystemProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> FileSystemProvider:
        return self._provider

    # Presence ---------------------------------------------------------------

    def exists_as_file(self, path: StrPath) -> bool:
        """Return ``True`` if something exists at ``path`` and it is not a directory."""

        presence = self._provider.exists(path)
        return presence.exists and not presence.is_directory

    def exists_as_directory(self, path: StrPath) -> bool:
        """Return ``True`` if something exists at ``path`` and it is a directory."""

        presence = self._provider.exists(path)
        return presence.exists and presence.is_directory

    # Manipulation -----------------------------------------------------------

    def delete(self, path: StrPath) -> None:
        """Remove the file or directory at ``path``.

        Raises:
            OSError: Whatever the provider raises, including for a missing path.
        """

        self._provider.remove(path)

    def create_file(self, path: StrPath, data: bytes | None = None) -> bool:
        """Create a file at ``path`` and write ``data`` to it.

        The containing directory is created first, with any missing
        intermediate directories. An existing file is overwritten when the
        process is allowed to do so.

        Args:
            path: Path to the file.
            data: Bytes to write. ``None`` creates an empty file.

        Returns:
            bool: The provider's answer, unchanged. ``False`` means the file
            could not be written (for example because a directory occupies
            ``path``). It is not raised as an error; callers that need the
            file must check it.

        Raises:
            OSError: When the containing directory cannot be created. The file
            is not attempted in that case.
        """

        self.create_containing_directory(path)
        return self._provider.create_file(path, data)

    def create_containing_directory(self, path: StrPath) -> None:
        """Create the directory that would hold ``path``, including intermediates."""

        self._provider.create_directory(containing_directory(path), create_intermediates=True)

    def create_directory(self, path: StrPath) -> None:
        """Create ``path`` as a directory, including intermediates; no-op if present."""

        self._provider.create_directory(path, create_intermediates=True)


__all__ = ["PathUtility", "containing_directory"]
