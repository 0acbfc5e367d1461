"""
Summary: Ports defining the file-system primitives the path helpers depend on.
Why: Decouple path helpers from the host file system so tests can swap in a fake.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

StrPath: TypeAlias = str | os.PathLike[str]


@dataclass(slots=True, frozen=True)
class PathPresence:
    """Answer of a presence query against a provider."""

    exists: bool
    is_directory: bool = False

    @classmethod
    def missing(cls) -> PathPresence:
        return cls(exists=False, is_directory=False)


@runtime_checkable
class FileSystemProvider(Protocol):
    """Port exposing the four primitives used by ``PathUtility``."""

    def exists(self, path: StrPath) -> PathPresence:
        """Report whether something lives at ``path`` and whether it is a directory."""
        ...

    def remove(self, path: StrPath) -> None:
        """Remove the entry at ``path``; raise ``OSError`` when that is not possible."""
        ...

    def create_file(self, path: StrPath, contents: bytes | None = None) -> bool:
        """Create or overwrite a file; return ``False`` instead of raising on failure."""
        ...

    def create_directory(self, path: StrPath, create_intermediates: bool = True) -> None:
        """Create a directory; raise ``OSError`` when that is not possible."""
        ...


__all__ = ["FileSystemProvider", "PathPresence", "StrPath"]
