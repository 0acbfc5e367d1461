"""
Summary: Export path helper use cases, ports and providers.
Why: Provide a stable import surface for callers and tests.
"""

from .adapters import (
    InMemoryFileSystemProvider,
    LocalFileSystemProvider,
    available_providers,
    build_provider,
    default_path_utility,
    register_provider,
)
from .usecases import (
    FileSystemProvider,
    PathPresence,
    PathUtility,
    StrPath,
    containing_directory,
)

__all__ = [
    "FileSystemProvider",
    "InMemoryFileSystemProvider",
    "LocalFileSystemProvider",
    "PathPresence",
    "PathUtility",
    "StrPath",
    "available_providers",
    "build_provider",
    "containing_directory",
    "default_path_utility",
    "register_provider",
]
