"""pathops: file and directory presence, creation and deletion helpers."""

from pathops.features.paths import (
    FileSystemProvider,
    InMemoryFileSystemProvider,
    LocalFileSystemProvider,
    PathPresence,
    PathUtility,
    build_provider,
    default_path_utility,
    register_provider,
)

__version__ = "0.1.0"

__all__ = [
    "FileSystemProvider",
    "InMemoryFileSystemProvider",
    "LocalFileSystemProvider",
    "PathPresence",
    "PathUtility",
    "__version__",
    "build_provider",
    "default_path_utility",
    "register_provider",
]
