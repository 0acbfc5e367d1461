"""
Summary: Concrete file-system providers for the paths feature.
Why: Keep host and in-memory I/O in adapters while PathUtility targets the port.
"""

from .local import LocalFileSystemProvider
from .memory import InMemoryFileSystemProvider
from .registry import (
    available_providers,
    build_provider,
    default_path_utility,
    register_provider,
)

__all__ = [
    "InMemoryFileSystemProvider",
    "LocalFileSystemProvider",
    "available_providers",
    "build_provider",
    "default_path_utility",
    "register_provider",
]
