"""
Summary: Use cases and ports for the paths feature.
Why: Expose PathUtility and its provider port without pulling in adapters.
"""

from .path_utility import PathUtility, containing_directory
from .ports import FileSystemProvider, PathPresence, StrPath

__all__ = [
    "FileSystemProvider",
    "PathPresence",
    "PathUtility",
    "StrPath",
    "containing_directory",
]
