"""
Summary: Name-based registry of file-system providers and the default PathUtility.
Why: Let configuration swap the backing file system without touching call sites.
"""

from __future__ import annotations

from collections.abc import Callable

from ..usecases.path_utility import PathUtility
from ..usecases.ports import FileSystemProvider
from .local import LocalFileSystemProvider
from .memory import InMemoryFileSystemProvider

ProviderFactory = Callable[[], FileSystemProvider]

_FACTORIES: dict[str, ProviderFactory] = {
    "local": LocalFileSystemProvider,
    "memory": InMemoryFileSystemProvider,
}


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register ``factory`` under ``name``, replacing any previous entry."""

    key = name.strip().lower()
    if not key:
        raise ValueError("Provider name cannot be empty")
    _FACTORIES[key] = factory


def available_providers() -> tuple[str, ...]:
    return tuple(sorted(_FACTORIES))


def build_provider(name: str) -> FileSystemProvider:
    """Instantiate the provider registered under ``name``.

    Raises:
        ValueError: If no provider is registered under ``name``.
    """

    try:
        factory = _FACTORIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(available_providers())
        raise ValueError(f"Unknown file-system provider {name!r} (known: {known})") from None
    return factory()


def default_path_utility() -> PathUtility:
    """Build a ``PathUtility`` over the configured provider."""

    from pathops.config import settings

    return PathUtility(build_provider(settings.PROVIDER_NAME))


__all__ = [
    "ProviderFactory",
    "available_providers",
    "build_provider",
    "default_path_utility",
    "register_provider",
]
