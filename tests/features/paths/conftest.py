"""Shared fixtures running path helper tests against every provider."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pathops.features.paths import (
    InMemoryFileSystemProvider,
    LocalFileSystemProvider,
    PathUtility,
)


@pytest.fixture(params=["memory", "local"])
def utility(
    request: pytest.FixtureRequest,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> PathUtility:
    """PathUtility over an empty namespace; relative paths resolve inside it."""

    if request.param == "memory":
        return PathUtility(InMemoryFileSystemProvider(cwd="/work"))

    monkeypatch.chdir(tmp_path)
    return PathUtility(LocalFileSystemProvider())


@pytest.fixture
def read_back(utility: PathUtility) -> Callable[[str], bytes]:
    """Read file contents through whichever backend ``utility`` uses."""

    provider = utility.provider
    if isinstance(provider, InMemoryFileSystemProvider):
        return provider.read_bytes
    return lambda path: Path(path).read_bytes()
