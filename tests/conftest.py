"""Shared pytest fixtures for poolseed tests.

Provides configuration objects, a seeded mock entropy source, and a
scripted entropy source that replays a fixed word sequence and can be
cut short to simulate a short read.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path

import numpy as np
import pytest

from poolseed.config import PoolSeedConfig
from poolseed.entropy.base import EntropySource
from poolseed.entropy.mock import MockUniformSource


class ScriptedSource(EntropySource):
    """Test double: replays *words* as native-order bytes, then runs dry.

    Once the script is exhausted, reads return whatever is left (possibly
    nothing), which the strict readers turn into a short read.
    """

    def __init__(self, words: Sequence[int], tail: bytes = b"") -> None:
        self._data = np.asarray(words, dtype=np.uint32).tobytes() + tail
        self._offset = 0
        self.reads: list[int] = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_available(self) -> bool:
        return self._offset < len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read(self, n: int) -> bytes:
        self.reads.append(n)
        chunk = self._data[self._offset : self._offset + n]
        self._offset += len(chunk)
        return chunk

    def close(self) -> None:
        pass


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep POOLSEED_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("POOLSEED_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def default_config() -> PoolSeedConfig:
    """Return a PoolSeedConfig with all default values and no .env file."""
    return PoolSeedConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> PoolSeedConfig:
    """Return a config with no per-block logging."""
    return PoolSeedConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def gcm_config() -> PoolSeedConfig:
    """Return a config with the extended GCM constants enabled."""
    return PoolSeedConfig(_env_file=None, random_gcm=True, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def mock_entropy_source() -> MockUniformSource:
    """Return a seeded MockUniformSource for reproducible blocks."""
    return MockUniformSource(seed=42)


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedSource]:
    """Return a factory for ScriptedSource instances."""
    return ScriptedSource
