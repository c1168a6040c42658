"""Seeded mock entropy source for tests and reproducible dry runs.

Output is uniform over ``[0, 255]`` but fully determined by the seed. Never
use it for a real build: the generated header would be predictable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from poolseed.entropy.base import EntropySource
from poolseed.entropy.registry import register_entropy_source

if TYPE_CHECKING:
    from poolseed.config import PoolSeedConfig


@register_entropy_source("mock")
class MockUniformSource(EntropySource):
    """Deterministic uniform byte source.

    Args:
        seed: Optional RNG seed for reproducible output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: PoolSeedConfig) -> MockUniformSource:
        return cls(seed=config.mock_seed)

    @property
    def name(self) -> str:
        """Return ``'mock'``."""
        return "mock"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def read(self, n: int) -> bytes:
        """Generate *n* uniform bytes from the seeded generator."""
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """No-op, no resources to release."""
