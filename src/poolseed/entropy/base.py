"""Abstract base class for all entropy sources.

Every entropy source, whether the OS random device, ``os.urandom()`` or a
seeded test mock, implements this interface. Subclasses provide a raw
``read()`` that may return fewer bytes than asked for, like ``os.read()``.
The ABC layers the strict ``get_random_bytes()`` and ``get_words()`` on top,
which treat any shortfall as fatal.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from poolseed.exceptions import ShortReadError
from poolseed.layout import WORD_BYTES

if TYPE_CHECKING:
    from poolseed.config import PoolSeedConfig

logger = logging.getLogger("poolseed")


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    A source is opened once per run and read repeatedly; it is never
    written to.
    """

    @classmethod
    def from_config(cls, config: PoolSeedConfig) -> EntropySource:
        """Construct the source from configuration.

        The default ignores *config*; sources with settings override this.
        """
        return cls()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'device'``, ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def read(self, n: int) -> bytes:
        """Read up to *n* bytes in a single request.

        Args:
            n: Number of bytes wanted.

        Returns:
            At most *n* bytes. Fewer bytes signal a short read.

        Raises:
            EntropyUnavailableError: If the source is closed or unusable.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources (file descriptors, generators)."""

    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes from one read.

        Args:
            n: Number of random bytes to fetch.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            ShortReadError: If the read returned fewer than *n* bytes.
            EntropyUnavailableError: If the source cannot provide bytes.
        """
        data = self.read(n)
        if len(data) != n:
            logger.debug(
                "Short read from %s: requested %d bytes, received %d", self.name, n, len(data)
            )
            raise ShortReadError(n, len(data))
        return data

    def get_words(self, count: int, out: np.ndarray | None = None) -> np.ndarray:
        """Return *count* random 32-bit words in native byte order.

        If *out* is provided, the words are written into it and it is
        returned. Otherwise a new array is allocated.

        Args:
            count: Number of words to fetch.
            out: Optional pre-allocated ``uint32`` array of length *count*.

        Returns:
            Array of ``uint32`` words.

        Raises:
            ShortReadError: If the read returned fewer than ``4 * count`` bytes.
        """
        raw = self.get_random_bytes(count * WORD_BYTES)
        words = np.frombuffer(raw, dtype=np.uint32)
        if out is not None:
            np.copyto(out, words)
            return out
        return words.copy()

    def __enter__(self) -> EntropySource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
