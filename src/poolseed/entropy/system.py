"""System entropy source using ``os.urandom()``.

Useful on platforms without a ``/dev/urandom`` node. ``os.urandom()`` always
returns the full request, so this source never produces short reads.
"""

from __future__ import annotations

import os

from poolseed.entropy.base import EntropySource
from poolseed.entropy.registry import register_entropy_source


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper: always available, cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def read(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def close(self) -> None:
        """No-op, no resources to release."""
