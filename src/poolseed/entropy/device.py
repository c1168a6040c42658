"""Entropy source reading directly from the OS random device.

This is the default source. The device is opened once, read-only, when the
source is constructed. Each ``read()`` is a single ``os.read()`` call with
no retry, so a short read from the device surfaces as-is.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from poolseed.entropy.base import EntropySource
from poolseed.entropy.registry import register_entropy_source
from poolseed.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from poolseed.config import PoolSeedConfig

logger = logging.getLogger("poolseed")

DEFAULT_DEVICE = "/dev/urandom"


@register_entropy_source("device")
class DeviceEntropySource(EntropySource):
    """Non-blocking random device, ``/dev/urandom`` by default.

    Args:
        path: Device path to open.

    Raises:
        EntropyUnavailableError: If the device cannot be opened.
    """

    def __init__(self, path: str = DEFAULT_DEVICE) -> None:
        self._path = path
        try:
            self._fd: int | None = os.open(path, os.O_RDONLY)
        except OSError as exc:
            raise EntropyUnavailableError(f"no {path}") from exc
        logger.debug("Opened entropy device %s (fd=%d)", path, self._fd)

    @classmethod
    def from_config(cls, config: PoolSeedConfig) -> DeviceEntropySource:
        return cls(config.entropy_device)

    @property
    def name(self) -> str:
        """Return ``'device'``."""
        return "device"

    @property
    def path(self) -> str:
        """Path of the opened device."""
        return self._path

    @property
    def is_available(self) -> bool:
        """``True`` while the device descriptor is open."""
        return self._fd is not None

    def read(self, n: int) -> bytes:
        """Issue one ``os.read()`` for up to *n* bytes.

        Raises:
            EntropyUnavailableError: If the source has been closed or the
                read itself fails.
        """
        if self._fd is None:
            raise EntropyUnavailableError(f"{self._path} is closed")
        if n == 0:
            return b""
        try:
            return os.read(self._fd, n)
        except OSError as exc:
            raise EntropyUnavailableError(f"read from {self._path} failed: {exc}") from exc

    def close(self) -> None:
        """Close the device descriptor. Safe to call twice."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

