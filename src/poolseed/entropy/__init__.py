"""Entropy source subsystem for poolseed.

Re-exports the ABC, registry, and all built-in source implementations::

    from poolseed.entropy import EntropySource, EntropySourceRegistry
    from poolseed.entropy import DeviceEntropySource, SystemEntropySource
"""

from poolseed.entropy.base import EntropySource
from poolseed.entropy.device import DeviceEntropySource
from poolseed.entropy.mock import MockUniformSource
from poolseed.entropy.registry import EntropySourceRegistry, register_entropy_source
from poolseed.entropy.system import SystemEntropySource

__all__ = [
    "DeviceEntropySource",
    "EntropySource",
    "EntropySourceRegistry",
    "MockUniformSource",
    "SystemEntropySource",
    "register_entropy_source",
]
