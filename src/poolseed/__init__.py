"""poolseed: compile-time random seed constants for kernel random pools.

Reads raw bytes from the OS random device, keeps only 32-bit words with a
moderate Hamming weight and no all-zero or all-one bytes, and prints them as
C array initializers for inclusion at build time.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("poolseed")
except PackageNotFoundError:
    __version__ = "0.0.0"

from poolseed.config import PoolSeedConfig, load_config, resolve_config
from poolseed.exceptions import (
    AllocationError,
    ConfigValidationError,
    EntropyUnavailableError,
    PoolSeedError,
    ReplacementLimitError,
    ShortReadError,
)
from poolseed.filter import accept, acceptance_mask, hamming
from poolseed.generator import Block, HeaderGenerator, format_block, generate_block

__all__ = [
    "AllocationError",
    "Block",
    "ConfigValidationError",
    "EntropyUnavailableError",
    "HeaderGenerator",
    "PoolSeedConfig",
    "PoolSeedError",
    "ReplacementLimitError",
    "ShortReadError",
    "__version__",
    "accept",
    "acceptance_mask",
    "format_block",
    "generate_block",
    "hamming",
    "load_config",
    "resolve_config",
]
