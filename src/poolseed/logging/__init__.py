"""Diagnostic logging subsystem for poolseed.

Provides immutable per-block records and a configurable logger that supports
none/summary/full verbosity and in-memory diagnostic mode.
"""

from poolseed.logging.logger import GenerationLogger
from poolseed.logging.types import BlockRecord

__all__ = [
    "BlockRecord",
    "GenerationLogger",
]
