"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BlockRecord:
    """Immutable record of one generated block.

    Attributes:
        name: Emitted array identifier.
        word_count: Number of words in the block.
        replaced_words: Replacement reads performed across all positions.
        rejected_positions: Positions whose initial word failed the filter.
        bytes_read: Total entropy bytes consumed, initial read included.
        entropy_source: Name of the source that provided the bytes.
        elapsed_ms: Wall-clock time to generate the block (milliseconds).
    """

    name: str
    word_count: int
    replaced_words: int
    rejected_positions: int
    bytes_read: int
    entropy_source: str
    elapsed_ms: float
