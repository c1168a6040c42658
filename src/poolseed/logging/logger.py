"""Diagnostic logger for per-block generation events.

Uses the standard ``logging`` module with the ``"poolseed"`` logger. Nothing
here writes to stdout: stdout carries only the generated header.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from poolseed.config import PoolSeedConfig
    from poolseed.logging.types import BlockRecord

logger = logging.getLogger("poolseed")


class GenerationLogger:
    """Per-block diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per block with word and read counts.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: PoolSeedConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[BlockRecord] = []

    def log_block(self, record: BlockRecord) -> None:
        """Log a single generated block.

        Args:
            record: Immutable record of the block's generation.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "block=%s words=%d rejected=%d replaced=%d bytes=%d source=%s elapsed=%.2fms",
                record.name,
                record.word_count,
                record.rejected_positions,
                record.replaced_words,
                record.bytes_read,
                record.entropy_source,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("block_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[BlockRecord]:
        """Return a copy of all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute aggregate statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        total_words = sum(r.word_count for r in self._records)
        total_replaced = sum(r.replaced_words for r in self._records)
        total_rejected = sum(r.rejected_positions for r in self._records)
        return {
            "total_blocks": len(self._records),
            "total_words": total_words,
            "total_bytes_read": sum(r.bytes_read for r in self._records),
            "total_replaced": total_replaced,
            "rejection_rate": total_rejected / total_words if total_words else 0.0,
            "total_elapsed_ms": sum(r.elapsed_ms for r in self._records),
        }
