"""Header generation: filtered entropy blocks rendered as C array literals.

Orchestrates the whole run:
    preamble -> pools block -> (optional) GCM constants block and counter view.

Each block is read from the entropy source in one request. Words that fail
the acceptance filter are then replaced in place, one fresh word at a time,
until they pass. That replacement loop has no upper bound unless
``max_replacement_attempts`` is set. With any sensible entropy source the
chance of it running long is astronomically small, but termination is not
guaranteed.

The generated file should be deleted by the build after it is compiled so
that every build gets fresh values and no copy of the seed is left in the
build tree.
"""

from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

import numpy as np

from poolseed.exceptions import AllocationError, ReplacementLimitError
from poolseed.filter import accept, rejected_positions
from poolseed.layout import (
    ARRAY_WORDS,
    CONSTANTS_BLOCK_NAME,
    COUNTER_VIEW_NAME,
    COUNTER_WORDS,
    POOLS_BLOCK_NAME,
    PREAMBLE_DEFINES,
    TOTAL_POOL_WORDS,
    WORD_BYTES,
    WORDS_PER_LINE,
)
from poolseed.logging.logger import GenerationLogger
from poolseed.logging.types import BlockRecord

if TYPE_CHECKING:
    from poolseed.config import PoolSeedConfig
    from poolseed.entropy.base import EntropySource

logger = logging.getLogger("poolseed")

HEADER_COMMENT = "/* File generated by poolseed */"


@dataclass(frozen=True, slots=True, eq=False)
class Block:
    """A named, filtered array of 32-bit words.

    Attributes:
        name: Identifier used for the emitted array.
        words: Read-only ``uint32`` array; every word passes the filter.
        rejected: Positions whose initially read word failed the filter.
        replaced: Replacement reads performed across all positions.
    """

    name: str
    words: np.ndarray
    rejected: int = 0
    replaced: int = 0

    def __len__(self) -> int:
        return len(self.words)

    @property
    def bytes_read(self) -> int:
        """Entropy bytes consumed to build this block."""
        return (len(self.words) + self.replaced) * WORD_BYTES


def generate_block(
    source: EntropySource,
    word_count: int,
    name: str,
    max_attempts: int = 0,
) -> Block:
    """Read *word_count* words from *source* and filter them in place.

    Rejected words are visited in position order, so entropy is consumed
    exactly as a word-by-word scan would consume it.

    Args:
        source: Open entropy source.
        word_count: Number of words in the block (at least 1).
        name: Array identifier.
        max_attempts: Replacement reads allowed per word; ``0`` is unbounded.

    Returns:
        The filtered block.

    Raises:
        ValueError: If *word_count* is not positive.
        AllocationError: If the word buffer cannot be allocated.
        ShortReadError: If any read returns fewer bytes than requested.
        ReplacementLimitError: If *max_attempts* is exceeded for a word.
    """
    if word_count < 1:
        raise ValueError(f"Block {name!r} needs at least one word, got {word_count}")

    try:
        data = np.zeros(word_count, dtype=np.uint32)
    except MemoryError as exc:
        logger.debug("Cannot allocate %d words for %r", word_count, name)
        raise AllocationError(name, word_count) from exc

    source.get_words(word_count, out=data)

    positions = rejected_positions(data)
    replaced = 0
    for pos in positions:
        attempts = 0
        while not accept(data[pos]):
            if max_attempts and attempts >= max_attempts:
                raise ReplacementLimitError(
                    f"word {pos} of {name!r} still rejected after {attempts} replacement reads"
                )
            data[pos] = source.get_words(1)[0]
            attempts += 1
        replaced += attempts

    data.flags.writeable = False
    return Block(name=name, words=data, rejected=len(positions), replaced=replaced)


def format_block(block: Block, words_per_line: int = WORDS_PER_LINE) -> str:
    """Render *block* as a ``static u32`` array initializer.

    Values are ``0x%08x``, *words_per_line* to a line, and the closing
    brace follows the last value. A blank line ends the declaration.
    """
    values = [f"0x{int(word):08x}" for word in block.words]
    rows = [", ".join(values[i : i + words_per_line]) for i in range(0, len(values), words_per_line)]
    body = ",\n".join(rows)
    return f"static u32 {block.name}[] = {{\n{body} }} ;\n\n"


def render_define(name: str, value: int) -> str:
    return f"#define {name} {value}\n"


def render_preamble() -> str:
    """Render the header comment and the pool constant definitions."""
    defines = "".join(render_define(name, value) for name, value in PREAMBLE_DEFINES)
    return f"{HEADER_COMMENT}\n\n{defines}\n"


def render_counter_view() -> str:
    """Declare the counter as a pointer into the constants block (a view, not a copy)."""
    return f"static u32 *{COUNTER_VIEW_NAME} = {CONSTANTS_BLOCK_NAME} + ARRAY_WORDS ;\n"


class HeaderGenerator:
    """Writes the complete seed header to a text stream.

    The entropy source is owned by the caller and passed in explicitly.
    Output is written piece by piece: when a block fails, everything before
    it has already been written and nothing of the failed block has.

    Args:
        config: Runtime configuration (extended mode, safety cap, logging).
        source: Open entropy source.
    """

    def __init__(self, config: PoolSeedConfig, source: EntropySource) -> None:
        self._config = config
        self._source = source
        self._log = GenerationLogger(config)

    @property
    def generation_logger(self) -> GenerationLogger:
        return self._log

    def generate_block(self, word_count: int, name: str) -> Block:
        """Generate one block and log its diagnostic record."""
        start = time.perf_counter()
        block = generate_block(
            self._source,
            word_count,
            name,
            max_attempts=self._config.max_replacement_attempts,
        )
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        self._log.log_block(
            BlockRecord(
                name=name,
                word_count=word_count,
                replaced_words=block.replaced,
                rejected_positions=block.rejected,
                bytes_read=block.bytes_read,
                entropy_source=self._source.name,
                elapsed_ms=elapsed_ms,
            )
        )
        return block

    def write(self, stream: TextIO) -> None:
        """Write the preamble and every block to *stream*.

        Raises:
            PoolSeedError: On any fatal generation failure.
        """
        stream.write(render_preamble())
        stream.write(format_block(self.generate_block(TOTAL_POOL_WORDS, POOLS_BLOCK_NAME)))

        if self._config.random_gcm:
            stream.write(render_define("ARRAY_WORDS", ARRAY_WORDS) + "\n")
            constants = self.generate_block(ARRAY_WORDS + COUNTER_WORDS, CONSTANTS_BLOCK_NAME)
            stream.write(format_block(constants))
            stream.write(render_counter_view())

    def render(self) -> str:
        """Return the complete header as a string."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()
