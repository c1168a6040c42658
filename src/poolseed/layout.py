"""Pool layout constants shared with the consuming C source.

These values are printed verbatim into the generated header, so the
consumer can check at compile time that it agrees with the generator.
They are not configurable.
"""

from __future__ import annotations

# Random pool sizes.
INPUT_POOL_SHIFT: int = 12
INPUT_POOL_WORDS: int = 1 << (INPUT_POOL_SHIFT - 5)
OUTPUT_POOL_SHIFT: int = 10
OUTPUT_POOL_WORDS: int = 1 << (OUTPUT_POOL_SHIFT - 5)

# One input pool plus two output pools.
TOTAL_POOL_WORDS: int = INPUT_POOL_WORDS + 2 * OUTPUT_POOL_WORDS

# Extended (GCM hash) constants: 4 pools get 2 constants each, 128 bits per row.
ARRAY_ROWS: int = 8
ARRAY_WORDS: int = 4 * ARRAY_ROWS

# 128-bit counter plus extra mixing data, appended after the constants.
COUNTER_WORDS: int = 8

# Output formatting.
WORDS_PER_LINE: int = 8
WORD_BYTES: int = 4

POOLS_BLOCK_NAME = "pools"
CONSTANTS_BLOCK_NAME = "constants"
COUNTER_VIEW_NAME = "counter"

# (name, value) pairs emitted in the preamble, in output order.
PREAMBLE_DEFINES: tuple[tuple[str, int], ...] = (
    ("INPUT_POOL_WORDS", INPUT_POOL_WORDS),
    ("OUTPUT_POOL_WORDS", OUTPUT_POOL_WORDS),
    ("INPUT_POOL_SHIFT", INPUT_POOL_SHIFT),
)
