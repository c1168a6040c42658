"""Acceptance filter for seed words.

A word is kept only if its Hamming weight lies in ``[MIN_WEIGHT, MAX_WEIGHT]``
and every one of its four bytes has at least one bit set and one bit clear.

The filter is not strictly necessary: raw device output could be used as is,
and any bias makes the output slightly easier to guess. But a Hamming weight
near 16 gives close to even odds that using the word in arithmetic (``+``,
``^`` or multiplication) flips any given bit, so a weak bias is applied.
"""

from __future__ import annotations

import numpy as np

from poolseed.layout import WORD_BYTES

MIN_WEIGHT: int = 8
MAX_WEIGHT: int = 32 - MIN_WEIGHT

_WORD_MASK = 0xFFFFFFFF
_DEGENERATE_BYTES = (0x00, 0xFF)


def _check_word(word: int) -> int:
    value = int(word)
    if value < 0 or value > _WORD_MASK:
        raise ValueError(f"Not a 32-bit unsigned word: {value!r}")
    return value


def hamming(word: int) -> int:
    """Return the number of set bits in *word*.

    Uses Kernighan's method: each iteration clears the lowest set bit, so
    the loop runs once per set bit.

    Args:
        word: A 32-bit unsigned value.

    Returns:
        Population count in ``[0, 32]``.

    Raises:
        ValueError: If *word* does not fit in 32 unsigned bits.
    """
    x = _check_word(word)
    weight = 0
    while x:
        x &= x - 1
        weight += 1
    return weight


def accept(word: int) -> bool:
    """Return whether *word* is suitable as seed material.

    Args:
        word: A 32-bit unsigned value.

    Returns:
        ``True`` if the Hamming weight is within bounds and no byte is
        ``0x00`` or ``0xFF``.

    Raises:
        ValueError: If *word* does not fit in 32 unsigned bits.
    """
    value = _check_word(word)

    weight = hamming(value)
    if weight < MIN_WEIGHT or weight > MAX_WEIGHT:
        return False

    return all(octet not in _DEGENERATE_BYTES for octet in value.to_bytes(WORD_BYTES, "little"))


def acceptance_mask(words: np.ndarray) -> np.ndarray:
    """Vectorized :func:`accept` over an array of words.

    Args:
        words: Array-like of 32-bit unsigned values, any shape, including 0-d.

    Returns:
        Boolean array of the same shape, ``True`` where the word is accepted.
    """
    arr = np.asarray(words, dtype=np.uint32)
    octets = np.ascontiguousarray(arr.reshape(-1)).view(np.uint8).reshape(-1, WORD_BYTES)

    weights = np.unpackbits(octets, axis=1).sum(axis=1)
    weight_ok = (weights >= MIN_WEIGHT) & (weights <= MAX_WEIGHT)
    bytes_ok = ~np.isin(octets, _DEGENERATE_BYTES).any(axis=1)

    return (weight_ok & bytes_ok).reshape(arr.shape)


def rejected_positions(words: np.ndarray) -> np.ndarray:
    """Return the indices of rejected words in a 1-D array, in ascending order."""
    return np.flatnonzero(~acceptance_mask(words))
