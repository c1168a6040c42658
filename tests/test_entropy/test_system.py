"""Tests for SystemEntropySource."""

from __future__ import annotations

import numpy as np

from poolseed.entropy.system import SystemEntropySource


class TestSystemEntropySource:
    """Tests for the os.urandom() wrapper."""

    def test_name(self) -> None:
        assert SystemEntropySource().name == "system"

    def test_is_always_available(self) -> None:
        assert SystemEntropySource().is_available is True

    def test_returns_correct_byte_count(self) -> None:
        source = SystemEntropySource()
        for n in (0, 1, 4, 100, 768):
            assert len(source.get_random_bytes(n)) == n

    def test_consecutive_calls_differ(self) -> None:
        """Two calls with enough bytes should produce different output."""
        source = SystemEntropySource()
        assert source.get_random_bytes(32) != source.get_random_bytes(32)

    def test_close_is_noop(self) -> None:
        source = SystemEntropySource()
        source.close()
        assert len(source.get_random_bytes(8)) == 8

    def test_name_and_availability(self) -> None:
        source = SystemEntropySource()
        assert source.name == "system"
        assert source.is_available is True

    def test_get_words(self) -> None:
        words = SystemEntropySource().get_words(10)
        assert words.shape == (10,)
        assert words.dtype == np.uint32
        assert words.flags.writeable

    def test_get_words_with_out(self) -> None:
        out = np.zeros(6, dtype=np.uint32)
        result = SystemEntropySource().get_words(6, out=out)
        assert result is out
