"""Tests for MockUniformSource."""

from __future__ import annotations

import numpy as np

from poolseed.entropy.mock import MockUniformSource


class TestMockUniformSource:
    """Tests for the seeded mock entropy source."""

    def test_name(self) -> None:
        assert MockUniformSource().name == "mock"

    def test_is_always_available(self) -> None:
        assert MockUniformSource().is_available is True

    def test_returns_correct_byte_count(self) -> None:
        source = MockUniformSource(seed=42)
        for n in (0, 1, 4, 100, 768):
            data = source.read(n)
            assert isinstance(data, bytes)
            assert len(data) == n

    def test_seeded_reproducibility(self) -> None:
        a = MockUniformSource(seed=123).get_random_bytes(100)
        b = MockUniformSource(seed=123).get_random_bytes(100)
        assert a == b

    def test_different_seeds_differ(self) -> None:
        a = MockUniformSource(seed=1).get_random_bytes(100)
        b = MockUniformSource(seed=2).get_random_bytes(100)
        assert a != b

    def test_covers_full_byte_range(self) -> None:
        arr = np.frombuffer(MockUniformSource(seed=42).read(20_000), dtype=np.uint8)
        assert arr.min() == 0
        assert arr.max() == 255
        assert abs(arr.mean() - 127.5) < 3.0

    def test_context_manager(self) -> None:
        with MockUniformSource(seed=3) as source:
            assert len(source.get_words(4)) == 4
