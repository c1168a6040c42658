"""Tests for EntropySourceRegistry."""

from __future__ import annotations

import pytest

from poolseed.config import PoolSeedConfig
from poolseed.entropy import DeviceEntropySource, MockUniformSource, SystemEntropySource
from poolseed.entropy.base import EntropySource
from poolseed.entropy.registry import EntropySourceRegistry
from poolseed.exceptions import EntropyUnavailableError


class _DummySource(EntropySource):
    """Minimal concrete source for registry tests."""

    @property
    def name(self) -> str:
        return "dummy"

    @property
    def is_available(self) -> bool:
        return True

    def read(self, n: int) -> bytes:
        return b"\x5a" * n

    def close(self) -> None:
        pass


class TestEntropySourceRegistry:
    """Tests for the decorator-based source registry."""

    def setup_method(self) -> None:
        """Save registry state before each test."""
        self._saved_registry = dict(EntropySourceRegistry._registry)

    def teardown_method(self) -> None:
        """Restore registry state after each test."""
        EntropySourceRegistry._registry = self._saved_registry

    def test_builtins_registered(self) -> None:
        assert EntropySourceRegistry.get("device") is DeviceEntropySource
        assert EntropySourceRegistry.get("system") is SystemEntropySource
        assert EntropySourceRegistry.get("mock") is MockUniformSource

    def test_register_and_get(self) -> None:
        @EntropySourceRegistry.register("test_source")
        class TestSource(_DummySource):
            pass

        assert EntropySourceRegistry.get("test_source") is TestSource

    def test_get_unknown_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="no_such_source"):
            EntropySourceRegistry.get("no_such_source")

    def test_list_available_is_sorted(self) -> None:
        EntropySourceRegistry.register("zzz_source")(_DummySource)
        EntropySourceRegistry.register("aaa_source")(_DummySource)
        available = EntropySourceRegistry.list_available()
        assert available == sorted(available)
        assert {"device", "mock", "system"} <= set(available)

    def test_build_device_uses_configured_path(self, tmp_path) -> None:
        device = tmp_path / "random"
        device.write_bytes(b"\x00" * 16)
        config = PoolSeedConfig(_env_file=None, entropy_device=str(device))  # type: ignore[call-arg]
        source = EntropySourceRegistry.build(config)
        try:
            assert isinstance(source, DeviceEntropySource)
            assert source.path == str(device)
        finally:
            source.close()

    def test_build_device_missing_path(self, tmp_path) -> None:
        config = PoolSeedConfig(
            _env_file=None, entropy_device=str(tmp_path / "missing")  # type: ignore[call-arg]
        )
        with pytest.raises(EntropyUnavailableError, match="no "):
            EntropySourceRegistry.build(config)

    def test_build_mock_passes_seed(self) -> None:
        config = PoolSeedConfig(
            _env_file=None, entropy_source_type="mock", mock_seed=5  # type: ignore[call-arg]
        )
        a = EntropySourceRegistry.build(config).read(32)
        b = MockUniformSource(seed=5).read(32)
        assert a == b

    def test_build_default_from_config(self) -> None:
        EntropySourceRegistry.register("dummy")(_DummySource)
        config = PoolSeedConfig(_env_file=None, entropy_source_type="dummy")  # type: ignore[call-arg]
        assert isinstance(EntropySourceRegistry.build(config), _DummySource)

    def test_register_overrides_existing_name(self) -> None:
        EntropySourceRegistry.register("system")(_DummySource)
        assert EntropySourceRegistry.get("system") is _DummySource

    def test_unknown_name_lists_available(self) -> None:
        with pytest.raises(KeyError) as excinfo:
            EntropySourceRegistry.get("quantum")
        message = excinfo.value.args[0]
        assert "'quantum'" in message
        assert "device, mock, system" in message
