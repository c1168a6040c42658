"""Name-to-class map of entropy sources.

Each source module registers its class with ``@register_entropy_source``
when :mod:`poolseed.entropy` is imported. The command line picks one by
``entropy_source_type``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from poolseed.config import PoolSeedConfig
    from poolseed.entropy.base import EntropySource


class EntropySourceRegistry:
    """Registered entropy source classes, keyed by name."""

    _registry: ClassVar[dict[str, type[EntropySource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Class decorator registering a source under *name*."""

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[EntropySource]:
        """Look up a source class by name.

        Raises:
            KeyError: If no source is registered under *name*.
        """
        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown entropy source: {name!r}. Available: {available}") from None

    @classmethod
    def build(cls, config: PoolSeedConfig) -> EntropySource:
        """Open the source named by ``config.entropy_source_type``.

        Raises:
            KeyError: If the source name is unknown.
            EntropyUnavailableError: If the source cannot be opened.
        """
        return cls.get(config.entropy_source_type).from_config(config)

    @classmethod
    def list_available(cls) -> list[str]:
        return sorted(cls._registry)


register_entropy_source = EntropySourceRegistry.register
