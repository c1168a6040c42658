"""Configuration system for poolseed.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (POOLSEED_*) -> .env file -> field defaults.

Command-line overrides are applied via resolve_config(), which creates a new
config instance without mutating the defaults. The pool layout itself is not
configurable; see :mod:`poolseed.layout`.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from poolseed.exceptions import ConfigValidationError

LogLevel = Literal["none", "summary", "full"]


class PoolSeedConfig(BaseSettings):
    """Runtime configuration for the header generator.

    Resolution order: init kwargs -> env vars (POOLSEED_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="POOLSEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Entropy source ---

    entropy_source_type: str = Field(
        default="device",
        description="Registered entropy source: 'device', 'system' or 'mock'",
    )
    entropy_device: str = Field(
        default="/dev/urandom",
        description="Path opened by the 'device' entropy source",
    )
    mock_seed: int | None = Field(
        default=None,
        description="Seed for the 'mock' entropy source",
    )

    # --- Generation ---

    random_gcm: bool = Field(
        default=False,
        description="Also emit the GCM hash constants and counter words",
    )
    max_replacement_attempts: int = Field(
        default=0,
        ge=0,
        description="Replacement reads allowed per word before giving up (0 = unbounded)",
    )

    # --- Logging ---

    log_level: LogLevel = Field(
        default="summary",
        description="Per-block logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Keep every block record in memory for analysis",
    )


_ALL_FIELDS: frozenset[str] = frozenset(PoolSeedConfig.model_fields.keys())


def load_config(**kwargs: Any) -> PoolSeedConfig:
    """Load configuration from the environment, with optional init kwargs.

    Raises:
        ConfigValidationError: If any value fails validation.
    """
    try:
        return PoolSeedConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def resolve_config(
    defaults: PoolSeedConfig,
    overrides: dict[str, Any] | None,
) -> PoolSeedConfig:
    """Create a new config instance merging defaults with explicit overrides.

    Keys whose value is ``None`` are treated as "not given" and skipped, so
    unset command-line options fall through to the environment.

    Args:
        defaults: The base configuration loaded from the environment.
        overrides: Field name to value mapping.

    Returns:
        A new PoolSeedConfig with overrides applied, or *defaults* itself
        when there is nothing to apply.

    Raises:
        ConfigValidationError: If a key is unknown or a value is invalid.
    """
    if not overrides:
        return defaults

    unknown = sorted(set(overrides) - _ALL_FIELDS)
    if unknown:
        raise ConfigValidationError(f"Unknown config field(s): {', '.join(unknown)}")

    applied = {key: value for key, value in overrides.items() if value is not None}
    if not applied:
        return defaults

    # model_copy(update=...) skips validation; model_validate runs it.
    merged = defaults.model_dump()
    merged.update(applied)
    try:
        return PoolSeedConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
