"""
Codec configuration.

Controls how the JSON codec reports decodes served by the legacy keyed
form, and the default tolerance for approximate vector comparison.
All settings can be overridden via environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


@dataclass
class CodecConfig:
    """Configuration for the vector codec."""

    # Level for the log record emitted when {"X": .., "Y": ..} is decoded
    legacy_log_level: str = field(
        default_factory=lambda: os.getenv("VECT_LEGACY_LOG_LEVEL", "DEBUG").upper()
    )

    # Absolute per-component tolerance used by Vec2.is_close
    float_tolerance: float = field(
        default_factory=lambda: _env_float("VECT_FLOAT_TOLERANCE", 1e-9)
    )

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def legacy_level(self) -> int:
        """Numeric logging level for legacy decodes (DEBUG if unrecognised)."""
        level = getattr(logging, self.legacy_log_level.upper(), None)
        if isinstance(level, int):
            return level
        return logging.DEBUG

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not isinstance(getattr(logging, self.legacy_log_level.upper(), None), int):
            errors.append(f"VECT_LEGACY_LOG_LEVEL is not a logging level: {self.legacy_log_level!r}")
        if self.float_tolerance < 0:
            errors.append("VECT_FLOAT_TOLERANCE must be non-negative")
        return errors


# Singleton config instance
_config: Optional[CodecConfig] = None


def get_config() -> CodecConfig:
    """Get the global codec configuration."""
    global _config
    if _config is None:
        _config = CodecConfig.from_env()
    return _config


def set_config(config: CodecConfig) -> None:
    """
    Replace the global configuration.

    Useful for testing or runtime overrides.
    """
    global _config
    _config = config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() rereads the environment."""
    global _config
    _config = None
