"""Configuration management for namesmith.

Config resolution order (highest priority first):
1. Programmatic (NamesmithConfig constructed in code, installed via configure())
2. Environment variables (NAMESMITH_DATA_DIR, NAMESMITH_RARITY, etc.)
3. Config file (~/.config/namesmith/config.json, managed by `namesmith config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from .rarity import MAX_RARITY, MIN_RARITY, NEUTRAL_RARITY


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "namesmith"
CONFIG_FILE = CONFIG_DIR / "config.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a config/env boolean string.

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    token = value.strip().lower()
    if token in _TRUE_VALUES:
        return True
    if token in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def _validate_rarity(value: float) -> float:
    value = float(value)
    if not MIN_RARITY <= value <= MAX_RARITY:
        raise ValueError(f"Rarity must be between 0 and 100, got {value}")
    return value


def _validate_count(value: int) -> int:
    value = int(value)
    if value < 1:
        raise ValueError(f"Count must be at least 1, got {value}")
    return value


def _validate_bool(value: bool | str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value)
    raise TypeError(f"Expected a boolean, got {type(value).__name__}")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class SourcesConfig:
    """Where dataset files are read from.

    - data_dir: directory holding given_names/ and surnames/ (empty = bundled data)
    """

    data_dir: str = ""


@dataclass
class DefaultsConfig:
    """Defaults for the generate command."""

    rarity: float = NEUTRAL_RARITY
    count: int = 1
    title_case: bool = True


@dataclass
class NamesmithConfig:
    """Top-level namesmith configuration.

    Examples:
        # Package use — no files needed
        config = NamesmithConfig(defaults=DefaultsConfig(rarity=80))

        # CLI use — loads from ~/.config/namesmith/config.json
        config = NamesmithConfig.load()
    """

    sources: SourcesConfig = field(default_factory=SourcesConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "NamesmithConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("NAMESMITH_DATA_DIR"):
            config.sources.data_dir = val
        if val := os.environ.get("NAMESMITH_RARITY"):
            try:
                config.defaults.rarity = _validate_rarity(float(val))
            except ValueError:
                logger.warning("Invalid NAMESMITH_RARITY=%r, ignoring", val)
        if val := os.environ.get("NAMESMITH_COUNT"):
            try:
                config.defaults.count = _validate_count(int(val))
            except ValueError:
                logger.warning("Invalid NAMESMITH_COUNT=%r, ignoring", val)
        if val := os.environ.get("NAMESMITH_TITLE_CASE"):
            try:
                config.defaults.title_case = parse_bool(val)
            except ValueError:
                logger.warning("Invalid NAMESMITH_TITLE_CASE=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/namesmith/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "sources": asdict(self.sources),
            "defaults": asdict(self.defaults),
        }

    @property
    def data_dir(self) -> Path | None:
        """Configured data directory, or None for the bundled data."""
        return Path(self.sources.data_dir) if self.sources.data_dir else None


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: NamesmithConfig, data: dict) -> None:
    """Apply a dict of values onto a NamesmithConfig, skipping invalid values."""
    if "sources" in data and isinstance(data["sources"], dict):
        for k, v in data["sources"].items():
            if hasattr(config.sources, k):
                setattr(config.sources, k, str(v))
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if not hasattr(config.defaults, k):
                continue
            try:
                if k == "rarity":
                    v = _validate_rarity(v)
                elif k == "count":
                    v = _validate_count(v)
                elif k == "title_case":
                    v = _validate_bool(v)
            except (TypeError, ValueError):
                logger.warning("Invalid config value defaults.%s=%r, ignoring", k, v)
                continue
            setattr(config.defaults, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: NamesmithConfig | None = None


def get_config() -> NamesmithConfig:
    """Get the global NamesmithConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = NamesmithConfig.load()
    return _config


def configure(config: NamesmithConfig) -> None:
    """Set the global NamesmithConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
