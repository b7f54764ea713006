#!/usr/bin/env python3
"""
config.py
---------
Optional YAML configuration for the friends CLI.

The engine itself only needs the journal path; everything else here is a
command-line default. A config file looks like:

    filename: ~/notes/friends.md
    log_dir: ~/.friendlog/logs
    favorites_limit: 10
    activities_limit: 10
    suggest_count: 5
    suggest:
      close_ratio: 1.0
      distant_ratio: 2.0
      default_gap_days: 30

Every key is optional. Precedence is: command-line flag > config file >
built-in default.

Usage:
    from friendlog.core.config import load_config

    config = load_config()              # ~/.friendlog/config.yaml if present
    config = load_config(Path("x.yaml"))  # explicit file, must exist
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from friendlog.core.exceptions import ConfigError
from friendlog.core.paths import DEFAULT_CONFIG_PATH, DEFAULT_JOURNAL_PATH, LOG_DIR


@dataclass(frozen=True)
class SuggestPolicy:
    """
    Thresholds used to bucket friends in ``suggest``.

    A friend's ratio is ``days since last activity / average gap``:
    below ``close_ratio`` is close, below ``distant_ratio`` is moderate,
    anything else is distant. Friends seen on a single day have no
    average gap and use ``default_gap_days`` instead.

    Attributes:
        close_ratio: Upper bound (exclusive) of the close bucket
        distant_ratio: Lower bound (inclusive) of the distant bucket
        default_gap_days: Baseline gap for friends with one activity date
    """

    close_ratio: float = 1.0
    distant_ratio: float = 2.0
    default_gap_days: float = 30.0

    def __post_init__(self) -> None:
        """Validate thresholds on initialization."""
        if self.close_ratio <= 0:
            raise ConfigError(f"close_ratio must be positive, got {self.close_ratio}")
        if self.distant_ratio < self.close_ratio:
            raise ConfigError(
                f"distant_ratio ({self.distant_ratio}) must not be below "
                f"close_ratio ({self.close_ratio})"
            )
        if self.default_gap_days <= 0:
            raise ConfigError(
                f"default_gap_days must be positive, got {self.default_gap_days}"
            )


@dataclass
class FriendsConfig:
    """
    Resolved CLI configuration.

    Attributes:
        filename: Journal file to load and save
        log_dir: Directory for operation/error logs
        favorites_limit: Default ``list favorites`` limit
        activities_limit: Default ``list activities`` limit
        suggest_count: Names sampled per bucket by ``suggest``
        suggest: Bucketing thresholds
        source: Config file the values came from (None for defaults)
    """

    filename: Path = DEFAULT_JOURNAL_PATH
    log_dir: Path = LOG_DIR
    favorites_limit: int = 10
    activities_limit: int = 10
    suggest_count: int = 5
    suggest: SuggestPolicy = field(default_factory=SuggestPolicy)
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate limits on initialization."""
        for name in ("favorites_limit", "activities_limit", "suggest_count"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")


_TOP_LEVEL_KEYS = {
    "filename",
    "log_dir",
    "favorites_limit",
    "activities_limit",
    "suggest_count",
    "suggest",
}
_SUGGEST_KEYS = {"close_ratio", "distant_ratio", "default_gap_days"}


def _build_policy(data: Any) -> SuggestPolicy:
    """Build a SuggestPolicy from the ``suggest:`` mapping."""
    if data is None:
        return SuggestPolicy()
    if not isinstance(data, dict):
        raise ConfigError("'suggest' must be a mapping")

    unknown = set(data) - _SUGGEST_KEYS
    if unknown:
        raise ConfigError(f"Unknown suggest keys: {', '.join(sorted(unknown))}")

    values: Dict[str, float] = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"suggest.{key} must be a number, got {value!r}")
        values[key] = float(value)
    return SuggestPolicy(**values)


def config_from_dict(data: Dict[str, Any], source: Optional[Path] = None) -> FriendsConfig:
    """
    Build a FriendsConfig from parsed YAML data.

    Args:
        data: Mapping loaded from the config file
        source: File the mapping came from, for error messages

    Returns:
        Validated FriendsConfig

    Raises:
        ConfigError: If keys are unknown or values invalid
    """
    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    kwargs: Dict[str, Any] = {"source": source}
    if data.get("filename"):
        kwargs["filename"] = Path(str(data["filename"])).expanduser()
    if data.get("log_dir"):
        kwargs["log_dir"] = Path(str(data["log_dir"])).expanduser()
    for key in ("favorites_limit", "activities_limit", "suggest_count"):
        if key in data:
            kwargs[key] = data[key]
    kwargs["suggest"] = _build_policy(data.get("suggest"))

    return FriendsConfig(**kwargs)


def load_config(path: Optional[Path] = None) -> FriendsConfig:
    """
    Load configuration from YAML.

    Args:
        path: Explicit config file. When None, the default location is used
            and a missing file simply means built-in defaults.

    Returns:
        Resolved FriendsConfig

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid
    """
    explicit = path is not None
    config_path = Path(path).expanduser() if explicit else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return FriendsConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e

    if data is None:
        return FriendsConfig(source=config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    return config_from_dict(data, source=config_path)
