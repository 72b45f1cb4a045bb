"""YAML configuration loader for grouping."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from pathlib import Path

import yaml
from dotenv import load_dotenv

from common.config import find_config_path, load_yaml
from group_news.errors import ConfigurationError

# Load .env file if it exists
load_dotenv()

# Config directory at the repository root
CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"
CONFIG_ENV_VAR = "GROUP_NEWS_CONFIG"

DEFAULT_THRESHOLD = 0.65


def validate_threshold(threshold: object) -> float:
    """Return threshold as a float, rejecting anything outside [0, 1]."""
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        raise ConfigurationError(f"Threshold must be a number, got {threshold!r}")
    value = float(threshold)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"Threshold must be between 0 and 1, got {threshold!r}")
    return value


@dataclass
class GroupNewsConfig:
    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        self.threshold = validate_threshold(self.threshold)


def load_config(name: str | None = None) -> GroupNewsConfig:
    """Load grouping config by name (e.g., 'test' or 'prod') or path.

    Args:
        name: Config name without extension, path to a YAML file, or None to
            use $GROUP_NEWS_CONFIG (default 'prod')

    Returns:
        GroupNewsConfig instance

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigurationError: If the file contents are invalid
    """
    config_path = find_config_path(name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    try:
        data = load_yaml(config_path)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file {config_path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    known = {f.name for f in fields(GroupNewsConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown config options in {config_path}: {', '.join(map(str, unknown))}"
        )

    return GroupNewsConfig(threshold=data.get("threshold", DEFAULT_THRESHOLD))
