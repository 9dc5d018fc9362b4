"""Configuration management for disk-stats."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".disk-stats"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    "max_depth": 3,
    "min_size_mb": 1,
    "output_prefix": "disk_usage",
    "follow_symlinks": False,
}


def load_config() -> dict:
    """Load configuration, merging with defaults.

    Returns:
        Configuration dictionary
    """
    if not CONFIG_FILE.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(CONFIG_FILE) as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError("config root must be an object")
        # Merge with defaults
        config = DEFAULT_CONFIG.copy()
        config.update(user_config)
        return config
    except (ValueError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, exc)
        return DEFAULT_CONFIG.copy()


def save_config(config: dict) -> None:
    """Persist configuration.

    Args:
        config: Configuration dictionary to save
    """
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_FILE, "w") as f:
        json.dump(config, f, indent=2)
