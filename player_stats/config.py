from __future__ import annotations

import os
from pathlib import Path

import yaml

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = REPO_ROOT / "config" / "player.yaml"
CONFIG_ENV_VAR = "PLAYER_STATS_CONFIG"


def default_config_path() -> Path:
    env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_config(config_path: str | Path | None = None) -> dict:
    """Load YAML config file into a dictionary."""
    config_path = Path(config_path) if config_path is not None else default_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file must contain a mapping at the top level: {config_path}")
    return cfg
