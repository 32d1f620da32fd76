from __future__ import annotations

from pathlib import Path

import streamlit as st

from player_stats.config import default_config_path
from player_stats.data_loader import load_player_stats
from player_stats.stats import PlayerStats


@st.cache_resource(show_spinner=False)
def _load_cached(config_path: str) -> PlayerStats:
    return load_player_stats(config_path)


def get_player_stats(config_path: str | Path | None = None) -> PlayerStats:
    """Load the enriched season table once per process and reuse it across reruns."""
    path = Path(config_path) if config_path is not None else default_config_path()
    return _load_cached(str(path))
