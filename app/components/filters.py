from __future__ import annotations

import streamlit as st

from player_stats.i18n import DEFAULT_LANGUAGE, LANGUAGES, translate
from player_stats.models import ALL_TEAMS, TeamFilter


def _init_or_reset_selectbox(key: str, options: list[object], default: object | None = None) -> object | None:
    if not options:
        st.session_state[key] = None
        return None

    if default not in options:
        default = options[0]

    current = st.session_state.get(key, default)
    if current not in options:
        current = default
        st.session_state[key] = current
    return current


def language_selector() -> str:
    options = list(LANGUAGES)
    selected = _init_or_reset_selectbox("flt_lang", options, default=DEFAULT_LANGUAGE)
    lang = st.sidebar.radio(
        "Idioma / Language / Llengua",
        options=options,
        index=options.index(selected),
        horizontal=True,
        key="flt_lang",
    )
    return str(lang)


def sidebar_filters(team_filters: list[TeamFilter], seasons_short: list[str], lang: str) -> dict[str, object]:
    t = translate(lang)

    team_keys = [team.key for team in team_filters]
    team_lookup = {team.key: team.label for team in team_filters}
    selected_team = _init_or_reset_selectbox("flt_team", team_keys, default=ALL_TEAMS)
    selected_team = st.sidebar.radio(
        t["sidebar"]["team"],
        options=team_keys,
        index=team_keys.index(selected_team) if selected_team in team_keys else 0,
        format_func=lambda k: team_lookup.get(k, k),
        key="flt_team",
    )

    season_options: list[str | None] = [None, *seasons_short]
    selected_season = _init_or_reset_selectbox("flt_season", season_options, default=None)
    selected_season = st.sidebar.radio(
        f"{t['sidebar']['total']} / {t['sidebar']['season']}",
        options=season_options,
        index=season_options.index(selected_season) if selected_season in season_options else 0,
        format_func=lambda s: t["sidebar"]["all"] if s is None else s,
        key="flt_season",
    )

    return {
        "team_key": selected_team or ALL_TEAMS,
        "team_label": team_lookup.get(selected_team, ALL_TEAMS),
        "season_short": selected_season,
    }
