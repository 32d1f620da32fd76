import sys
from pathlib import Path

import streamlit as st

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.append(str(REPO_ROOT))

from app.components.data import get_player_stats
from app.components.filters import language_selector, sidebar_filters
from app.components.ui import resolve_asset, section_title, setup_page, stat_block
from app.components.viz import season_goals_figure
from player_stats.i18n import MENU_SECTIONS, format_average, translate

setup_page(page_title="Player Stats", page_icon="⚽")

try:
    stats = get_player_stats()
except (FileNotFoundError, ValueError) as exc:
    st.error(f"Could not load the player dataset: {exc}")
    st.stop()

player = stats.player
lang = language_selector()
t = translate(lang)
selection = sidebar_filters(stats.team_filters, stats.seasons_short, lang)

with st.sidebar.expander(t["header"]["menu"], expanded=False):
    for section in MENU_SECTIONS:
        st.markdown(f"[{t['menu'][section]}](#{section.replace('_', '-')})")

selected = stats.filter(selection["team_key"], selection["season_short"])
totals = stats.aggregate(selected)

photo_col, title_col = st.columns([1, 6])
with photo_col:
    photo = resolve_asset(player.photo)
    if photo is not None:
        st.image(str(photo), width=112)
    else:
        st.markdown(f'<div class="jersey-fallback">{player.number}</div>', unsafe_allow_html=True)
with title_col:
    st.markdown(f'<h1 id="home">{t["header"]["title"].format(name=player.name.upper())}</h1>', unsafe_allow_html=True)
    st.caption(f"{selection['team_label']} • {selection['season_short'] or t['sidebar']['all']}")

section_title(t["menu"]["stats"], anchor="stats")
if not selected:
    st.info(t["stats"]["no_data"])

left, right = st.columns([1, 1.2])
with left:
    stat_block(t["stats"]["goals"], totals.goals, t["stats"]["average"], format_average(totals.goals_per_match, lang))
    h1, h2 = st.columns(2)
    h1.metric(t["stats"]["hat_trick"], totals.hat_tricks)
    h2.metric(t["stats"]["braces"], totals.braces)
    stat_block(
        t["stats"]["assists"], totals.assists, t["stats"]["average"], format_average(totals.assists_per_match, lang)
    )
    stat_block(t["stats"]["matches"], totals.matches)
    stat_block(t["stats"]["titles"], totals.titles)

with right:
    fig = season_goals_figure(stats.to_frame(selected), title=t["stats"]["by_season"], labels=t["stats"])
    st.plotly_chart(fig, use_container_width=True)

section_title(t["sections"]["teams"], anchor="teams")
club_cols = st.columns(3)
for i, club in enumerate(stats.clubs):
    with club_cols[i % 3]:
        st.markdown(
            f'<div class="team-card"><h3>{club.club}</h3><p>{club.league}</p>'
            f"<span>{club.totals.matches} {t['teams_card']['matches']}</span> · "
            f"<span>{club.totals.goals} {t['teams_card']['goals']}</span> · "
            f"<span>{club.totals.assists} {t['teams_card']['assists']}</span></div>",
            unsafe_allow_html=True,
        )

section_title(t["sections"]["team_photo"], anchor="team-photo")
cover = resolve_asset(player.cover)
if cover is not None:
    st.image(str(cover), caption=t["alt"]["team_photo"], use_container_width=True)
else:
    st.caption(t["alt"]["photo_missing"])

section_title(t["sections"]["career"], anchor="career")
career = stats.to_frame()[["season", "club", "league", "matches", "goals", "assists", "titles"]]
career.columns = [
    t["table"]["season"],
    t["table"]["team"],
    t["table"]["competition"],
    t["table"]["played"],
    t["table"]["goals"],
    t["table"]["assists"],
    t["table"]["titles"],
]
st.dataframe(career, use_container_width=True, hide_index=True)

section_title(t["sections"]["player_data"], anchor="player-data")
labels = t["player_data"]
fields = [
    (labels["position"], player.position),
    (labels["jersey_number"], player.number),
    (labels["birth_date"], player.birth_date),
    (labels["birth_place"], player.birth_place),
    (labels["height"], player.height),
    (labels["nationality"], player.nationality),
    (labels["current_club"], player.current_club),
    (labels["contract_until"], player.contract_until),
]
data_cols = st.columns(3)
for i, (label, value) in enumerate(fields):
    data_cols[i % 3].markdown(f"**{label}**  \n{value}")

section_title(t["sections"]["contact"], anchor="contact")
if player.contact_links:
    st.markdown(
        " ".join(f'<a class="context-chip" href="{url}">{name}</a>' for name, url in player.contact_links.items()),
        unsafe_allow_html=True,
    )

st.divider()
st.caption(f"{player.name} · {t['footer']['jersey']} {player.number}")
