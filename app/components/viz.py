from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

PINK = "#ec4899"
PURPLE = "#a855f7"
LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(255,255,255,0.04)",
    font=dict(color="#f8f4fb"),
    margin=dict(l=10, r=10, t=40, b=10),
)


def season_goals_figure(seasons_df: pd.DataFrame, title: str, labels: dict[str, str]) -> go.Figure:
    """Goals, braces and hat-tricks per season, oldest season on the left."""
    fig = go.Figure()
    if seasons_df.empty:
        fig.update_layout(title=title, xaxis=dict(visible=False), yaxis=dict(visible=False), **LAYOUT)
        return fig

    ordered = seasons_df.iloc[::-1]
    x = (ordered["season_short"] + " · " + ordered["club"]).tolist()
    fig.add_trace(go.Bar(x=x, y=ordered["goals"], name=labels["goals"], marker_color=PINK))
    fig.add_trace(go.Bar(x=x, y=ordered["braces"], name=labels["braces"], marker_color=PURPLE))
    fig.add_trace(go.Bar(x=x, y=ordered["hat_tricks"], name=labels["hat_trick"], marker_color="#f9a8d4"))
    fig.update_layout(title=title, barmode="group", legend=dict(orientation="h", y=-0.2), **LAYOUT)
    return fig
