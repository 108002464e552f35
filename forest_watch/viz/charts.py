"""
Plotly figures for the dashboard.

All functions take the normalized readings frame (or the event tally) and
return a plotly Figure; rendering is left to the caller (st.plotly_chart).
Colours and chart height come from configs/app.yaml.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from forest_watch.config import load_config

_cfg = load_config("app")
_events = _cfg["events"]
CHART_HEIGHT: int = _cfg["charts"]["height"]


def event_colour(event: str) -> list[int]:
    """RGB triple for an event tag; unknown tags get the default colour."""
    return list(_events["colours"].get(event, _events["default_colour"]))


def _css(rgb: list[int]) -> str:
    r, g, b = rgb
    return f"rgb({r},{g},{b})"


def timeseries_figure(
    df: pd.DataFrame, column: str, title: str, unit: str = ""
) -> go.Figure:
    """
    Line chart of one numeric column over time.

    Null values are dropped rather than drawn as gaps at zero.

    Raises:
        KeyError: If `column` is not in the frame.
    """
    if column not in df.columns:
        raise KeyError(f"Unknown readings column: {column!r}")

    series = df.loc[df[column].notna(), ["timestamp", column]].copy()
    series[column] = series[column].astype(float)

    label = f"{title} ({unit})" if unit else title
    fig = px.line(
        series,
        x="timestamp",
        y=column,
        title=title,
        labels={"timestamp": "Time", column: label},
        markers=True,
    )
    fig.update_layout(height=CHART_HEIGHT, margin=dict(l=10, r=10, t=40, b=10))
    return fig


def event_count_figure(counts: pd.DataFrame) -> go.Figure:
    """Bar chart of the event tally from features.filters.count_events."""
    colour_map = {event: _css(event_colour(event)) for event in counts["event"]}
    fig = px.bar(
        counts,
        x="event",
        y="count",
        color="event",
        color_discrete_map=colour_map,
        title="Event distribution",
        labels={"event": "Event", "count": "Readings"},
        text="count",
    )
    fig.update_layout(
        height=CHART_HEIGHT,
        showlegend=False,
        margin=dict(l=10, r=10, t=40, b=10),
    )
    return fig
