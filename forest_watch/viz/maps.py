"""
Event location map.

One ScatterplotLayer marker per reading, coloured by event tag, centred on the
mean reading location. The Deck is rebuilt from scratch on every Streamlit
rerun, so a filter change never leaves markers from the previous selection.

Usage:

    deck = build_event_map(filtered)
    if deck is not None:
        st.pydeck_chart(deck)
"""

from __future__ import annotations

import pandas as pd
import pydeck as pdk

from forest_watch.config import load_config
from forest_watch.viz.charts import event_colour

_map_cfg = load_config("app")["map"]

MAP_COLUMNS = ["lat", "lon", "color_r", "color_g", "color_b", "event", "time", "temp_label"]


def _fmt(value: object, unit: str) -> str:
    return "n/a" if pd.isna(value) else f"{float(value):.1f} {unit}"


def build_map_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Flatten readings into the plain-typed frame pydeck serializes.

    Nullable columns are rendered to strings here so the JSON payload never
    carries pd.NA.
    """
    if df.empty:
        return pd.DataFrame(columns=MAP_COLUMNS)

    colours = [event_colour(e) for e in df["event"]]
    return pd.DataFrame({
        "lat": df["latitude"].astype(float).to_numpy(),
        "lon": df["longitude"].astype(float).to_numpy(),
        "color_r": [c[0] for c in colours],
        "color_g": [c[1] for c in colours],
        "color_b": [c[2] for c in colours],
        "event": df["event"].astype(str).to_numpy(),
        "time": df["timestamp"].dt.strftime("%Y-%m-%d %H:%M").to_numpy(),
        "temp_label": [_fmt(v, "°C") for v in df["temperature"]],
    })


def build_event_map(df: pd.DataFrame) -> pdk.Deck | None:
    """Return a pydeck Deck of reading locations, or None if there are none."""
    map_df = build_map_frame(df)
    if map_df.empty:
        return None

    layer = pdk.Layer(
        "ScatterplotLayer",
        data=map_df,
        get_position="[lon, lat]",
        get_fill_color="[color_r, color_g, color_b, 200]",
        get_radius=_map_cfg["marker_radius_m"],
        radius_min_pixels=4,
        pickable=True,
    )

    view_state = pdk.ViewState(
        latitude=float(map_df["lat"].mean()),
        longitude=float(map_df["lon"].mean()),
        zoom=_map_cfg["zoom"],
        pitch=_map_cfg["pitch"],
    )

    return pdk.Deck(
        layers=[layer],
        initial_view_state=view_state,
        map_style=_map_cfg["map_style"],
        tooltip={"text": "{event}\n{time}\nTemperature: {temp_label}"},
    )
