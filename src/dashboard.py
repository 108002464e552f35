"""
Dashboard page — the main landing page of the Forest Watch app.

Loads the sensor CSV once per session (cached), then draws everything from
the normalized frame plus the single event filter selection.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pandas as pd
import streamlit as st

_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from forest_watch.config import load_config, resolve_data_path  # noqa: E402
from forest_watch.data.loader import load_sensor_csv  # noqa: E402
from forest_watch.features.filters import (  # noqa: E402
    count_events,
    event_options,
    filter_by_event,
    summarize_readings,
)
from forest_watch.features.normalize import normalize_readings  # noqa: E402
from forest_watch.logging_utils import get_logger  # noqa: E402
from forest_watch.viz.charts import event_count_figure, timeseries_figure  # noqa: E402
from forest_watch.viz.maps import build_event_map  # noqa: E402
from forest_watch.viz.table import build_log_table  # noqa: E402

logger = get_logger("forest_watch")

_cfg = load_config("app")
_page = _cfg["page"]
_series = _cfg["charts"]["series"]
_categories = _cfg["events"]["categories"]


@st.cache_data(show_spinner=False)
def load_readings(source: str) -> pd.DataFrame:
    """Load and normalize the sensor CSV. Cached per source for the session."""
    return normalize_readings(load_sensor_csv(source))


def _metric_card(label: str, value: str) -> None:
    st.markdown(
        f"""
        <div class="metric-card">
            <div class="metric-label">{label}</div>
            <div class="metric-value">{value}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _fmt(value: float | None, unit: str, digits: int = 1) -> str:
    return "—" if value is None else f"{value:.{digits}f} {unit}"


def show_dashboard_page(render_footer: Callable[[], None]) -> None:
    # Hero
    st.markdown(
        f"""
        <div class="hero">
            <div class="hero-title">{_page['title']}</div>
            <div class="hero-subtitle">{_page['subtitle']}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    source = str(resolve_data_path(_cfg["data"]["csv_path"]))
    with st.spinner("Loading sensor readings..."):
        readings = load_readings(source)

    if readings.empty:
        st.info("No sensor readings to show.")
        render_footer()
        return

    # Headline numbers
    summary = summarize_readings(readings)
    col_n, col_t, col_p, col_m = st.columns(4)
    with col_n:
        _metric_card("Readings", f"{summary['count']:,}")
    with col_t:
        _metric_card("Mean temperature", _fmt(summary["mean_temperature"], "°C"))
    with col_p:
        _metric_card("Mean pressure", _fmt(summary["mean_pressure"], "hPa"))
    with col_m:
        _metric_card("Peak motion", _fmt(summary["peak_motion"], "g", digits=2))

    st.caption(
        f"{summary['first_timestamp']:%Y-%m-%d %H:%M} → "
        f"{summary['last_timestamp']:%Y-%m-%d %H:%M} UTC"
    )

    # Filter
    selection = st.selectbox("Event filter", event_options(readings), key="event_filter")
    filtered = filter_by_event(readings, selection)
    logger.debug("Event filter %r: %d of %d readings", selection, len(filtered), len(readings))

    # Time series
    st.markdown('<h2 class="section-header">Sensor trends</h2>', unsafe_allow_html=True)
    for series in _series:
        st.plotly_chart(
            timeseries_figure(filtered, series["column"], series["title"], series.get("unit", "")),
            use_container_width=True,
        )

    # Event distribution always reflects the full dataset
    st.markdown('<h2 class="section-header">Events</h2>', unsafe_allow_html=True)
    st.plotly_chart(
        event_count_figure(count_events(readings, _categories)),
        use_container_width=True,
    )

    # Map
    st.markdown('<h2 class="section-header">Event locations</h2>', unsafe_allow_html=True)
    deck = build_event_map(filtered)
    if deck is None:
        st.info("No readings match this filter.")
    else:
        st.pydeck_chart(deck)

    # Log
    st.markdown('<h2 class="section-header">Readings log</h2>', unsafe_allow_html=True)
    st.dataframe(build_log_table(filtered), use_container_width=True, hide_index=True)

    render_footer()
