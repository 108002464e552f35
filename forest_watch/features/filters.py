"""
Derived views over the normalized readings frame.

Everything here is a pure function of the readings frame: nothing mutates
its input, so the frame loaded once per session can be shared by every
widget on the page.

  event_options(df)          — selector choices: "All" + each distinct event tag
  filter_by_event(df, sel)   — exact-match event filter, pass-through for "All"
  count_events(df)           — fixed tally over the known event categories
  summarize_readings(df)     — headline numbers for the metric row
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

ALL_EVENTS = "All"
KNOWN_EVENTS = ("fire_risk", "motion_detected", "None")


def event_options(df: pd.DataFrame) -> list[str]:
    """
    Return ["All", *distinct event tags in first-seen order].

    "All" is reserved for the pass-through choice, so a reading tagged
    literally "All" adds no second entry and can't be selected on its own.
    """
    if df.empty:
        return [ALL_EVENTS]
    tags = [tag for tag in pd.unique(df["event"]).tolist() if tag != ALL_EVENTS]
    return [ALL_EVENTS, *tags]


def filter_by_event(df: pd.DataFrame, selection: str) -> pd.DataFrame:
    """
    Keep only readings whose event tag equals `selection`.

    "All" returns the frame as-is. Any other selection returns a new frame,
    so the caller's frame is never modified.
    """
    if selection == ALL_EVENTS:
        return df
    return df[df["event"] == selection].reset_index(drop=True)


def count_events(
    df: pd.DataFrame, categories: Sequence[str] = KNOWN_EVENTS
) -> pd.DataFrame:
    """
    Tally readings per known event category, in category order.

    Meant to be called on the unfiltered frame so the distribution chart
    doesn't change when the user narrows the table. Tags outside
    `categories` are ignored; a category with no readings counts 0.

    Returns:
        DataFrame with columns event (str) and count (int).
    """
    tally = df["event"].value_counts() if not df.empty else pd.Series(dtype="int64")
    return pd.DataFrame({
        "event": list(categories),
        "count": [int(tally.get(c, 0)) for c in categories],
    })


def _mean_or_none(series: pd.Series) -> float | None:
    value = series.mean(skipna=True)
    return None if pd.isna(value) else float(value)


def _max_or_none(series: pd.Series) -> float | None:
    value = series.max(skipna=True)
    return None if pd.isna(value) else float(value)


def summarize_readings(df: pd.DataFrame) -> dict[str, Any]:
    """
    Headline numbers for the top of the dashboard.

    Null values are ignored. Every statistic is None when there is nothing
    to compute it from.
    """
    if df.empty:
        return {
            "count": 0,
            "first_timestamp": None,
            "last_timestamp": None,
            "mean_temperature": None,
            "mean_pressure": None,
            "peak_motion": None,
        }
    return {
        "count": len(df),
        "first_timestamp": df["timestamp"].min(),
        "last_timestamp": df["timestamp"].max(),
        "mean_temperature": _mean_or_none(df["temperature"]),
        "mean_pressure": _mean_or_none(df["pressure"]),
        "peak_motion": _max_or_none(df["motion_magnitude"]),
    }
