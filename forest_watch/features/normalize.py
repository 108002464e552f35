"""
Row normalization for forest-sensor readings.

Turns the loader's raw string rows into the typed readings frame that every
chart, the map and the log table are drawn from. The rules, per row:

  - rows where every field is empty are skipped outright
  - timestamp is parsed with dateutil; unparseable or empty → row dropped
  - location must be exactly "lat,lon" with two finite floats → else row dropped
  - temperature, pressure and motion_x/y/z are parsed independently; a bad
    value becomes null for that field only, the row is kept
  - motion_magnitude = sqrt(x² + y² + z²), null if any axis is null or non-finite
  - an empty event tag becomes the literal "None"

The output frame uses pandas' nullable Float64 dtype for every numeric column,
so a missing value is pd.NA rather than NaN, and timestamps are UTC.

Usage:

    from forest_watch.data.loader import load_sensor_csv
    from forest_watch.features.normalize import normalize_readings

    readings = normalize_readings(load_sensor_csv(path))
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from datetime import timezone

import pandas as pd
from dateutil import parser as dtparser

from forest_watch.data.loader import clean_cell

logger = logging.getLogger(__name__)

NUMERIC_COLUMNS = ["temperature", "pressure", "motion_x", "motion_y", "motion_z"]
NORMALIZED_COLUMNS = [
    "timestamp",
    *NUMERIC_COLUMNS,
    "motion_magnitude",
    "latitude",
    "longitude",
    "event",
]
DEFAULT_EVENT = "None"


def parse_timestamp(value: str) -> pd.Timestamp | None:
    """
    Parse a free-form date/time string into a UTC timestamp.

    Naive values are taken to be UTC. Returns None for empty or unparseable
    input instead of raising.
    """
    candidate = (value or "").strip()
    if not candidate:
        return None
    try:
        parsed = dtparser.parse(candidate)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return pd.Timestamp(parsed).tz_convert("UTC")
    except (ValueError, OverflowError):
        # dateutil's ParserError and pandas' OutOfBoundsDatetime are both ValueErrors
        return None


def parse_float(value: str) -> float | None:
    """Parse one numeric field. Empty, non-numeric or NaN input gives None."""
    candidate = (value or "").strip()
    if not candidate:
        return None
    try:
        parsed = float(candidate)
    except ValueError:
        return None
    return None if math.isnan(parsed) else parsed


def parse_location(value: str) -> tuple[float, float] | None:
    """Parse a "lat,lon" string. Returns None unless both parts are finite floats."""
    parts = (value or "").split(",")
    if len(parts) != 2:
        return None
    lat, lon = (parse_float(p) for p in parts)
    if lat is None or lon is None or not (math.isfinite(lat) and math.isfinite(lon)):
        return None
    return lat, lon


def motion_magnitude(
    x: float | None, y: float | None, z: float | None
) -> float | None:
    """Euclidean norm of the three motion axes, or None if any axis is missing."""
    axes = (x, y, z)
    if any(a is None or not math.isfinite(a) for a in axes):
        return None
    return math.hypot(x, y, z)


def _row_is_empty(row: dict[str, str]) -> bool:
    return not any((v or "").strip() for v in row.values())


def normalize_readings(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Map the loader's raw frame onto the typed readings frame.

    Args:
        raw: DataFrame of str as returned by load_sensor_csv.

    Returns:
        DataFrame with NORMALIZED_COLUMNS, sorted by timestamp (stable).
        timestamp is datetime64[UTC]; numeric columns are Float64; event is str.
        Returns an empty DataFrame with the same columns and dtypes if no row
        survives.
    """
    records: list[dict] = []
    dropped: Counter[str] = Counter()

    # Frames built by hand may hold NaN or non-str cells; the parsers expect str
    for row in raw.map(clean_cell).to_dict(orient="records"):
        if _row_is_empty(row):
            dropped["empty"] += 1
            continue

        timestamp = parse_timestamp(row.get("timestamp", ""))
        if timestamp is None:
            dropped["timestamp"] += 1
            continue

        location = parse_location(row.get("location", ""))
        if location is None:
            dropped["location"] += 1
            continue

        values = {col: parse_float(row.get(col, "")) for col in NUMERIC_COLUMNS}
        records.append({
            "timestamp": timestamp,
            **values,
            "motion_magnitude": motion_magnitude(
                values["motion_x"], values["motion_y"], values["motion_z"]
            ),
            "latitude": location[0],
            "longitude": location[1],
            "event": (row.get("event") or "").strip() or DEFAULT_EVENT,
        })

    logger.info(
        "Normalized %d readings (dropped: %d empty, %d bad timestamp, %d bad location)",
        len(records),
        dropped["empty"],
        dropped["timestamp"],
        dropped["location"],
    )

    df = pd.DataFrame.from_records(records, columns=NORMALIZED_COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    for col in (*NUMERIC_COLUMNS, "motion_magnitude", "latitude", "longitude"):
        df[col] = df[col].astype("Float64")
    df["event"] = df["event"].astype(object)

    return df.sort_values("timestamp", kind="stable").reset_index(drop=True)
