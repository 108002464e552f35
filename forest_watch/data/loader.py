"""
Loader for forest-sensor CSV exports.

The sensor export is a plain header-first CSV:

    timestamp, temperature, pressure, motion_x, motion_y, motion_z, location, event

but the files come out of a simulator that is loose with formatting: headers
and values may carry stray whitespace or be wrapped in an extra pair of quote
characters, and the location column is itself a quoted "lat,lon" pair. This
module reads the file as raw strings and cleans every header and value. It
does no type conversion; that is the normalizer's job
(forest_watch.features.normalize).

Usage:

    from forest_watch.data.loader import load_sensor_csv

    raw = load_sensor_csv("data/forest_sensor_data.csv")
    # DataFrame of str, one column per header, "" for empty cells
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = [
    "timestamp",
    "temperature",
    "pressure",
    "motion_x",
    "motion_y",
    "motion_z",
    "location",
    "event",
]

_QUOTE_CHARS = "\"'"


def clean_cell(value: object) -> str:
    """Trim whitespace and strip surrounding quote characters from one cell."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""
    return str(value).strip().strip(_QUOTE_CHARS).strip()


def empty_frame() -> pd.DataFrame:
    """An empty raw frame with the expected columns."""
    return pd.DataFrame(columns=EXPECTED_COLUMNS, dtype=str)


def load_sensor_csv(source: Path | str) -> pd.DataFrame:
    """
    Read a sensor CSV into a DataFrame of cleaned strings.

    Args:
        source: Local path or http(s) URL of the CSV resource.

    Returns:
        DataFrame with one str column per header. Empty cells are "".
        Returns an empty DataFrame with EXPECTED_COLUMNS if the resource
        can't be read or parsed; the failure is logged, not raised.
    """
    name = Path(str(source)).name
    skipped_lines = 0

    def _skip_bad_line(bad_line: list[str]) -> None:
        nonlocal skipped_lines
        skipped_lines += 1
        logger.debug("%s: skipping line with %d fields", name, len(bad_line))
        return None

    # The header is read as an ordinary row so its width fixes the column
    # count. With header=0 pandas would treat an over-long first data line as
    # an unnamed index column and shift every row left.
    try:
        grid = pd.read_csv(
            source,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
            on_bad_lines=_skip_bad_line,
            engine="python",
        )
    except (OSError, ValueError) as exc:
        # OSError covers missing files and URL failures; ValueError covers
        # pandas' EmptyDataError/ParserError and bad encodings.
        logger.error("Failed to load sensor CSV %s: %s", source, exc)
        return empty_frame()

    grid = grid.fillna("").map(clean_cell)
    df = grid.iloc[1:].reset_index(drop=True)
    df.columns = list(grid.iloc[0])

    missing = [c for c in EXPECTED_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("%s: missing columns %s — filled with empty values", name, missing)
        for col in missing:
            df[col] = ""

    if skipped_lines:
        logger.info("%s: skipped %d malformed lines", name, skipped_lines)

    logger.info("%s: loaded %d raw rows", name, len(df))
    return df
