"""
Shared pytest fixtures for the Forest Watch test suite.

All fixtures are synthetic. The hand-edited sample in tests/data/ is only used by
the end-to-end test. Values are chosen so expected outputs are trivial to
compute by hand.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from forest_watch.data.loader import EXPECTED_COLUMNS
from forest_watch.features.normalize import normalize_readings

HEADER = ",".join(EXPECTED_COLUMNS)


def raw_row(**overrides: str) -> dict[str, str]:
    """A valid raw (string) row; keyword arguments replace individual fields."""
    row = {
        "timestamp": "2024-06-01T00:00:00Z",
        "temperature": "24.5",
        "pressure": "1012.0",
        "motion_x": "3",
        "motion_y": "4",
        "motion_z": "0",
        "location": "13.08,80.27",
        "event": "None",
    }
    row.update(overrides)
    return row


@pytest.fixture()
def make_row():
    """Factory fixture wrapping raw_row for tests that build their own raw frames."""
    return raw_row


# ---------------------------------------------------------------------------
# CSV content for loader tests
# ---------------------------------------------------------------------------

@pytest.fixture()
def valid_csv_content() -> str:
    """
    Four readings, one per hour. The third has a non-numeric temperature and
    the fourth an empty event tag; location is quoted because it holds a comma.
    """
    lines = [
        HEADER,
        '2024-06-01T00:00:00Z,21.5,1010.2,0.01,0.02,0.00,"13.08,80.27",None',
        '2024-06-01T01:00:00Z,30.1,1010.4,0.00,0.00,0.01,"13.09,80.28",fire_risk',
        '2024-06-01T02:00:00Z,n/a,1010.1,1.20,-0.80,0.50,"13.07,80.26",motion_detected',
        '2024-06-01T03:00:00Z,22.0,1009.9,0.02,0.01,0.00,"13.10,80.25",',
    ]
    return "\n".join(lines)


@pytest.fixture()
def valid_csv_file(tmp_path: Path, valid_csv_content: str) -> Path:
    """Write valid_csv_content to a temp file and return the Path."""
    p = tmp_path / "forest_sensor_data.csv"
    p.write_text(valid_csv_content, encoding="utf-8")
    return p


@pytest.fixture()
def messy_csv_file(tmp_path: Path) -> Path:
    """
    CSV with padded, single-quoted headers and values, a fully empty row and
    a blank line — the kind of export the simulator produces on a bad day.
    """
    header = ", ".join(f"'{c}'" for c in EXPECTED_COLUMNS)
    lines = [
        header,
        " '2024-06-01T00:00:00Z' , ' 21.5 ' ,1010.2, 0.1 ,0.2,0.3, \"13.08,80.27\", 'fire_risk' ",
        ",,,,,,,",
        "",
        "2024-06-01T01:00:00Z,22.0,1010.0,0,0,0,\"13.09,80.28\",None",
    ]
    p = tmp_path / "messy.csv"
    p.write_text("\n".join(lines), encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# Normalized frames for filter / aggregation / viz tests
# ---------------------------------------------------------------------------

@pytest.fixture()
def event_mix_df() -> pd.DataFrame:
    """
    20 normalized readings: 13 fire_risk, 5 motion_detected, 2 None,
    one minute apart.
    """
    events = ["fire_risk"] * 13 + ["motion_detected"] * 5 + ["None"] * 2
    raw = pd.DataFrame([
        raw_row(timestamp=f"2024-06-01T00:{i:02d}:00Z", event=event, temperature=str(20 + i))
        for i, event in enumerate(events)
    ])
    return normalize_readings(raw)


@pytest.fixture()
def readings_df(valid_csv_content: str) -> pd.DataFrame:
    """The four valid_csv_content rows, normalized."""
    lines = valid_csv_content.splitlines()[1:]
    raw = pd.DataFrame([
        dict(zip(EXPECTED_COLUMNS, _split(line))) for line in lines
    ])
    return normalize_readings(raw)


def _split(line: str) -> list[str]:
    # Location is the only quoted field in valid_csv_content
    head, location, tail = line.split('"')
    return [*head.rstrip(",").split(","), location, tail.lstrip(",")]
