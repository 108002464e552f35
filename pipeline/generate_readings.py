"""
generate_readings.py — Write a simulated forest-sensor CSV for the dashboard.

Produces one reading every `interval_s` seconds from a node scattered around
a centre coordinate. Temperature follows a daily cycle, pressure drifts, and
motion is low-level noise. Rows tagged fire_risk run hot; rows tagged
motion_detected get a motion spike. A small fraction of rows is deliberately
corrupted (bad numbers, missing timestamp, broken location, empty tag) so the
dashboard's cleaning rules have something to do.

Usage:
    python -m pipeline.generate_readings

Output:
    data/forest_sensor_data.csv (path set in configs/pipeline.yaml)
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pandas as pd

# Make the project root importable so forest_watch.* works from any directory.
_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from forest_watch.config import load_config, resolve_data_path  # noqa: E402
from forest_watch.data.loader import EXPECTED_COLUMNS  # noqa: E402
from forest_watch.logging_utils import get_logger  # noqa: E402

logger = get_logger(__name__)

_SECONDS_PER_DAY = 86_400
_CORRUPTIONS = ("temperature", "pressure", "timestamp", "location", "event")


def generate_readings(
    rows: int,
    seed: int,
    start: str,
    interval_s: int,
    centre: tuple[float, float],
    spread_deg: float,
    event_rates: dict[str, float],
    corrupt_rate: float = 0.0,
) -> pd.DataFrame:
    """
    Build a simulated sensor export as a DataFrame of strings.

    Deterministic for a given seed. Columns match the loader's
    EXPECTED_COLUMNS, so the result can be written straight to CSV.
    """
    rng = np.random.default_rng(seed)

    times = pd.date_range(pd.Timestamp(start), periods=rows, freq=pd.Timedelta(seconds=interval_s))
    seconds_of_day = times.hour.to_numpy() * 3600 + times.minute.to_numpy() * 60
    day_phase = 2 * np.pi * seconds_of_day / _SECONDS_PER_DAY

    tags = list(event_rates)
    probs = list(event_rates.values())
    events = rng.choice(tags + ["None"], size=rows, p=probs + [1.0 - sum(probs)])

    temperature = 26.0 + 5.0 * np.sin(day_phase - np.pi / 2) + rng.normal(0, 0.6, rows)
    temperature = np.where(events == "fire_risk", temperature + rng.uniform(8, 15, rows), temperature)
    pressure = 1010.0 + np.cumsum(rng.normal(0, 0.15, rows))

    motion = rng.normal(0, 0.03, (rows, 3))
    spike = rng.uniform(0.5, 2.0, (rows, 3)) * rng.choice([-1, 1], (rows, 3))
    motion = np.where((events == "motion_detected")[:, None], motion + spike, motion)

    lat = centre[0] + rng.uniform(-spread_deg, spread_deg, rows)
    lon = centre[1] + rng.uniform(-spread_deg, spread_deg, rows)

    df = pd.DataFrame({
        "timestamp": times.strftime("%Y-%m-%dT%H:%M:%SZ"),
        "temperature": np.round(temperature, 2).astype(str),
        "pressure": np.round(pressure, 2).astype(str),
        "motion_x": np.round(motion[:, 0], 4).astype(str),
        "motion_y": np.round(motion[:, 1], 4).astype(str),
        "motion_z": np.round(motion[:, 2], 4).astype(str),
        "location": [f"{a:.5f},{o:.5f}" for a, o in zip(lat, lon)],
        "event": events,
    })

    corrupt_rows = np.flatnonzero(rng.random(rows) < corrupt_rate)
    replacements = {
        "temperature": "n/a",
        "pressure": "ERR",
        "timestamp": "",
        "location": "bad",
        "event": "",
    }
    for idx in corrupt_rows:
        field = _CORRUPTIONS[rng.integers(len(_CORRUPTIONS))]
        df.at[idx, field] = replacements[field]

    logger.info("Generated %d readings (%d corrupted)", rows, len(corrupt_rows))
    return df[EXPECTED_COLUMNS]


def main() -> None:
    gen = load_config("pipeline")["generator"]
    out_path = resolve_data_path(gen["output_csv"])

    df = generate_readings(
        rows=gen["rows"],
        seed=gen["seed"],
        start=gen["start"],
        interval_s=gen["interval_s"],
        centre=(gen["centre"]["latitude"], gen["centre"]["longitude"]),
        spread_deg=gen["spread_deg"],
        event_rates=gen["event_rates"],
        corrupt_rate=gen["corrupt_rate"],
    )

    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    logger.info("CSV saved to %s", out_path)


if __name__ == "__main__":
    main()
