"""Typed record view over a normalized readings DataFrame."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pandas as pd


@dataclass(frozen=True, slots=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class SensorReading:
    """A single forest-sensor reading that passed normalization."""

    timestamp: datetime
    location: Location
    temperature: float | None = None
    pressure: float | None = None
    motion_x: float | None = None
    motion_y: float | None = None
    motion_z: float | None = None
    motion_magnitude: float | None = None
    event: str = "None"


def _optional(value: object) -> float | None:
    return None if pd.isna(value) else float(value)


def readings_from_frame(df: pd.DataFrame) -> list[SensorReading]:
    """Convert the normalizer's output frame into SensorReading records."""
    return [
        SensorReading(
            timestamp=row.timestamp.to_pydatetime(),
            location=Location(float(row.latitude), float(row.longitude)),
            temperature=_optional(row.temperature),
            pressure=_optional(row.pressure),
            motion_x=_optional(row.motion_x),
            motion_y=_optional(row.motion_y),
            motion_z=_optional(row.motion_z),
            motion_magnitude=_optional(row.motion_magnitude),
            event=row.event,
        )
        for row in df.itertuples(index=False)
    ]
