"""Display frame for the sortable readings log."""

from __future__ import annotations

import pandas as pd

LOG_COLUMNS = {
    "timestamp": "Time (UTC)",
    "temperature": "Temperature (°C)",
    "pressure": "Pressure (hPa)",
    "motion_x": "Motion X",
    "motion_y": "Motion Y",
    "motion_z": "Motion Z",
    "motion_magnitude": "Motion |m|",
    "location": "Location",
    "event": "Event",
}


def build_log_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename and reshape readings for st.dataframe.

    Timestamps stay as datetimes (minus the tz) so column sorting is
    chronological; lat/lon collapse into one "lat, lon" string.
    """
    table = df.copy()
    table["timestamp"] = table["timestamp"].dt.tz_localize(None)
    table["location"] = [
        f"{lat:.5f}, {lon:.5f}" for lat, lon in zip(table["latitude"], table["longitude"])
    ]
    table["motion_magnitude"] = table["motion_magnitude"].round(3)
    return table[list(LOG_COLUMNS)].rename(columns=LOG_COLUMNS)
