"""
Forest Watch — shared Python package.

Contains the core logic behind the forest-sensor dashboard:
  - forest_watch.data.loader         — sensor CSV ingestion (trim/unquote)
  - forest_watch.data.models         — typed SensorReading record view
  - forest_watch.features.normalize  — raw row → typed reading, drop rules, motion magnitude
  - forest_watch.features.filters    — event filter, event tally, summary metrics
  - forest_watch.viz.charts          — plotly time-series and event-count figures
  - forest_watch.viz.maps            — pydeck event map
  - forest_watch.viz.table           — display frame for the readings log
  - forest_watch.config              — YAML config loading
  - forest_watch.logging_utils       — project-wide logger factory
"""
