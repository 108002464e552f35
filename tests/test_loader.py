"""
Tests for forest_watch.data.loader — CSV ingestion and cell cleaning.

All tests use synthetic data from conftest.py fixtures.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from forest_watch.data.loader import EXPECTED_COLUMNS, clean_cell, load_sensor_csv
from forest_watch.features.normalize import normalize_readings


class TestLoadValidFile:
    def test_returns_all_rows(self, valid_csv_file: Path) -> None:
        df = load_sensor_csv(valid_csv_file)
        assert len(df) == 4

    def test_has_expected_columns(self, valid_csv_file: Path) -> None:
        df = load_sensor_csv(valid_csv_file)
        for col in EXPECTED_COLUMNS:
            assert col in df.columns, f"Missing column: {col}"

    def test_values_stay_strings(self, valid_csv_file: Path) -> None:
        """The loader does no type conversion — that's the normalizer's job."""
        df = load_sensor_csv(valid_csv_file)
        assert df.loc[0, "temperature"] == "21.5"
        assert df.loc[2, "temperature"] == "n/a"

    def test_quoted_location_kept_whole(self, valid_csv_file: Path) -> None:
        df = load_sensor_csv(valid_csv_file)
        assert df.loc[0, "location"] == "13.08,80.27"

    def test_empty_cell_is_empty_string(self, valid_csv_file: Path) -> None:
        df = load_sensor_csv(valid_csv_file)
        assert df.loc[3, "event"] == ""

    def test_accepts_str_path(self, valid_csv_file: Path) -> None:
        df = load_sensor_csv(str(valid_csv_file))
        assert len(df) == 4


class TestCleaning:
    def test_headers_trimmed_and_unquoted(self, messy_csv_file: Path) -> None:
        df = load_sensor_csv(messy_csv_file)
        assert list(df.columns[: len(EXPECTED_COLUMNS)]) == EXPECTED_COLUMNS

    def test_values_trimmed_and_unquoted(self, messy_csv_file: Path) -> None:
        df = load_sensor_csv(messy_csv_file)
        first = df.iloc[0]
        assert first["timestamp"] == "2024-06-01T00:00:00Z"
        assert first["temperature"] == "21.5"
        assert first["motion_x"] == "0.1"
        assert first["location"] == "13.08,80.27"
        assert first["event"] == "fire_risk"

    def test_blank_line_skipped_but_empty_row_kept(self, messy_csv_file: Path) -> None:
        """
        A truly blank line never becomes a row. A row of empty fields does —
        the normalizer is the one that drops it.
        """
        df = load_sensor_csv(messy_csv_file)
        assert len(df) == 3
        assert (df.iloc[1] == "").all()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  fire_risk ", "fire_risk"),
            ('"fire_risk"', "fire_risk"),
            ("'13.08,80.27'", "13.08,80.27"),
            ("' 21.5 '", "21.5"),
            ("", ""),
            (None, ""),
            (float("nan"), ""),
        ],
    )
    def test_clean_cell(self, raw: object, expected: str) -> None:
        assert clean_cell(raw) == expected


class TestMissingColumns:
    def test_missing_columns_filled_empty(self, tmp_path: Path) -> None:
        p = tmp_path / "partial.csv"
        p.write_text('timestamp,location\n2024-06-01T00:00:00Z,"13.08,80.27"\n', encoding="utf-8")
        df = load_sensor_csv(p)
        for col in EXPECTED_COLUMNS:
            assert col in df.columns
        assert df.loc[0, "temperature"] == ""
        assert df.loc[0, "location"] == "13.08,80.27"


class TestMalformedLines:
    """Lines with more fields than the header are skipped and counted."""

    _LONG = "2024-06-01T00:00:00Z,21.5,1010.2,0.01,0.02,0.00,13.08,80.27,None"
    _GOOD = [
        '2024-06-01T01:00:00Z,30.1,1010.4,0.00,0.00,0.01,"13.09,80.28",fire_risk',
        '2024-06-01T02:00:00Z,22.0,1009.9,0.02,0.01,0.00,"13.10,80.25",None',
    ]

    def _write(self, tmp_path: Path, lines: list[str]) -> Path:
        p = tmp_path / "long_lines.csv"
        p.write_text("\n".join([",".join(EXPECTED_COLUMNS), *lines]), encoding="utf-8")
        return p

    def test_long_first_line_does_not_shift_columns(self, tmp_path: Path) -> None:
        df = load_sensor_csv(self._write(tmp_path, [self._LONG, *self._GOOD]))
        assert len(df) == 2
        assert list(df.columns) == EXPECTED_COLUMNS
        assert df.loc[0, "timestamp"] == "2024-06-01T01:00:00Z"
        assert df.loc[0, "location"] == "13.09,80.28"
        assert df.loc[0, "event"] == "fire_risk"

    def test_long_first_line_keeps_other_readings(self, tmp_path: Path) -> None:
        readings = normalize_readings(
            load_sensor_csv(self._write(tmp_path, [self._LONG, *self._GOOD]))
        )
        assert len(readings) == 2

    def test_long_middle_line_skipped(self, tmp_path: Path) -> None:
        df = load_sensor_csv(self._write(tmp_path, [self._GOOD[0], self._LONG, self._GOOD[1]]))
        assert len(df) == 2
        assert list(df["event"]) == ["fire_risk", "None"]

    def test_skips_logged_at_info(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        p = self._write(tmp_path, [self._LONG, self._GOOD[0], self._LONG, self._GOOD[1]])
        with caplog.at_level(logging.INFO, logger="forest_watch.data.loader"):
            df = load_sensor_csv(p)
        assert len(df) == 2
        assert any(
            r.levelno == logging.INFO and "skipped 2 malformed lines" in r.getMessage()
            for r in caplog.records
        )

    def test_short_line_padded(self, tmp_path: Path) -> None:
        df = load_sensor_csv(self._write(tmp_path, ["2024-06-01T00:00:00Z,21.5"]))
        assert len(df) == 1
        assert df.loc[0, "temperature"] == "21.5"
        assert df.loc[0, "event"] == ""


class TestLoadFailures:
    def test_missing_file_returns_empty(self, tmp_path: Path) -> None:
        df = load_sensor_csv(tmp_path / "does_not_exist.csv")
        assert df.empty
        assert list(df.columns) == EXPECTED_COLUMNS

    def test_missing_file_is_logged_not_raised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="forest_watch.data.loader"):
            load_sensor_csv(tmp_path / "does_not_exist.csv")
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_empty_file_returns_empty(self, tmp_path: Path) -> None:
        p = tmp_path / "empty.csv"
        p.write_text("", encoding="utf-8")
        df = load_sensor_csv(p)
        assert df.empty
        assert "timestamp" in df.columns

    def test_header_only_file_returns_empty(self, tmp_path: Path) -> None:
        p = tmp_path / "header_only.csv"
        p.write_text(",".join(EXPECTED_COLUMNS) + "\n", encoding="utf-8")
        df = load_sensor_csv(p)
        assert df.empty
        assert list(df.columns) == EXPECTED_COLUMNS
