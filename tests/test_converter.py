"""
Tests — UTM Batch Converter
============================
Unit tests for :class:`~src.utm_coordinate.converter.UTMBatchConverter`.

Test strategy:
- Build minimal CSV inputs using ``tmp_path`` fixtures.
- Assert converted values are within an acceptable tolerance.
- Assert that validation errors are raised for bad inputs.
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from src.utm_coordinate.converter import ConverterConfig, UTMBatchConverter
from shared.python.exceptions import ColumnNotFoundError, InputValidationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def latlon_csv(tmp_path: Path) -> Path:
    """Write a small CSV of WGS84 positions and return the path."""
    csv_path = tmp_path / "stations.csv"
    df = pd.DataFrame(
        {
            "latitude": [52.2053, -33.9249, 60.0],
            "longitude": [0.1218, 18.4241, 5.0],
            "name": ["Cambridge", "Cape Town", "Bergen"],
        }
    )
    df.to_csv(csv_path, index=False)
    return csv_path


@pytest.fixture()
def utm_csv(tmp_path: Path) -> Path:
    """Write a small CSV of UTM positions (zone 32V and 34H) and return the path."""
    csv_path = tmp_path / "stations_utm.csv"
    df = pd.DataFrame(
        {
            "zone_number": [32, 34],
            "zone_letter": ["V", "H"],
            "easting": [297_508.0, 261_878.0],
            "northing": [6_655_024.0, 6_243_186.0],
        }
    )
    df.to_csv(csv_path, index=False)
    return csv_path


# ---------------------------------------------------------------------------
# Happy-path tests
# ---------------------------------------------------------------------------


class TestUTMBatchConverterHappyPath:
    """Tests for successful conversion scenarios."""

    def test_csv_output_created(self, tmp_path: Path, latlon_csv: Path) -> None:
        output = tmp_path / "out" / "stations_utm.csv"
        UTMBatchConverter(latlon_csv, output, ConverterConfig()).run()
        assert output.exists(), "Output CSV was not created."

    def test_to_utm_adds_zone_columns(self, tmp_path: Path, latlon_csv: Path) -> None:
        output = tmp_path / "output.csv"
        UTMBatchConverter(latlon_csv, output, ConverterConfig()).run()

        df = pd.read_csv(output)
        assert df["zone_number"].tolist() == [31, 34, 32]
        assert df["zone_letter"].tolist() == ["U", "H", "V"]
        assert df["easting"].between(100_000, 900_000).all()
        assert df["name"].tolist() == ["Cambridge", "Cape Town", "Bergen"]

    def test_round_trip_through_files(self, tmp_path: Path, latlon_csv: Path) -> None:
        utm_out = tmp_path / "utm.csv"
        UTMBatchConverter(latlon_csv, utm_out, ConverterConfig()).run()

        # Drop the original geographic columns so they must be recomputed.
        pd.read_csv(utm_out).drop(columns=["latitude", "longitude"]).to_csv(
            utm_out, index=False
        )

        geo_out = tmp_path / "geo.csv"
        UTMBatchConverter(utm_out, geo_out, ConverterConfig(direction="to-latlon")).run()

        df = pd.read_csv(geo_out)
        assert df["latitude"].tolist() == pytest.approx([52.2053, -33.9249, 60.0], abs=1e-5)
        assert df["longitude"].tolist() == pytest.approx([0.1218, 18.4241, 5.0], abs=1e-5)

    def test_to_latlon_ranges(self, tmp_path: Path, utm_csv: Path) -> None:
        output = tmp_path / "output.csv"
        UTMBatchConverter(utm_csv, output, ConverterConfig(direction="to-latlon")).run()

        df = pd.read_csv(output)
        assert df["latitude"].iloc[0] == pytest.approx(60.0, abs=0.1)
        assert df["latitude"].iloc[1] == pytest.approx(-33.9, abs=0.1)
        assert df["longitude"].between(-180, 180).all()

    def test_geojson_output(self, tmp_path: Path, latlon_csv: Path) -> None:
        output = tmp_path / "output.geojson"
        cfg = ConverterConfig(output_format="geojson")
        UTMBatchConverter(latlon_csv, output, cfg).run()

        with open(output) as fh:
            geo = json.load(fh)

        assert geo["type"] == "FeatureCollection"
        assert len(geo["features"]) == 3
        first = geo["features"][0]
        assert first["geometry"]["coordinates"] == pytest.approx([0.1218, 52.2053])
        assert first["properties"]["zone_letter"] == "U"

    def test_optional_columns(self, tmp_path: Path, latlon_csv: Path) -> None:
        output = tmp_path / "output.csv"
        cfg = ConverterConfig(include_epsg=True, include_coord_string=True)
        UTMBatchConverter(latlon_csv, output, cfg).run()

        df = pd.read_csv(output)
        assert df["utm_epsg"].tolist() == [32631, 32734, 32632]
        assert df["coord_string"].str.len().tolist() == [18, 18, 18]
        assert df["coord_string"].iloc[2].startswith("32V ")

    def test_custom_column_names(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "points.csv"
        pd.DataFrame({"y": [10.0], "x": [10.0]}).to_csv(csv_path, index=False)
        cfg = ConverterConfig(lat_col="y", lon_col="x", easting_col="e", northing_col="n")
        output = tmp_path / "output.csv"
        UTMBatchConverter(csv_path, output, cfg).run()

        df = pd.read_csv(output)
        assert {"e", "n", "zone_number", "zone_letter"} <= set(df.columns)

    def test_result_object_populated(self, tmp_path: Path, latlon_csv: Path) -> None:
        """``tool.result`` should be a populated ConversionResult after run()."""
        output = tmp_path / "output.csv"
        tool = UTMBatchConverter(latlon_csv, output, ConverterConfig())
        assert tool.result is None  # not yet run
        tool.run()
        assert tool.result is not None
        assert tool.result.rows_processed == 3
        assert tool.result.rows_skipped == 0
        assert tool.result.rows_outside_grid == 0
        assert "3 rows to-utm" in tool.result.summary()

    def test_null_rows_skipped(self, tmp_path: Path) -> None:
        """Rows with null coordinates should be skipped, not crash the tool."""
        csv_path = tmp_path / "with_nulls.csv"
        df = pd.DataFrame({"latitude": [1.0, None, 3.0], "longitude": [10.0, 20.0, None]})
        df.to_csv(csv_path, index=False)

        tool = UTMBatchConverter(csv_path, tmp_path / "output.csv", ConverterConfig())
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_skipped == 2
        assert tool.result.rows_processed == 1

    def test_non_numeric_rows_skipped(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "dirty.csv"
        csv_path.write_text("latitude,longitude\n1.0,2.0\nabc,3.0\n")

        tool = UTMBatchConverter(csv_path, tmp_path / "output.csv", ConverterConfig())
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_skipped == 1

    def test_infinite_rows_skipped(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "infinite.csv"
        csv_path.write_text("latitude,longitude\n1.0,2.0\n3.0,inf\n")

        output = tmp_path / "output.csv"
        tool = UTMBatchConverter(csv_path, output, ConverterConfig())
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_processed == 1
        assert tool.result.rows_skipped == 1
        assert pd.read_csv(output)["zone_number"].tolist() == [31]

    def test_infinite_zone_rows_skipped(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "infinite_utm.csv"
        csv_path.write_text(
            "zone_number,zone_letter,easting,northing\n"
            "32,V,297508,6655024\n"
            "inf,V,297508,6655024\n"
            "32,V,-inf,6655024\n"
        )

        tool = UTMBatchConverter(
            csv_path, tmp_path / "output.csv", ConverterConfig(direction="to-latlon")
        )
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_processed == 1
        assert tool.result.rows_skipped == 2

    def test_outside_grid_rows_counted(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "polar.csv"
        pd.DataFrame({"latitude": [85.0, 10.0], "longitude": [10.0, 10.0]}).to_csv(
            csv_path, index=False
        )
        output = tmp_path / "output.csv"
        tool = UTMBatchConverter(csv_path, output, ConverterConfig())
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_outside_grid == 1
        assert pd.read_csv(output)["zone_letter"].tolist() == ["*", "P"]


# ---------------------------------------------------------------------------
# Validation error tests
# ---------------------------------------------------------------------------


class TestUTMBatchConverterValidation:
    """Tests for input validation error handling."""

    def test_missing_input_file_raises(self, tmp_path: Path) -> None:
        tool = UTMBatchConverter(
            tmp_path / "does_not_exist.csv", tmp_path / "out.csv", ConverterConfig()
        )
        with pytest.raises(InputValidationError):
            tool.run()

    def test_wrong_extension_raises(self, tmp_path: Path) -> None:
        txt = tmp_path / "points.txt"
        txt.write_text("latitude,longitude\n1,2\n")
        tool = UTMBatchConverter(txt, tmp_path / "out.csv", ConverterConfig())
        with pytest.raises(InputValidationError):
            tool.run()

    def test_missing_coordinate_column_raises(
        self, tmp_path: Path, latlon_csv: Path
    ) -> None:
        cfg = ConverterConfig(lat_col="lat")  # ← column does not exist
        tool = UTMBatchConverter(latlon_csv, tmp_path / "out.csv", cfg)
        with pytest.raises(ColumnNotFoundError):
            tool.run()

    def test_to_latlon_requires_utm_columns(
        self, tmp_path: Path, latlon_csv: Path
    ) -> None:
        cfg = ConverterConfig(direction="to-latlon")
        tool = UTMBatchConverter(latlon_csv, tmp_path / "out.csv", cfg)
        with pytest.raises(ColumnNotFoundError):
            tool.run()

    def test_unknown_direction_raises(self, tmp_path: Path, latlon_csv: Path) -> None:
        cfg = ConverterConfig(direction="sideways")  # type: ignore[arg-type]
        tool = UTMBatchConverter(latlon_csv, tmp_path / "out.csv", cfg)
        with pytest.raises(InputValidationError):
            tool.run()
