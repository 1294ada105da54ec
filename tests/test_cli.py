"""
Tests — geo-utm CLI
====================
Exercises the Click commands with :class:`click.testing.CliRunner`.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from click.testing import CliRunner

from src.utm_coordinate.cli import main


class TestSinglePointCommands:
    def test_to_utm(self) -> None:
        result = CliRunner().invoke(main, ["to-utm", "60.0", "5.0"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("32V ")
        assert "epsg:      32632" in result.output

    def test_to_utm_outside_grid_warns(self) -> None:
        result = CliRunner().invoke(main, ["to-utm", "85.0", "10.0"])
        assert result.exit_code == 0, result.output
        assert "outside the UTM grid" in result.output

    def test_to_latlon(self) -> None:
        result = CliRunner().invoke(main, ["to-latlon", "31N", "500000", "0"])
        assert result.exit_code == 0, result.output
        assert "latitude:  0.0000000" in result.output
        assert "longitude: 3.0000000" in result.output

    def test_to_latlon_lowercase_zone(self) -> None:
        result = CliRunner().invoke(main, ["to-latlon", "31n", "500000", "0"])
        assert result.exit_code == 0, result.output
        assert "zone:      31N" in result.output

    def test_to_latlon_bad_zone(self) -> None:
        result = CliRunner().invoke(main, ["to-latlon", "N31", "500000", "0"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestBatchCommand:
    def test_batch_to_utm(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "points.csv"
        pd.DataFrame({"latitude": [60.0], "longitude": [5.0]}).to_csv(csv_path, index=False)
        output = tmp_path / "points_utm.csv"

        result = CliRunner().invoke(
            main,
            ["batch", "--input", str(csv_path), "--output", str(output), "--epsg"],
        )

        assert result.exit_code == 0, result.output
        assert "Converted 1 rows" in result.output
        df = pd.read_csv(output)
        assert df["utm_epsg"].tolist() == [32632]

    def test_batch_missing_column_exits_1(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "points.csv"
        pd.DataFrame({"lat": [60.0], "lon": [5.0]}).to_csv(csv_path, index=False)

        result = CliRunner().invoke(
            main,
            ["batch", "-i", str(csv_path), "-o", str(tmp_path / "out.csv")],
        )

        assert result.exit_code == 1
        assert "Column 'latitude' not found" in result.output
