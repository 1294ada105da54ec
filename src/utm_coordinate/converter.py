"""
UTM Coordinate — Batch Converter
=================================
Provides the :class:`UTMBatchConverter` class, which reads a CSV file of
positions, converts every row between latitude/longitude and UTM with
:class:`~src.utm_coordinate.coordinate.UTMCoordinate`, and writes the
result as CSV or GeoJSON.

Classes:
    ConverterConfig     Column names, direction and output options.
    ConversionResult    Summary of a completed run.
    UTMBatchConverter   Primary tool class (inherits GeoTool).

Typical usage::

    from pathlib import Path
    from src.utm_coordinate.converter import ConverterConfig, UTMBatchConverter

    tool = UTMBatchConverter(
        input_path=Path("data/stations.csv"),
        output_path=Path("output/stations_utm.csv"),
        config=ConverterConfig(direction="to-utm"),
    )
    tool.run()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import pandas as pd

from src.utm_coordinate.coordinate import UTMCoordinate
from src.utm_coordinate.projection import utm_epsg_code
from shared.python.base_tool import GeoTool
from shared.python.exceptions import OutputWriteError
from shared.python.validators import Validators

logger = logging.getLogger("geoutm.utm_coordinate.converter")

DIRECTIONS = ("to-utm", "to-latlon")
OUTPUT_FORMATS = ("csv", "geojson")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConversionResult:
    """Immutable container for a completed conversion run.

    Attributes:
        rows_processed: Number of rows converted and written.
        rows_skipped: Rows dropped because an input field was null or
            non-numeric.
        rows_outside_grid: Converted rows whose latitude lies outside the
            UTM grid.
        direction: ``"to-utm"`` or ``"to-latlon"``.
        output_path: Path where the converted file was written.
    """

    rows_processed: int
    rows_skipped: int
    rows_outside_grid: int
    direction: str
    output_path: Path

    def summary(self) -> str:
        """Return a human-readable summary string for logging or display."""
        return (
            f"Converted {self.rows_processed} rows {self.direction} "
            f"({self.rows_skipped} skipped, "
            f"{self.rows_outside_grid} outside UTM grid) | "
            f"Output: {self.output_path}"
        )


@dataclass
class ConverterConfig:
    """Configuration bundle for :class:`UTMBatchConverter`.

    Attributes:
        direction: ``"to-utm"`` reads the latitude/longitude columns and
            adds the four UTM columns; ``"to-latlon"`` does the reverse.
        lat_col: Latitude column name.
        lon_col: Longitude column name.
        zone_col: UTM zone number column name.
        letter_col: UTM zone letter column name.
        easting_col: Easting column name.
        northing_col: Northing column name.
        output_format: ``"csv"`` or ``"geojson"``.  GeoJSON geometry is
            always the WGS84 longitude/latitude point.
        include_epsg: Add a ``utm_epsg`` column with the zone's EPSG code.
        include_coord_string: Add a ``coord_string`` column holding the
            fixed-column line.
    """

    direction: Literal["to-utm", "to-latlon"] = "to-utm"
    lat_col: str = "latitude"
    lon_col: str = "longitude"
    zone_col: str = "zone_number"
    letter_col: str = "zone_letter"
    easting_col: str = "easting"
    northing_col: str = "northing"
    output_format: Literal["csv", "geojson"] = "csv"
    include_epsg: bool = False
    include_coord_string: bool = False

    @property
    def input_columns(self) -> list[str]:
        """Columns the configured direction reads."""
        if self.direction == "to-utm":
            return [self.lat_col, self.lon_col]
        return [self.zone_col, self.letter_col, self.easting_col, self.northing_col]

    @property
    def numeric_columns(self) -> list[str]:
        """Input columns that must hold numbers."""
        return [c for c in self.input_columns if c != self.letter_col]


# ---------------------------------------------------------------------------
# Main tool class
# ---------------------------------------------------------------------------


class UTMBatchConverter(GeoTool):
    """Convert every row of a CSV between latitude/longitude and UTM.

    Inherits the Template Method pipeline from :class:`~shared.python.GeoTool`:
    ``validate_inputs`` → ``process`` → ``_report_success``.

    Args:
        input_path: Path to the input CSV file.
        output_path: Path where the converted output will be written.
        config: A :class:`ConverterConfig` instance.
        verbose: Enable DEBUG-level logging.  Defaults to ``False``.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        config: ConverterConfig,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.config: ConverterConfig = config

        self._result: ConversionResult | None = None

    # ------------------------------------------------------------------
    # GeoTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Validate the input file and configuration before processing.

        Raises:
            InputValidationError: On a missing file, wrong extension or an
                unknown direction/format.
            ColumnNotFoundError: If a column the direction reads is absent.
            OutputWriteError: If the output directory cannot be created.
        """
        Validators.assert_choice(self.config.direction, DIRECTIONS, "direction")
        Validators.assert_choice(self.config.output_format, OUTPUT_FORMATS, "output format")
        Validators.assert_file_exists(self.input_path)
        Validators.assert_supported_extension(self.input_path, [".csv"])
        Validators.assert_output_dir_writable(self.output_path)

        df_peek = pd.read_csv(self.input_path, nrows=0)
        Validators.assert_columns_exist(df_peek, self.config.input_columns)

        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Read the CSV, convert each row, and write the output file.

        Raises:
            OutputWriteError: If writing the output file fails.
        """
        df = pd.read_csv(self.input_path)
        original_len = len(df)

        df = self._drop_invalid_rows(df)
        rows_skipped = original_len - len(df)
        if rows_skipped:
            logger.warning(
                "Dropped %d row(s) with null or non-numeric coordinate values.",
                rows_skipped,
            )

        if self.config.direction == "to-utm":
            coords = self._convert_to_utm(df)
        else:
            coords = self._convert_to_lat_lon(df)

        if self.config.include_epsg:
            df["utm_epsg"] = [utm_epsg_code(*c.get_utm_zone()) for c in coords]
        if self.config.include_coord_string:
            df["coord_string"] = [c.create_display_string() for c in coords]

        rows_outside = sum(1 for c in coords if c.is_outside_grid())
        if rows_outside:
            logger.warning(
                "%d row(s) lie outside the UTM grid (zone letter '*').", rows_outside
            )

        try:
            if self.config.output_format == "geojson":
                self._write_geojson(df)
            else:
                df.to_csv(self.output_path, index=False)
        except OSError as exc:
            raise OutputWriteError(str(self.output_path), str(exc)) from exc

        self._result = ConversionResult(
            rows_processed=len(df),
            rows_skipped=rows_skipped,
            rows_outside_grid=rows_outside,
            direction=self.config.direction,
            output_path=self.output_path,
        )
        logger.info(self._result.summary())

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _drop_invalid_rows(self, df: pd.DataFrame) -> pd.DataFrame:
        """Drop rows with a null, non-numeric or infinite input field.

        Numeric input columns are coerced to floats in the returned frame.
        """
        df = df.copy()
        mask = pd.Series(True, index=df.index)
        for col in self.config.numeric_columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
            # NaN compares False, so this also drops nulls.
            mask &= df[col].abs() < float("inf")
        if self.config.direction == "to-latlon":
            mask &= df[self.config.letter_col].notna()
        return df[mask].copy()

    def _convert_to_utm(self, df: pd.DataFrame) -> list[UTMCoordinate]:
        cfg = self.config
        coords = [
            UTMCoordinate.from_lat_lon(float(lat), float(lon))
            for lat, lon in zip(df[cfg.lat_col], df[cfg.lon_col])
        ]
        points = [c.get_utm() for c in coords]
        df[cfg.zone_col] = [p.zone_number for p in points]
        df[cfg.letter_col] = [p.zone_letter for p in points]
        df[cfg.easting_col] = [p.easting for p in points]
        df[cfg.northing_col] = [p.northing for p in points]
        return coords

    def _convert_to_lat_lon(self, df: pd.DataFrame) -> list[UTMCoordinate]:
        cfg = self.config
        coords = [
            UTMCoordinate.from_utm(int(zone), str(letter).strip(), float(e), float(n))
            for zone, letter, e, n in zip(
                df[cfg.zone_col], df[cfg.letter_col], df[cfg.easting_col], df[cfg.northing_col]
            )
        ]
        points = [c.get_lat_lon() for c in coords]
        df[cfg.lat_col] = [p.latitude for p in points]
        df[cfg.lon_col] = [p.longitude for p in points]
        return coords

    def _write_geojson(self, df: pd.DataFrame) -> None:
        """Serialise the DataFrame as a GeoJSON FeatureCollection.

        The latitude/longitude columns become each Feature's ``geometry``;
        all remaining columns go into ``properties``.
        """
        lon_col = self.config.lon_col
        lat_col = self.config.lat_col
        prop_cols = [c for c in df.columns if c not in (lon_col, lat_col)]

        features = []
        for _, row in df.iterrows():
            feature = {
                "type": "Feature",
                "geometry": {
                    "type": "Point",
                    "coordinates": [row[lon_col], row[lat_col]],
                },
                "properties": {c: row[c] for c in prop_cols},
            }
            features.append(feature)

        geojson = {"type": "FeatureCollection", "features": features}

        with open(self.output_path, "w", encoding="utf-8") as fh:
            json.dump(geojson, fh, indent=2, default=str)

    @property
    def result(self) -> ConversionResult | None:
        """The :class:`ConversionResult` from the last :meth:`run` call.

        Returns ``None`` if :meth:`run` has not been called yet.
        """
        return self._result
