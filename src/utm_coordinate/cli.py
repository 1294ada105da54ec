"""
UTM Coordinate — CLI Entry Point
=================================
Command-line interface built with Click.  Installed as the ``geo-utm``
command via ``pyproject.toml``.

Usage:
    geo-utm to-utm 60.0 5.0
    geo-utm to-latlon 32V 297508 6655024
    geo-utm batch --input data/stations.csv --output out/stations_utm.csv

Run ``geo-utm --help`` or ``geo-utm COMMAND --help`` for all options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from src.utm_coordinate.converter import ConverterConfig, UTMBatchConverter
from src.utm_coordinate.coordinate import UTMCoordinate
from src.utm_coordinate.projection import utm_epsg_code
from shared.python.base_tool import configure_logging
from shared.python.exceptions import CoordinateStringError, GeoUTMError


def _echo_coordinate(coord: UTMCoordinate) -> None:
    lat, lon = coord.get_lat_lon()
    zone_number, zone_letter, easting, northing = coord.get_utm()
    click.echo(coord.create_display_string())
    click.echo(f"  latitude:  {lat:.7f}")
    click.echo(f"  longitude: {lon:.7f}")
    click.echo(f"  zone:      {zone_number}{zone_letter}")
    click.echo(f"  easting:   {easting:.3f}")
    click.echo(f"  northing:  {northing:.3f}")
    click.echo(f"  epsg:      {utm_epsg_code(zone_number, zone_letter)}")
    if coord.is_outside_grid():
        click.echo("  warning:   latitude is outside the UTM grid (80°S to 84°N)")


def _parse_zone(token: str) -> tuple[int, str]:
    """Split a zone token such as ``31N`` into number and letter."""
    digits, letter = token[:-1], token[-1:]
    if not digits.isdigit() or not letter.isalpha():
        raise CoordinateStringError(token, "zone must look like '31N'")
    return int(digits), letter.upper()


@click.group(
    name="geo-utm",
    help="Convert positions between WGS84 latitude/longitude and UTM.",
)
def main() -> None:
    """CLI entry point."""


@main.command(
    name="to-utm",
    help="Convert one LAT LON position to UTM.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("lat", type=float)
@click.argument("lon", type=float)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def to_utm(lat: float, lon: float, verbose: bool) -> None:
    configure_logging(verbose)
    _echo_coordinate(UTMCoordinate.from_lat_lon(lat, lon))


@main.command(
    name="to-latlon",
    help="Convert one UTM position (ZONE like 31N, EASTING, NORTHING) to lat/lon.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("zone")
@click.argument("easting", type=float)
@click.argument("northing", type=float)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def to_latlon(zone: str, easting: float, northing: float, verbose: bool) -> None:
    configure_logging(verbose)
    try:
        zone_number, zone_letter = _parse_zone(zone)
    except GeoUTMError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    _echo_coordinate(UTMCoordinate.from_utm(zone_number, zone_letter, easting, northing))


@main.command(
    name="batch",
    help=(
        "Convert every row of a CSV file.\n\n"
        "Reads INPUT, converts each row in the chosen direction and writes "
        "the result to OUTPUT."
    ),
)
# ---------------------------------------------------------------------------
# Required arguments
# ---------------------------------------------------------------------------
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to the input CSV file.",
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Path for the output file. Parent directories are created if absent.",
)
# ---------------------------------------------------------------------------
# Optional arguments
# ---------------------------------------------------------------------------
@click.option(
    "--direction",
    type=click.Choice(["to-utm", "to-latlon"], case_sensitive=False),
    default="to-utm",
    show_default=True,
    help="Conversion direction.",
)
@click.option("--lat-col", default="latitude", show_default=True, help="Latitude column.")
@click.option("--lon-col", default="longitude", show_default=True, help="Longitude column.")
@click.option("--zone-col", default="zone_number", show_default=True, help="Zone number column.")
@click.option("--letter-col", default="zone_letter", show_default=True, help="Zone letter column.")
@click.option("--easting-col", default="easting", show_default=True, help="Easting column.")
@click.option("--northing-col", default="northing", show_default=True, help="Northing column.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["csv", "geojson"], case_sensitive=False),
    default="csv",
    show_default=True,
    help="Output file format.",
)
@click.option("--epsg", "include_epsg", is_flag=True, default=False,
              help="Add a utm_epsg column with each row's zone EPSG code.")
@click.option("--coord-string", "include_coord_string", is_flag=True, default=False,
              help="Add a coord_string column with the fixed-column line.")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug-level logging output.",
)
def batch(
    input_path: Path,
    output_path: Path,
    direction: str,
    lat_col: str,
    lon_col: str,
    zone_col: str,
    letter_col: str,
    easting_col: str,
    northing_col: str,
    output_format: str,
    include_epsg: bool,
    include_coord_string: bool,
    verbose: bool,
) -> None:
    """Wire Click options into UTMBatchConverter."""
    config = ConverterConfig(
        direction=direction.lower(),  # type: ignore[arg-type]
        lat_col=lat_col,
        lon_col=lon_col,
        zone_col=zone_col,
        letter_col=letter_col,
        easting_col=easting_col,
        northing_col=northing_col,
        output_format=output_format.lower(),  # type: ignore[arg-type]
        include_epsg=include_epsg,
        include_coord_string=include_coord_string,
    )

    tool = UTMBatchConverter(input_path, output_path, config, verbose=verbose)

    try:
        tool.run()
    except GeoUTMError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    if tool.result is not None:
        click.echo(tool.result.summary())


if __name__ == "__main__":
    main()
