"""
UTM Coordinate — Fixed-Column Text Line
========================================
Renders a :class:`~src.utm_coordinate.coordinate.UTMCoordinate` as a
fixed-width line and reads such lines back.

Line layout (0-based, half-open column ranges)::

    31N 166021 0000000
    ^^^ ^^^^^^ ^^^^^^^
    |   |      northing   [11, 18)
    |   easting           [4, 10)
    zone token            [0, 3)

Easting and northing are truncated to whole metres, the usual convention
for grid references.  Values that do not fit their columns (negative, or
an easting of a million metres or more) widen the line and break the
layout; such coordinates are far outside any zone.
"""

from __future__ import annotations

from typing import NamedTuple

from src.utm_coordinate.coordinate import UTMCoordinate
from shared.python.exceptions import CoordinateStringError

UTM_ZONE_POS = 0
UTM_ZONE_LEN = 3
UTM_EASTING_POS = 4
UTM_EASTING_LEN = 6
UTM_NORTHING_POS = 11
UTM_NORTHING_LEN = 7

COORD_STRING_LEN = UTM_NORTHING_POS + UTM_NORTHING_LEN


class DisplayStrings(NamedTuple):
    """The three text fields of a coordinate line."""

    zone: str
    easting: str
    northing: str


def create_coord_string(coord: UTMCoordinate) -> str:
    """Return the fixed-column line for *coord*.

    Triggers the coordinate's lazy UTM conversion if needed.
    """
    zone_number, zone_letter, easting, northing = coord.get_utm()
    return f"{zone_number:02d}{zone_letter} {int(easting):06d} {int(northing):07d}"


def create_display_strings(coord_string: str) -> DisplayStrings:
    """Split a coordinate line into its zone, easting and northing fields.

    Raises:
        CoordinateStringError: If the line is shorter than the layout.
    """
    if len(coord_string) < COORD_STRING_LEN:
        raise CoordinateStringError(
            coord_string,
            f"expected at least {COORD_STRING_LEN} characters, got {len(coord_string)}",
        )
    return DisplayStrings(
        zone=coord_string[UTM_ZONE_POS:UTM_ZONE_POS + UTM_ZONE_LEN],
        easting=coord_string[UTM_EASTING_POS:UTM_EASTING_POS + UTM_EASTING_LEN],
        northing=coord_string[UTM_NORTHING_POS:UTM_NORTHING_POS + UTM_NORTHING_LEN],
    )


def parse_coord_string(coord_string: str) -> UTMCoordinate:
    """Build a UTM-authoritative coordinate from a coordinate line.

    Raises:
        CoordinateStringError: If a field is missing or not numeric.
    """
    fields = create_display_strings(coord_string)

    zone_digits, zone_letter = fields.zone[:2], fields.zone[2]
    if not zone_digits.strip().isdigit():
        raise CoordinateStringError(coord_string, f"bad zone number {zone_digits!r}")
    if zone_letter.isspace():
        raise CoordinateStringError(coord_string, "missing zone letter")

    easting = _parse_metres(coord_string, "easting", fields.easting)
    northing = _parse_metres(coord_string, "northing", fields.northing)

    return UTMCoordinate.from_utm(int(zone_digits), zone_letter, easting, northing)


def _parse_metres(coord_string: str, name: str, field: str) -> float:
    """Return a whole-metre field as a float.

    Only ASCII digits with an optional leading sign are accepted; ``nan``,
    ``inf`` and underscore-grouped numbers are rejected.
    """
    text = field.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise CoordinateStringError(coord_string, f"bad {name} {field!r}")
    return float(text)
