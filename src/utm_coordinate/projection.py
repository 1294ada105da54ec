"""
UTM Coordinate — WGS84 Projection Maths
========================================
Pure functions converting between geographic (latitude/longitude) and
Universal Transverse Mercator coordinates on the WGS84 ellipsoid.

The forward and inverse transforms use the Snyder transverse Mercator
series (USGS Professional Paper 1395): a sixth-order meridional arc for
the forward direction and a footpoint-latitude series for the inverse.
Within a zone the results agree with PROJ to well below a metre.

Every function here is total over finite floats.  Positions outside the
UTM grid (poles, beyond 84°N / 80°S) still produce numbers; callers that
need validation check the zone letter against :data:`OUTSIDE_GRID`.

Functions:
    lat_lon_to_utm      Geographic → UTM, with zone selection.
    utm_to_lat_lon      UTM → geographic.
    utm_zone_number     Longitudinal zone, including Norway/Svalbard rules.
    utm_zone_letter     8° latitude band letter, or the sentinel.
    central_meridian    Central meridian of a zone, in degrees.
    utm_epsg_code       EPSG code of the WGS84 / UTM zone CRS.
"""

from __future__ import annotations

import math
from typing import NamedTuple

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WGS84_A: float = 6378137.0
WGS84_F: float = 1.0 / 298.257223563

UTM_SCALE_FACTOR: float = 0.9996
FALSE_EASTING: float = 500000.0
FALSE_NORTHING_SOUTH: float = 10000000.0

#: Latitude band letters from 80°S northwards; ``I`` and ``O`` are skipped.
ZONE_LETTERS: str = "CDEFGHJKLMNPQRSTUVWX"

#: Zone letter assigned to latitudes outside ``[-80, 84)``.
OUTSIDE_GRID: str = "*"

GRID_SOUTH_LIMIT: float = -80.0
GRID_NORTH_LIMIT: float = 84.0


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class UTMPoint(NamedTuple):
    """A position on the UTM grid."""

    zone_number: int
    zone_letter: str
    easting: float
    northing: float


class LatLon(NamedTuple):
    """A geographic position in decimal degrees."""

    latitude: float
    longitude: float


# ---------------------------------------------------------------------------
# Zone rules
# ---------------------------------------------------------------------------


def normalize_longitude(lon: float) -> float:
    """Wrap *lon* into the half-open range ``[-180, 180)``."""
    return (lon + 180.0) % 360.0 - 180.0


def utm_zone_number(lat: float, lon: float) -> int:
    """Return the UTM zone number (1–60) for a position.

    The zone is ``floor((lon + 180) / 6) + 1`` on the normalised longitude,
    overridden by the irregular zones around south-western Norway and
    Svalbard.

    Args:
        lat: Latitude in degrees.
        lon: Longitude in degrees; any finite value is wrapped into
            [-180, 180).

    Returns:
        The zone number, or 0 when *lon* is not finite.
    """
    if not math.isfinite(lon):
        return 0
    lon = normalize_longitude(lon)
    zone = int(math.floor((lon + 180.0) / 6.0)) + 1

    # South-western Norway
    if 56.0 <= lat < 64.0 and 3.0 <= lon < 12.0:
        zone = 32

    # Svalbard
    if 72.0 <= lat < 84.0:
        if 0.0 <= lon < 9.0:
            zone = 31
        elif 9.0 <= lon < 21.0:
            zone = 33
        elif 21.0 <= lon < 33.0:
            zone = 35
        elif 33.0 <= lon < 42.0:
            zone = 37

    return zone


def utm_zone_letter(lat: float) -> str:
    """Return the latitude band letter for *lat*.

    Bands are 8° tall from ``C`` at 80°S up to ``W``; ``X`` covers the
    12° band from 72°N to 84°N.  Latitudes outside ``[-80, 84)`` get
    :data:`OUTSIDE_GRID`.
    """
    if GRID_SOUTH_LIMIT <= lat < GRID_NORTH_LIMIT:
        index = int((lat - GRID_SOUTH_LIMIT) // 8.0)
        return ZONE_LETTERS[min(index, len(ZONE_LETTERS) - 1)]
    return OUTSIDE_GRID


def is_northern(zone_letter: str) -> bool:
    """Return ``True`` if *zone_letter* is a northern-hemisphere band.

    Bands ``N`` through ``X`` are north of the equator.  Every other
    character, the sentinel included, is treated as southern, so sentinel
    round trips only hold for points south of the grid.
    """
    return zone_letter.upper() >= "N"


def central_meridian(zone_number: int) -> float:
    """Return the central meridian of *zone_number* in degrees."""
    return (zone_number - 1) * 6.0 - 180.0 + 3.0


def utm_epsg_code(zone_number: int, zone_letter: str) -> int:
    """Return the EPSG code of the WGS84 / UTM CRS for a zone.

    Example::

        >>> utm_epsg_code(14, "R")
        32614
        >>> utm_epsg_code(56, "H")
        32756
    """
    base = 32600 if is_northern(zone_letter) else 32700
    return base + zone_number


# ---------------------------------------------------------------------------
# Forward projection
# ---------------------------------------------------------------------------


def lat_lon_to_utm(lat: float, lon: float) -> UTMPoint:
    """Project a WGS84 latitude/longitude onto the UTM grid.

    The zone is chosen with :func:`utm_zone_number`; the letter with
    :func:`utm_zone_letter`.  Southern-hemisphere northings carry the
    10 000 000 m false northing.

    Args:
        lat: Latitude in degrees, nominally [-90, 90].
        lon: Longitude in degrees, nominally [-180, 180].

    Returns:
        The :class:`UTMPoint` for the position.  A non-finite latitude or
        longitude gives zone 0 or the sentinel letter with NaN easting and
        northing.

    Example::

        lat_lon_to_utm(0.0, 0.0)
        # UTMPoint(zone_number=31, zone_letter='N', easting=166021.44, northing=0.0)
    """
    zone_number = utm_zone_number(lat, lon)
    zone_letter = utm_zone_letter(lat)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return UTMPoint(zone_number, zone_letter, math.nan, math.nan)

    lon = normalize_longitude(lon)
    easting, northing = _transverse_mercator_forward(
        WGS84_A, WGS84_F, lat, lon, central_meridian(zone_number)
    )
    if lat < 0.0:
        northing += FALSE_NORTHING_SOUTH
    return UTMPoint(zone_number, zone_letter, easting, northing)


def _transverse_mercator_forward(
    a: float, f: float, lat: float, lon: float, lon_origin: float
) -> tuple[float, float]:
    """Return scaled, false-easted (easting, northing) before hemisphere offset."""
    ecc2 = f * (2.0 - f)
    ecc4 = ecc2 * ecc2
    ecc6 = ecc4 * ecc2
    ecc_prime2 = ecc2 / (1.0 - ecc2)
    k0 = UTM_SCALE_FACTOR

    lat_rad = math.radians(lat)
    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    tan_lat = math.tan(lat_rad)

    n = a / math.sqrt(1.0 - ecc2 * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = ecc_prime2 * cos_lat * cos_lat
    big_a = cos_lat * math.radians(lon - lon_origin)

    # Meridional arc from the equator.
    m = a * (
        (1.0 - ecc2 / 4.0 - 3.0 * ecc4 / 64.0 - 5.0 * ecc6 / 256.0) * lat_rad
        - (3.0 * ecc2 / 8.0 + 3.0 * ecc4 / 32.0 + 45.0 * ecc6 / 1024.0)
        * math.sin(2.0 * lat_rad)
        + (15.0 * ecc4 / 256.0 + 45.0 * ecc6 / 1024.0) * math.sin(4.0 * lat_rad)
        - (35.0 * ecc6 / 3072.0) * math.sin(6.0 * lat_rad)
    )

    a2 = big_a * big_a
    a3 = a2 * big_a
    a4 = a3 * big_a
    a5 = a4 * big_a
    a6 = a5 * big_a

    easting = k0 * n * (
        big_a
        + (1.0 - t + c) * a3 / 6.0
        + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * ecc_prime2) * a5 / 120.0
    ) + FALSE_EASTING

    northing = k0 * (
        m
        + n * tan_lat * (
            a2 / 2.0
            + (5.0 - t + 9.0 * c + 4.0 * c * c) * a4 / 24.0
            + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * ecc_prime2) * a6 / 720.0
        )
    )
    return easting, northing


# ---------------------------------------------------------------------------
# Inverse projection
# ---------------------------------------------------------------------------


def utm_to_lat_lon(
    zone_number: int, zone_letter: str, easting: float, northing: float
) -> LatLon:
    """Convert a UTM position back to WGS84 latitude/longitude.

    The hemisphere is taken from *zone_letter* (see :func:`is_northern`).
    No range checking is done on the zone, easting or northing; values
    far outside a zone give numerically defined but meaningless results.

    Args:
        zone_number: UTM zone, nominally 1–60.
        zone_letter: Latitude band letter.
        easting: Easting in metres, including the 500 000 m false easting.
        northing: Northing in metres, including the false northing for
            southern bands.

    Because the sentinel letter reads as southern, a sentinel point only
    comes back where it started if it lay south of the grid.  Points north
    of 84°N land in the southern hemisphere.

    Returns:
        The :class:`LatLon` for the position, or NaNs when *easting* or
        *northing* is not finite.
    """
    if not (math.isfinite(easting) and math.isfinite(northing)):
        return LatLon(math.nan, math.nan)

    x = easting - FALSE_EASTING
    y = northing
    if not is_northern(zone_letter):
        y -= FALSE_NORTHING_SOUTH

    lat_rad, lon_offset_rad = _transverse_mercator_inverse(WGS84_A, WGS84_F, x, y)
    return LatLon(
        math.degrees(lat_rad),
        central_meridian(zone_number) + math.degrees(lon_offset_rad),
    )


def _transverse_mercator_inverse(
    a: float, f: float, x: float, y: float
) -> tuple[float, float]:
    """Return (latitude, longitude offset from the central meridian) in radians."""
    ecc2 = f * (2.0 - f)
    ecc4 = ecc2 * ecc2
    ecc6 = ecc4 * ecc2
    ecc_prime2 = ecc2 / (1.0 - ecc2)
    k0 = UTM_SCALE_FACTOR

    root = math.sqrt(1.0 - ecc2)
    e1 = (1.0 - root) / (1.0 + root)

    # Footpoint latitude from the rectifying latitude mu.
    m = y / k0
    mu = m / (a * (1.0 - ecc2 / 4.0 - 3.0 * ecc4 / 64.0 - 5.0 * ecc6 / 256.0))
    phi1 = (
        mu
        + (3.0 * e1 / 2.0 - 27.0 * e1 ** 3 / 32.0) * math.sin(2.0 * mu)
        + (21.0 * e1 ** 2 / 16.0 - 55.0 * e1 ** 4 / 32.0) * math.sin(4.0 * mu)
        + (151.0 * e1 ** 3 / 96.0) * math.sin(6.0 * mu)
        + (1097.0 * e1 ** 4 / 512.0) * math.sin(8.0 * mu)
    )

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)
    denom = 1.0 - ecc2 * sin_phi1 * sin_phi1

    n1 = a / math.sqrt(denom)
    t1 = tan_phi1 * tan_phi1
    c1 = ecc_prime2 * cos_phi1 * cos_phi1
    r1 = a * (1.0 - ecc2) / denom ** 1.5
    d = x / (n1 * k0)

    d2 = d * d
    d3 = d2 * d
    d4 = d3 * d
    d5 = d4 * d
    d6 = d5 * d

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d2 / 2.0
        - (5.0 + 3.0 * t1 + 10.0 * c1 - 4.0 * c1 * c1 - 9.0 * ecc_prime2) * d4 / 24.0
        + (61.0 + 90.0 * t1 + 298.0 * c1 + 45.0 * t1 * t1
           - 252.0 * ecc_prime2 - 3.0 * c1 * c1) * d6 / 720.0
    )
    lon_offset = (
        d
        - (1.0 + 2.0 * t1 + c1) * d3 / 6.0
        + (5.0 - 2.0 * c1 + 28.0 * t1 - 3.0 * c1 * c1
           + 8.0 * ecc_prime2 + 24.0 * t1 * t1) * d5 / 120.0
    ) / cos_phi1
    return lat, lon_offset
