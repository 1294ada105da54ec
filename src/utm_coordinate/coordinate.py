"""
UTM Coordinate — Lazy Dual-Representation Value Type
=====================================================
Provides :class:`UTMCoordinate`, a single position that can be read or
written either as WGS84 latitude/longitude or as a UTM grid reference.

Only the representation written last is authoritative.  The other one is
derived on the first read after the write and cached until the next
write, so repeatedly reading the same representation, or writing one
representation several times before reading the other, never repeats the
projection maths.

Thread-safety:
    A ``UTMCoordinate`` is not safe to share between threads without an
    external lock.  The getters (:meth:`UTMCoordinate.get_lat_lon`,
    :meth:`UTMCoordinate.get_utm` and everything built on them) write the
    cache fields and flags, so even concurrent *reads* race.

Classes:
    CoordinateType      Closed set of typed-coordinate variants.
    TypedCoordinate     Capability protocol shared by the variants.
    UTMCoordinate       The UTM variant.

Typical usage::

    from src.utm_coordinate.coordinate import UTMCoordinate

    coord = UTMCoordinate.from_lat_lon(60.0, 5.0)
    zone_number, zone_letter, easting, northing = coord.get_utm()
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from src.utm_coordinate import projection
from src.utm_coordinate.projection import OUTSIDE_GRID, LatLon, UTMPoint
from shared.python.exceptions import IncompatibleCoordinateError

logger = logging.getLogger("geoutm.utm_coordinate")


# ---------------------------------------------------------------------------
# Typed-coordinate capability
# ---------------------------------------------------------------------------


class CoordinateType(Enum):
    """Variants of the typed-coordinate family.

    Only the UTM variant is implemented in this package.
    """

    UTM = "utm"


class TypedCoordinate(Protocol):
    """What a coordinate variant must offer to be copied into another.

    ``to_geographic`` is the common denominator: any variant can be
    rebuilt from WGS84 latitude/longitude.  ``to_native`` returns the
    variant's own representation.
    """

    @property
    def coord_type(self) -> CoordinateType: ...

    def to_geographic(self) -> LatLon: ...

    def to_native(self) -> tuple: ...


# ---------------------------------------------------------------------------
# UTM variant
# ---------------------------------------------------------------------------


class UTMCoordinate:
    """A position held as latitude/longitude and as a UTM grid reference.

    A freshly constructed coordinate sits at latitude 0, longitude 0 with
    the geographic representation authoritative; its first UTM read gives
    zone 31, band ``N``, easting ≈ 166 021.44 m, northing 0 m.

    If the latitude is outside the UTM grid (>= 84°N or < 80°S) the zone
    letter is :data:`~src.utm_coordinate.projection.OUTSIDE_GRID`;
    :meth:`is_outside_grid` checks for it.  The sentinel reads as a
    southern band, so a sentinel grid reference converts back to its
    starting latitude only for points south of the grid.

    Inputs are not range checked.  Latitudes outside [-90, 90], zone
    numbers outside 1–60 and similar values convert to deterministic but
    meaningless numbers.  A non-finite longitude gives zone 0 and a NaN
    easting and northing.

    Example::

        coord = UTMCoordinate.from_utm(32, "V", 297_508.0, 6_655_024.0)
        lat, lon = coord.get_lat_lon()   # converts once
        lat, lon = coord.get_lat_lon()   # cached
        coord.set_lat_lon(59.9, 10.7)    # UTM now stale
    """

    def __init__(self) -> None:
        self._latitude: float = 0.0
        self._longitude: float = 0.0
        self._zone_number: int = 0
        self._zone_letter: str = OUTSIDE_GRID
        self._easting: float = 0.0
        self._northing: float = 0.0

        # Lazy evaluation flags; at most one is set.
        self._require_lat_lon_convert: bool = False
        self._require_utm_convert: bool = False

        self.set_lat_lon(0.0, 0.0)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_utm(
        cls, zone_number: int, zone_letter: str, easting: float, northing: float
    ) -> UTMCoordinate:
        """Build a coordinate whose authoritative representation is UTM."""
        coord = cls()
        coord.set_utm(zone_number, zone_letter, easting, northing)
        return coord

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> UTMCoordinate:
        """Build a coordinate whose authoritative representation is lat/lon."""
        coord = cls()
        coord.set_lat_lon(lat, lon)
        return coord

    @classmethod
    def from_coordinate(cls, other: TypedCoordinate | UTMCoordinate) -> UTMCoordinate:
        """Copy another coordinate.

        A ``UTMCoordinate`` source is copied field for field, cache state
        included, so no conversion happens.  Any other source must provide
        ``to_geographic()``; its latitude/longitude becomes the
        authoritative representation of the copy.

        Raises:
            IncompatibleCoordinateError: If *other* offers neither.
        """
        if isinstance(other, UTMCoordinate):
            return other.__copy__()

        to_geographic = getattr(other, "to_geographic", None)
        if not callable(to_geographic):
            raise IncompatibleCoordinateError(other)

        lat, lon = to_geographic()
        return cls.from_lat_lon(lat, lon)

    def __copy__(self) -> UTMCoordinate:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        return clone

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def set_lat_lon(self, lat: float, lon: float) -> None:
        """Make latitude/longitude authoritative; the UTM fields go stale."""
        self._latitude = lat
        self._longitude = lon
        self._require_lat_lon_convert = False
        self._require_utm_convert = True

    def set_utm(
        self, zone_number: int, zone_letter: str, easting: float, northing: float
    ) -> None:
        """Make the UTM grid reference authoritative; lat/lon go stale."""
        self._zone_number = zone_number
        self._zone_letter = zone_letter
        self._easting = easting
        self._northing = northing
        self._require_utm_convert = False
        self._require_lat_lon_convert = True

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def get_lat_lon(self) -> LatLon:
        """Return ``(latitude, longitude)``, converting from UTM if stale."""
        self._refresh_lat_lon()
        return LatLon(self._latitude, self._longitude)

    def get_utm(self) -> UTMPoint:
        """Return ``(zone_number, zone_letter, easting, northing)``.

        Converts from latitude/longitude if the UTM fields are stale.
        """
        self._refresh_utm()
        return UTMPoint(
            self._zone_number, self._zone_letter, self._easting, self._northing
        )

    def get_utm_zone(self) -> tuple[int, str]:
        """Return ``(zone_number, zone_letter)``."""
        self._refresh_utm()
        return self._zone_number, self._zone_letter

    def get_xy(self) -> tuple[float, float]:
        """Return the planar ``(easting, northing)`` pair."""
        self._refresh_utm()
        return self._easting, self._northing

    def is_outside_grid(self) -> bool:
        """``True`` if the position lies outside the UTM grid's latitude range."""
        self._refresh_utm()
        return self._zone_letter == OUTSIDE_GRID

    def create_display_string(self) -> str:
        """Render the fixed-column coordinate line, e.g. ``"31N 166021 0000000"``."""
        from src.utm_coordinate.coord_string import create_coord_string  # noqa: PLC0415

        return create_coord_string(self)

    @property
    def latitude(self) -> float:
        return self.get_lat_lon().latitude

    @property
    def longitude(self) -> float:
        return self.get_lat_lon().longitude

    @property
    def zone_number(self) -> int:
        return self.get_utm().zone_number

    @property
    def zone_letter(self) -> str:
        return self.get_utm().zone_letter

    @property
    def easting(self) -> float:
        return self.get_utm().easting

    @property
    def northing(self) -> float:
        return self.get_utm().northing

    # ------------------------------------------------------------------
    # TypedCoordinate capability
    # ------------------------------------------------------------------

    @property
    def coord_type(self) -> CoordinateType:
        return CoordinateType.UTM

    def to_geographic(self) -> LatLon:
        return self.get_lat_lon()

    def to_native(self) -> UTMPoint:
        return self.get_utm()

    # ------------------------------------------------------------------
    # Lazy conversion
    # ------------------------------------------------------------------

    def _refresh_lat_lon(self) -> None:
        if not self._require_lat_lon_convert:
            return
        self._latitude, self._longitude = projection.utm_to_lat_lon(
            self._zone_number, self._zone_letter, self._easting, self._northing
        )
        self._require_lat_lon_convert = False
        logger.debug(
            "UTM %d%s %.3f %.3f → lat/lon %.7f, %.7f",
            self._zone_number,
            self._zone_letter,
            self._easting,
            self._northing,
            self._latitude,
            self._longitude,
        )

    def _refresh_utm(self) -> None:
        if not self._require_utm_convert:
            return
        (
            self._zone_number,
            self._zone_letter,
            self._easting,
            self._northing,
        ) = projection.lat_lon_to_utm(self._latitude, self._longitude)
        self._require_utm_convert = False
        logger.debug(
            "lat/lon %.7f, %.7f → UTM %d%s %.3f %.3f",
            self._latitude,
            self._longitude,
            self._zone_number,
            self._zone_letter,
            self._easting,
            self._northing,
        )

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        # Show the authoritative representation without forcing a conversion.
        if self._require_lat_lon_convert:
            return (
                f"{self.__class__.__name__}("
                f"zone={self._zone_number}{self._zone_letter}, "
                f"easting={self._easting!r}, northing={self._northing!r})"
            )
        return (
            f"{self.__class__.__name__}("
            f"latitude={self._latitude!r}, longitude={self._longitude!r})"
        )
