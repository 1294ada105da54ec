"""
UTM Coordinate
==============
A WGS84 position readable and writable as latitude/longitude or as a UTM
grid reference, converted lazily between the two.

Public API::

    from src.utm_coordinate import UTMCoordinate, lat_lon_to_utm, utm_to_lat_lon
"""

from src.utm_coordinate.coordinate import CoordinateType, TypedCoordinate, UTMCoordinate
from src.utm_coordinate.projection import (
    OUTSIDE_GRID,
    LatLon,
    UTMPoint,
    lat_lon_to_utm,
    utm_to_lat_lon,
)

__all__ = [
    "UTMCoordinate",
    "CoordinateType",
    "TypedCoordinate",
    "LatLon",
    "UTMPoint",
    "OUTSIDE_GRID",
    "lat_lon_to_utm",
    "utm_to_lat_lon",
]
__version__ = "1.0.0"
