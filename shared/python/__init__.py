"""
GeoUTM — Shared Python Package
===============================
Re-exports the shared base class, exception hierarchy, and validator
utilities so tools can import from a single location::

    from shared.python import GeoTool, Validators
    from shared.python.exceptions import CoordinateStringError
"""

from shared.python.base_tool import GeoTool, configure_logging
from shared.python.exceptions import (
    ColumnNotFoundError,
    CoordinateError,
    CoordinateStringError,
    GeoUTMError,
    IncompatibleCoordinateError,
    InputValidationError,
    OutputWriteError,
)
from shared.python.validators import Validators

__all__ = [
    "GeoTool",
    "configure_logging",
    "Validators",
    "GeoUTMError",
    "InputValidationError",
    "ColumnNotFoundError",
    "CoordinateError",
    "IncompatibleCoordinateError",
    "CoordinateStringError",
    "OutputWriteError",
]
