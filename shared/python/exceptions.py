"""
GeoUTM — Custom Exception Hierarchy
====================================
All GeoUTM modules raise exceptions from this module so callers can
catch them at the right level of granularity.

The projection maths itself never raises: conversions are total over
floating-point input and degenerate positions (poles, antimeridian)
produce numbers.  These exceptions cover the seams around it.

Hierarchy::

    GeoUTMError                          ← catch-all base
    ├── InputValidationError             ← bad files, missing columns, etc.
    │   └── ColumnNotFoundError          ← CSV/table column missing
    ├── CoordinateError                  ← coordinate value problems
    │   ├── IncompatibleCoordinateError  ← copy from an unsupported variant
    │   └── CoordinateStringError        ← malformed fixed-column line
    └── OutputWriteError                 ← cannot write to output path

Usage::

    from shared.python.exceptions import CoordinateStringError

    raise CoordinateStringError(text, "zone token is not a number")
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class GeoUTMError(Exception):
    """Base exception for all GeoUTM errors.

    Catch this to handle any package-specific error without caring about
    the exact subtype.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(GeoUTMError):
    """Raised when a tool's inputs fail pre-processing validation.

    This is the parent class for more specific input problems.
    """


class ColumnNotFoundError(InputValidationError):
    """Raised when an expected column is absent from a tabular dataset.

    Args:
        column: The name of the missing column.
        available: List of column names that ARE present, used to
                   generate a helpful error message.

    Example::

        raise ColumnNotFoundError("latitude", df.columns.tolist())
    """

    def __init__(self, column: str, available: list[str]) -> None:
        available_str = ", ".join(f"'{c}'" for c in available)
        super().__init__(
            f"Column '{column}' not found. Available columns: {available_str}"
        )
        self.column: str = column
        self.available: list[str] = available


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


class CoordinateError(GeoUTMError):
    """Raised for problems with a coordinate value itself.

    Subclass this for more specific coordinate errors.
    """


class IncompatibleCoordinateError(CoordinateError):
    """Raised when a coordinate cannot be built from another object.

    A :class:`~src.utm_coordinate.coordinate.UTMCoordinate` can only be
    copied from another ``UTMCoordinate`` or from an object exposing the
    typed-coordinate capability (``to_geographic()``).

    Args:
        source: The object that was offered as the copy source.

    Example::

        raise IncompatibleCoordinateError(other)
    """

    def __init__(self, source: object) -> None:
        super().__init__(
            f"Cannot build a UTM coordinate from {type(source).__name__!r}: "
            "it does not provide to_geographic()."
        )
        self.source: object = source


class CoordinateStringError(CoordinateError):
    """Raised when a fixed-column coordinate line cannot be parsed.

    Args:
        text: The offending line.
        reason: Short explanation of what is wrong with it.

    Example::

        raise CoordinateStringError("3XN 12 34", "line is too short")
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse coordinate string {text!r}: {reason}")
        self.text: str = text
        self.reason: str = reason


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(GeoUTMError):
    """Raised when the tool cannot write its output to disk.

    Args:
        output_path: String representation of the path that failed.
        reason: Underlying OS or library error message.

    Example::

        raise OutputWriteError("/read-only/dir/out.csv", "Permission denied")
    """

    def __init__(self, output_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to write output to '{output_path}': {reason}"
        )
        self.output_path: str = output_path
        self.reason: str = reason
