"""
Geographic Converter — Custom Exception Hierarchy
==================================================
Every error raised by the converter and its tools comes from this module
so callers can catch them at the right level of granularity.

Hierarchy::

    GeoConverterError                    ← catch-all base
    ├── InputValidationError             ← bad files, bad arguments, etc.
    │   ├── ColumnNotFoundError          ← CSV/table column missing
    │   └── OutOfRangeError              ← latitude/longitude outside bounds
    └── OutputWriteError                 ← cannot write to output path

Usage::

    from shared.python.exceptions import OutOfRangeError

    raise OutOfRangeError("latitude", 91.0, -90.0, 90.0)
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class GeoConverterError(Exception):
    """Base exception for the geographic converter and its tools.

    Catch this to handle any tool-specific error without caring about
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


class InputValidationError(GeoConverterError):
    """Raised when inputs fail pre-processing validation.

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


class OutOfRangeError(InputValidationError):
    """Raised when a geographic angle lies outside its valid bounds.

    Args:
        argument: Which argument failed, ``"latitude"`` or ``"longitude"``.
        value: The rejected value in degrees.
        lower: Inclusive lower bound in degrees.
        upper: Inclusive upper bound in degrees.

    Example::

        raise OutOfRangeError("longitude", 181.0, -180.0, 180.0)
    """

    def __init__(self, argument: str, value: float, lower: float, upper: float) -> None:
        super().__init__(
            f"Input {argument} out of range: {value!r} is not within "
            f"[{lower:g}, {upper:g}] degrees."
        )
        self.argument: str = argument
        self.value: float = value
        self.lower: float = lower
        self.upper: float = upper


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class OutputWriteError(GeoConverterError):
    """Raised when a tool cannot write its output to disk.

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
