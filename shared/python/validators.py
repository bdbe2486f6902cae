"""
Geographic Converter — Shared Input Validators
===============================================
Static precondition checks used by the converter and the batch tool.

All methods raise an appropriate exception from
:mod:`shared.python.exceptions` rather than returning booleans, which
keeps ``validate_inputs`` implementations short::

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            Validators.assert_file_exists(self.input_path)
            Validators.assert_supported_extension(self.input_path, [".csv"])
            Validators.assert_latitude_in_range(self.origin_lat)
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from shared.python.exceptions import (
    ColumnNotFoundError,
    InputValidationError,
    OutOfRangeError,
    OutputWriteError,
)

LATITUDE_BOUNDS: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_BOUNDS: tuple[float, float] = (-180.0, 180.0)


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod`` — this class is never instantiated.
    It exists purely as a logical namespace.
    """

    # ------------------------------------------------------------------
    # File-system checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_file_exists(path: Path) -> None:
        """Assert that *path* points to an existing regular file.

        Args:
            path: Path object to check.

        Raises:
            InputValidationError: If *path* does not exist or is a
                directory rather than a file.
        """
        path = Path(path)
        if not path.exists():
            raise InputValidationError(
                f"Input file not found: '{path}'. "
                "Check that the path is correct and the file exists."
            )
        if path.is_dir():
            raise InputValidationError(
                f"Expected a file but got a directory: '{path}'."
            )

    @staticmethod
    def assert_output_dir_writable(output_path: Path) -> None:
        """Assert that the parent directory of *output_path* is writable.

        Creates the parent directory (and any missing parents) if it does
        not yet exist.

        Args:
            output_path: Intended output file path.

        Raises:
            OutputWriteError: If the parent directory cannot be created.
        """
        parent = Path(output_path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(str(output_path), str(exc)) from exc

    @staticmethod
    def assert_supported_extension(path: Path, extensions: Sequence[str]) -> None:
        """Assert that *path* has one of the allowed file extensions.

        Args:
            path: File path to check.
            extensions: Allowed extensions, each starting with a dot
                        (e.g. ``[".csv"]``).

        Raises:
            InputValidationError: If the file extension is not in
                *extensions*.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        allowed = [ext.lower() for ext in extensions]
        if suffix not in allowed:
            raise InputValidationError(
                f"Unsupported file extension '{suffix}' for '{path.name}'. "
                f"Accepted extensions: {', '.join(allowed)}"
            )

    # ------------------------------------------------------------------
    # Geographic range checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_latitude_in_range(latitude_deg: float) -> None:
        """Assert that *latitude_deg* lies within [-90, 90], bounds included.

        Raises:
            OutOfRangeError: With ``argument == "latitude"``.

        Example::

            Validators.assert_latitude_in_range(52.39)
        """
        lower, upper = LATITUDE_BOUNDS
        if latitude_deg < lower or latitude_deg > upper:
            raise OutOfRangeError("latitude", latitude_deg, lower, upper)

    @staticmethod
    def assert_longitude_in_range(longitude_deg: float) -> None:
        """Assert that *longitude_deg* lies within [-180, 180], bounds included.

        An origin at exactly ±180 passes this check even though points
        east of it wrap across the antimeridian.

        Raises:
            OutOfRangeError: With ``argument == "longitude"``.
        """
        lower, upper = LONGITUDE_BOUNDS
        if longitude_deg < lower or longitude_deg > upper:
            raise OutOfRangeError("longitude", longitude_deg, lower, upper)

    # ------------------------------------------------------------------
    # Tabular data checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_columns_exist(
        df: object,  # pandas DataFrame — typed loosely to avoid hard dep
        required_columns: Sequence[str],
    ) -> None:
        """Assert that all *required_columns* are present in *df*.

        Args:
            df: A ``pandas.DataFrame``.
            required_columns: Column names that must be present.

        Raises:
            ColumnNotFoundError: On the first missing column found.
        """
        available = list(df.columns)  # type: ignore[union-attr]
        for col in required_columns:
            if col not in available:
                raise ColumnNotFoundError(col, available)
