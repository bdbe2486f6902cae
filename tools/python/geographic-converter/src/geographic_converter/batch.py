"""
Geographic Converter — Batch Module
====================================
Provides :class:`BatchGeographicConverter`, which reads a CSV file of
points, converts every row between geographic and local planar
coordinates, and writes the result as CSV or GeoJSON.

Classes:
    BatchConverterConfig       Direction, origin, columns, output format.
    BatchConversionResult      Immutable summary of a completed run.
    BatchGeographicConverter   Primary tool class (inherits GeoTool).

Typical usage::

    from pathlib import Path
    from geographic_converter.batch import BatchConverterConfig, BatchGeographicConverter

    cfg = BatchConverterConfig(direction="to_planar")
    BatchGeographicConverter(
        Path("data/gps_fixes.csv"), Path("output/gps_fixes_local.csv"), cfg
    ).run()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import pandas as pd

from geographic_converter.converter import (
    DEFAULT_ORIGIN,
    GeographicConverter,
    GeographicOrigin,
    geographic_to_planar,
    planar_to_geographic,
)
from shared.python.base_tool import GeoTool
from shared.python.exceptions import OutputWriteError
from shared.python.validators import Validators

logger = logging.getLogger("geoconverter.batch")

Direction = Literal["to_planar", "to_geographic"]

# (x, y) column names read and written for each direction
_DEFAULT_COLUMNS: dict[str, tuple[tuple[str, str], tuple[str, str]]] = {
    "to_planar": (("longitude", "latitude"), ("easting", "northing")),
    "to_geographic": (("easting", "northing"), ("longitude", "latitude")),
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BatchConversionResult:
    """Immutable container for a completed batch run.

    Attributes:
        rows_processed: Number of rows converted.
        rows_skipped: Rows dropped for null or non-numeric coordinates.
        direction: ``"to_planar"`` or ``"to_geographic"``.
        origin: Origin the grid was anchored at.
        output_path: Path where the converted file was written.
    """

    rows_processed: int
    rows_skipped: int
    direction: str
    origin: GeographicOrigin
    output_path: Path

    def summary(self) -> str:
        """Return a human-readable summary string for logging or display."""
        return (
            f"Converted {self.rows_processed} rows "
            f"({self.rows_skipped} skipped) | {self.direction} | "
            f"origin ({self.origin.latitude_deg}, {self.origin.longitude_deg}) | "
            f"Output: {self.output_path}"
        )


@dataclass
class BatchConverterConfig:
    """Configuration bundle for :class:`BatchGeographicConverter`.

    Column names left as ``None`` fall back to the direction's defaults:
    ``longitude``/``latitude`` in and ``easting``/``northing`` out for
    ``to_planar``, the reverse for ``to_geographic``.

    Attributes:
        direction: Which way to convert.
        origin: Grid origin.  Validated before processing.
        x_col: Input column holding longitude or easting.
        y_col: Input column holding latitude or northing.
        out_x_col: Output column for easting or longitude.
        out_y_col: Output column for northing or latitude.
        output_format: ``"csv"`` or ``"geojson"``.
        keep_input_columns: Keep the source coordinate columns in the
            output when the output names differ from them.
    """

    direction: Direction = "to_planar"
    origin: GeographicOrigin = DEFAULT_ORIGIN
    x_col: str | None = None
    y_col: str | None = None
    out_x_col: str | None = None
    out_y_col: str | None = None
    output_format: Literal["csv", "geojson"] = "csv"
    keep_input_columns: bool = True

    def __post_init__(self) -> None:
        if self.direction not in _DEFAULT_COLUMNS:
            raise ValueError(
                f"direction must be one of {sorted(_DEFAULT_COLUMNS)}, "
                f"got {self.direction!r}"
            )
        (in_x, in_y), (out_x, out_y) = _DEFAULT_COLUMNS[self.direction]
        self.x_col = self.x_col or in_x
        self.y_col = self.y_col or in_y
        self.out_x_col = self.out_x_col or out_x
        self.out_y_col = self.out_y_col or out_y


# ---------------------------------------------------------------------------
# Main tool class
# ---------------------------------------------------------------------------


class BatchGeographicConverter(GeoTool):
    """Convert every point in a CSV between lat/long and the local grid.

    Inherits the Template Method pipeline from :class:`~shared.python.GeoTool`:
    ``validate_inputs`` → ``process`` → ``_report_success``.

    Args:
        input_path: Path to the input CSV file.
        output_path: Path where the converted output will be written.
        config: A :class:`BatchConverterConfig`.
        verbose: Enable DEBUG-level logging.  Defaults to ``False``.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        config: BatchConverterConfig,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(input_path, output_path, verbose=verbose)
        self.config: BatchConverterConfig = config
        self._result: BatchConversionResult | None = None

    # ------------------------------------------------------------------
    # GeoTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Validate the input file, origin and columns before processing.

        Raises:
            InputValidationError: If the file is missing or not a CSV.
            OutOfRangeError: If the configured origin is out of bounds.
            OutputWriteError: If the output directory cannot be created.
            ColumnNotFoundError: If a coordinate column is missing.
        """
        Validators.assert_file_exists(self.input_path)
        Validators.assert_supported_extension(self.input_path, [".csv"])
        self.config.origin.validate()
        Validators.assert_output_dir_writable(self.output_path)

        df_peek = pd.read_csv(self.input_path, nrows=0)
        Validators.assert_columns_exist(
            df_peek, [self.config.x_col, self.config.y_col]
        )

        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Read the CSV, convert the coordinates, and write the output.

        Raises:
            OutputWriteError: If writing the output file fails.
        """
        cfg = self.config
        df = pd.read_csv(self.input_path)
        original_len = len(df)

        df = self._drop_invalid_rows(df)
        rows_skipped = original_len - len(df)
        if rows_skipped:
            logger.warning(
                "Dropped %d row(s) with null or non-numeric coordinate values.",
                rows_skipped,
            )

        converter = GeographicConverter(cfg.origin)
        xs = df[cfg.x_col].to_numpy(dtype=float)
        ys = df[cfg.y_col].to_numpy(dtype=float)

        if cfg.direction == "to_planar":
            new_xs, new_ys = geographic_to_planar(ys, xs, converter.origin)
        else:
            new_ys, new_xs = planar_to_geographic(xs, ys, converter.origin)

        if not cfg.keep_input_columns:
            df = df.drop(columns=[cfg.x_col, cfg.y_col])
        df[cfg.out_x_col] = new_xs
        df[cfg.out_y_col] = new_ys

        try:
            if cfg.output_format == "geojson":
                self._write_geojson(df)
            else:
                df.to_csv(self.output_path, index=False)
        except OSError as exc:
            raise OutputWriteError(str(self.output_path), str(exc)) from exc

        self._result = BatchConversionResult(
            rows_processed=len(df),
            rows_skipped=rows_skipped,
            direction=cfg.direction,
            origin=converter.origin,
            output_path=self.output_path,
        )
        logger.info(self._result.summary())

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _drop_invalid_rows(self, df: pd.DataFrame) -> pd.DataFrame:
        """Coerce the coordinate columns to numbers and drop rows that fail."""
        x = pd.to_numeric(df[self.config.x_col], errors="coerce")
        y = pd.to_numeric(df[self.config.y_col], errors="coerce")
        mask = x.notna() & y.notna()
        df = df[mask].copy()
        df[self.config.x_col] = x[mask]
        df[self.config.y_col] = y[mask]
        return df

    def _write_geojson(self, df: pd.DataFrame) -> None:
        """Serialise the DataFrame as a GeoJSON FeatureCollection.

        Geometry coordinates are ``[out_x, out_y]``: ``[lon, lat]`` for
        ``to_geographic`` and ``[easting, northing]`` in the local grid
        for ``to_planar``.
        """
        out_x = self.config.out_x_col
        out_y = self.config.out_y_col
        prop_cols = [c for c in df.columns if c not in (out_x, out_y)]

        features = []
        for _, row in df.iterrows():
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "Point",
                        "coordinates": [float(row[out_x]), float(row[out_y])],
                    },
                    "properties": {c: row[c] for c in prop_cols},
                }
            )

        geojson = {"type": "FeatureCollection", "features": features}

        with open(self.output_path, "w", encoding="utf-8") as fh:
            json.dump(geojson, fh, indent=2, default=str)

    @property
    def result(self) -> BatchConversionResult | None:
        """The :class:`BatchConversionResult` from the last :meth:`run` call,
        or ``None`` if :meth:`run` has not been called yet."""
        return self._result
