"""
Tests — Batch Geographic Converter
===================================
Unit tests for :class:`~geographic_converter.batch.BatchGeographicConverter`
and the ``geo-local-grid`` CLI.

Test strategy:
- Build minimal CSV inputs in ``tmp_path``.
- Compare converted columns against :class:`GeographicConverter` results.
- Assert that validation errors are raised for bad inputs.
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
from click.testing import CliRunner

from geographic_converter.batch import BatchConverterConfig, BatchGeographicConverter
from geographic_converter.cli import main
from geographic_converter.converter import GeographicConverter, GeographicOrigin
from shared.python.exceptions import (
    ColumnNotFoundError,
    InputValidationError,
    OutOfRangeError,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def latlon_csv(tmp_path: Path) -> Path:
    """Write a small CSV of GPS fixes near the default origin."""
    csv_path = tmp_path / "fixes.csv"
    df = pd.DataFrame(
        {
            "latitude": [52.39, 52.40, 52.45],
            "longitude": [1.42, 1.43, 1.50],
            "name": ["origin", "A", "B"],
        }
    )
    df.to_csv(csv_path, index=False)
    return csv_path


@pytest.fixture()
def planar_config() -> BatchConverterConfig:
    return BatchConverterConfig(direction="to_planar")


# ---------------------------------------------------------------------------
# Config tests
# ---------------------------------------------------------------------------


class TestBatchConverterConfig:
    def test_to_planar_default_columns(self) -> None:
        cfg = BatchConverterConfig(direction="to_planar")
        assert (cfg.x_col, cfg.y_col) == ("longitude", "latitude")
        assert (cfg.out_x_col, cfg.out_y_col) == ("easting", "northing")

    def test_to_geographic_default_columns(self) -> None:
        cfg = BatchConverterConfig(direction="to_geographic")
        assert (cfg.x_col, cfg.y_col) == ("easting", "northing")
        assert (cfg.out_x_col, cfg.out_y_col) == ("longitude", "latitude")

    def test_explicit_columns_kept(self) -> None:
        cfg = BatchConverterConfig(direction="to_planar", x_col="lng", y_col="lat")
        assert (cfg.x_col, cfg.y_col) == ("lng", "lat")

    def test_unknown_direction_rejected(self) -> None:
        with pytest.raises(ValueError):
            BatchConverterConfig(direction="sideways")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Happy-path tests
# ---------------------------------------------------------------------------


class TestBatchGeographicConverterHappyPath:
    def test_csv_output_created(
        self, tmp_path: Path, latlon_csv: Path, planar_config: BatchConverterConfig
    ) -> None:
        output = tmp_path / "out" / "local.csv"
        BatchGeographicConverter(latlon_csv, output, planar_config).run()
        assert output.exists(), "Output CSV was not created."

    def test_values_match_converter(
        self, tmp_path: Path, latlon_csv: Path, planar_config: BatchConverterConfig
    ) -> None:
        output = tmp_path / "local.csv"
        BatchGeographicConverter(latlon_csv, output, planar_config).run()
        df = pd.read_csv(output)

        converter = GeographicConverter()
        for _, row in df.iterrows():
            easting, northing = converter.to_planar(row["latitude"], row["longitude"])
            assert row["easting"] == pytest.approx(easting, abs=1e-6)
            assert row["northing"] == pytest.approx(northing, abs=1e-6)

        assert df.loc[0, "easting"] == pytest.approx(0.0, abs=1e-9)
        assert df.loc[0, "northing"] == pytest.approx(0.0, abs=1e-9)
        assert list(df["name"]) == ["origin", "A", "B"]

    def test_drop_input_columns(self, tmp_path: Path, latlon_csv: Path) -> None:
        cfg = BatchConverterConfig(direction="to_planar", keep_input_columns=False)
        output = tmp_path / "local.csv"
        BatchGeographicConverter(latlon_csv, output, cfg).run()
        assert set(pd.read_csv(output).columns) == {"name", "easting", "northing"}

    def test_custom_origin(self, tmp_path: Path, latlon_csv: Path) -> None:
        cfg = BatchConverterConfig(
            direction="to_planar", origin=GeographicOrigin(52.40, 1.43)
        )
        output = tmp_path / "local.csv"
        BatchGeographicConverter(latlon_csv, output, cfg).run()
        df = pd.read_csv(output)
        assert df.loc[1, "easting"] == pytest.approx(0.0, abs=1e-9)
        assert df.loc[0, "northing"] < 0

    def test_round_trip_through_two_runs(
        self, tmp_path: Path, latlon_csv: Path, planar_config: BatchConverterConfig
    ) -> None:
        local = tmp_path / "local.csv"
        BatchGeographicConverter(latlon_csv, local, planar_config).run()

        back = tmp_path / "back.csv"
        cfg = BatchConverterConfig(
            direction="to_geographic",
            out_x_col="lon_back",
            out_y_col="lat_back",
        )
        BatchGeographicConverter(local, back, cfg).run()

        df = pd.read_csv(back)
        assert df["lat_back"].to_numpy() == pytest.approx(df["latitude"].to_numpy(), abs=1e-9)
        assert df["lon_back"].to_numpy() == pytest.approx(df["longitude"].to_numpy(), abs=1e-9)

    def test_geojson_output(self, tmp_path: Path, latlon_csv: Path) -> None:
        local = tmp_path / "local.csv"
        BatchGeographicConverter(
            latlon_csv, local, BatchConverterConfig(direction="to_planar",
                                                    keep_input_columns=False)
        ).run()

        output = tmp_path / "points.geojson"
        cfg = BatchConverterConfig(direction="to_geographic", output_format="geojson")
        BatchGeographicConverter(local, output, cfg).run()

        with open(output, encoding="utf-8") as fh:
            geo = json.load(fh)

        assert geo["type"] == "FeatureCollection"
        assert len(geo["features"]) == 3
        first = geo["features"][0]
        assert first["geometry"]["coordinates"] == pytest.approx([1.42, 52.39], abs=1e-9)
        assert first["properties"]["name"] == "origin"

    def test_result_object_populated(
        self, tmp_path: Path, latlon_csv: Path, planar_config: BatchConverterConfig
    ) -> None:
        tool = BatchGeographicConverter(latlon_csv, tmp_path / "out.csv", planar_config)
        assert tool.result is None  # not yet run
        tool.run()
        assert tool.result is not None
        assert tool.result.rows_processed == 3
        assert tool.result.rows_skipped == 0
        assert tool.result.direction == "to_planar"
        assert "3 rows" in tool.result.summary()

    def test_invalid_rows_skipped(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "with_nulls.csv"
        pd.DataFrame(
            {"latitude": [52.4, None, "n/a", 52.5], "longitude": [1.5, 1.6, 1.7, None]}
        ).to_csv(csv_path, index=False)

        tool = BatchGeographicConverter(
            csv_path, tmp_path / "out.csv", BatchConverterConfig()
        )
        tool.run()

        assert tool.result is not None
        assert tool.result.rows_skipped == 3
        assert tool.result.rows_processed == 1


# ---------------------------------------------------------------------------
# Validation error tests
# ---------------------------------------------------------------------------


class TestBatchGeographicConverterValidation:
    def test_missing_input_file_raises(self, tmp_path: Path) -> None:
        tool = BatchGeographicConverter(
            tmp_path / "does_not_exist.csv", tmp_path / "out.csv", BatchConverterConfig()
        )
        with pytest.raises(InputValidationError):
            tool.run()

    def test_wrong_extension_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "points.txt"
        path.write_text("latitude,longitude\n52.4,1.5\n", encoding="utf-8")
        tool = BatchGeographicConverter(path, tmp_path / "out.csv", BatchConverterConfig())
        with pytest.raises(InputValidationError):
            tool.run()

    def test_out_of_range_origin_raises(self, tmp_path: Path, latlon_csv: Path) -> None:
        cfg = BatchConverterConfig(origin=GeographicOrigin(52.39, 181.0))
        tool = BatchGeographicConverter(latlon_csv, tmp_path / "out.csv", cfg)
        with pytest.raises(OutOfRangeError) as exc_info:
            tool.run()
        assert exc_info.value.argument == "longitude"
        assert not (tmp_path / "out.csv").exists()

    def test_missing_coordinate_column_raises(
        self, tmp_path: Path, latlon_csv: Path
    ) -> None:
        cfg = BatchConverterConfig(direction="to_geographic")  # expects easting/northing
        tool = BatchGeographicConverter(latlon_csv, tmp_path / "out.csv", cfg)
        with pytest.raises(ColumnNotFoundError) as exc_info:
            tool.run()
        assert exc_info.value.column == "easting"


# ---------------------------------------------------------------------------
# CLI tests
# ---------------------------------------------------------------------------


class TestCli:
    def test_to_planar(self, tmp_path: Path, latlon_csv: Path) -> None:
        output = tmp_path / "local.csv"
        result = CliRunner().invoke(
            main, ["--input", str(latlon_csv), "--output", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert "Converted 3 rows" in result.output
        df = pd.read_csv(output)
        assert df.loc[0, "easting"] == pytest.approx(0.0, abs=1e-9)

    def test_to_geographic_geojson(self, tmp_path: Path) -> None:
        csv_path = tmp_path / "local.csv"
        pd.DataFrame({"x": [0.0, 500.0], "y": [0.0, 250.0]}).to_csv(csv_path, index=False)
        output = tmp_path / "points.geojson"

        result = CliRunner().invoke(
            main,
            [
                "-i", str(csv_path), "-o", str(output),
                "--direction", "to-geographic", "--format", "geojson",
                "--origin-lat", "51.5", "--origin-lon", "-0.2",
                "--x-col", "x", "--y-col", "y",
            ],
        )

        assert result.exit_code == 0, result.output
        geo = json.loads(output.read_text(encoding="utf-8"))
        assert geo["features"][0]["geometry"]["coordinates"] == pytest.approx(
            [-0.2, 51.5], abs=1e-9
        )

    def test_out_of_range_origin_exits_cleanly(
        self, tmp_path: Path, latlon_csv: Path
    ) -> None:
        result = CliRunner().invoke(
            main,
            [
                "-i", str(latlon_csv), "-o", str(tmp_path / "out.csv"),
                "--origin-lat", "91",
            ],
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "latitude" in result.output
