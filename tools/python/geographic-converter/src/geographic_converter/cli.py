"""
Geographic Converter — CLI Entry Point
=======================================
Command-line interface built with Click.  Installed as the
``geo-local-grid`` command via ``pyproject.toml``.

Usage:
    geo-local-grid --input data/fixes.csv --output out/fixes_local.csv
    geo-local-grid -i out/fixes_local.csv -o out/fixes.geojson \\
                   --direction to-geographic --format geojson \\
                   --origin-lat 51.5 --origin-lon -0.2

Run ``geo-local-grid --help`` for a full list of options.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from geographic_converter.batch import BatchConverterConfig, BatchGeographicConverter
from geographic_converter.converter import DEFAULT_ORIGIN, GeographicOrigin
from shared.python.exceptions import GeoConverterError


@click.command(
    name="geo-local-grid",
    help=(
        "Convert points in a CSV file between latitude/longitude and a "
        "local easting/northing grid anchored at an origin.\n\n"
        "The grid uses a spherical-earth approximation and is only "
        "accurate close to the origin."
    ),
)
# ---------------------------------------------------------------------------
# Required arguments
# ---------------------------------------------------------------------------
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to the input CSV file.",
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    help="Path for the output file. Parent directories are created if absent.",
)
# ---------------------------------------------------------------------------
# Optional arguments
# ---------------------------------------------------------------------------
@click.option(
    "--direction",
    type=click.Choice(["to-planar", "to-geographic"], case_sensitive=False),
    default="to-planar",
    show_default=True,
    help="'to-planar' reads lat/long and writes easting/northing; "
         "'to-geographic' does the reverse.",
)
@click.option(
    "--origin-lat",
    type=float,
    default=DEFAULT_ORIGIN.latitude_deg,
    show_default=True,
    help="Latitude of the grid origin in degrees [-90, 90].",
)
@click.option(
    "--origin-lon",
    type=float,
    default=DEFAULT_ORIGIN.longitude_deg,
    show_default=True,
    help="Longitude of the grid origin in degrees [-180, 180].",
)
@click.option(
    "--x-col",
    default=None,
    help="Input column with longitude (to-planar) or easting (to-geographic).",
)
@click.option(
    "--y-col",
    default=None,
    help="Input column with latitude (to-planar) or northing (to-geographic).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["csv", "geojson"], case_sensitive=False),
    default="csv",
    show_default=True,
    help="Output file format.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug-level logging output.",
)
def main(
    input_path: Path,
    output_path: Path,
    direction: str,
    origin_lat: float,
    origin_lon: float,
    x_col: str | None,
    y_col: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """CLI entry point — wires Click options into BatchGeographicConverter."""
    config = BatchConverterConfig(
        direction=direction.lower().replace("-", "_"),  # type: ignore[arg-type]
        origin=GeographicOrigin(origin_lat, origin_lon),
        x_col=x_col,
        y_col=y_col,
        output_format=output_format.lower(),  # type: ignore[arg-type]
    )

    tool = BatchGeographicConverter(
        input_path=input_path,
        output_path=output_path,
        config=config,
        verbose=verbose,
    )

    try:
        tool.run()
    except GeoConverterError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    if tool.result is not None:
        click.echo(tool.result.summary())


if __name__ == "__main__":
    main()
