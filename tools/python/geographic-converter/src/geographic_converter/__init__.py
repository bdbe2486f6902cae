"""
Geographic Converter
====================
Converts latitude/longitude to a local easting/northing grid and back,
using a spherical-earth approximation anchored at a configurable origin.

Public API::

    from geographic_converter import GeographicConverter, GeographicOrigin
"""

from geographic_converter.batch import (
    BatchConversionResult,
    BatchConverterConfig,
    BatchGeographicConverter,
)
from geographic_converter.converter import (
    DEFAULT_ORIGIN,
    DEG_TO_RAD,
    EARTH_SEMI_MAJOR_AXIS_M,
    GeographicConverter,
    GeographicOrigin,
    geographic_to_planar,
    planar_to_geographic,
)

__all__ = [
    "GeographicConverter",
    "GeographicOrigin",
    "DEFAULT_ORIGIN",
    "DEG_TO_RAD",
    "EARTH_SEMI_MAJOR_AXIS_M",
    "geographic_to_planar",
    "planar_to_geographic",
    "BatchConverterConfig",
    "BatchConversionResult",
    "BatchGeographicConverter",
]
__version__ = "1.0.0"
