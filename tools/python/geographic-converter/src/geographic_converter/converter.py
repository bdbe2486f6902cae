"""
Geographic Converter — Core Module
===================================
Converts between geographic coordinates (latitude/longitude in degrees)
and a local planar grid (easting/northing in meters) anchored at an
origin point.

The earth is treated as a sphere whose radius is the WGS84 semi-major
axis, unlike the ellipsoidal WGS84 datum itself.  Longitude differences
are scaled by the cosine of the point's latitude and latitude
differences map linearly to northing, so the grid is only accurate over
short distances from the origin.

Known limitations:
    - An origin longitude of exactly ±180 is accepted, but points on the
      far side of the antimeridian come out roughly 360 degrees away.
    - Near the poles ``r_cos_alpha`` in the inverse transform tends to
      zero; the division is left unguarded and yields ``inf``/``nan``.

Classes:
    GeographicOrigin      Immutable origin value (south-west corner).
    GeographicConverter   Origin holder exposing the two conversions.

Typical usage::

    from geographic_converter.converter import GeographicConverter

    converter = GeographicConverter()
    converter.set_origin(51.5, -0.2)
    easting_m, northing_m = converter.to_planar(51.51, -0.19)
    lat_deg, lon_deg = converter.to_geographic(easting_m, northing_m)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from shared.python.validators import Validators

logger = logging.getLogger("geoconverter.converter")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

EARTH_SEMI_MAJOR_AXIS_M: float = 6378137.0  # WGS84, used as sphere radius
DEG_TO_RAD: float = math.pi / 180.0


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeographicOrigin:
    """Reference point that maps to planar ``(0, 0)``.

    By convention the south-west corner of the area of interest.

    Attributes:
        latitude_deg: Origin latitude in degrees, within [-90, 90].
        longitude_deg: Origin longitude in degrees, within [-180, 180].
    """

    latitude_deg: float
    longitude_deg: float

    def validate(self) -> None:
        """Raise :class:`~shared.python.exceptions.OutOfRangeError` if
        either angle is outside its bounds.  Latitude is checked first."""
        Validators.assert_latitude_in_range(self.latitude_deg)
        Validators.assert_longitude_in_range(self.longitude_deg)


# South-west corner of the OS grid system, in WGS84 lat/long.
DEFAULT_ORIGIN = GeographicOrigin(latitude_deg=52.39, longitude_deg=1.42)


# ---------------------------------------------------------------------------
# Vectorised transforms
# ---------------------------------------------------------------------------


def geographic_to_planar(
    latitude_deg: npt.ArrayLike,
    longitude_deg: npt.ArrayLike,
    origin: GeographicOrigin,
) -> tuple[np.ndarray, np.ndarray]:
    """Convert latitude/longitude (deg) to easting/northing (m).

    Accepts scalars or arrays; no range checks are applied to the
    points themselves.

    Returns:
        ``(easting_m, northing_m)`` as float64 arrays (0-d for scalars).
    """
    lat = np.asarray(latitude_deg, dtype=float)
    lon = np.asarray(longitude_deg, dtype=float)

    easting = (
        (lon - origin.longitude_deg)
        * DEG_TO_RAD
        * EARTH_SEMI_MAJOR_AXIS_M
        * np.cos(lat * DEG_TO_RAD)
    )
    northing = (lat - origin.latitude_deg) * DEG_TO_RAD * EARTH_SEMI_MAJOR_AXIS_M
    return easting, northing


def planar_to_geographic(
    easting_m: npt.ArrayLike,
    northing_m: npt.ArrayLike,
    origin: GeographicOrigin,
) -> tuple[np.ndarray, np.ndarray]:
    """Convert easting/northing (m) back to latitude/longitude (deg).

    Exact algebraic inverse of :func:`geographic_to_planar`.  When
    ``r_cos_alpha`` is zero the longitude division produces ``inf`` or
    ``nan`` under IEEE-754 rules instead of raising.

    Returns:
        ``(latitude_deg, longitude_deg)`` as float64 arrays.
    """
    east = np.asarray(easting_m, dtype=float)
    north = np.asarray(northing_m, dtype=float)

    alpha = north / EARTH_SEMI_MAJOR_AXIS_M + origin.latitude_deg * DEG_TO_RAD
    r_cos_alpha = EARTH_SEMI_MAJOR_AXIS_M * np.cos(alpha)

    with np.errstate(divide="ignore", invalid="ignore"):
        longitude = (
            (east + origin.longitude_deg * DEG_TO_RAD * r_cos_alpha)
            / r_cos_alpha
            / DEG_TO_RAD
        )
    latitude = alpha / DEG_TO_RAD
    return latitude, longitude


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------


class GeographicConverter:
    """Holds a local-grid origin and converts points to and from it.

    The origin is stored as one immutable :class:`GeographicOrigin`.
    :meth:`set_origin` validates first and then swaps the reference, so
    a failed update leaves the previous origin intact and a concurrent
    conversion never sees half of an update.

    Args:
        origin: Starting origin.  Defaults to :data:`DEFAULT_ORIGIN`
                (52.39°N, 1.42°E).

    Raises:
        OutOfRangeError: If a supplied *origin* is out of bounds.
    """

    def __init__(self, origin: GeographicOrigin = DEFAULT_ORIGIN) -> None:
        origin.validate()
        self._origin: GeographicOrigin = origin

    @property
    def origin(self) -> GeographicOrigin:
        """The current origin snapshot."""
        return self._origin

    def set_origin(self, latitude_deg: float, longitude_deg: float) -> None:
        """Move the origin of the planar grid.

        Bounds are inclusive: latitude in [-90, 90], longitude in
        [-180, 180].

        Raises:
            OutOfRangeError: Identifying the failing argument.  The
                current origin is not modified.
        """
        origin = GeographicOrigin(latitude_deg, longitude_deg)
        origin.validate()
        self._origin = origin
        logger.debug(
            "Origin set to lat=%.8f lon=%.8f", latitude_deg, longitude_deg
        )

    def to_planar(self, latitude_deg: float, longitude_deg: float) -> tuple[float, float]:
        """Return ``(easting_m, northing_m)`` of a geographic point."""
        easting, northing = geographic_to_planar(
            latitude_deg, longitude_deg, self._origin
        )
        return float(easting), float(northing)

    def to_geographic(self, easting_m: float, northing_m: float) -> tuple[float, float]:
        """Return ``(latitude_deg, longitude_deg)`` of a planar point."""
        latitude, longitude = planar_to_geographic(
            easting_m, northing_m, self._origin
        )
        return float(latitude), float(longitude)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"origin_latitude_deg={self._origin.latitude_deg!r}, "
            f"origin_longitude_deg={self._origin.longitude_deg!r})"
        )
