"""
Geospatial helpers.

A small spherical-Earth geometry layer: coordinates, haversine distance and parsing of
`lat,lon` text. No GIS dependency is needed for great-circle distances in kilometers.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, isfinite, radians, sin, sqrt

from customerlocator.core.units import DistanceKm

EARTH_RADIUS_KM = 6371.0

DUBLIN_LATITUDE = 53.3393
DUBLIN_LONGITUDE = -6.2576841


class CoordinateParseError(ValueError):
    """Raised when `lat,lon` text cannot be converted into a `Coordinate`."""

    def __init__(self, reason: str):
        super().__init__(f"Location parse error: {reason}")
        self.reason = reason


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Values are not range-checked: |latitude| > 90 passes through unchanged.
    """

    latitude: float
    longitude: float

    @classmethod
    def dublin(cls) -> Coordinate:
        return cls(DUBLIN_LATITUDE, DUBLIN_LONGITUDE)

    def is_dublin(self) -> bool:
        return self == Coordinate.dublin()

    def distance_from(self, other: Coordinate) -> DistanceKm:
        """Great-circle distance to `other`."""
        return DistanceKm(haversine_km(self, other))

    def __str__(self) -> str:
        return f"Location({self.latitude}, {self.longitude})"


DUBLIN = Coordinate.dublin()


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Compute great-circle distance in kilometers between two points.

    Uses the atan2 form, which stays stable for nearly antipodal points. Non-finite
    inputs give NaN instead of raising.
    """
    if not all(isfinite(v) for v in (a.latitude, a.longitude, b.latitude, b.longitude)):
        return float("nan")

    lat1 = radians(a.latitude)
    lat2 = radians(b.latitude)
    dlat = radians(b.latitude - a.latitude)
    dlon = radians(b.longitude - a.longitude)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding (or |latitude| > 90) can push h just outside [0, 1].
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))


def parse_coordinate(text: str) -> Coordinate:
    """Parse `LAT,LON` text (e.g. `53.3393,-6.2576841`) into a `Coordinate`.

    Elements after the second one are ignored.
    """
    parts = str(text).split(",")
    if len(parts) < 2:
        raise CoordinateParseError("missing element latitude,longitude on tuple")
    try:
        latitude = float(parts[0])
        longitude = float(parts[1])
    except ValueError as exc:
        raise CoordinateParseError(f"error parsing location {exc}") from exc
    return Coordinate(latitude, longitude)
