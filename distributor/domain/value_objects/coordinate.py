"""Coordinate value object — immutable (lat, lon) pair and great-circle distance."""

import math
from dataclasses import dataclass

# WGS-84 equatorial radius
EARTH_RADIUS_KM = 6378.137


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def haversine_km(self, other: "Coordinate") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        return distance_km(self, other)


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in km between two coordinates given in degrees."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push h slightly above 1 for antipodal points
    h = min(1.0, h)

    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
