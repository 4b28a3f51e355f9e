"""Geographic utility functions for maritime route optimization."""

import math
from typing import Tuple
from shapely.geometry import Point, LineString

from .config import EARTH_RADIUS_KM, KM_TO_NAUTICAL_MILES
from .interfaces import Coordinate

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (JavaScript Math.round)."""
    return int(math.floor(value + 0.5))

def great_circle_distance_nm(a: Coordinate, b: Coordinate) -> int:
    """Calculate the great circle distance between two coordinates.

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance in nautical miles, rounded to the nearest integer
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    diff_lat = math.radians(b.latitude - a.latitude)
    diff_lon = math.radians(b.longitude - a.longitude)

    # Haversine formula
    h = math.sin(diff_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(diff_lon / 2) ** 2
    # Rounding can push h past 1 for antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    distance_km = EARTH_RADIUS_KM * c

    return round_half_up(distance_km * KM_TO_NAUTICAL_MILES)

def interpolate_point(start: Coordinate, end: Coordinate, ratio: float) -> Tuple[float, float]:
    """Get the point at a fraction of the straight line between two coordinates.

    Args:
        start: Starting coordinate
        end: Ending coordinate
        ratio: Fraction of the line, 0 at start and 1 at end

    Returns:
        Tuple of (latitude, longitude); no range normalization is applied
    """
    if start == end:
        return start.latitude, start.longitude

    # Shapely works in (x, y) = (lon, lat)
    line = LineString([(start.longitude, start.latitude), (end.longitude, end.latitude)])
    point = line.interpolate(ratio, normalized=True)

    return point.y, point.x

def planar_distance_deg(a: Coordinate, b: Coordinate) -> float:
    """Euclidean distance between two coordinates in unprojected degrees."""
    return Point(a.longitude, a.latitude).distance(Point(b.longitude, b.latitude))

def normalize_position(lat: float, lon: float) -> Coordinate:
    """Clamp latitude and wrap longitude into their valid ranges."""
    lat = max(-90.0, min(90.0, lat))
    if not (-180 <= lon <= 180):
        lon = ((lon + 180) % 360) - 180
    return Coordinate(lat, lon)
