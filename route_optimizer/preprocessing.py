"""Input preprocessing utilities for route requests."""

import re
import logging
from typing import Optional
from dataclasses import dataclass

from .interfaces import Coordinate

logger = logging.getLogger(__name__)

INVALID_FORMAT = "Invalid coordinate format"
DMS_PATTERN = re.compile(r'(\d+)°(\d+)\'(\d+)"([NS])\s*(\d+)°(\d+)\'(\d+)"([EW])')
CARDINAL_PATTERN = re.compile(r'(\d+\.?\d*°?\s*[NS])\s*,?\s*(\d+\.?\d*°?\s*[EW])')

@dataclass
class ParsedCoordinate:
    """Represents a parsed coordinate with validation status."""
    latitude: float
    longitude: float
    is_valid: bool
    error_message: Optional[str] = None

    def to_coordinate(self) -> Optional[Coordinate]:
        if not self.is_valid:
            return None
        return Coordinate(self.latitude, self.longitude)

def parse_coordinates(coord_input: str) -> ParsedCoordinate:
    """Parse coordinates in various formats into decimal degrees.

    Supports formats:
    - Decimal degrees: "lat, lon", [lat, lon] or (lat, lon)
    - DMS: 40°26'46"N 79°58'56"W
    - Decimal degrees with cardinal directions: 40.446° N 79.982° W
    """
    coord_input = coord_input.strip().strip('[]()')

    dms_match = DMS_PATTERN.match(coord_input)
    if dms_match:
        lat_d, lat_m, lat_s, lat_dir, lon_d, lon_m, lon_s, lon_dir = dms_match.groups()
        lat = (int(lat_d) + int(lat_m)/60 + int(lat_s)/3600) * (1 if lat_dir == 'N' else -1)
        lon = (int(lon_d) + int(lon_m)/60 + int(lon_s)/3600) * (1 if lon_dir == 'E' else -1)
        return validate_coordinates(lat, lon)

    dd_match = CARDINAL_PATTERN.match(coord_input)
    if dd_match:
        lat_str, lon_str = dd_match.groups()
        lat = float(re.search(r'(\d+\.?\d*)', lat_str).group()) * (-1 if 'S' in lat_str else 1)
        lon = float(re.search(r'(\d+\.?\d*)', lon_str).group()) * (-1 if 'W' in lon_str else 1)
        return validate_coordinates(lat, lon)

    if ',' in coord_input:
        parts = coord_input.split(',')
        if len(parts) == 2:
            try:
                lat, lon = (float(part) for part in parts)
            except ValueError:
                return ParsedCoordinate(0, 0, False, INVALID_FORMAT)
            return validate_coordinates(lat, lon)

    logger.debug(f"Not a coordinate literal: '{coord_input}'")
    return ParsedCoordinate(0, 0, False, INVALID_FORMAT)

def validate_coordinates(lat: float, lon: float) -> ParsedCoordinate:
    """Validate that coordinates are within valid ranges."""
    if not (-90 <= lat <= 90):
        return ParsedCoordinate(lat, lon, False, "Latitude must be between -90 and 90")
    if not (-180 <= lon <= 180):
        return ParsedCoordinate(lat, lon, False, "Longitude must be between -180 and 180")
    return ParsedCoordinate(lat, lon, True)

def split_route_text(location: str) -> str:
    """Return the first leg of a "A to B" location string, or the input unchanged."""
    parts = re.split(r'\s+to\s+', location.strip(), maxsplit=1, flags=re.IGNORECASE)
    return parts[0].strip()
