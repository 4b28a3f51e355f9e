"""Place name lookup for maritime route optimization."""

import logging
import random
from typing import Dict, Optional, Tuple, Union

from .errors import InvalidCoordinate, UnresolvedLocation
from .interfaces import Coordinate, LocationResult, Resolved, Unresolved
from .preprocessing import INVALID_FORMAT, parse_coordinates

logger = logging.getLogger(__name__)

# Matched by substring containment, first hit in insertion order wins
KNOWN_LOCATIONS: Dict[str, Tuple[float, float]] = {
    'rotterdam': (51.9225, 4.4792),
    'singapore': (1.3521, 103.8198),
    'shanghai': (31.2304, 121.4737),
    'new york': (40.7128, -74.006),
    'los angeles': (34.0522, -118.2437),
    'cape town': (-33.9249, 18.4241),
    'sydney': (-33.8688, 151.2093),
    'tokyo': (35.6762, 139.6503),
    'hamburg': (53.5511, 9.9937),
    'dubai': (25.2048, 55.2708),
    'suez canal': (30.0286, 32.5498),
    'panama canal': (9.08, -79.68),
    'gibraltar': (36.1408, -5.3536),
}

class Gazetteer:
    """Class to look up coordinates for well-known port and passage names."""

    def __init__(self, locations: Optional[Dict[str, Tuple[float, float]]] = None):
        self.locations = dict(KNOWN_LOCATIONS if locations is None else locations)

    def lookup(self, place_name: str) -> LocationResult:
        """Look up a place name.

        Args:
            place_name: Free-text place name, e.g. "Port of Rotterdam"

        Returns:
            Resolved with the first matching entry, or Unresolved
        """
        needle = place_name.lower()
        for key, (lat, lon) in self.locations.items():
            if key in needle:
                logger.debug(f"Resolved '{place_name}' to '{key}' ({lat}, {lon})")
                return Resolved(Coordinate(lat, lon), key)

        logger.debug(f"No gazetteer entry for '{place_name}'")
        return Unresolved(place_name)

def random_coordinate(random_source: random.Random) -> Coordinate:
    """Uniform random coordinate over the full latitude/longitude range."""
    return Coordinate(random_source.uniform(-90, 90), random_source.uniform(-180, 180))

def resolve_coordinate(
    place: Union[str, Coordinate],
    random_source: Optional[random.Random] = None,
    strict: bool = False,
    gazetteer: Optional[Gazetteer] = None
) -> Coordinate:
    """Resolve a place name or coordinate literal to a Coordinate.

    Args:
        place: Place name, "lat, lon" string, or Coordinate
        random_source: Random source for the fallback coordinate
        strict: Raise instead of falling back to a random coordinate
        gazetteer: Lookup table to use, defaults to the built-in one

    Returns:
        The resolved Coordinate

    Raises:
        UnresolvedLocation: strict is set and nothing matched
        InvalidCoordinate: the input is a coordinate literal out of range
    """
    if isinstance(place, Coordinate):
        return place

    parsed = parse_coordinates(place)
    if parsed.is_valid:
        return parsed.to_coordinate()
    if parsed.error_message != INVALID_FORMAT:
        raise InvalidCoordinate(f"{place}: {parsed.error_message}")

    result = (gazetteer or Gazetteer()).lookup(place)
    if isinstance(result, Resolved):
        return result.coordinate

    if strict:
        raise UnresolvedLocation(place)

    logger.warning(f"Could not resolve '{place}', using a random coordinate")
    return random_coordinate(random_source or random.Random())
