"""Weather condition synthesis along a route."""

import math
import logging
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import LATITUDE_BIAS_SCALE, SEVERITY_STEP
from .interfaces import Waypoint, WeatherSample

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class WeatherArchetype:
    conditions: str
    wind_speed_range: Tuple[float, float]
    wave_height_range: Tuple[float, float]
    visibility: str

# Ordered from calm to severe; the latitude bias steps along this list
WEATHER_ARCHETYPES = (
    WeatherArchetype("Clear skies", (5, 15), (0.5, 1.5), "Excellent"),
    WeatherArchetype("Partly cloudy", (10, 20), (1, 2), "Good"),
    WeatherArchetype("Overcast", (15, 25), (1.5, 3), "Moderate"),
    WeatherArchetype("Light rain", (15, 30), (2, 4), "Moderate"),
    WeatherArchetype("Heavy rain", (25, 40), (3, 5), "Poor"),
    WeatherArchetype("Fog", (5, 15), (1, 2), "Very poor"),
    WeatherArchetype("Storm", (35, 50), (4, 7), "Poor"),
)

def latitude_bias(latitude: float) -> float:
    """Probability of stepping to a more severe archetype; 0 at the equator, 1 from 30° on."""
    return min(abs(latitude) / 90 * LATITUDE_BIAS_SCALE, 1)

def choose_archetype_index(latitude: float, random_source: random.Random) -> int:
    index = random_source.randrange(len(WEATHER_ARCHETYPES))
    if random_source.random() < latitude_bias(latitude):
        index = min(index + SEVERITY_STEP, len(WEATHER_ARCHETYPES) - 1)
    return index

def synthesize_weather(waypoints: Sequence[Waypoint], random_source: random.Random) -> List[WeatherSample]:
    """Generate one independent weather sample per waypoint.

    Args:
        waypoints: Route waypoints
        random_source: Source for archetype choice and value draws

    Returns:
        List of WeatherSample in waypoint order
    """
    samples = []
    for waypoint in waypoints:
        archetype = WEATHER_ARCHETYPES[choose_archetype_index(waypoint.coordinate.latitude, random_source)]

        wind_min, wind_max = archetype.wind_speed_range
        wave_min, wave_max = archetype.wave_height_range
        wind_speed = math.floor(random_source.uniform(wind_min, wind_max))
        wave_height = round(random_source.uniform(wave_min, wave_max), 1)

        samples.append(WeatherSample(
            location=waypoint.coordinate,
            conditions=archetype.conditions,
            wind_speed_knots=wind_speed,
            wave_height_m=wave_height,
            visibility=archetype.visibility,
        ))

    logger.debug(f"Synthesized weather for {len(samples)} waypoints")
    return samples
