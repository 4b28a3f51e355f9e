"""Alternative route generation."""

import logging
import random
from dataclasses import dataclass
from typing import List

from .config import CO2_PER_TON_FUEL, MAX_ALTERNATIVES, MIN_ALTERNATIVES
from .geo_utils import round_half_up
from .interfaces import AlternativeRoute, RouteMetrics
from .route_types import RouteProfile, WeatherRisk

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RouteArchetype:
    """Multiplicative factors applied to the primary route metrics."""
    id: str
    name: str
    distance_factor: float
    duration_factor: float
    fuel_factor: float
    weather_risk: str

ROUTE_ARCHETYPES = (
    RouteArchetype(RouteProfile.FASTEST, "Fastest Route", 1.05, 0.85, 1.2, WeatherRisk.MEDIUM),
    RouteArchetype(RouteProfile.ECO, "Eco-Friendly Route", 1.1, 1.15, 0.8, WeatherRisk.LOW),
    RouteArchetype(RouteProfile.TRADITIONAL, "Traditional Shipping Lane", 1.0, 1.0, 1.0, WeatherRisk.LOW),
    RouteArchetype(RouteProfile.NORTHERN, "Northern Route", 0.9, 1.1, 1.1, WeatherRisk.HIGH),
)

def apply_archetype(primary: RouteMetrics, archetype: RouteArchetype) -> AlternativeRoute:
    """Scale the primary metrics by an archetype's factors."""
    fuel = round_half_up(primary.fuel_consumption_mt * archetype.fuel_factor)
    metrics = RouteMetrics(
        distance_nm=round_half_up(primary.distance_nm * archetype.distance_factor),
        duration_hours=round_half_up(primary.duration_hours * archetype.duration_factor),
        fuel_consumption_mt=fuel,
        co2_emissions_mt=round_half_up(fuel * CO2_PER_TON_FUEL),
    )
    return AlternativeRoute(archetype.id, archetype.name, metrics, archetype.weather_risk)

def generate_alternatives(primary: RouteMetrics, random_source: random.Random) -> List[AlternativeRoute]:
    """Pick 2 or 3 distinct archetypes and derive an alternative route from each."""
    count = random_source.randint(MIN_ALTERNATIVES, MAX_ALTERNATIVES)
    selected = random_source.sample(ROUTE_ARCHETYPES, count)
    logger.debug(f"Selected alternatives: {[archetype.id for archetype in selected]}")
    return [apply_archetype(primary, archetype) for archetype in selected]
