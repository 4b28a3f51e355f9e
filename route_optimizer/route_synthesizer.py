"""Route synthesis: metrics, waypoints, alternatives and weather for one request."""

import logging
import random
from typing import Optional, Union

from .alternatives import generate_alternatives
from .gazetteer import Gazetteer, resolve_coordinate
from .geo_utils import great_circle_distance_nm
from .interfaces import Coordinate, RouteResult, VesselProfile
from .vessel_profiles import (
    derive_metrics,
    fuel_factor_tons_per_nm,
    is_known_profile,
    speed_factor_knots,
    validate_vessel_profile,
)
from .waypoint_calculator import WaypointCalculator
from .weather_synthesizer import synthesize_weather

logger = logging.getLogger(__name__)

Location = Union[str, Coordinate]

class RouteSynthesizer:
    """Class to compute a route and its alternatives between two locations."""

    def __init__(self, gazetteer: Optional[Gazetteer] = None):
        """Initialize the synthesizer with a place name lookup."""
        self.gazetteer = gazetteer or Gazetteer()

    def compute_route(
        self,
        origin: Location,
        destination: Location,
        vessel: VesselProfile,
        random_source: Optional[random.Random] = None,
        strict: bool = False
    ) -> RouteResult:
        """Compute the optimized route between two locations.

        Args:
            origin: Origin place name or coordinate
            destination: Destination place name or coordinate
            vessel: Vessel type and size
            random_source: Random source; pass a seeded instance for reproducible output
            strict: Raise on unresolved locations or unknown vessel profiles
                instead of falling back to random coordinates and default factors

        Returns:
            RouteResult with waypoints, metrics, alternatives and weather samples

        Raises:
            UnresolvedLocation: strict is set and a place name matched nothing
            UnknownVesselProfile: strict is set and the vessel is not in the tables
            InvalidCoordinate: a coordinate literal is out of range
        """
        rng = random_source or random.Random()
        logger.info(f"Computing route from {origin} to {destination} for {vessel.vessel_size} {vessel.vessel_type}")

        if strict:
            validate_vessel_profile(vessel)
        elif not is_known_profile(vessel):
            logger.warning(f"Unknown vessel profile {vessel}, using default factors")

        origin_coord = resolve_coordinate(origin, rng, strict=strict, gazetteer=self.gazetteer)
        destination_coord = resolve_coordinate(destination, rng, strict=strict, gazetteer=self.gazetteer)

        waypoints = WaypointCalculator.build_waypoints(origin_coord, destination_coord, rng)

        distance = great_circle_distance_nm(origin_coord, destination_coord)
        metrics = derive_metrics(
            distance,
            speed_factor_knots(vessel.vessel_type, vessel.vessel_size),
            fuel_factor_tons_per_nm(vessel.vessel_type, vessel.vessel_size),
        )

        alternatives = generate_alternatives(metrics, rng)
        weather = synthesize_weather(waypoints, rng)

        logger.info(f"Route computed: {metrics.distance_nm}nm, {metrics.duration_hours}h, "
                    f"{len(waypoints)} waypoints, {len(alternatives)} alternatives")

        return RouteResult(
            origin_name=origin if isinstance(origin, str) else origin.label(),
            destination_name=destination if isinstance(destination, str) else destination.label(),
            origin=origin_coord,
            destination=destination_coord,
            waypoints=waypoints,
            metrics=metrics,
            alternatives=alternatives,
            weather=weather,
        )
