"""Waypoint calculation functionality for route synthesis."""

import logging
import random
from typing import Dict, List, Tuple

from .config import (
    LANDMARK_THRESHOLD_DEG,
    MAX_INTERMEDIATE_WAYPOINTS,
    MIN_INTERMEDIATE_WAYPOINTS,
    WAYPOINT_JITTER_DEG,
)
from .geo_utils import interpolate_point, normalize_position, planar_distance_deg
from .interfaces import Coordinate, Waypoint

logger = logging.getLogger(__name__)

# Key passages used to label waypoints that pass close by
MARITIME_LANDMARKS: Dict[str, Tuple[float, float]] = {
    'Suez Canal': (30.0286, 32.5498),
    'Gibraltar Strait': (36.1408, -5.3536),
    'Panama Canal': (9.08, -79.68),
    'Cape of Good Hope': (-34.3568, 18.474),
    'Malacca Strait': (1.75, 101.0),
    'English Channel': (50.1, -1.0),
}

class WaypointCalculator:
    """Class to build waypoint sequences between an origin and a destination."""

    @staticmethod
    def build_waypoints(
        origin: Coordinate,
        destination: Coordinate,
        random_source: random.Random
    ) -> List[Waypoint]:
        """Build a jittered waypoint sequence from origin to destination.

        Args:
            origin: Route start
            destination: Route end
            random_source: Source of the waypoint count and jitter

        Returns:
            List of Waypoints, Origin first and Destination last, with
            2 to 5 intermediate points between them
        """
        num_intermediate = random_source.randint(MIN_INTERMEDIATE_WAYPOINTS, MAX_INTERMEDIATE_WAYPOINTS)
        logger.debug(f"Building route with {num_intermediate} intermediate waypoints")

        waypoints = [Waypoint(origin, "Origin")]
        for i in range(1, num_intermediate + 1):
            ratio = i / (num_intermediate + 1)
            lat, lon = interpolate_point(origin, destination, ratio)

            jitter_lat = random_source.uniform(-WAYPOINT_JITTER_DEG, WAYPOINT_JITTER_DEG)
            jitter_lon = random_source.uniform(-WAYPOINT_JITTER_DEG, WAYPOINT_JITTER_DEG)

            waypoints.append(Waypoint(normalize_position(lat + jitter_lat, lon + jitter_lon)))
        waypoints.append(Waypoint(destination, "Destination"))

        WaypointCalculator.label_landmarks(waypoints)
        return waypoints

    @staticmethod
    def label_landmarks(
        waypoints: List[Waypoint],
        threshold_deg: float = LANDMARK_THRESHOLD_DEG
    ) -> List[Waypoint]:
        """Rename waypoints lying near a known maritime landmark.

        Every landmark is checked in table order, so when several are within
        the threshold the last one wins.
        """
        for waypoint in waypoints:
            for name, (lat, lon) in MARITIME_LANDMARKS.items():
                if planar_distance_deg(waypoint.coordinate, Coordinate(lat, lon)) < threshold_deg:
                    logger.debug(f"Waypoint {waypoint.coordinate.label()} is near {name}")
                    waypoint.name = name
        return waypoints
