"""Vessel speed and fuel factors and the metrics derived from them."""

import logging

from .config import CO2_PER_TON_FUEL
from .errors import UnknownVesselProfile
from .geo_utils import round_half_up
from .interfaces import RouteMetrics, VesselProfile
from .route_types import VesselSize, VesselType

logger = logging.getLogger(__name__)

# Service speed by vessel type (knots)
BASE_SPEED_KNOTS = {
    VesselType.CONTAINER: 20,
    VesselType.TANKER: 15,
    VesselType.BULK: 14,
    VesselType.CRUISE: 22,
    VesselType.FISHING: 12,
}
DEFAULT_SPEED_KNOTS = 15

SPEED_SIZE_MODIFIERS = {
    VesselSize.SMALL: 0.9,
    VesselSize.MEDIUM: 1.0,
    VesselSize.LARGE: 1.1,
    VesselSize.VLCC: 0.85,
}

# Fuel burn by vessel type (metric tons per nautical mile)
BASE_FUEL_TONS_PER_NM = {
    VesselType.CONTAINER: 0.3,
    VesselType.TANKER: 0.25,
    VesselType.BULK: 0.2,
    VesselType.CRUISE: 0.35,
    VesselType.FISHING: 0.1,
}
DEFAULT_FUEL_TONS_PER_NM = 0.25

FUEL_SIZE_MODIFIERS = {
    VesselSize.SMALL: 0.6,
    VesselSize.MEDIUM: 1.0,
    VesselSize.LARGE: 1.8,
    VesselSize.VLCC: 3.0,
}
DEFAULT_SIZE_MODIFIER = 1.0

def speed_factor_knots(vessel_type: str, vessel_size: str) -> float:
    """Cruising speed for a vessel class, falling back to defaults for unknown values."""
    base = BASE_SPEED_KNOTS.get(vessel_type, DEFAULT_SPEED_KNOTS)
    return base * SPEED_SIZE_MODIFIERS.get(vessel_size, DEFAULT_SIZE_MODIFIER)

def fuel_factor_tons_per_nm(vessel_type: str, vessel_size: str) -> float:
    """Fuel burn per nautical mile for a vessel class, falling back to defaults for unknown values."""
    base = BASE_FUEL_TONS_PER_NM.get(vessel_type, DEFAULT_FUEL_TONS_PER_NM)
    return base * FUEL_SIZE_MODIFIERS.get(vessel_size, DEFAULT_SIZE_MODIFIER)

def is_known_profile(vessel: VesselProfile) -> bool:
    return vessel.vessel_type in BASE_SPEED_KNOTS and vessel.vessel_size in SPEED_SIZE_MODIFIERS

def validate_vessel_profile(vessel: VesselProfile) -> VesselProfile:
    """Raise UnknownVesselProfile unless both type and size are in the tables."""
    if not is_known_profile(vessel):
        raise UnknownVesselProfile(vessel.vessel_type, vessel.vessel_size)
    return vessel

def derive_metrics(distance_nm: float, speed_factor: float, fuel_factor: float) -> RouteMetrics:
    """Derive duration, fuel consumption and CO2 emissions for a distance.

    Args:
        distance_nm: Route distance in nautical miles
        speed_factor: Vessel speed in knots, must be positive
        fuel_factor: Fuel burn in metric tons per nautical mile

    Returns:
        RouteMetrics with every value rounded half-up to an integer
    """
    if speed_factor <= 0:
        raise ValueError(f"Speed factor must be positive, got {speed_factor}")

    fuel = round_half_up(distance_nm * fuel_factor)
    metrics = RouteMetrics(
        distance_nm=round_half_up(distance_nm),
        duration_hours=round_half_up(distance_nm / speed_factor),
        fuel_consumption_mt=fuel,
        co2_emissions_mt=round_half_up(fuel * CO2_PER_TON_FUEL),
    )
    logger.debug(f"Derived metrics {metrics} (speed {speed_factor}kn, fuel {fuel_factor}t/nm)")
    return metrics
