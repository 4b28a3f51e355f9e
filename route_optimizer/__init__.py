"""Maritime route optimization package."""

from .interfaces import (
    AlternativeRoute, Coordinate, RouteMetrics, RouteResult, VesselProfile,
    Waypoint, WeatherObservation, WeatherSample, Resolved, Unresolved
)
from .errors import (
    RouteOptimizerError, UnresolvedLocation, UnknownVesselProfile, InvalidCoordinate,
    NarrationError, WeatherServiceError, ConfigurationError
)
from .route_types import VesselType, VesselSize, RouteProfile, WeatherRisk
from .gazetteer import Gazetteer, resolve_coordinate
from .geo_utils import great_circle_distance_nm
from .vessel_profiles import speed_factor_knots, fuel_factor_tons_per_nm, derive_metrics
from .waypoint_calculator import WaypointCalculator
from .alternatives import generate_alternatives
from .weather_synthesizer import synthesize_weather
from .route_synthesizer import RouteSynthesizer
from .cache import TTLCache
from .narration import RouteNarrator
from .weather_service import OpenWeatherMapClient
from .service import RouteOptimizationService, WeatherAnalysisService

__all__ = [
    'AlternativeRoute', 'Coordinate', 'RouteMetrics', 'RouteResult', 'VesselProfile',
    'Waypoint', 'WeatherObservation', 'WeatherSample', 'Resolved', 'Unresolved',
    'RouteOptimizerError', 'UnresolvedLocation', 'UnknownVesselProfile', 'InvalidCoordinate',
    'NarrationError', 'WeatherServiceError', 'ConfigurationError',
    'VesselType', 'VesselSize', 'RouteProfile', 'WeatherRisk',
    'Gazetteer', 'resolve_coordinate', 'great_circle_distance_nm',
    'speed_factor_knots', 'fuel_factor_tons_per_nm', 'derive_metrics',
    'WaypointCalculator', 'generate_alternatives', 'synthesize_weather', 'RouteSynthesizer',
    'TTLCache', 'RouteNarrator', 'OpenWeatherMapClient',
    'RouteOptimizationService', 'WeatherAnalysisService'
]
