"""Type definitions and interfaces for maritime route optimization."""

from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field

from .errors import InvalidCoordinate

@dataclass(frozen=True)
class Coordinate:
    """A position in decimal degrees."""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise InvalidCoordinate(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not (-180 <= self.longitude <= 180):
            raise InvalidCoordinate(f"Longitude must be between -180 and 180, got {self.longitude}")

    def label(self) -> str:
        return f"{self.latitude},{self.longitude}"

@dataclass(frozen=True)
class VesselProfile:
    """Vessel class used to look up speed and fuel factors."""
    vessel_type: str
    vessel_size: str

@dataclass(frozen=True)
class RouteMetrics:
    """Distance, duration, fuel and emissions for a route."""
    distance_nm: int
    duration_hours: int
    fuel_consumption_mt: int
    co2_emissions_mt: int

@dataclass
class Waypoint:
    """A named or unnamed point along a route."""
    coordinate: Coordinate
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'lat': self.coordinate.latitude, 'lng': self.coordinate.longitude}
        if self.name is not None:
            data['name'] = self.name
        return data

@dataclass(frozen=True)
class AlternativeRoute:
    """A route variant derived from the primary metrics."""
    id: str
    name: str
    metrics: RouteMetrics
    weather_risk: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'distance': self.metrics.distance_nm,
            'duration': self.metrics.duration_hours,
            'fuelConsumption': self.metrics.fuel_consumption_mt,
            'co2Emissions': self.metrics.co2_emissions_mt,
            'weatherRisk': self.weather_risk,
        }

@dataclass(frozen=True)
class WeatherSample:
    """Synthesized weather at one waypoint."""
    location: Coordinate
    conditions: str
    wind_speed_knots: int
    wave_height_m: float
    visibility: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.location.label(),
            'conditions': self.conditions,
            'windSpeed': self.wind_speed_knots,
            'waveHeight': self.wave_height_m,
            'visibility': self.visibility,
        }

@dataclass
class RouteResult:
    """Everything computed for one origin/destination request."""
    origin_name: str
    destination_name: str
    origin: Coordinate
    destination: Coordinate
    waypoints: List[Waypoint]
    metrics: RouteMetrics
    alternatives: List[AlternativeRoute] = field(default_factory=list)
    weather: List[WeatherSample] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape rendered by the dashboard."""
        return {
            'origin': self.origin_name,
            'destination': self.destination_name,
            'originCoordinate': {'lat': self.origin.latitude, 'lng': self.origin.longitude},
            'destinationCoordinate': {'lat': self.destination.latitude, 'lng': self.destination.longitude},
            'optimizedRoute': {
                'waypoints': [wp.to_dict() for wp in self.waypoints],
                'distance': self.metrics.distance_nm,
                'duration': self.metrics.duration_hours,
                'fuelConsumption': self.metrics.fuel_consumption_mt,
                'co2Emissions': self.metrics.co2_emissions_mt,
            },
            'alternatives': [alt.to_dict() for alt in self.alternatives],
            'weatherConditions': [sample.to_dict() for sample in self.weather],
        }

@dataclass
class WeatherObservation:
    """A current or forecast reading from the weather data service."""
    timestamp: int
    temperature_c: float
    humidity: float
    wind_speed_ms: float
    wind_deg: Optional[float]
    conditions: str
    description: str
    is_forecast: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'dt': self.timestamp,
            'temp': self.temperature_c,
            'humidity': self.humidity,
            'wind_speed': self.wind_speed_ms,
            'wind_deg': self.wind_deg,
            'weather': [{'main': self.conditions, 'description': self.description}],
        }

@dataclass(frozen=True)
class Resolved:
    """A place name that matched a known location."""
    coordinate: Coordinate
    matched_key: str

@dataclass(frozen=True)
class Unresolved:
    """A place name that matched nothing."""
    place_name: str

LocationResult = Union[Resolved, Unresolved]
