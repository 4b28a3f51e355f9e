"""Exceptions raised by the route optimizer."""


class RouteOptimizerError(Exception):
    """Base class for route optimizer errors."""


class InvalidCoordinate(RouteOptimizerError, ValueError):
    """Latitude or longitude outside its valid range."""


class UnresolvedLocation(RouteOptimizerError):
    """A place name matched no gazetteer entry and is not a coordinate."""

    def __init__(self, place_name: str):
        super().__init__(f"Location not found: {place_name}")
        self.place_name = place_name


class UnknownVesselProfile(RouteOptimizerError):
    """Vessel type or size missing from the factor tables."""

    def __init__(self, vessel_type: str, vessel_size: str):
        super().__init__(f"Unknown vessel profile: type={vessel_type!r}, size={vessel_size!r}")
        self.vessel_type = vessel_type
        self.vessel_size = vessel_size


class NarrationError(RouteOptimizerError):
    """The text generation service failed to produce a narrative."""


class WeatherServiceError(RouteOptimizerError):
    """The weather data service returned an error."""


class ConfigurationError(RouteOptimizerError):
    """A required setting (API key, endpoint) is missing."""
