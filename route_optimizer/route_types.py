"""Type constants for vessels, route profiles and weather risk."""

class VesselType:
    """Constants for vessel types."""
    CONTAINER = "container"
    TANKER = "tanker"
    BULK = "bulk"
    CRUISE = "cruise"
    FISHING = "fishing"


class VesselSize:
    """Constants for vessel sizes."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    VLCC = "vlcc"


class RouteProfile:
    """Constants for alternative route profile ids."""
    FASTEST = "fastest"
    ECO = "eco"
    TRADITIONAL = "traditional"
    NORTHERN = "northern"


class WeatherRisk:
    """Constants for weather risk levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
