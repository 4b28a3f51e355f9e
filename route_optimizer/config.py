"""Configuration constants for maritime route optimization."""

# Geodesy
EARTH_RADIUS_KM = 6371
KM_TO_NAUTICAL_MILES = 0.539957
CO2_PER_TON_FUEL = 3.1  # metric tons of CO2 per metric ton of fuel burned

# Waypoint synthesis
MIN_INTERMEDIATE_WAYPOINTS = 2
MAX_INTERMEDIATE_WAYPOINTS = 5
WAYPOINT_JITTER_DEG = 2.5
LANDMARK_THRESHOLD_DEG = 5.0  # planar degrees, not projected

# Alternative routes
MIN_ALTERNATIVES = 2
MAX_ALTERNATIVES = 3

# Weather synthesis
LATITUDE_BIAS_SCALE = 3
SEVERITY_STEP = 2

# External services
OPENWEATHERMAP_URL = 'https://api.openweathermap.org'
FORECAST_DAYS = 5
REQUEST_TIMEOUT_SECONDS = 10
DEFAULT_NARRATION_MODEL = 'gpt-4o-mini'

# Cache lifetimes
ROUTE_CACHE_TTL_SECONDS = 60 * 60
WEATHER_CACHE_TTL_SECONDS = 30 * 60

# Environment variables, read when clients and caches are constructed
ENV_OPENWEATHERMAP_API_KEY = 'OPENWEATHERMAP_API_KEY'
ENV_NARRATION_MODEL = 'ROUTE_OPTIMIZER_MODEL'
ENV_ROUTE_CACHE_TTL = 'ROUTE_CACHE_TTL_SECONDS'
ENV_WEATHER_CACHE_TTL = 'WEATHER_CACHE_TTL_SECONDS'
