"""Weather data retrieval from OpenWeatherMap."""

import os
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import requests

from .config import ENV_OPENWEATHERMAP_API_KEY, FORECAST_DAYS, OPENWEATHERMAP_URL, REQUEST_TIMEOUT_SECONDS
from .errors import ConfigurationError, InvalidCoordinate, UnresolvedLocation, WeatherServiceError
from .interfaces import Coordinate, WeatherObservation
from .preprocessing import INVALID_FORMAT, parse_coordinates, split_route_text

logger = logging.getLogger(__name__)

class OpenWeatherMapClient:
    """Class to fetch current conditions and forecasts for a location."""

    def __init__(self, api_key: Optional[str] = None, base_url: str = OPENWEATHERMAP_URL):
        """Initialize the client.

        Args:
            api_key: OpenWeatherMap API key. If None, uses OPENWEATHERMAP_API_KEY.
            base_url: API root URL
        """
        self.api_key = api_key or os.getenv(ENV_OPENWEATHERMAP_API_KEY)
        self.base_url = base_url.rstrip('/')

    def _get(self, path: str, params: Dict) -> object:
        if not self.api_key:
            raise ConfigurationError("OpenWeatherMap API key is not configured")

        url = f"{self.base_url}{path}"
        logger.debug(f"Requesting {url} with {params}")

        try:
            response = requests.get(url, params={**params, 'appid': self.api_key}, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"OpenWeatherMap request to {path} failed: {str(e)}")
            raise WeatherServiceError(f"OpenWeatherMap API error: {str(e)}") from e

    def geocode(self, place_name: str) -> Coordinate:
        """Look up the coordinate of a place name.

        Raises:
            UnresolvedLocation: no match was returned
        """
        data = self._get('/geo/1.0/direct', {'q': place_name, 'limit': 1})
        if not data:
            raise UnresolvedLocation(place_name)
        return Coordinate(data[0]['lat'], data[0]['lon'])

    def resolve_location(self, location: str) -> Tuple[Coordinate, str]:
        """Resolve "lat, lon", "A to B" (first leg) or a place name.

        Returns:
            Tuple of (coordinate, display name)
        """
        parsed = parse_coordinates(location)
        if parsed.is_valid:
            return parsed.to_coordinate(), f"{parsed.latitude:.2f}, {parsed.longitude:.2f}"
        if parsed.error_message != INVALID_FORMAT:
            raise InvalidCoordinate(f"{location}: {parsed.error_message}")

        return self.geocode(split_route_text(location)), location

    def fetch_current_and_forecast(self, coordinate: Coordinate) -> List[WeatherObservation]:
        """Fetch current weather and a daily forecast.

        Args:
            coordinate: Location to query

        Returns:
            List of WeatherObservation: the current reading first, then one
            forecast reading per calendar day (UTC), at most FORECAST_DAYS
        """
        params = {'lat': coordinate.latitude, 'lon': coordinate.longitude, 'units': 'metric'}
        current = self._get('/data/2.5/weather', params)
        forecast = self._get('/data/2.5/forecast', params)

        try:
            observations = [self._parse_observation(current, is_forecast=False)]

            # The forecast comes in 3-hour steps; keep the first step of each day
            seen_days = set()
            for item in forecast.get('list', []):
                day = datetime.fromtimestamp(item['dt'], tz=timezone.utc).date()
                if day in seen_days:
                    continue
                seen_days.add(day)
                observations.append(self._parse_observation(item, is_forecast=True))
                if len(seen_days) >= FORECAST_DAYS:
                    break
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected OpenWeatherMap payload: {str(e)}")
            raise WeatherServiceError(f"Malformed OpenWeatherMap response: {str(e)}") from e

        logger.info(f"Fetched weather for {coordinate.label()}: {len(observations) - 1} forecast days")
        return observations

    @staticmethod
    def _parse_observation(item: Dict, is_forecast: bool) -> WeatherObservation:
        weather = (item.get('weather') or [{}])[0]
        wind = item.get('wind', {})
        return WeatherObservation(
            timestamp=item.get('dt', 0),
            temperature_c=item['main']['temp'],
            humidity=item['main']['humidity'],
            wind_speed_ms=wind.get('speed', 0.0),
            wind_deg=wind.get('deg'),
            conditions=weather.get('main', 'Unknown'),
            description=weather.get('description', ''),
            is_forecast=is_forecast,
        )
