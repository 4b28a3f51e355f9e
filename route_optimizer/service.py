"""Request handlers for route optimization and weather analysis.

Both services treat the narrator and cache as optional enrichments: a
failure in either is logged and the request still returns its data.
"""

import os
import logging
import random
from typing import Any, Dict, Optional

from .cache import TTLCache
from .config import (
    ENV_ROUTE_CACHE_TTL,
    ENV_WEATHER_CACHE_TTL,
    ROUTE_CACHE_TTL_SECONDS,
    WEATHER_CACHE_TTL_SECONDS,
)
from .interfaces import VesselProfile
from .narration import (
    FALLBACK_ROUTE_ANALYSIS,
    RouteNarrator,
    build_route_prompt,
    build_weather_fallback,
    build_weather_prompt,
)
from .route_synthesizer import RouteSynthesizer
from .weather_service import OpenWeatherMapClient

logger = logging.getLogger(__name__)

def route_cache_from_env() -> TTLCache:
    ttl = int(os.getenv(ENV_ROUTE_CACHE_TTL, ROUTE_CACHE_TTL_SECONDS))
    return TTLCache(ttl_seconds=ttl, name="route_cache")

def weather_cache_from_env() -> TTLCache:
    ttl = int(os.getenv(ENV_WEATHER_CACHE_TTL, WEATHER_CACHE_TTL_SECONDS))
    return TTLCache(ttl_seconds=ttl, name="weather_cache")

def _cache_get(cache: Optional[TTLCache], key: str) -> Optional[Dict[str, Any]]:
    if cache is None:
        return None
    try:
        return cache.get(key)
    except Exception as e:
        logger.warning(f"Error checking cache for {key}: {str(e)}")
        return None

def _cache_put(cache: Optional[TTLCache], key: str, blob: Dict[str, Any]) -> None:
    if cache is None:
        return
    try:
        cache.put(key, blob)
    except Exception as e:
        logger.warning(f"Error caching {key}: {str(e)}")

class RouteOptimizationService:
    """Computes, narrates and caches optimized routes."""

    def __init__(
        self,
        synthesizer: Optional[RouteSynthesizer] = None,
        narrator: Optional[RouteNarrator] = None,
        cache: Optional[TTLCache] = None,
        strict: bool = False
    ):
        self.synthesizer = synthesizer or RouteSynthesizer()
        self.narrator = narrator
        self.cache = cache
        self.strict = strict

    @staticmethod
    def cache_key(origin: str, destination: str, vessel_type: str, vessel_size: str) -> str:
        return f"route:{origin}:{destination}:{vessel_type}:{vessel_size}"

    async def optimize(
        self,
        origin: str,
        destination: str,
        vessel_type: str,
        vessel_size: str,
        random_source: Optional[random.Random] = None
    ) -> Dict[str, Any]:
        """Optimize a route and return the dashboard payload.

        Args:
            origin: Origin place name or "lat, lon"
            destination: Destination place name or "lat, lon"
            vessel_type: Vessel type, e.g. "container"
            vessel_size: Vessel size, e.g. "large"
            random_source: Random source for reproducible routes

        Returns:
            RouteResult.to_dict() with an added 'analysis' text
        """
        if not origin or not destination:
            raise ValueError("Origin and destination are required")

        key = self.cache_key(origin, destination, vessel_type, vessel_size)
        cached = _cache_get(self.cache, key)
        if cached is not None:
            logger.info(f"Returning cached route for {key}")
            return cached

        route = self.synthesizer.compute_route(
            origin, destination, VesselProfile(vessel_type, vessel_size),
            random_source=random_source, strict=self.strict,
        )
        payload = route.to_dict()
        payload['analysis'] = await self._narrate(build_route_prompt(route))

        _cache_put(self.cache, key, payload)
        return payload

    async def _narrate(self, prompt: str) -> str:
        if self.narrator is None:
            return FALLBACK_ROUTE_ANALYSIS
        try:
            return await self.narrator.generate(prompt)
        except Exception as e:
            logger.warning(f"Route narration failed, using fallback: {str(e)}")
            return FALLBACK_ROUTE_ANALYSIS

class WeatherAnalysisService:
    """Fetches, narrates and caches weather for a location."""

    def __init__(
        self,
        client: Optional[OpenWeatherMapClient] = None,
        narrator: Optional[RouteNarrator] = None,
        cache: Optional[TTLCache] = None
    ):
        self.client = client or OpenWeatherMapClient()
        self.narrator = narrator
        self.cache = cache

    @staticmethod
    def cache_key(location: str, query: Optional[str] = None) -> str:
        return f"weather:{location}:{query or 'default'}"

    async def analyze(self, location: str, query: Optional[str] = None) -> Dict[str, Any]:
        """Fetch weather for a location and describe it for mariners.

        Returns:
            Dictionary with 'weatherData' (location, current, forecast) and 'analysisText'
        """
        if not location:
            raise ValueError("Location is required")

        key = self.cache_key(location, query)
        cached = _cache_get(self.cache, key)
        if cached is not None:
            logger.info(f"Returning cached weather for {key}")
            return cached

        coordinate, name = self.client.resolve_location(location)
        observations = self.client.fetch_current_and_forecast(coordinate)

        analysis = None
        if self.narrator is not None:
            try:
                analysis = await self.narrator.generate(build_weather_prompt(name, observations, query))
            except Exception as e:
                logger.warning(f"Weather narration failed, using fallback: {str(e)}")
        if analysis is None:
            analysis = build_weather_fallback(name, observations, query)

        payload = {
            'weatherData': {
                'location': name,
                'current': observations[0].to_dict(),
                'forecast': [obs.to_dict() for obs in observations[1:]],
            },
            'analysisText': analysis,
        }
        _cache_put(self.cache, key, payload)
        return payload
