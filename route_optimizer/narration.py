"""Narrative route and weather analysis from a text generation model."""

import os
import logging
from datetime import datetime, timezone
from typing import List, Optional

from autogen_agentchat.agents import AssistantAgent
from autogen_core.models import ChatCompletionClient
from autogen_ext.models.openai import AzureOpenAIChatCompletionClient, OpenAIChatCompletionClient

from .config import DEFAULT_NARRATION_MODEL, ENV_NARRATION_MODEL
from .errors import NarrationError
from .interfaces import RouteResult, WeatherObservation

logger = logging.getLogger(__name__)

FALLBACK_ROUTE_ANALYSIS = "Unable to generate route analysis. Please try again later."

WIND_DIRECTIONS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

def create_model_client(model: Optional[str] = None) -> ChatCompletionClient:
    """Create the chat completion client, Azure when an Azure endpoint is configured."""
    model = model or os.getenv(ENV_NARRATION_MODEL, DEFAULT_NARRATION_MODEL)
    logger.debug(f"Creating chat completion client for {model}")
    if os.getenv("AZURE_OPENAI_ENDPOINT"):
        return AzureOpenAIChatCompletionClient(
            model=model,
            azure_deployment=model,
        )
    return OpenAIChatCompletionClient(model=model)

class RouteNarrator:
    """Generates narrative text for a prompt using an assistant agent."""

    def __init__(self, model_client: Optional[ChatCompletionClient] = None):
        self._model_client = model_client

    @property
    def model_client(self) -> ChatCompletionClient:
        if self._model_client is None:
            self._model_client = create_model_client()
        return self._model_client

    async def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Raises:
            NarrationError: the model call failed or returned no text
        """
        # A fresh agent per prompt keeps requests from sharing chat history
        agent = AssistantAgent(
            name="MaritimeAnalyst",
            model_client=self.model_client,
            system_message="You are a maritime route optimization and weather expert. Use maritime terminology.",
        )
        try:
            result = await agent.run(task=prompt)
        except Exception as e:
            logger.error(f"Error generating narration: {str(e)}")
            raise NarrationError(str(e)) from e

        text = result.messages[-1].content if result.messages else None
        if not isinstance(text, str) or not text.strip():
            raise NarrationError("Model returned no text")
        return text

    async def close(self) -> None:
        if self._model_client is not None:
            await self._model_client.close()

def format_duration(hours: int) -> str:
    return f"{hours // 24} days {hours % 24} hours"

def build_route_prompt(route: RouteResult) -> str:
    """Render the analysis prompt for a computed route."""
    metrics = route.metrics
    alternatives = "\n".join(
        f"- {alt.name}: Distance {alt.metrics.distance_nm} nm, Duration {format_duration(alt.metrics.duration_hours)}, "
        f"Fuel {alt.metrics.fuel_consumption_mt} mt, Weather Risk: {alt.weather_risk}"
        for alt in route.alternatives
    )
    weather = "\n".join(
        f"- Point {i}: {sample.conditions}, Wind {sample.wind_speed_knots} knots, "
        f"Waves {sample.wave_height_m}m, Visibility {sample.visibility}"
        for i, sample in enumerate(route.weather, start=1)
    )

    return f"""Analyze the following maritime route data:

Route: {route.origin_name} to {route.destination_name}

Optimized Route Details:
- Distance: {metrics.distance_nm} nautical miles
- Duration: {format_duration(metrics.duration_hours)}
- Fuel Consumption: {metrics.fuel_consumption_mt} metric tons
- CO2 Emissions: {metrics.co2_emissions_mt} metric tons

Alternative Routes:
{alternatives}

Weather Conditions Along Route:
{weather}

Provide a detailed analysis of this maritime route, including:
1. Overall assessment of the optimized route
2. Key advantages compared to alternatives
3. Weather and navigational challenges to be aware of
4. Recommendations for the captain and crew
5. Fuel efficiency and environmental considerations

Format your response in clear paragraphs."""

def wind_direction(degrees: Optional[float]) -> str:
    """Compass point (8-wind) for a wind bearing."""
    if degrees is None:
        return "variable directions"
    return WIND_DIRECTIONS[int((degrees / 45) + 0.5) % 8]

def weekday(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%A")

def build_weather_prompt(location: str, observations: List[WeatherObservation], query: Optional[str] = None) -> str:
    """Render the analysis prompt for current conditions and forecast."""
    current, forecast = observations[0], observations[1:]
    days = "; ".join(
        f"{weekday(day.timestamp)[:3]}: {day.temperature_c:.1f}°C, {day.conditions}, "
        f"wind {day.wind_speed_ms:.1f} m/s from {wind_direction(day.wind_deg)}"
        for day in forecast
    )
    focus = f"Specifically address: {query}" if query else "Provide a maritime-focused analysis of these conditions."

    return f"""Analyze the following maritime weather data for {location}:

Current conditions: {current.temperature_c:.1f}°C, {current.description}, wind {current.wind_speed_ms:.1f} m/s from {wind_direction(current.wind_deg)}

{len(forecast)}-day forecast: {days}

{focus}

Provide a concise analysis highlighting risks or favorable conditions for sea travel, considering wave height, visibility and navigation challenges."""

def build_weather_fallback(location: str, observations: List[WeatherObservation], query: Optional[str] = None) -> str:
    """Rule-based weather summary used when no narration is available."""
    current, forecast = observations[0], observations[1:]
    conditions = current.conditions.lower()

    lines = [
        f"Current conditions at {location}: {current.temperature_c:.1f}°C, {current.conditions}, "
        f"with winds at {current.wind_speed_ms:.1f} m/s from the {wind_direction(current.wind_deg)}.",
        "",
        f"{len(forecast)}-day forecast summary:",
    ]
    for day in forecast:
        lines.append(f"- {weekday(day.timestamp)}: {day.temperature_c:.1f}°C, {day.conditions}, "
                     f"winds at {day.wind_speed_ms:.1f} m/s")

    lines += ["", "Maritime assessment:"]
    if current.wind_speed_ms > 10:
        lines.append("- Current wind conditions may create moderate sea states with waves potentially reaching 2-3 meters.")
    elif current.wind_speed_ms > 5:
        lines.append("- Light to moderate winds should create relatively calm sea conditions with waves under 1.5 meters.")
    else:
        lines.append("- Light winds should result in calm seas with minimal wave activity.")

    if "rain" in conditions or "shower" in conditions:
        lines.append("- Precipitation may reduce visibility. Maintain proper lookout and use radar when necessary.")
    elif "fog" in conditions or "mist" in conditions:
        lines.append("- Reduced visibility conditions. Use fog signals and maintain slow, safe speed.")
    elif "clear" in conditions or "sun" in conditions:
        lines.append("- Good visibility conditions should allow for optimal navigation.")

    if query:
        lines.append("")
        lines.append(_answer_query(query.lower(), forecast))

    return "\n".join(lines).rstrip()

def _answer_query(query: str, forecast: List[WeatherObservation]) -> str:
    if "depart" in query or "when" in query:
        if not forecast:
            return ""
        # Prefer light wind, then clear skies
        best = max(forecast, key=lambda day: -day.wind_speed_ms + (5 if "clear" in day.conditions.lower() else 0))
        return (f"Regarding your question about departure timing: {weekday(best.timestamp)} appears to offer "
                f"the most favorable conditions with {best.temperature_c:.1f}°C and {best.conditions.lower()} conditions.")

    if "risk" in query or "danger" in query:
        windy = [weekday(day.timestamp) for day in forecast if day.wind_speed_ms > 10]
        if windy:
            return (f"Regarding your question about risks: Be cautious on {', '.join(windy)} "
                    "due to higher wind conditions that may create challenging sea states.")
        return ("Regarding your question about risks: No significant weather risks identified in the forecast "
                "period, but always maintain standard maritime safety practices.")

    return ""
