"""Air quality, marine and flood tool adapters."""
from __future__ import annotations

from typing import Any, Dict

from .base import BaseTool
from .schemas import AirQualityParams, FloodParams, MarineParams


class AirQualityTool(BaseTool):
    name = "air_quality"
    description = "Get air quality forecasts: particulate matter, gases, pollen and European/US AQI indices."
    params_model = AirQualityParams

    async def run(self, params: AirQualityParams) -> Dict[str, Any]:
        return await self.client.get_air_quality(params)


class MarineWeatherTool(BaseTool):
    name = "marine_weather"
    description = "Get marine forecasts: wave height, direction and period, swell, ocean currents and sea temperature."
    params_model = MarineParams

    async def run(self, params: MarineParams) -> Dict[str, Any]:
        return await self.client.get_marine(params)


class FloodForecastTool(BaseTool):
    name = "flood_forecast"
    description = "Get river discharge forecasts from the GloFAS flood model, optionally with all ensemble members."
    params_model = FloodParams

    async def run(self, params: FloodParams) -> Dict[str, Any]:
        return await self.client.get_flood(params)


__all__ = ["AirQualityTool", "MarineWeatherTool", "FloodForecastTool"]
