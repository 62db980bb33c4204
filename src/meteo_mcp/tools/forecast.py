"""Forecast tool adapters."""
from __future__ import annotations

from typing import Any, Dict

from .base import BaseTool
from .schemas import EnsembleParams, ForecastParams


class WeatherForecastTool(BaseTool):
    name = "weather_forecast"
    description = (
        "Get weather forecast data for coordinates using the Open-Meteo API. "
        "Supports current conditions plus hourly and daily variables for up to 16 days."
    )
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_forecast(params)


class SeasonalForecastTool(BaseTool):
    name = "seasonal_forecast"
    description = (
        "Get seasonal forecast data from the long-range ensemble system. "
        "Accepts the weather_forecast parameters, including forecast_days up to 16."
    )
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_seasonal(params)


class EnsembleForecastTool(BaseTool):
    name = "ensemble_forecast"
    description = (
        "Get ensemble forecasts that show forecast uncertainty through multiple model members. "
        "At least one ensemble model must be selected."
    )
    params_model = EnsembleParams

    async def run(self, params: EnsembleParams) -> Dict[str, Any]:
        return await self.client.get_ensemble(params)


__all__ = ["WeatherForecastTool", "SeasonalForecastTool", "EnsembleForecastTool"]
