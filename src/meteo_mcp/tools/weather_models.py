"""Per-model forecast tool adapters.

Each tool hits the dedicated endpoint of one national weather service and
accepts the same parameters as ``weather_forecast``.
"""
from __future__ import annotations

from typing import Any, Dict

from .base import BaseTool
from .schemas import ForecastParams


class DwdIconForecastTool(BaseTool):
    name = "dwd_icon_forecast"
    description = "Get forecast data from the DWD ICON model (Germany), high resolution over Europe."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_dwd_icon(params)


class GfsForecastTool(BaseTool):
    name = "gfs_forecast"
    description = "Get forecast data from the NOAA GFS model, global coverage with HRRR detail over North America."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_gfs(params)


class MeteoFranceForecastTool(BaseTool):
    name = "meteofrance_forecast"
    description = "Get forecast data from the Meteo-France AROME and ARPEGE models for France and Europe."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_meteofrance(params)


class EcmwfForecastTool(BaseTool):
    name = "ecmwf_forecast"
    description = "Get forecast data from the ECMWF IFS model (European Centre for Medium-Range Weather Forecasts)."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_ecmwf(params)


class JmaForecastTool(BaseTool):
    name = "jma_forecast"
    description = "Get forecast data from the Japan Meteorological Agency, high resolution over Japan and East Asia."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_jma(params)


class MetnoForecastTool(BaseTool):
    name = "metno_forecast"
    description = "Get forecast data from MET Norway, high resolution over the Nordic countries."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_metno(params)


class GemForecastTool(BaseTool):
    name = "gem_forecast"
    description = "Get forecast data from the Canadian GEM model (Environment and Climate Change Canada)."
    params_model = ForecastParams

    async def run(self, params: ForecastParams) -> Dict[str, Any]:
        return await self.client.get_gem(params)


__all__ = [
    "DwdIconForecastTool",
    "GfsForecastTool",
    "MeteoFranceForecastTool",
    "EcmwfForecastTool",
    "JmaForecastTool",
    "MetnoForecastTool",
    "GemForecastTool",
]
