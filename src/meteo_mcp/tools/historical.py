"""Historical and climate tool adapters."""
from __future__ import annotations

from typing import Any, Dict

from .base import BaseTool
from .schemas import ArchiveParams, ClimateParams


class WeatherArchiveTool(BaseTool):
    name = "weather_archive"
    description = "Get historical weather data from the ERA5 reanalysis (1940 to present) for a date range."
    params_model = ArchiveParams

    async def run(self, params: ArchiveParams) -> Dict[str, Any]:
        return await self.client.get_archive(params)


class ClimateProjectionTool(BaseTool):
    name = "climate_projection"
    description = "Get daily climate change projections (1950 to 2050) from downscaled CMIP6 models."
    params_model = ClimateParams

    async def run(self, params: ClimateParams) -> Dict[str, Any]:
        return await self.client.get_climate(params)


__all__ = ["WeatherArchiveTool", "ClimateProjectionTool"]
