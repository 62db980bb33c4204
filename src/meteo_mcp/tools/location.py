"""Elevation and geocoding tool adapters."""
from __future__ import annotations

from typing import Any, Dict

from .base import BaseTool
from .schemas import ElevationParams, GeocodingParams


class ElevationTool(BaseTool):
    name = "elevation"
    description = "Get terrain elevation in metres for up to 100 coordinates (90 m digital elevation model)."
    params_model = ElevationParams

    async def run(self, params: ElevationParams) -> Dict[str, Any]:
        return await self.client.get_elevation(params)


class GeocodingTool(BaseTool):
    name = "geocoding"
    description = (
        "Search locations worldwide by place name or postal code. "
        "Returns coordinates, elevation, timezone and administrative areas."
    )
    params_model = GeocodingParams

    async def run(self, params: GeocodingParams) -> Dict[str, Any]:
        return await self.client.get_geocoding(params)


__all__ = ["ElevationTool", "GeocodingTool"]
