"""Async client for the Open-Meteo REST API."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from meteo_mcp.config import OpenMeteoConfig

if TYPE_CHECKING:  # pragma: no cover
    from meteo_mcp.tools.schemas import (
        AirQualityParams,
        ArchiveParams,
        BaseParams,
        ClimateParams,
        ElevationParams,
        EnsembleParams,
        FloodParams,
        ForecastParams,
        GeocodingParams,
        MarineParams,
    )

logger = logging.getLogger(__name__)


class RemoteAPIError(RuntimeError):
    """Raised when Open-Meteo answers with a non-2xx status or cannot be reached."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class OpenMeteoClient:
    """Thin wrapper over the Open-Meteo HTTP endpoints.

    Every public coroutine takes an already validated parameter model and
    returns the decoded JSON body untouched. All calls share one
    ``httpx.AsyncClient`` connection pool.
    """

    def __init__(
        self,
        config: Optional[OpenMeteoConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or OpenMeteoConfig.from_env()
        self._client = http_client or httpx.AsyncClient()

    async def get_forecast(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/forecast", params)

    async def get_archive(self, params: "ArchiveParams") -> Dict[str, Any]:
        return await self._get(self.config.archive_url, "/v1/archive", params)

    async def get_air_quality(self, params: "AirQualityParams") -> Dict[str, Any]:
        return await self._get(self.config.air_quality_url, "/v1/air-quality", params)

    async def get_marine(self, params: "MarineParams") -> Dict[str, Any]:
        return await self._get(self.config.marine_url, "/v1/marine", params)

    async def get_elevation(self, params: "ElevationParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/elevation", params)

    async def get_dwd_icon(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/dwd-icon", params)

    async def get_gfs(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/gfs", params)

    async def get_meteofrance(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/meteofrance", params)

    async def get_ecmwf(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/ecmwf", params)

    async def get_jma(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/jma", params)

    async def get_metno(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/metno", params)

    async def get_gem(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.api_url, "/v1/gem", params)

    async def get_flood(self, params: "FloodParams") -> Dict[str, Any]:
        return await self._get(self.config.flood_url, "/v1/flood", params)

    async def get_seasonal(self, params: "ForecastParams") -> Dict[str, Any]:
        return await self._get(self.config.seasonal_url, "/v1/seasonal", params)

    async def get_climate(self, params: "ClimateParams") -> Dict[str, Any]:
        return await self._get(self.config.climate_url, "/v1/climate", params)

    async def get_ensemble(self, params: "EnsembleParams") -> Dict[str, Any]:
        return await self._get(self.config.ensemble_url, "/v1/ensemble", params)

    async def get_geocoding(self, params: "GeocodingParams") -> Dict[str, Any]:
        return await self._get(self.config.geocoding_url, "/v1/search", params)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, base_url: str, path: str, params: "BaseParams") -> Dict[str, Any]:
        url = f"{base_url.rstrip('/')}{path}"
        query = params.to_query()
        logger.debug("GET %s %s", url, query)
        try:
            response = await self._client.get(url, params=query)
        except httpx.HTTPError as exc:
            raise RemoteAPIError(f"Request to {url} failed: {exc}") from exc
        self._raise_for_error(response)
        return response.json()

    def _raise_for_error(self, response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = self._error_detail(exc.response)
            raise RemoteAPIError(
                f"Open-Meteo request failed with HTTP {status}: {detail}",
                status_code=status,
                body=exc.response.text,
            ) from exc

    def _error_detail(self, response: httpx.Response) -> str:
        """Prefer the ``reason`` of Open-Meteo's JSON error object over the raw body."""

        text = response.text.strip()
        try:
            body = response.json()
        except ValueError:
            return text or response.reason_phrase
        if isinstance(body, dict) and body.get("reason"):
            return str(body["reason"])
        return text or response.reason_phrase


__all__ = ["OpenMeteoClient", "RemoteAPIError"]
