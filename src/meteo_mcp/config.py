"""Configuration helpers for the Open-Meteo MCP server."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class OpenMeteoConfig:
    """Base URLs of the Open-Meteo API hosts.

    Each host can be pointed elsewhere (a self-hosted instance, a commercial
    ``customer-`` endpoint) through its own environment variable.
    """

    api_url: str = "https://api.open-meteo.com"
    archive_url: str = "https://archive-api.open-meteo.com"
    air_quality_url: str = "https://air-quality-api.open-meteo.com"
    marine_url: str = "https://marine-api.open-meteo.com"
    flood_url: str = "https://flood-api.open-meteo.com"
    seasonal_url: str = "https://seasonal-api.open-meteo.com"
    climate_url: str = "https://climate-api.open-meteo.com"
    ensemble_url: str = "https://ensemble-api.open-meteo.com"
    geocoding_url: str = "https://geocoding-api.open-meteo.com"

    @classmethod
    def from_env(cls) -> "OpenMeteoConfig":
        """Build config using environment variables with sane defaults."""

        return cls(
            api_url=os.getenv("OPEN_METEO_API_URL") or cls.api_url,
            archive_url=os.getenv("OPEN_METEO_ARCHIVE_API_URL") or cls.archive_url,
            air_quality_url=os.getenv("OPEN_METEO_AIR_QUALITY_API_URL") or cls.air_quality_url,
            marine_url=os.getenv("OPEN_METEO_MARINE_API_URL") or cls.marine_url,
            flood_url=os.getenv("OPEN_METEO_FLOOD_API_URL") or cls.flood_url,
            seasonal_url=os.getenv("OPEN_METEO_SEASONAL_API_URL") or cls.seasonal_url,
            climate_url=os.getenv("OPEN_METEO_CLIMATE_API_URL") or cls.climate_url,
            ensemble_url=os.getenv("OPEN_METEO_ENSEMBLE_API_URL") or cls.ensemble_url,
            geocoding_url=os.getenv("OPEN_METEO_GEOCODING_API_URL") or cls.geocoding_url,
        )


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the protocol server process."""

    name: str = "open-meteo-mcp-server"
    version: str = "1.0.0"
    log_level: str = "INFO"
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            log_level=(os.getenv("OPEN_METEO_MCP_LOG_LEVEL") or cls.log_level).upper(),
            http_host=os.getenv("OPEN_METEO_MCP_HOST") or cls.http_host,
            http_port=int(os.getenv("OPEN_METEO_MCP_PORT") or cls.http_port),
        )


__all__ = ["OpenMeteoConfig", "ServerConfig"]
