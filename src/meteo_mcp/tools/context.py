"""Shared context for tool execution."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from meteo_mcp.clients import OpenMeteoClient
from meteo_mcp.config import OpenMeteoConfig


@dataclass
class ToolContext:
    config: OpenMeteoConfig | None = None
    http_client: httpx.AsyncClient | None = None
    client: OpenMeteoClient | None = None

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = OpenMeteoConfig.from_env()
        if self.client is None:
            self.client = OpenMeteoClient(self.config, http_client=self.http_client)

    async def aclose(self) -> None:
        if self.client:
            await self.client.aclose()


__all__ = ["ToolContext"]
