"""Tool registry and call dispatcher."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from meteo_mcp.clients import RemoteAPIError

from .base import BaseTool, ToolDescriptor, ToolError, ToolResult, UnexpectedError, UnknownOperationError
from .context import ToolContext
from .environment import AirQualityTool, FloodForecastTool, MarineWeatherTool
from .forecast import EnsembleForecastTool, SeasonalForecastTool, WeatherForecastTool
from .historical import ClimateProjectionTool, WeatherArchiveTool
from .location import ElevationTool, GeocodingTool
from .schemas import validate_arguments
from .weather_models import (
    DwdIconForecastTool,
    EcmwfForecastTool,
    GemForecastTool,
    GfsForecastTool,
    JmaForecastTool,
    MeteoFranceForecastTool,
    MetnoForecastTool,
)

logger = logging.getLogger(__name__)


class ToolRegistry:
    def __init__(self, context: ToolContext | None = None) -> None:
        self.context = context or ToolContext()
        self._tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> BaseTool:
        if name not in self._tools:
            raise UnknownOperationError(name)
        return self._tools[name]

    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[ToolDescriptor]:
        return [tool.describe() for tool in self._tools.values()]

    async def handle_call(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        """Validate and execute one tool call.

        Never raises: unknown tools, invalid arguments, API failures and
        defects all come back as a ``ToolResult`` whose single text block
        starts with ``Error:``.
        """

        logger.debug("Tool call %s arguments=%s", name, arguments)
        try:
            tool = self.get(name)
            params = validate_arguments(tool.params_model, arguments)
            data = await tool.run(params)
            result = ToolResult.from_data(data)
        except (ToolError, RemoteAPIError) as exc:
            logger.warning("Tool call %s failed: %s", name, exc)
            return ToolResult.from_error(str(exc))
        except Exception:
            logger.exception("Unexpected failure in tool call %s", name)
            return ToolResult.from_error(str(UnexpectedError(name)))
        logger.debug("Tool call %s succeeded", name)
        return result

    async def aclose(self) -> None:
        await self.context.aclose()

    @classmethod
    def default(cls, context: ToolContext | None = None) -> "ToolRegistry":
        context = context or ToolContext()
        registry = cls(context=context)
        for tool in (
            WeatherForecastTool(context),
            WeatherArchiveTool(context),
            AirQualityTool(context),
            MarineWeatherTool(context),
            ElevationTool(context),
            DwdIconForecastTool(context),
            GfsForecastTool(context),
            MeteoFranceForecastTool(context),
            EcmwfForecastTool(context),
            JmaForecastTool(context),
            MetnoForecastTool(context),
            GemForecastTool(context),
            FloodForecastTool(context),
            SeasonalForecastTool(context),
            ClimateProjectionTool(context),
            EnsembleForecastTool(context),
            GeocodingTool(context),
        ):
            registry.register(tool)
        return registry


__all__ = ["ToolRegistry"]
