"""Tool adapter exports."""

from .base import (
    BaseTool,
    TextBlock,
    ToolDescriptor,
    ToolError,
    ToolResult,
    UnexpectedError,
    UnknownOperationError,
    ValidationError,
)
from .context import ToolContext
from .environment import AirQualityTool, FloodForecastTool, MarineWeatherTool
from .forecast import EnsembleForecastTool, SeasonalForecastTool, WeatherForecastTool
from .historical import ClimateProjectionTool, WeatherArchiveTool
from .location import ElevationTool, GeocodingTool
from .registry import ToolRegistry
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

__all__ = [
    "BaseTool",
    "TextBlock",
    "ToolDescriptor",
    "ToolError",
    "ToolResult",
    "UnexpectedError",
    "UnknownOperationError",
    "ValidationError",
    "ToolContext",
    "ToolRegistry",
    "validate_arguments",
    "WeatherForecastTool",
    "WeatherArchiveTool",
    "AirQualityTool",
    "MarineWeatherTool",
    "ElevationTool",
    "DwdIconForecastTool",
    "GfsForecastTool",
    "MeteoFranceForecastTool",
    "EcmwfForecastTool",
    "JmaForecastTool",
    "MetnoForecastTool",
    "GemForecastTool",
    "FloodForecastTool",
    "SeasonalForecastTool",
    "ClimateProjectionTool",
    "EnsembleForecastTool",
    "GeocodingTool",
]
