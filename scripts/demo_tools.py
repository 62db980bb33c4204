"""Demonstrate executing tools via the registry against the live API."""
from __future__ import annotations

import asyncio

from meteo_mcp.tools import ToolRegistry


async def run_demo() -> None:
    registry = ToolRegistry.default()
    try:
        print("Available tools:", ", ".join(registry.names()))

        geocoding_result = await registry.handle_call("geocoding", {"name": "Berlin", "count": 1})
        print("Geocoding:", geocoding_result.text[:200])

        forecast_result = await registry.handle_call(
            "weather_forecast",
            {
                "latitude": 52.52,
                "longitude": 13.41,
                "hourly": "temperature_2m,precipitation",
                "forecast_days": 1,
            },
        )
        print("Forecast sample:", forecast_result.text[:200])

        elevation_result = await registry.handle_call(
            "elevation",
            {"latitude": [52.52, 46.95], "longitude": [13.41, 7.45]},
        )
        print("Elevation:", elevation_result.text)

        invalid_result = await registry.handle_call("weather_forecast", {"latitude": 123})
        print("Invalid call:", invalid_result.text)
    finally:
        await registry.aclose()


def main() -> None:
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
