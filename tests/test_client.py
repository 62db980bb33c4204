"""Tests for the Open-Meteo HTTP client."""

import httpx
import pytest

from meteo_mcp.clients import OpenMeteoClient, RemoteAPIError
from meteo_mcp.config import OpenMeteoConfig
from meteo_mcp.tools import validate_arguments
from meteo_mcp.tools.schemas import (
    AirQualityParams,
    ClimateParams,
    ElevationParams,
    EnsembleParams,
    FloodParams,
    ForecastParams,
    GeocodingParams,
    MarineParams,
)

BERLIN = {"latitude": 52.52, "longitude": 13.41}


def make_client(transport, config=None):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return OpenMeteoClient(config or OpenMeteoConfig(), http_client=http_client)


@pytest.mark.asyncio
async def test_forecast_builds_query_from_params(transport):
    client = make_client(transport)
    params = validate_arguments(ForecastParams, {**BERLIN, "hourly": ["temperature_2m", "rain"], "forecast_days": 3})

    await client.get_forecast(params)
    await client.aclose()

    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url.host == "api.open-meteo.com"
    assert request.url.path == "/v1/forecast"
    assert request.url.params["hourly"] == "temperature_2m,rain"
    assert request.url.params["forecast_days"] == "3"
    assert request.url.params["temperature_unit"] == "celsius"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, model, arguments, host, path",
    [
        ("get_air_quality", AirQualityParams, BERLIN, "air-quality-api.open-meteo.com", "/v1/air-quality"),
        ("get_marine", MarineParams, BERLIN, "marine-api.open-meteo.com", "/v1/marine"),
        ("get_flood", FloodParams, BERLIN, "flood-api.open-meteo.com", "/v1/flood"),
        ("get_seasonal", ForecastParams, BERLIN, "seasonal-api.open-meteo.com", "/v1/seasonal"),
        ("get_dwd_icon", ForecastParams, BERLIN, "api.open-meteo.com", "/v1/dwd-icon"),
        ("get_metno", ForecastParams, BERLIN, "api.open-meteo.com", "/v1/metno"),
        (
            "get_ensemble",
            EnsembleParams,
            {**BERLIN, "models": ["icon_seamless"]},
            "ensemble-api.open-meteo.com",
            "/v1/ensemble",
        ),
        (
            "get_climate",
            ClimateParams,
            {**BERLIN, "start_date": "2030-01-01", "end_date": "2030-01-31", "models": "EC_Earth3P_HR"},
            "climate-api.open-meteo.com",
            "/v1/climate",
        ),
        ("get_elevation", ElevationParams, BERLIN, "api.open-meteo.com", "/v1/elevation"),
        ("get_geocoding", GeocodingParams, {"name": "Berlin"}, "geocoding-api.open-meteo.com", "/v1/search"),
    ],
)
async def test_operations_use_their_own_host(transport, method, model, arguments, host, path):
    client = make_client(transport)

    await getattr(client, method)(validate_arguments(model, arguments))
    await client.aclose()

    assert len(transport.requests) == 1
    assert transport.requests[0].url.host == host
    assert transport.requests[0].url.path == path


@pytest.mark.asyncio
async def test_configured_base_url_is_used(transport):
    client = make_client(transport, OpenMeteoConfig(api_url="http://localhost:8080/"))

    await client.get_gfs(validate_arguments(ForecastParams, BERLIN))
    await client.aclose()

    assert str(transport.requests[0].url).startswith("http://localhost:8080/v1/gfs?")


@pytest.mark.asyncio
async def test_response_body_is_returned_unmodified(transport):
    body = {"latitude": 52.52, "hourly": {"time": ["2024-01-01T00:00"], "temperature_2m": [1.5]}, "extra": None}
    transport.handler = lambda request: httpx.Response(200, json=body)
    client = make_client(transport)

    result = await client.get_forecast(validate_arguments(ForecastParams, BERLIN))
    await client.aclose()

    assert result == body


@pytest.mark.asyncio
async def test_provider_reason_is_reported_on_client_error(transport):
    transport.handler = lambda request: httpx.Response(
        400, json={"error": True, "reason": "Cannot initialize WeatherVariable from invalid String value foo"}
    )
    client = make_client(transport)

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.get_forecast(validate_arguments(ForecastParams, BERLIN))
    await client.aclose()

    assert exc_info.value.status_code == 400
    assert "HTTP 400" in str(exc_info.value)
    assert "invalid String value foo" in str(exc_info.value)


@pytest.mark.asyncio
async def test_plain_text_server_error(transport):
    transport.handler = lambda request: httpx.Response(503, text="upstream unavailable")
    client = make_client(transport)

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.get_forecast(validate_arguments(ForecastParams, BERLIN))
    await client.aclose()

    assert exc_info.value.status_code == 503
    assert exc_info.value.body == "upstream unavailable"
    assert "upstream unavailable" in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_failure_is_wrapped(transport):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport.handler = refuse
    client = make_client(transport)

    with pytest.raises(RemoteAPIError) as exc_info:
        await client.get_forecast(validate_arguments(ForecastParams, BERLIN))
    await client.aclose()

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)
