"""Shared fixtures: a registry wired to a recording fake of the Open-Meteo API."""
from __future__ import annotations

from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

from meteo_mcp.config import OpenMeteoConfig
from meteo_mcp.tools import ToolContext, ToolRegistry


class RecordingTransport:
    """Records every outgoing request and answers through ``handler``."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"ok": True}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


def build_registry(transport: RecordingTransport) -> ToolRegistry:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    context = ToolContext(config=OpenMeteoConfig(), http_client=http_client)
    return ToolRegistry.default(context)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest_asyncio.fixture
async def registry(transport):
    registry = build_registry(transport)
    yield registry
    await registry.aclose()


@pytest.fixture
def plain_registry(transport) -> ToolRegistry:
    """Registry for synchronous tests; no event loop is needed to build it."""
    return build_registry(transport)
