"""FastAPI app exposing the Open-Meteo tools over HTTP for local debugging."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import Body, FastAPI
from pydantic import BaseModel, Field

from meteo_mcp import __version__
from meteo_mcp.tools import ToolRegistry


class ToolInfo(BaseModel):
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(default_factory=dict)


class ContentBlock(BaseModel):
    type: str = "text"
    text: str


class CallResponse(BaseModel):
    tool: str
    content: List[ContentBlock]


def create_app(registry: ToolRegistry | None = None) -> FastAPI:
    """Build the app; tool failures are reported as 200 responses with ``Error:`` text."""

    tools = registry or ToolRegistry.default()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        await tools.aclose()

    app = FastAPI(title="Open-Meteo MCP Tools", version=__version__, lifespan=lifespan)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "tools": len(tools.names())}

    @app.get("/tools", response_model=List[ToolInfo])
    async def list_tools() -> List[ToolInfo]:
        return [ToolInfo(**descriptor.as_dict()) for descriptor in tools.list_tools()]

    @app.post("/tools/{name}", response_model=CallResponse)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]] = Body(None)) -> CallResponse:
        result = await tools.handle_call(name, arguments)
        return CallResponse(
            tool=name,
            content=[ContentBlock(type=block.type, text=block.text) for block in result.content],
        )

    return app


__all__ = ["create_app"]
