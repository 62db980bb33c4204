"""MCP stdio server exposing the Open-Meteo tools."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from meteo_mcp.config import ServerConfig
from meteo_mcp.log import configure_logging
from meteo_mcp.tools import ToolDescriptor, ToolRegistry, ToolResult

logger = logging.getLogger(__name__)


def to_mcp_tools(descriptors: Sequence[ToolDescriptor]) -> List[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema,
        )
        for descriptor in descriptors
    ]


def to_text_content(result: ToolResult) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=block.text) for block in result.content]


def create_server(registry: ToolRegistry, config: ServerConfig | None = None) -> Server:
    """Bind ``registry`` to the MCP ``tools/list`` and ``tools/call`` requests."""

    config = config or ServerConfig()
    server: Server = Server(config.name, version=config.version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return to_mcp_tools(registry.list_tools())

    # Argument checking happens in the registry so that failures reach the
    # caller as ordinary "Error: ..." text instead of SDK error results.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await registry.handle_call(name, arguments)
        return to_text_content(result)

    return server


def _handle_loop_exception(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    exc = context.get("exception")
    if exc is None:
        loop.default_exception_handler(context)
        return
    logger.critical("Unhandled error in event loop: %s", context.get("message"), exc_info=exc)
    loop.stop()


async def serve_stdio(config: ServerConfig) -> None:
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)
    registry = ToolRegistry.default()
    server = create_server(registry, config)
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Open-Meteo MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await registry.aclose()


def serve_http(config: ServerConfig) -> None:
    import uvicorn

    from meteo_mcp.http_app import create_app

    logger.info("Open-Meteo tool API listening on http://%s:%s", config.http_host, config.http_port)
    uvicorn.run(create_app(), host=config.http_host, port=config.http_port, log_config=None)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Open-Meteo API as MCP tools.")
    parser.add_argument("--http", action="store_true", help="Serve the tools over HTTP instead of stdio")
    parser.add_argument("--host", default=None, help="HTTP bind address (with --http)")
    parser.add_argument("--port", type=int, default=None, help="HTTP port (with --http)")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG or INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = ServerConfig.from_env()
    config = ServerConfig(
        name=config.name,
        version=config.version,
        log_level=(args.log_level or config.log_level).upper(),
        http_host=args.host or config.http_host,
        http_port=args.port or config.http_port,
    )
    configure_logging(config.log_level)

    try:
        if args.http:
            serve_http(config)
        else:
            asyncio.run(serve_stdio(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.critical("Server error, terminating", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
