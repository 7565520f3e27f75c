"""MCP stdio server exposing the registered tools."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import ServerConfig
from .errors import ToolError
from .playwright_session import PlaywrightSessionManager
from .session import ToolContext
from .tools.registry import ToolRegistry, build_registry

_LOG = structlog.get_logger(__name__)


def describe_tools(registry: ToolRegistry) -> List[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=dict(descriptor.input_schema),
        )
        for descriptor in registry.descriptors()
    ]


async def call_registered_tool(
    registry: ToolRegistry,
    context: ToolContext,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> List[types.TextContent]:
    """Dispatch a call and convert the response blocks to MCP content.

    ToolError propagates unchanged; the MCP server reports it to the client as
    an error result. Anything else is logged here before propagating.
    """

    try:
        response = await registry.dispatch(name, context, arguments)
    except ToolError:
        raise
    except Exception:
        _LOG.exception("tool_crashed", tool=name)
        raise
    return [types.TextContent(type="text", text=block.text) for block in response.content]


def build_server(registry: ToolRegistry, context: ToolContext, name: str = "reddit-mcp") -> Server:
    server: Server = Server(name)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return describe_tools(registry)

    @server.call_tool()
    async def call_tool(tool_name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        return await call_registered_tool(registry, context, tool_name, arguments)

    return server


async def serve(config: ServerConfig) -> None:
    """Launch the browser and serve MCP requests over stdio until EOF."""

    registry = build_registry(config.reddit)
    manager = PlaywrightSessionManager(config.playwright)

    async with manager.start() as context:
        server = build_server(registry, context, config.server_name)
        _LOG.info("server_started", name=config.server_name, tools=len(registry))
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["build_server", "call_registered_tool", "describe_tools", "serve"]
