"""MCP server exposing the tool dispatcher over stdio."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

LOGGER = logging.getLogger(__name__)

SERVER_NAME = "video-replication-mcp"
SERVER_VERSION = "1.0.0"

if TYPE_CHECKING:
    from video_replication_mcp.tools import ToolDispatcher, ToolResult


def build_tools(dispatcher: ToolDispatcher) -> list[types.Tool]:
    """Convert catalog definitions into MCP Tool objects."""
    return [
        types.Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in dispatcher.get_tool_definitions()
    ]


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Wrap a ToolResult as a single text block, flagging failures."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=not result.success,
    )


def create_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return build_tools(dispatcher)

    # Arguments are checked by the dispatcher's own validators.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        result = await asyncio.to_thread(dispatcher.dispatch, name, arguments)
        return to_call_tool_result(result)

    return server


async def run_stdio(dispatcher: ToolDispatcher) -> None:
    """Serve MCP requests on stdin/stdout until the client disconnects."""
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        LOGGER.info("%s %s started on stdio", SERVER_NAME, SERVER_VERSION)
        await server.run(read_stream, write_stream, server.create_initialization_options())
