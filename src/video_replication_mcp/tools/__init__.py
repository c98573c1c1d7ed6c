"""Tool layer for the video replication API.

This module provides:
- ToolDispatcher: Routes tool calls to the API client
- ToolResult: Uniform success/failure envelope
- Tool exceptions for error handling
- MCP tool schemas
"""

from __future__ import annotations

from video_replication_mcp.tools.dispatcher import ToolDispatcher
from video_replication_mcp.tools.exceptions import (
    ToolError,
    UnknownOperationError,
    ValidationError,
)
from video_replication_mcp.tools.result import ToolResult
from video_replication_mcp.tools.schemas import get_all_tool_schemas

__all__ = [
    "ToolDispatcher",
    "ToolResult",
    "ToolError",
    "UnknownOperationError",
    "ValidationError",
    "get_all_tool_schemas",
]
