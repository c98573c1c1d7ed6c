"""MCP server exposing video replication jobs to AI assistants."""

from __future__ import annotations

from video_replication_mcp.api_client import (
    ApiClient,
    ApiClientError,
    ApiError,
    ConfigurationError,
)
from video_replication_mcp.config import ApiConfig
from video_replication_mcp.tools import ToolDispatcher, ToolResult

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ApiConfig",
    "ApiError",
    "ConfigurationError",
    "ToolDispatcher",
    "ToolResult",
]

__version__ = "1.0.0"
