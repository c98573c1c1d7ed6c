"""Tool result dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolResult:
    """Result from a tool execution."""

    tool_name: str
    success: bool
    text: str  # JSON on success, error message on failure
    code: str | None = None

    @classmethod
    def ok(cls, tool_name: str, text: str) -> ToolResult:
        return cls(tool_name=tool_name, success=True, text=text)

    @classmethod
    def failure(cls, tool_name: str, message: str, code: str) -> ToolResult:
        return cls(tool_name=tool_name, success=False, text=message, code=code)
