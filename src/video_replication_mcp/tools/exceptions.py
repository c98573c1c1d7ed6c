"""Tool-specific exceptions."""

from __future__ import annotations


class ToolError(Exception):
    """Base exception for tool operations."""


class ValidationError(ToolError):
    """Tool arguments failed validation."""

    def __init__(self, tool_name: str, problems: list[str]) -> None:
        self.tool_name = tool_name
        self.problems = list(problems)
        super().__init__(f"Invalid arguments for {tool_name}: {'; '.join(self.problems)}")


class UnknownOperationError(ToolError):
    """Tool name not recognized."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown operation: {name}")
