"""Base exporter interface for the tool catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable


class Exporter(ABC):
    """Base class for tool catalog exporters."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without dot (e.g., 'json', 'yaml')."""
        ...

    @abstractmethod
    def render(self, tools: Iterable[dict]) -> str:
        """Render tool definitions as a document string."""
        ...

    def export(self, tools: Iterable[dict], output_path: Path) -> int:
        """Write tool definitions to file.

        Args:
            tools: Tool definitions in MCP format.
            output_path: Path to output file.

        Returns:
            Number of tools exported.
        """
        tools = list(tools)
        Path(output_path).write_text(self.render(tools), encoding="utf-8")
        return len(tools)

    @staticmethod
    def catalog_document(tools: Iterable[dict]) -> dict:
        """Wrap tool definitions in the exported document shape."""
        data = list(tools)
        return {
            "tools": data,
            "count": len(data),
        }


def get_exporter(fmt: str) -> Exporter:
    """Return the exporter for a format name ('json' or 'yaml')."""
    from video_replication_mcp.exporters.json_exporter import JsonExporter
    from video_replication_mcp.exporters.yaml_exporter import YamlExporter

    exporters = {"json": JsonExporter, "yaml": YamlExporter, "yml": YamlExporter}
    try:
        return exporters[fmt.lower()]()
    except KeyError:
        raise ValueError(f"Unknown export format: {fmt}")
