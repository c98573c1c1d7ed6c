"""JSON exporter for the tool catalog."""

from __future__ import annotations

import json
from typing import Iterable

from video_replication_mcp.exporters.base import Exporter


class JsonExporter(Exporter):
    """Export tool definitions to JSON format."""

    @property
    def extension(self) -> str:
        """Return json extension."""
        return "json"

    def render(self, tools: Iterable[dict]) -> str:
        return json.dumps(self.catalog_document(tools), indent=2, ensure_ascii=False) + "\n"
