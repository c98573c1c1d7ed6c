"""YAML exporter for the tool catalog."""

from __future__ import annotations

from typing import Iterable

import yaml

from video_replication_mcp.exporters.base import Exporter


class YamlExporter(Exporter):
    """Export tool definitions to YAML format."""

    @property
    def extension(self) -> str:
        """Return yaml extension."""
        return "yaml"

    def render(self, tools: Iterable[dict]) -> str:
        return yaml.safe_dump(self.catalog_document(tools), allow_unicode=True, sort_keys=False)
