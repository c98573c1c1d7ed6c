"""Tool catalog exporters for JSON and YAML formats."""

from video_replication_mcp.exporters.base import Exporter, get_exporter
from video_replication_mcp.exporters.json_exporter import JsonExporter
from video_replication_mcp.exporters.yaml_exporter import YamlExporter

__all__ = [
    "Exporter",
    "JsonExporter",
    "YamlExporter",
    "get_exporter",
]
