"""Tests for tool catalog exporters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from video_replication_mcp.exporters import JsonExporter, YamlExporter, get_exporter
from video_replication_mcp.tools import get_all_tool_schemas


@pytest.fixture
def tools() -> list[dict]:
    return get_all_tool_schemas()


class TestJsonExporter:
    def test_extension(self):
        assert JsonExporter().extension == "json"

    def test_export(self, tools: list[dict], tmp_path: Path):
        output = tmp_path / "catalog.json"

        count = JsonExporter().export(tools, output)

        assert count == 3
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["count"] == 3
        assert data["tools"] == tools

    def test_unicode_preserved(self, tools: list[dict]):
        assert "中文" in JsonExporter().render(tools)


class TestYamlExporter:
    def test_extension(self):
        assert YamlExporter().extension == "yaml"

    def test_export(self, tools: list[dict], tmp_path: Path):
        output = tmp_path / "catalog.yaml"

        count = YamlExporter().export(tools, output)

        assert count == 3
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["count"] == 3
        assert [tool["name"] for tool in data["tools"]] == [tool["name"] for tool in tools]

    def test_key_order_and_unicode(self, tools: list[dict]):
        text = YamlExporter().render(tools)
        assert text.startswith("tools:")
        assert "中文" in text

    def test_empty_catalog(self, tmp_path: Path):
        output = tmp_path / "empty.yaml"
        assert YamlExporter().export([], output) == 0
        assert yaml.safe_load(output.read_text(encoding="utf-8")) == {"tools": [], "count": 0}


class TestGetExporter:
    @pytest.mark.parametrize("fmt, cls", [("json", JsonExporter), ("yaml", YamlExporter), ("YML", YamlExporter)])
    def test_known_formats(self, fmt, cls):
        assert isinstance(get_exporter(fmt), cls)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="xml"):
            get_exporter("xml")
