"""Tests for environment configuration."""

from __future__ import annotations

import pytest

from video_replication_mcp.config import DEFAULT_BASE_URL, ApiConfig


class TestApiConfig:
    def test_defaults(self):
        config = ApiConfig.from_env({})
        assert config.base_url == DEFAULT_BASE_URL == "http://localhost:3000"
        assert config.api_key == ""

    def test_reads_environment(self):
        config = ApiConfig.from_env({
            "VIDEO_API_BASE_URL": "https://video.example.test",
            "VIDEO_API_KEY": " secret ",
        })
        assert config.base_url == "https://video.example.test"
        assert config.api_key == "secret"

    def test_blank_values_are_unset(self):
        config = ApiConfig.from_env({"VIDEO_API_BASE_URL": "  ", "VIDEO_API_KEY": ""})
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key == ""

    def test_uses_process_environment(self, monkeypatch):
        monkeypatch.setenv("VIDEO_API_KEY", "from-env")
        monkeypatch.delenv("VIDEO_API_BASE_URL", raising=False)
        assert ApiConfig.from_env().api_key == "from-env"

    def test_frozen(self):
        config = ApiConfig()
        with pytest.raises(AttributeError):
            config.api_key = "changed"
