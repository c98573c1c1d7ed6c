"""Shared pytest fixtures for video-replication-mcp tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from video_replication_mcp.api_client import ApiClient
from video_replication_mcp.config import ApiConfig
from video_replication_mcp.tools import ToolDispatcher

BASE_URL = "https://api.example.test"
API_KEY = "test-key"


def make_response(status_code: int, payload: Any = None, *, invalid_json: bool = False) -> Mock:
    """Build a Mock requests.Response.

    Args:
        status_code: HTTP status to report.
        payload: Value returned by .json().
        invalid_json: Make .json() raise ValueError instead.
    """
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = "<html>Internal Server Error</html>"
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def config() -> ApiConfig:
    return ApiConfig(base_url=BASE_URL, api_key=API_KEY)


@pytest.fixture
def session() -> Mock:
    """Mock requests.Session answering every request with 200 {}."""
    mock_session = Mock(spec=requests.Session)
    mock_session.request.return_value = make_response(200, {})
    return mock_session


@pytest.fixture
def client(config: ApiConfig, session: Mock) -> ApiClient:
    return ApiClient(config, session=session)


@pytest.fixture
def dispatcher(client: ApiClient) -> ToolDispatcher:
    return ToolDispatcher(client)


@pytest.fixture
def unconfigured_dispatcher(session: Mock) -> ToolDispatcher:
    """Dispatcher whose client has no API key."""
    return ToolDispatcher(ApiClient(ApiConfig(base_url=BASE_URL, api_key=""), session=session))


@pytest.fixture
def respond(session: Mock):
    """Set the response the mock session returns for the next request."""

    def _respond(status_code: int, payload: Any = None, *, invalid_json: bool = False) -> Mock:
        response = make_response(status_code, payload, invalid_json=invalid_json)
        session.request.return_value = response
        return response

    return _respond
