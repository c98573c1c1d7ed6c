"""HTTP client for the upstream video replication API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from requests import Response
from requests.exceptions import ConnectionError, RequestException, Timeout

from .config import ApiConfig

LOGGER = logging.getLogger(__name__)

REPLICATE_VIDEO_PATH = "/api/v1/replicate-video"
GENERATIONS_PATH = "/api/v1/generations"
CREDITS_BALANCE_PATH = "/api/v1/credits/balance"

_METHODS = ("GET", "POST")


class ApiClientError(Exception):
    """Base exception for upstream API calls."""


class ConfigurationError(ApiClientError):
    """Raised before any I/O when the client is missing required settings."""


class ApiError(ApiClientError):
    """Raised when the upstream API rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ApiClient:
    """Thin wrapper around the video replication HTTP API."""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._session = session or requests.Session()

    def replicate_video(
        self,
        image_url: str,
        video_url: str,
        language: str,
        webhook_url: Optional[str] = None,
    ) -> Any:
        """Submit a replication job; returns the job descriptor."""

        body: Dict[str, Any] = {
            "imageUrl": image_url,
            "videoUrl": video_url,
            "language": language,
        }
        if webhook_url is not None:
            body["webhookUrl"] = webhook_url
        return self.call("POST", REPLICATE_VIDEO_PATH, body)

    def get_generation_status(self, generation_id: str) -> Any:
        """Fetch the status descriptor of a generation job."""

        return self.call("GET", f"{GENERATIONS_PATH}/{quote(generation_id, safe='')}")

    def get_credits_balance(self) -> Any:
        """Fetch the account credit balance."""

        return self.call("GET", CREDITS_BALANCE_PATH)

    def call(self, method: str, path: str, body: Any = None) -> Any:
        """Issue one authenticated request and return the decoded JSON body.

        Raises:
            ConfigurationError: No API key configured. Nothing is sent.
            ApiError: Non-2xx status, undecodable success body, or a
                transport failure.
        """
        if method not in _METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        if not self.config.api_key:
            raise ConfigurationError("API key not configured; set VIDEO_API_KEY")

        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }
        kwargs: Dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = body

        LOGGER.debug("%s %s", method, url)
        try:
            response: Response = self._session.request(method, url, **kwargs)
        except Timeout:
            raise ApiError("Request timed out")
        except ConnectionError:
            raise ApiError(f"Cannot connect to {self.base_url}")
        except RequestException as exc:
            raise ApiError(f"Request failed: {exc}")

        return self._decode(response)

    @staticmethod
    def _decode(response: Response) -> Any:
        status = response.status_code
        try:
            data = response.json()
            parsed = True
        except ValueError:
            data = None
            parsed = False

        if not 200 <= status < 300:
            raise ApiError(_error_message(data, status), status_code=status)
        if not parsed:
            raise ApiError(f"Invalid JSON in API response (HTTP {status})", status_code=status)
        return data


def _error_message(data: Any, status: int) -> str:
    """Pull error.message out of an error body, falling back to the status."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
    return f"API error: HTTP {status}"
