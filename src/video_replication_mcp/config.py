"""Process configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "http://localhost:3000"


def _env(environ: Mapping[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    value = environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for the upstream video API."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """Build config from VIDEO_API_* variables.

        A missing API key is not an error here; the client reports it
        when a call is attempted.
        """
        if environ is None:
            environ = os.environ

        return cls(
            base_url=_env(environ, "VIDEO_API_BASE_URL", DEFAULT_BASE_URL),
            api_key=_env(environ, "VIDEO_API_KEY", ""),
        )
