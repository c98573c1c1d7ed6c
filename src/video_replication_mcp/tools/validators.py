"""Argument validation for each tool.

Each validator takes the raw argument mapping from a tool call and returns
a frozen parameter object, or raises ValidationError listing every problem
found. Keys not named by a tool's schema are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlsplit

from video_replication_mcp.tools.exceptions import ValidationError
from video_replication_mcp.tools.schemas import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class ReplicateVideoParams:
    image_url: str
    video_url: str
    language: str = DEFAULT_LANGUAGE
    webhook_url: str | None = None


@dataclass(frozen=True)
class GenerationStatusParams:
    generation_id: str


@dataclass(frozen=True)
class CreditsBalanceParams:
    pass


def is_valid_url(value: str) -> bool:
    """True if value has a scheme, a host, and an in-range port if any."""
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError when out of range or non-numeric
    except ValueError:
        return False
    return bool(parts.scheme) and parts.scheme.isascii() and bool(parts.hostname)


def _check_url(args: Mapping[str, Any], key: str, problems: list[str], *, required: bool) -> str | None:
    value = args.get(key)
    if value is None:
        if required:
            problems.append(f"{key} is required")
        return None
    if not isinstance(value, str):
        problems.append(f"{key} must be a string")
        return None
    if not is_valid_url(value):
        problems.append(f"{key} is not a valid URL")
        return None
    return value


def validate_replicate_video(args: Mapping[str, Any] | None) -> ReplicateVideoParams:
    args = args or {}
    problems: list[str] = []

    image_url = _check_url(args, "imageUrl", problems, required=True)
    video_url = _check_url(args, "videoUrl", problems, required=True)
    webhook_url = _check_url(args, "webhookUrl", problems, required=False)

    language = args.get("language", DEFAULT_LANGUAGE)
    if not isinstance(language, str):
        problems.append("language must be a string")

    if problems:
        raise ValidationError("replicate_video", problems)
    return ReplicateVideoParams(
        image_url=image_url,
        video_url=video_url,
        language=language,
        webhook_url=webhook_url,
    )


def validate_generation_status(args: Mapping[str, Any] | None) -> GenerationStatusParams:
    args = args or {}
    generation_id = args.get("generationId")
    if generation_id is None:
        raise ValidationError("get_generation_status", ["generationId is required"])
    if not isinstance(generation_id, str):
        raise ValidationError("get_generation_status", ["generationId must be a string"])
    if not generation_id.strip():
        raise ValidationError("get_generation_status", ["generationId must not be empty"])
    return GenerationStatusParams(generation_id=generation_id)


def validate_credits_balance(args: Mapping[str, Any] | None) -> CreditsBalanceParams:
    return CreditsBalanceParams()
