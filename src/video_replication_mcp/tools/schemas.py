"""MCP tool schema definitions."""

from __future__ import annotations

import copy

DEFAULT_LANGUAGE = "中文"

REPLICATE_VIDEO_SCHEMA: dict = {
    "name": "replicate_video",
    "description": (
        "Create a video replication job. From a product image and a reference "
        "video, the service analyses the content and generates a new marketing "
        "video. Costs 150 credits; processing takes about 2-5 minutes."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "imageUrl": {
                "type": "string",
                "format": "uri",
                "description": "Product image URL (jpg/png/webp)",
            },
            "videoUrl": {
                "type": "string",
                "format": "uri",
                "description": "Reference video URL (mp4)",
            },
            "language": {
                "type": "string",
                "description": "Language of the generated script, e.g. 中文, English",
                "default": DEFAULT_LANGUAGE,
            },
            "webhookUrl": {
                "type": "string",
                "format": "uri",
                "description": "Optional callback URL notified when the job finishes",
            },
        },
        "required": ["imageUrl", "videoUrl"],
    },
}

GET_GENERATION_STATUS_SCHEMA: dict = {
    "name": "get_generation_status",
    "description": (
        "Query the status of a video generation job. Returns progress, state "
        "and the result URL once completed."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "generationId": {
                "type": "string",
                "description": "Job ID returned by replicate_video",
            },
        },
        "required": ["generationId"],
    },
}

GET_CREDITS_BALANCE_SCHEMA: dict = {
    "name": "get_credits_balance",
    "description": "Query the credit balance of the current account.",
    "inputSchema": {
        "type": "object",
        "properties": {},
        "required": [],
    },
}

ALL_TOOL_SCHEMAS: tuple[dict, ...] = (
    REPLICATE_VIDEO_SCHEMA,
    GET_GENERATION_STATUS_SCHEMA,
    GET_CREDITS_BALANCE_SCHEMA,
)


def get_all_tool_schemas() -> list[dict]:
    """Return all tool schemas in MCP ``tools/list`` format.

    Returns deep copies so callers cannot mutate the module-level
    definitions.

    Available tools:
        - replicate_video: Submit a replication job
        - get_generation_status: Poll a job by ID
        - get_credits_balance: Read the account balance
    """
    return [copy.deepcopy(schema) for schema in ALL_TOOL_SCHEMAS]
