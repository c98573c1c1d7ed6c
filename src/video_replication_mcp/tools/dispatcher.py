"""Tool dispatcher for routing tool calls to the upstream API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable

from video_replication_mcp.api_client import ApiError, ConfigurationError
from video_replication_mcp.tools.exceptions import UnknownOperationError, ValidationError
from video_replication_mcp.tools.result import ToolResult
from video_replication_mcp.tools.schemas import get_all_tool_schemas
from video_replication_mcp.tools.validators import (
    CreditsBalanceParams,
    GenerationStatusParams,
    ReplicateVideoParams,
    validate_credits_balance,
    validate_generation_status,
    validate_replicate_video,
)

LOGGER = logging.getLogger(__name__)

if TYPE_CHECKING:
    from video_replication_mcp.api_client import ApiClient


class ToolDispatcher:
    """Route tool calls to the API client."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

        # Tool name -> (validator, invoker)
        self._handlers: dict[str, tuple[Callable[[Mapping[str, Any]], Any], Callable[[Any], Any]]] = {
            "replicate_video": (validate_replicate_video, self._handle_replicate_video),
            "get_generation_status": (validate_generation_status, self._handle_generation_status),
            "get_credits_balance": (validate_credits_balance, self._handle_credits_balance),
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, name: str, args: Mapping[str, Any] | None = None) -> ToolResult:
        """
        Execute tool call.

        Args:
            name: Tool name from the tools/call request.
            args: Argument mapping; None is treated as empty.

        Returns: ToolResult. Failures are reported in the result, never raised.
        """
        LOGGER.info("Tool call: %s", name)

        handler_entry = self._handlers.get(name)
        if handler_entry is None:
            error = UnknownOperationError(name)
            LOGGER.warning("Tool error: %s code=UNKNOWN_TOOL", name)
            return ToolResult.failure(name, str(error), "UNKNOWN_TOOL")

        if args is None:
            args = {}
        if not isinstance(args, Mapping):
            LOGGER.warning("Tool error: %s code=INVALID_ARGUMENTS", name)
            return ToolResult.failure(name, "Tool arguments must be an object", "INVALID_ARGUMENTS")

        validator, invoker = handler_entry

        try:
            params = validator(args)
        except ValidationError as e:
            LOGGER.warning("Tool error: %s code=INVALID_ARGUMENTS: %s", name, e)
            return ToolResult.failure(name, str(e), "INVALID_ARGUMENTS")

        try:
            result = invoker(params)
        except ConfigurationError as e:
            LOGGER.warning("Tool error: %s code=CONFIGURATION_ERROR: %s", name, e)
            return ToolResult.failure(name, str(e), "CONFIGURATION_ERROR")
        except ApiError as e:
            LOGGER.warning("Tool error: %s code=API_ERROR status=%s: %s", name, e.status_code, e)
            return ToolResult.failure(name, str(e), "API_ERROR")
        except Exception as e:
            LOGGER.error("Tool exception: %s: %s", name, e)
            return ToolResult.failure(name, str(e) or type(e).__name__, "EXECUTION_ERROR")

        LOGGER.debug("Tool success: %s", name)
        return ToolResult.ok(name, json.dumps(result, indent=2, ensure_ascii=False))

    def get_tool_definitions(self) -> list[dict]:
        """Return MCP tool schemas."""
        return get_all_tool_schemas()

    # Handler methods

    def _handle_replicate_video(self, params: ReplicateVideoParams) -> Any:
        return self._client.replicate_video(
            image_url=params.image_url,
            video_url=params.video_url,
            language=params.language,
            webhook_url=params.webhook_url,
        )

    def _handle_generation_status(self, params: GenerationStatusParams) -> Any:
        return self._client.get_generation_status(params.generation_id)

    def _handle_credits_balance(self, params: CreditsBalanceParams) -> Any:
        return self._client.get_credits_balance()
