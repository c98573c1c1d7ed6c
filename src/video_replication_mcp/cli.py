"""Command-line interface for the video replication MCP server."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .api_client import ApiClient
from .config import ApiConfig
from .exporters import get_exporter
from .server import run_stdio
from .tools import ToolDispatcher, get_all_tool_schemas

LOGGER = logging.getLogger("video_replication_mcp.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Video replication MCP server")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--base-url", default=None, help="Override VIDEO_API_BASE_URL")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Serve MCP tools over stdio (default)")

    catalog_parser = subparsers.add_parser("catalog", help="Write the tool catalog")
    catalog_parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")
    catalog_parser.add_argument("--output", default=None, help="Output file (default: stdout)")

    call_parser = subparsers.add_parser("call", help="Run one tool call and print the result")
    call_parser.add_argument("name", help="Tool name, e.g. get_credits_balance")
    call_parser.add_argument("--args", default="{}", help="Tool arguments as a JSON object")

    return parser


def build_dispatcher(args: argparse.Namespace) -> ToolDispatcher:
    config = ApiConfig.from_env()
    if args.base_url:
        config = replace(config, base_url=args.base_url)
    return ToolDispatcher(ApiClient(config))


def serve(args: argparse.Namespace) -> int:
    try:
        dispatcher = build_dispatcher(args)
        asyncio.run(run_stdio(dispatcher))
    except KeyboardInterrupt:
        return 0
    except Exception:
        LOGGER.exception("MCP server failed")
        return 1
    return 0


def catalog(args: argparse.Namespace) -> int:
    exporter = get_exporter(args.format)
    tools = get_all_tool_schemas()
    if args.output:
        count = exporter.export(tools, Path(args.output))
        LOGGER.info("Wrote %s tools to %s", count, args.output)
    else:
        sys.stdout.write(exporter.render(tools))
    return 0


def call(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        tool_args = json.loads(args.args)
    except json.JSONDecodeError as exc:
        parser.error(f"--args is not valid JSON: {exc}")

    result = build_dispatcher(args).dispatch(args.name, tool_args)
    print(result.text)
    return 0 if result.success else 1


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if args.command in (None, "serve"):
        code = serve(args)
    elif args.command == "catalog":
        code = catalog(args)
    elif args.command == "call":
        code = call(args, parser)
    else:
        parser.error(f"Unknown command {args.command}")

    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
