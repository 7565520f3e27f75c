"""Command line entry point for the Reddit MCP server and one-shot tool runs."""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Dict, List, Optional

import structlog

from .config import ServerConfig
from .errors import ToolError
from .logs import configure_logging
from .playwright_session import PlaywrightSessionManager
from .server import serve
from .tools.params import MAX_PAGE_COUNT
from .tools.registry import build_registry

_LOG = structlog.get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reddit browsing tools over MCP")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--browser", choices=["chromium", "firefox", "webkit"], default=None)
    parser.add_argument("--base-url", default=None, help="Override the Reddit base URL")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")

    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("serve", help="Serve the tools over MCP stdio (default)")
    subcommands.add_parser("nav", help="Open the Reddit home page once")
    search = subcommands.add_parser("search", help="Run one paginated search and print the result")
    search.add_argument("keywords", help="Search keywords")
    search.add_argument("--pages", type=int, default=1, help=f"Result pages to scrape (1-{MAX_PAGE_COUNT})")

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "serve"
    return args


def build_config(args: argparse.Namespace) -> ServerConfig:
    config = ServerConfig.from_env()
    if args.headed:
        config.playwright.headless = False
    if args.browser:
        config.playwright.browser = args.browser
    if args.base_url:
        config.reddit.base_url = args.base_url
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


async def run_once(config: ServerConfig, tool_name: str, params: Dict[str, Any]) -> int:
    registry = build_registry(config.reddit)
    manager = PlaywrightSessionManager(config.playwright)

    async with manager.start() as context:
        try:
            response = await registry.dispatch(tool_name, context, params)
        except ToolError as exc:
            _LOG.error("tool_failed", tool=tool_name, error=str(exc))
            return 1

    for block in response.content:
        print(block.text)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)
    configure_logging(config.log_level)

    if args.command == "serve":
        asyncio.run(serve(config))
        return

    if args.command == "nav":
        exit_code = asyncio.run(run_once(config, "mcp_reddit_nav", {"random_string": "cli"}))
    else:
        exit_code = asyncio.run(
            run_once(config, "mcp_reddit_search", {"keywords": args.keywords, "pageCount": args.pages})
        )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
