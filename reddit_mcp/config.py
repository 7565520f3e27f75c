"""Configuration models for the Reddit MCP tools."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class PlaywrightConfig:
    """Settings for Playwright browser sessions."""

    browser: str = "chromium"
    headless: bool = True
    slow_mo_ms: Optional[int] = None
    viewport_width: int = 1280
    viewport_height: int = 720
    navigation_timeout_ms: int = 30000


@dataclass
class RedditConfig:
    """Site-specific constants used by the navigation and search tools."""

    base_url: str = "https://www.reddit.com"
    search_path: str = "/search/"
    post_title_selector: str = '[data-testid="post-title"]'
    next_page_label: str = "Next page"
    content_placeholder: str = "No content available"
    load_timeout_ms: int = 5000
    settle_delay_ms: int = 2000

    @property
    def search_url(self) -> str:
        return self.base_url.rstrip("/") + self.search_path


@dataclass
class ServerConfig:
    """Top-level configuration object for the MCP server."""

    server_name: str = "reddit-mcp"
    log_level: str = "INFO"
    playwright: PlaywrightConfig = field(default_factory=PlaywrightConfig)
    reddit: RedditConfig = field(default_factory=RedditConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        config = cls()
        if "REDDIT_MCP_HEADLESS" in env:
            config.playwright.headless = _env_flag(env["REDDIT_MCP_HEADLESS"])
        if "REDDIT_MCP_BASE_URL" in env:
            config.reddit.base_url = env["REDDIT_MCP_BASE_URL"]
        if "REDDIT_MCP_LOG_LEVEL" in env:
            config.log_level = env["REDDIT_MCP_LOG_LEVEL"].upper()
        return config


__all__ = ["PlaywrightConfig", "RedditConfig", "ServerConfig"]
