"""Tool that opens the Reddit home page."""

from __future__ import annotations

from typing import Any, Mapping

import structlog

from ..config import RedditConfig
from ..navigation import open_page
from ..session import ToolContext
from .base import ToolDescriptor, ToolResponse, validate_params
from .params import NavParams

_LOG = structlog.get_logger(__name__)


class RedditNavTool:
    """Navigate to the Reddit home page."""

    descriptor = ToolDescriptor.from_model(
        name="mcp_reddit_nav",
        description="Navigate to Reddit website and perform basic operations",
        model=NavParams,
    )

    def __init__(self, config: RedditConfig | None = None) -> None:
        self.config = config or RedditConfig()

    async def handle(self, context: ToolContext, params: Mapping[str, Any]) -> ToolResponse:
        validate_params(NavParams, self.descriptor.name, params)

        async with open_page(context, self.config.base_url, load_timeout_ms=self.config.load_timeout_ms):
            _LOG.info("reddit_home_loaded", url=self.config.base_url)

        return ToolResponse.text("Successfully navigated to Reddit")


__all__ = ["RedditNavTool"]
