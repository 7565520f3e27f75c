"""Paginated Reddit search scraping."""

from __future__ import annotations

import asyncio
from typing import Any, List, Mapping
from urllib.parse import quote, urlencode

import structlog

from ..config import RedditConfig
from ..navigation import open_page
from ..session import ExtractedRecord, SessionHandle, ToolContext
from .base import ToolDescriptor, ToolResponse, validate_params
from .params import SearchParams

_LOG = structlog.get_logger(__name__)


def build_search_url(config: RedditConfig, keywords: str) -> str:
    return f"{config.search_url}?{urlencode({'q': keywords}, quote_via=quote)}"


def format_records(records: List[ExtractedRecord]) -> str:
    lines = [f"Found {len(records)} posts"]
    for index, record in enumerate(records, start=1):
        lines.append(f"{index}. Title: {record.title}")
        lines.append(f"   Content: {record.content}")
    return "\n".join(lines)


class RedditSearchTool:
    """Search Reddit and scrape post titles across several result pages."""

    descriptor = ToolDescriptor.from_model(
        name="mcp_reddit_search",
        description="Search Reddit for keywords and scrape post titles from up to 10 result pages",
        model=SearchParams,
    )

    def __init__(self, config: RedditConfig | None = None) -> None:
        self.config = config or RedditConfig()

    async def handle(self, context: ToolContext, params: Mapping[str, Any]) -> ToolResponse:
        search = validate_params(SearchParams, self.descriptor.name, params)
        url = build_search_url(self.config, search.keywords)

        async with open_page(context, url, load_timeout_ms=self.config.load_timeout_ms) as page:
            records = await self.scrape(page, page_count=search.pageCount)

        return ToolResponse.text(format_records(records))

    async def scrape(self, page: SessionHandle, *, page_count: int) -> List[ExtractedRecord]:
        """Extract records from up to ``page_count`` result pages, in encounter order."""

        records: List[ExtractedRecord] = []
        page_index = 1
        while page_index <= page_count:
            found = await page.extract_records(
                self.config.post_title_selector,
                placeholder=self.config.content_placeholder,
            )
            records.extend(found)
            _LOG.info("search_page_extracted", page=page_index, found=len(found), total=len(records))

            if page_index < page_count and not await self._next_page(page):
                _LOG.info("pagination_exhausted", page=page_index)
                break
            page_index += 1

        return records

    async def _next_page(self, page: SessionHandle) -> bool:
        next_button = await page.find_by_label(self.config.next_page_label)
        if next_button is None:
            return False
        await next_button.click()
        await asyncio.sleep(self.config.settle_delay_ms / 1000)
        return True


__all__ = ["RedditSearchTool", "build_search_url", "format_records"]
