"""Session handle contract and its Playwright-backed implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

import structlog
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

_LOG = structlog.get_logger(__name__)

_TITLE_TEXT_SCRIPT = "nodes => nodes.map(node => node.textContent || '')"


@dataclass(frozen=True)
class ExtractedRecord:
    """One scraped post: its title and a content field."""

    title: str
    content: str


class Affordance(Protocol):
    """An actionable UI element such as a pagination button."""

    async def click(self) -> None:
        """Activate the element."""


class SessionHandle(Protocol):
    """Single-use page resource owned by one tool invocation."""

    async def goto(self, url: str, *, wait_until: str = "domcontentloaded") -> None:
        """Navigate and return once the given readiness milestone is reached."""

    async def wait_for_load_state(self, state: str, *, timeout_ms: int) -> bool:
        """Wait for a readiness milestone; return False instead of raising on timeout."""

    async def extract_records(self, selector: str, *, placeholder: str) -> List[ExtractedRecord]:
        """Return one record per element matching selector, in document order."""

    async def find_by_label(self, label: str) -> Optional[Affordance]:
        """Return the first element exposing the accessible label, if any."""

    async def close(self) -> None:
        """Release the page."""


class ToolContext(Protocol):
    """Execution context handed to tool handlers."""

    async def create_page(self) -> SessionHandle:
        """Open a fresh page owned by the caller."""


class PlaywrightPageHandle:
    """SessionHandle implementation wrapping a Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page
        self._closed = False

    async def goto(self, url: str, *, wait_until: str = "domcontentloaded") -> None:
        await self.page.goto(url, wait_until=wait_until)

    async def wait_for_load_state(self, state: str, *, timeout_ms: int) -> bool:
        try:
            await self.page.wait_for_load_state(state, timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    async def extract_records(self, selector: str, *, placeholder: str) -> List[ExtractedRecord]:
        titles: List[str] = await self.page.eval_on_selector_all(selector, _TITLE_TEXT_SCRIPT)
        return [ExtractedRecord(title=title or "", content=placeholder) for title in titles]

    async def find_by_label(self, label: str) -> Optional[Locator]:
        locator = self.page.get_by_label(label, exact=True)
        if await locator.count() == 0:
            return None
        return locator.first

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.page.close()
        _LOG.debug("page_closed")


__all__ = [
    "Affordance",
    "ExtractedRecord",
    "PlaywrightPageHandle",
    "SessionHandle",
    "ToolContext",
]
