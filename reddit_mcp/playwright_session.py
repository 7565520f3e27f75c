"""Playwright session management helpers."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import AsyncIterator

import structlog
from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from .config import PlaywrightConfig
from .session import PlaywrightPageHandle

_LOG = structlog.get_logger(__name__)


@dataclass
class PlaywrightResources:
    """Encapsulates the Playwright primitives for convenient teardown."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext


class PlaywrightSessionManager:
    """Owns one browser context and hands out a fresh page per tool call."""

    def __init__(self, config: PlaywrightConfig | None = None) -> None:
        self.config = config or PlaywrightConfig()
        self._resources: PlaywrightResources | None = None

    @contextlib.asynccontextmanager
    async def start(self) -> AsyncIterator["PlaywrightSessionManager"]:
        self._resources = await self._launch()
        try:
            yield self
        finally:
            resources, self._resources = self._resources, None
            await self._close(resources)

    async def create_page(self) -> PlaywrightPageHandle:
        if self._resources is None:
            raise RuntimeError("Session manager is not started")

        page = await self._resources.context.new_page()
        timeout_ms = self.config.navigation_timeout_ms
        if timeout_ms is not None:
            page.set_default_timeout(timeout_ms)
            page.set_default_navigation_timeout(timeout_ms)
        return PlaywrightPageHandle(page)

    async def _launch(self) -> PlaywrightResources:
        playwright = await async_playwright().start()
        browser_type = getattr(playwright, self.config.browser)
        browser = await browser_type.launch(
            headless=self.config.headless,
            slow_mo=self.config.slow_mo_ms,
        )
        context = await browser.new_context(
            viewport={
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            }
        )
        _LOG.info("browser_started", browser=self.config.browser, headless=self.config.headless)
        return PlaywrightResources(playwright=playwright, browser=browser, context=context)

    async def _close(self, resources: PlaywrightResources) -> None:
        await resources.context.close()
        await resources.browser.close()
        await resources.playwright.stop()
        _LOG.info("browser_stopped")


__all__ = ["PlaywrightSessionManager", "PlaywrightResources"]
