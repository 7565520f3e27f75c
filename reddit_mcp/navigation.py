"""Page acquisition and bounded readiness waits."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator

import structlog
from playwright.async_api import Error as PlaywrightError

from .errors import NavigationError
from .session import SessionHandle, ToolContext

_LOG = structlog.get_logger(__name__)


async def soft_wait_for_load(handle: SessionHandle, *, timeout_ms: int) -> bool:
    """Wait for the full "load" signal for at most ``timeout_ms``.

    Returns whether the signal arrived. Many pages never fire it cleanly, and
    the document is already interactive once DOM content is loaded, so a
    timeout here only gets logged.
    """

    loaded = await handle.wait_for_load_state("load", timeout_ms=timeout_ms)
    if not loaded:
        _LOG.debug("load_wait_timeout", timeout_ms=timeout_ms)
    return loaded


async def navigate(handle: SessionHandle, url: str, *, load_timeout_ms: int) -> bool:
    """Navigate ``handle`` to ``url`` and return the soft-wait readiness flag."""

    _LOG.info("navigating", url=url)
    try:
        await handle.goto(url, wait_until="domcontentloaded")
    except PlaywrightError as exc:
        raise NavigationError(url, str(exc)) from exc
    return await soft_wait_for_load(handle, timeout_ms=load_timeout_ms)


@contextlib.asynccontextmanager
async def open_page(context: ToolContext, url: str, *, load_timeout_ms: int) -> AsyncIterator[SessionHandle]:
    """Yield a page positioned at ``url``; the page is closed on every exit path."""

    handle = await context.create_page()
    try:
        loaded = await navigate(handle, url, load_timeout_ms=load_timeout_ms)
        _LOG.info("page_ready", url=url, fully_loaded=loaded)
        yield handle
    finally:
        await handle.close()


__all__ = ["navigate", "open_page", "soft_wait_for_load"]
