"""Playwright-backed implementation of DriverSession."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import ElementHandle, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from pageobjects.exceptions import SessionError
from pageobjects.settings import PageObjectSettings

logger = logging.getLogger(__name__)


class PlaywrightSession:
    """Async driver session wrapping a single Playwright ``Page``.

    The session does not own the page: whoever created the page closes it.
    Use :func:`launch_session` when a throwaway browser is wanted.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def page(self) -> Page:
        """The raw Playwright page, for anything this layer does not cover."""
        return self._page

    # --- navigation ---

    async def navigate(self, url: str, *, wait_until: str = "load", timeout: float = 30_000) -> None:
        await self._page.goto(url, wait_until=wait_until, timeout=timeout)

    async def current_url(self) -> str:
        return self._page.url

    async def title(self) -> str:
        return await self._page.title()

    # --- querying ---

    async def query(self, selector: str, *, timeout: float = 5_000) -> ElementHandle | None:
        try:
            return await self._page.wait_for_selector(selector, state="attached", timeout=timeout)
        except PlaywrightTimeoutError:
            return None

    # --- interaction ---

    async def fill(self, element: ElementHandle, value: str) -> None:
        await element.fill(value)

    async def click(self, element: ElementHandle) -> None:
        await element.click()

    async def set_checked(self, element: ElementHandle, checked: bool) -> None:
        await element.set_checked(checked)

    # --- reading ---

    async def is_checked(self, element: ElementHandle) -> bool:
        return await element.is_checked()

    async def input_value(self, element: ElementHandle) -> str:
        return await element.input_value()

    async def inner_text(self, element: ElementHandle) -> str:
        return (await element.inner_text()).strip()

    async def get_attribute(self, element: ElementHandle, name: str) -> str | None:
        return await element.get_attribute(name)

    async def is_visible(self, element: ElementHandle) -> bool:
        return await element.is_visible()


@asynccontextmanager
async def launch_session(settings: PageObjectSettings) -> AsyncIterator[PlaywrightSession]:
    """Start a browser per *settings* and yield a session on a fresh page.

    Everything started here is torn down on exit, even when the body raises.
    """
    pw: Any = None
    browser: Any = None
    try:
        pw = await async_playwright().start()
        browser_type = getattr(pw, settings.browser)
        browser = await browser_type.launch(headless=settings.headless, slow_mo=settings.slow_mo)
        context = await browser.new_context(
            viewport={"width": settings.viewport_width, "height": settings.viewport_height},
        )
        page = await context.new_page()
    except PlaywrightError as exc:
        await _shutdown(pw, browser)
        raise SessionError(f"Failed to start Playwright {settings.browser}: {exc}") from exc
    logger.info("Browser launched (%s, headless=%s).", settings.browser, settings.headless)

    try:
        yield PlaywrightSession(page)
    finally:
        await _shutdown(pw, browser)
        logger.info("Browser closed.")


async def _shutdown(pw: Any, browser: Any) -> None:
    if browser is not None:
        await browser.close()
    if pw is not None:
        await pw.stop()
