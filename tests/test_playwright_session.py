"""Tests for the Playwright session and launcher (mock Playwright)."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pageobjects.browser import playwright_session
from pageobjects.browser.playwright_session import PlaywrightSession, launch_session
from pageobjects.exceptions import SessionError
from pageobjects.settings import PageObjectSettings


def _fake_playwright():
    page = MagicMock(name="page")
    context = MagicMock(name="context")
    context.new_page = AsyncMock(return_value=page)
    browser = MagicMock(name="browser")
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()
    pw = MagicMock(name="playwright")
    for engine in ("chromium", "firefox", "webkit"):
        getattr(pw, engine).launch = AsyncMock(return_value=browser)
    pw.stop = AsyncMock()
    starter = MagicMock(name="starter")
    starter.start = AsyncMock(return_value=pw)
    return starter, pw, browser, page


def test_launch_yields_session_on_new_page():
    starter, pw, browser, page = _fake_playwright()
    settings = PageObjectSettings(browser="firefox", headless=False, slow_mo=10)

    async def go():
        async with launch_session(settings) as session:
            return session

    with patch.object(playwright_session, "async_playwright", return_value=starter):
        session = asyncio.run(go())

    assert isinstance(session, PlaywrightSession)
    assert session.page is page
    pw.firefox.launch.assert_awaited_once_with(headless=False, slow_mo=10)
    pw.chromium.launch.assert_not_awaited()
    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


def test_teardown_runs_when_body_raises():
    starter, pw, browser, _ = _fake_playwright()

    async def go():
        async with launch_session(PageObjectSettings()):
            raise RuntimeError("test body failed")

    with patch.object(playwright_session, "async_playwright", return_value=starter):
        with pytest.raises(RuntimeError, match="test body failed"):
            asyncio.run(go())

    browser.close.assert_awaited_once()
    pw.stop.assert_awaited_once()


def test_launch_failure_is_wrapped_and_cleaned_up():
    starter, pw, browser, _ = _fake_playwright()
    pw.chromium.launch = AsyncMock(side_effect=PlaywrightError("Executable doesn't exist"))

    async def go():
        async with launch_session(PageObjectSettings()):
            pass

    with patch.object(playwright_session, "async_playwright", return_value=starter):
        with pytest.raises(SessionError, match="chromium"):
            asyncio.run(go())

    browser.close.assert_not_awaited()
    pw.stop.assert_awaited_once()


def test_query_returns_none_on_timeout():
    page = MagicMock(name="page")
    page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 100ms exceeded"))
    session = PlaywrightSession(page)

    assert asyncio.run(session.query('[name="q"]', timeout=100)) is None
    page.wait_for_selector.assert_awaited_once_with('[name="q"]', state="attached", timeout=100)
