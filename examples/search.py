"""Search for a term with a hand-written page object."""

from __future__ import annotations

import asyncio
import logging
import sys

from pageobjects.browser.playwright_session import launch_session
from pageobjects.elements import Button, TextBox
from pageobjects.page import Page, action
from pageobjects.settings import PageObjectSettings

logger = logging.getLogger(__name__)


class SearchPage(Page):
    url = "https://www.google.com"

    q = TextBox()
    btnK = Button()

    @action
    async def search(self, term: str) -> None:
        await self.q.fill(term)
        await self.btnK.click()


async def _run(term: str) -> None:
    settings = PageObjectSettings.from_yaml()
    async with launch_session(settings) as session:
        page = SearchPage.from_settings(session, settings)
        await page.visit()
        await page.search(term)
        logger.info("Landed on %r.", await page.title())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_run(" ".join(sys.argv[1:]) or "cheese"))
