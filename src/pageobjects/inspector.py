"""Visit declared pages on a live session and probe every element."""

from __future__ import annotations

import logging

from pageobjects.browser.base import DriverSession
from pageobjects.exceptions import PageObjectError
from pageobjects.models import ElementReport, PageReport
from pageobjects.page import Page
from pageobjects.settings import PageObjectSettings

logger = logging.getLogger(__name__)


async def inspect_page(page: Page) -> PageReport:
    """Visit *page* and report which of its declared elements resolve."""
    report = PageReport(page=page.page_name, url=page.absolute_url)
    try:
        await page.visit()
    except PageObjectError as exc:
        logger.warning("Could not visit %s: %s", page.page_name, exc)
        report.error = str(exc)
        return report
    report.loaded = True
    try:
        report.title = await page.title()
    except PageObjectError as exc:
        logger.warning("Could not read title of %s: %s", page.page_name, exc)

    for name, declaration in page.elements().items():
        element = getattr(page, name)
        entry = ElementReport(
            name=name,
            role=declaration.role,
            locators=", ".join(str(loc) for loc in declaration.locators),
        )
        try:
            entry.found = await element.exists()
            entry.visible = entry.found and await element.is_visible()
        except PageObjectError as exc:
            entry.error = str(exc)
        if not entry.found:
            logger.info("%s.%s not found.", page.page_name, name)
        report.elements.append(entry)
    return report


async def inspect_pages(
    session: DriverSession,
    page_classes: dict[str, type[Page]],
    settings: PageObjectSettings,
) -> list[PageReport]:
    """Inspect each page class in order on one session."""
    reports: list[PageReport] = []
    for name, page_cls in page_classes.items():
        logger.info("Inspecting page %r.", name)
        reports.append(await inspect_page(page_cls.from_settings(session, settings)))
    return reports
