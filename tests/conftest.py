"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass
class FakeElement:
    """Stand-in for a driver element handle."""

    text: str = ""
    value: str = ""
    checked: bool = False
    visible: bool = True
    broken: bool = False
    attributes: dict[str, str] = field(default_factory=dict)
    clicks: int = 0


class FakeSession:
    """In-memory DriverSession: a selector -> element table and a URL log."""

    def __init__(self, dom: dict[str, FakeElement] | None = None) -> None:
        self.dom: dict[str, FakeElement] = dict(dom or {})
        self.titles: dict[str, str] = {}
        self.fail_urls: set[str] = set()
        self.visited: list[str] = []
        self.navigate_kwargs: list[dict] = []
        self.queries: list[tuple[str, float]] = []
        self.url = "about:blank"

    def _guard(self, element: FakeElement) -> FakeElement:
        if element.broken:
            raise RuntimeError("element is detached")
        return element

    async def navigate(self, url, *, wait_until="load", timeout=30_000):
        if url in self.fail_urls:
            raise RuntimeError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.visited.append(url)
        self.navigate_kwargs.append({"wait_until": wait_until, "timeout": timeout})
        self.url = url

    async def current_url(self):
        return self.url

    async def title(self):
        return self.titles.get(self.url, "")

    async def query(self, selector, *, timeout=5_000):
        self.queries.append((selector, timeout))
        return self.dom.get(selector)

    async def fill(self, element, value):
        self._guard(element).value = value

    async def click(self, element):
        self._guard(element).clicks += 1

    async def set_checked(self, element, checked):
        self._guard(element).checked = checked

    async def is_checked(self, element):
        return self._guard(element).checked

    async def input_value(self, element):
        return self._guard(element).value

    async def inner_text(self, element):
        return self._guard(element).text

    async def get_attribute(self, element, name):
        return self._guard(element).attributes.get(name)

    async def is_visible(self, element):
        return self._guard(element).visible


@pytest.fixture()
def session():
    """A fake session holding a search form."""
    return FakeSession(
        {
            '[name="q"]': FakeElement(),
            '[name="btnK"]': FakeElement(text="Google Search"),
            '[id="remember"]': FakeElement(),
            '[aria-label="Help"]': FakeElement(text="Help", attributes={"href": "/help"}),
            "h1.headline": FakeElement(text="Search the web", visible=False),
        }
    )


@pytest.fixture()
def tmp_settings_yaml(tmp_path):
    """Write a minimal pageobjects.yaml and return its path."""
    content = """\
base_url: "https://staging.example.com"
browser: "Firefox"
headless: false
slow_mo: 25
element_timeout: 2500
wait_until: "domcontentloaded"
pages_file: "{pages}"
""".format(pages=str(tmp_path / "pages.yaml"))
    p = tmp_path / "pageobjects.yaml"
    p.write_text(content)
    return p


@pytest.fixture()
def tmp_pages_yaml(tmp_path):
    """Write a small page definitions file and return its path."""
    content = """\
pages:
  search:
    url: https://www.google.com
    elements:
      q: textbox
      btnK: button
      lucky:
        role: button
        locators: ["css=input[name=btnI]", "text=I'm Feeling Lucky"]
        timeout: 1500
  login_form:
    url: /login
    elements:
      username:
        role: textbox
        locator: "id=user"
      remember: checkbox
"""
    p = tmp_path / "pages.yaml"
    p.write_text(content)
    return p
