"""Plain data models for declarative page definitions and inspection results."""

from __future__ import annotations

from dataclasses import dataclass, field

from pageobjects.locators import Locator


@dataclass(frozen=True)
class ElementDefinition:
    """One named element: its role and the locators to try, in order."""

    name: str
    role: str
    locators: tuple[Locator, ...]
    timeout: float | None = None


@dataclass(frozen=True)
class PageDefinition:
    """A page as data: a single URL and its named elements."""

    name: str
    url: str
    elements: tuple[ElementDefinition, ...] = ()


@dataclass
class ElementReport:
    """Outcome of probing one declared element on a live page."""

    name: str
    role: str
    locators: str
    found: bool = False
    visible: bool = False
    error: str = ""


@dataclass
class PageReport:
    """Outcome of visiting one page and probing all of its elements."""

    page: str
    url: str
    title: str = ""
    loaded: bool = False
    error: str = ""
    elements: list[ElementReport] = field(default_factory=list)

    @property
    def missing(self) -> int:
        return sum(1 for e in self.elements if not e.found)

    @property
    def ok(self) -> bool:
        return self.loaded and self.missing == 0
