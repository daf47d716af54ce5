"""Element accessor declarations and the handles they bind to on a page.

A declaration is a class attribute on a :class:`~pageobjects.page.Page`
subclass::

    class SearchPage(Page):
        url = "https://www.google.com"
        q = TextBox()
        btnK = Button()

Reading ``page.q`` on an instance yields a :class:`PageElement` bound to that
page. The same object comes back on every access until the page is visited
again, and it keeps the driver's element handle once resolved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from pageobjects.exceptions import (
    ElementInteractionError,
    ElementNotFoundError,
    PageDefinitionError,
    PageObjectError,
)
from pageobjects.locators import Locator, LocatorLike

if TYPE_CHECKING:
    from pageobjects.page import Page

logger = logging.getLogger(__name__)


class PageElement:
    """An element declaration bound to one page instance."""

    def __init__(self, page: "Page", declaration: "Element") -> None:
        self._page = page
        self._declaration = declaration
        self._handle: Any = None

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self._page.page_name}.{self.name} "
            f"({', '.join(str(loc) for loc in self.locators)})>"
        )

    @property
    def name(self) -> str:
        return self._declaration.name

    @property
    def role(self) -> str:
        return self._declaration.role

    @property
    def locators(self) -> tuple[Locator, ...]:
        return self._declaration.locators

    @property
    def timeout(self) -> float:
        if self._declaration.timeout is not None:
            return self._declaration.timeout
        return self._page.element_timeout

    @property
    def is_resolved(self) -> bool:
        return self._handle is not None

    async def resolve(self) -> Any:
        """Return the driver's handle for this element, looking it up once.

        Each locator is tried in declaration order, each waiting up to
        :attr:`timeout` ms. The first match is cached for the rest of the
        page lifetime.
        """
        if self._handle is not None:
            return self._handle

        session = self._page.session
        for locator in self.locators:
            try:
                handle = await session.query(locator.selector(), timeout=self.timeout)
            except PageObjectError:
                raise
            except Exception as exc:
                raise ElementInteractionError(
                    f"Could not look up {self._page.page_name}.{self.name} via {locator}: {exc}"
                ) from exc
            if handle is not None:
                logger.debug("Resolved %s.%s via %s.", self._page.page_name, self.name, locator)
                self._handle = handle
                return handle

        tried = ", ".join(str(loc) for loc in self.locators)
        raise ElementNotFoundError(
            f"{self._page.page_name}.{self.name} ({self.role}) not found "
            f"within {self.timeout:g} ms; tried {tried}."
        )

    def invalidate(self) -> None:
        """Forget the cached handle so the next call looks the element up again."""
        self._handle = None

    # --- probes ---

    async def exists(self) -> bool:
        try:
            await self.resolve()
        except ElementNotFoundError:
            return False
        return True

    async def is_visible(self) -> bool:
        if not await self.exists():
            return False
        return await self._call("check visibility of", self._page.session.is_visible)

    # --- reading ---

    async def text(self) -> str:
        return await self._call("read text of", self._page.session.inner_text)

    async def attribute(self, name: str) -> str | None:
        return await self._call(f"read attribute {name!r} of", self._page.session.get_attribute, name)

    async def _call(self, verb: str, fn: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        handle = await self.resolve()
        try:
            return await fn(handle, *args)
        except PageObjectError:
            raise
        except Exception as exc:
            raise ElementInteractionError(
                f"Could not {verb} {self._page.page_name}.{self.name}: {exc}"
            ) from exc


class TextBoxElement(PageElement):
    async def fill(self, value: str) -> None:
        """Replace the textbox contents with *value*."""
        logger.debug("Fill %s.%s.", self._page.page_name, self.name)
        await self._call("fill", self._page.session.fill, str(value))

    async def clear(self) -> None:
        await self._call("clear", self._page.session.fill, "")

    async def value(self) -> str:
        return await self._call("read value of", self._page.session.input_value)


class ButtonElement(PageElement):
    async def click(self) -> None:
        logger.debug("Click %s.%s.", self._page.page_name, self.name)
        await self._call("click", self._page.session.click)


class LinkElement(ButtonElement):
    async def href(self) -> str | None:
        return await self.attribute("href")


class CheckboxElement(PageElement):
    async def check(self) -> None:
        await self.set(True)

    async def uncheck(self) -> None:
        await self.set(False)

    async def set(self, checked: bool) -> None:
        logger.debug("Set %s.%s checked=%s.", self._page.page_name, self.name, checked)
        await self._call("set", self._page.session.set_checked, bool(checked))

    async def is_checked(self) -> bool:
        return await self._call("read state of", self._page.session.is_checked)


class Element:
    """Declares a named element on a page.

    Locators are tried in order; with none given, the attribute name is used as
    a ``name`` locator. *timeout* (ms) overrides the page's element timeout.
    """

    role = "element"
    element_class: type[PageElement] = PageElement

    def __init__(self, *locators: LocatorLike, timeout: float | None = None) -> None:
        self.locators: tuple[Locator, ...] = tuple(Locator.parse(loc) for loc in locators)
        self.timeout = timeout
        self.name = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(str(loc)) for loc in self.locators)})"

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name and self.name != name:
            raise PageDefinitionError(
                f"{owner.__name__}.{name}: this declaration is already bound as {self.name!r}; "
                "declare a separate element instead."
            )
        self.name = name
        if not self.locators:
            self.locators = (Locator(name),)

    def __get__(self, page: "Page | None", owner: type | None = None) -> Any:
        if page is None:
            return self
        return page._bound_element(self)

    def __set__(self, page: "Page", value: Any) -> None:
        raise AttributeError(
            f"{self.name!r} is a {self.role} declaration and cannot be assigned; "
            f"interact through the element, e.g. `await page.{self.name}.fill(...)`."
        )

    def bind(self, page: "Page") -> PageElement:
        if not self.name:
            raise PageDefinitionError(f"{self!r} was never attached to a page class.")
        return self.element_class(page, self)


class TextBox(Element):
    role = "textbox"
    element_class = TextBoxElement


class Button(Element):
    role = "button"
    element_class = ButtonElement


class Link(Element):
    role = "link"
    element_class = LinkElement


class Checkbox(Element):
    role = "checkbox"
    element_class = CheckboxElement


class Text(Element):
    role = "text"


ROLES: dict[str, type[Element]] = {
    cls.role: cls for cls in (Element, TextBox, Button, Link, Checkbox, Text)
}
