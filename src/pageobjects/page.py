"""Base class for page objects."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, TypeVar
from urllib.parse import urljoin, urlsplit

from pageobjects.browser.base import DriverSession
from pageobjects.elements import CheckboxElement, Element, PageElement, TextBoxElement
from pageobjects.exceptions import (
    ActionError,
    NavigationError,
    PageDefinitionError,
    PageObjectError,
)
from pageobjects.settings import PageObjectSettings

logger = logging.getLogger(__name__)

_ACTION_MARKER = "__page_action__"

# set on every instance in Page.__init__
_INSTANCE_ATTRS: frozenset[str] = frozenset(
    {"base_url", "element_timeout", "navigation_timeout", "wait_until"}
)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def action(fn: F) -> F:
    """Mark an async page method as a named composite action.

    Calls are logged, and errors raised by the driver inside the action are
    re-raised as :class:`ActionError`.
    """
    if not inspect.iscoroutinefunction(fn):
        raise PageDefinitionError(f"@action needs an async method, got {fn.__qualname__}.")

    @functools.wraps(fn)
    async def wrapper(self: "Page", *args: Any, **kwargs: Any) -> Any:
        logger.info("%s: %s.", self.page_name, fn.__name__)
        try:
            return await fn(self, *args, **kwargs)
        except PageObjectError:
            raise
        except Exception as exc:
            raise ActionError(f"{self.page_name}.{fn.__name__} failed: {exc}") from exc

    setattr(wrapper, _ACTION_MARKER, True)
    return wrapper  # type: ignore[return-value]


class Page:
    """A single UI page: one URL plus the elements declared on it.

    Subclasses set :attr:`url` and declare elements as class attributes. A page
    object is bound to a live driver session and never launches or closes it.
    """

    url: str = ""

    def __init__(
        self,
        session: DriverSession,
        *,
        base_url: str = "",
        element_timeout: float = 5_000,
        navigation_timeout: float = 30_000,
        wait_until: str = "load",
    ) -> None:
        self._session = session
        self.base_url = base_url
        self.element_timeout = element_timeout
        self.navigation_timeout = navigation_timeout
        self.wait_until = wait_until
        self._element_cache: dict[str, PageElement] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.url, str):
            raise PageDefinitionError(f"{cls.__name__}.url must be a string.")
        for name, value in vars(cls).items():
            if isinstance(value, Element) and _is_reserved(name):
                raise PageDefinitionError(
                    f"{cls.__name__}.{name} shadows a Page member; pick another element name."
                )

    @classmethod
    def from_settings(cls, session: DriverSession, settings: PageObjectSettings) -> "Page":
        return cls(
            session,
            base_url=settings.base_url,
            element_timeout=settings.element_timeout,
            navigation_timeout=settings.navigation_timeout,
            wait_until=settings.wait_until,
        )

    def __repr__(self) -> str:
        return f"<{self.page_name} url={type(self).url!r}>"

    # --- introspection ---

    @property
    def page_name(self) -> str:
        return type(self).__name__

    @property
    def session(self) -> DriverSession:
        """The raw driver session this page is bound to."""
        return self._session

    @property
    def absolute_url(self) -> str:
        url = type(self).url
        if not url:
            raise PageDefinitionError(f"{self.page_name} does not declare a url.")
        if self.base_url:
            return urljoin(self.base_url, url)
        return url

    @classmethod
    def elements(cls) -> dict[str, Element]:
        """Return declared elements by name, base-class declarations first."""
        found: dict[str, Element] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Element):
                    found[name] = value
                elif name in found:
                    # overridden by a non-element in a subclass
                    del found[name]
        return found

    @classmethod
    def actions(cls) -> dict[str, Callable[..., Awaitable[Any]]]:
        """Return the composite actions declared with :func:`action`."""
        return {
            name: member
            for name, member in inspect.getmembers(cls, inspect.isfunction)
            if getattr(member, _ACTION_MARKER, False)
        }

    # --- navigation ---

    async def visit(self) -> "Page":
        """Navigate the session to this page's URL and start a new page lifetime."""
        url = self.absolute_url
        self._element_cache.clear()
        logger.info("Visiting %s at %s.", self.page_name, url)
        try:
            await self._session.navigate(url, wait_until=self.wait_until, timeout=self.navigation_timeout)
        except PageObjectError:
            raise
        except Exception as exc:
            raise NavigationError(f"Could not load {self.page_name} at {url}: {exc}") from exc
        return self

    async def title(self) -> str:
        return await self._read("title", self._session.title)

    async def current_url(self) -> str:
        return await self._read("current URL", self._session.current_url)

    async def is_current(self) -> bool:
        """Return ``True`` if the session is on this page's URL, ignoring query and fragment."""
        here = urlsplit(await self.current_url())
        there = urlsplit(self.absolute_url)
        return (here.scheme, here.netloc, here.path.rstrip("/")) == (
            there.scheme,
            there.netloc,
            there.path.rstrip("/"),
        )

    async def _read(self, what: str, fn: Callable[[], Awaitable[str]]) -> str:
        try:
            return await fn()
        except PageObjectError:
            raise
        except Exception as exc:
            raise NavigationError(f"Could not read the {what} of {self.page_name}: {exc}") from exc

    # --- elements ---

    def _bound_element(self, declaration: Element) -> PageElement:
        element = self._element_cache.get(declaration.name)
        if element is None:
            element = declaration.bind(self)
            self._element_cache[declaration.name] = element
        return element

    async def fill_form(self, **values: Any) -> None:
        """Fill textboxes and set checkboxes by element name."""
        declared = self.elements()
        for name, value in values.items():
            if name not in declared:
                raise PageDefinitionError(f"{self.page_name} has no element named {name!r}.")
            element = getattr(self, name)
            if isinstance(element, TextBoxElement):
                await element.fill(value)
            elif isinstance(element, CheckboxElement):
                await element.set(bool(value))
            else:
                raise PageDefinitionError(
                    f"{self.page_name}.{name} is a {element.role} and cannot be filled."
                )


def _is_reserved(name: str) -> bool:
    return name.startswith("_") or name in _INSTANCE_ATTRS or hasattr(Page, name)
