"""Protocol definition for driver sessions."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DriverSession(Protocol):
    """The slice of a live browser session that page objects rely on.

    Every method is async so page code can ``await`` each interaction.
    Element handles are opaque to this layer; they are passed back to the
    session for every interaction.
    """

    async def navigate(self, url: str, *, wait_until: str = "load", timeout: float = 30_000) -> None:
        """Navigate to *url* and wait for the specified load event."""
        ...

    async def current_url(self) -> str:
        """Return the URL the session is currently on."""
        ...

    async def title(self) -> str:
        """Return the document title of the current page."""
        ...

    async def query(self, selector: str, *, timeout: float = 5_000) -> Any | None:
        """Return the first element matching *selector*, or ``None`` after *timeout*."""
        ...

    async def fill(self, element: Any, value: str) -> None:
        """Clear *element* and type *value* into it."""
        ...

    async def click(self, element: Any) -> None:
        """Click *element*."""
        ...

    async def set_checked(self, element: Any, checked: bool) -> None:
        """Check or uncheck a checkbox/radio *element*."""
        ...

    async def is_checked(self, element: Any) -> bool:
        """Return whether a checkbox/radio *element* is checked."""
        ...

    async def input_value(self, element: Any) -> str:
        """Return the current value of a form control."""
        ...

    async def inner_text(self, element: Any) -> str:
        """Return the visible text of *element*."""
        ...

    async def get_attribute(self, element: Any, name: str) -> str | None:
        """Return the value of attribute *name* on *element*."""
        ...

    async def is_visible(self, element: Any) -> bool:
        """Return ``True`` if *element* is rendered and visible."""
        ...
