"""Locator value type and its translation to driver selector strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pageobjects.exceptions import LocatorError

DEFAULT_STRATEGY = "name"


def _attr(name: str):
    return lambda value: f'[{name}="{_escape(value)}"]'


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


# strategy -> selector builder
_STRATEGIES = {
    "name": _attr("name"),
    "id": _attr("id"),
    "label": _attr("aria-label"),
    "placeholder": _attr("placeholder"),
    "test_id": _attr("data-testid"),
    "css": lambda value: value,
    "xpath": lambda value: f"xpath={value}",
    "text": lambda value: f'text="{_escape(value)}"',
}

STRATEGIES: frozenset[str] = frozenset(_STRATEGIES)


@dataclass(frozen=True)
class Locator:
    """Identifies an element within a page.

    *strategy* says how *value* is matched; ``name`` (the element's ``name``
    attribute) is the default.
    """

    value: str
    strategy: str = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        if self.strategy not in _STRATEGIES:
            raise LocatorError(
                f"Unknown locator strategy {self.strategy!r}; "
                f"expected one of {sorted(_STRATEGIES)}."
            )
        if not isinstance(self.value, str) or not self.value.strip():
            raise LocatorError(f"Empty {self.strategy} locator.")

    @classmethod
    def parse(cls, spec: "LocatorLike") -> "Locator":
        """Build a locator from ``"q"``, ``"css=input.q"``, ``"id=search"`` etc.

        A bare string with no recognised ``strategy=`` prefix is a name locator.
        """
        if isinstance(spec, Locator):
            return spec
        if not isinstance(spec, str):
            raise LocatorError(f"Locator must be a string, got {type(spec).__name__}.")
        prefix, sep, rest = spec.partition("=")
        if sep and prefix.strip() in _STRATEGIES:
            return cls(rest.strip(), prefix.strip())
        return cls(spec.strip())

    def selector(self) -> str:
        """Return the Playwright selector string for this locator."""
        return _STRATEGIES[self.strategy](self.value)

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


LocatorLike = Union[str, Locator]
