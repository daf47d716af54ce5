"""Build page classes from YAML page definitions.

A definitions file looks like::

    pages:
      search:
        url: https://www.google.com
        elements:
          q: textbox
          btnK: button
          lucky:
            role: button
            locators: ["css=input[name=btnI]"]
            timeout: 2000

The short form ``name: role`` uses the element name as a ``name`` locator.
"""

from __future__ import annotations

import keyword
import logging
from pathlib import Path
from typing import Any

import yaml

from pageobjects.elements import ROLES
from pageobjects.exceptions import PageDefinitionError
from pageobjects.locators import Locator
from pageobjects.models import ElementDefinition, PageDefinition
from pageobjects.page import Page

logger = logging.getLogger(__name__)


def load_page_definitions(path: str | Path) -> dict[str, PageDefinition]:
    """Read *path* and return its page definitions keyed by page name."""
    path = Path(path)
    if not path.exists():
        raise PageDefinitionError(f"Page definitions file {path} does not exist.")
    with open(path) as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise PageDefinitionError(f"{path} is not valid YAML: {exc}") from exc
    definitions = parse_page_definitions(data)
    logger.debug("Loaded %d page definition(s) from %s.", len(definitions), path)
    return definitions


def parse_page_definitions(data: Any) -> dict[str, PageDefinition]:
    """Validate an already-parsed definitions document."""
    if not isinstance(data, dict) or not isinstance(data.get("pages"), dict):
        raise PageDefinitionError("Definitions must be a mapping with a 'pages' mapping.")
    return {str(name): _parse_page(str(name), body) for name, body in data["pages"].items()}


def _parse_page(name: str, body: Any) -> PageDefinition:
    if not isinstance(body, dict):
        raise PageDefinitionError(f"Page {name!r}: expected a mapping.")
    url = body.get("url")
    if not isinstance(url, str) or not url.strip():
        raise PageDefinitionError(f"Page {name!r}: 'url' must be a non-empty string.")
    raw_elements = body.get("elements") or {}
    if not isinstance(raw_elements, dict):
        raise PageDefinitionError(f"Page {name!r}: 'elements' must be a mapping.")
    elements = tuple(
        _parse_element(name, str(el_name), spec) for el_name, spec in raw_elements.items()
    )
    return PageDefinition(name=name, url=url.strip(), elements=elements)


def _parse_element(page: str, name: str, spec: Any) -> ElementDefinition:
    where = f"Page {page!r}, element {name!r}"
    if not name.isidentifier() or keyword.iskeyword(name):
        raise PageDefinitionError(f"{where}: not a valid Python identifier.")

    if isinstance(spec, str):
        spec = {"role": spec}
    if not isinstance(spec, dict):
        raise PageDefinitionError(f"{where}: expected a role name or a mapping.")

    role = str(spec.get("role", "element")).strip().lower()
    if role not in ROLES:
        raise PageDefinitionError(f"{where}: unknown role {role!r}; expected one of {sorted(ROLES)}.")

    raw_locators = spec.get("locators", spec.get("locator", name))
    if isinstance(raw_locators, str):
        raw_locators = [raw_locators]
    if not isinstance(raw_locators, list) or not raw_locators:
        raise PageDefinitionError(f"{where}: 'locators' must be a string or a non-empty list.")
    try:
        locators = tuple(Locator.parse(loc) for loc in raw_locators)
    except PageDefinitionError as exc:
        raise PageDefinitionError(f"{where}: {exc}") from exc

    timeout = spec.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise PageDefinitionError(f"{where}: 'timeout' must be a non-negative number.")
        timeout = float(timeout)

    return ElementDefinition(name=name, role=role, locators=locators, timeout=timeout)


def _class_name(page_name: str) -> str:
    words = [w for w in page_name.replace("-", "_").split("_") if w]
    base = "".join(w[:1].upper() + w[1:] for w in words) or "Anonymous"
    return base if base.endswith("Page") else f"{base}Page"


def build_page_class(definition: PageDefinition) -> type[Page]:
    """Create a :class:`Page` subclass equivalent to a hand-written declaration."""
    namespace: dict[str, Any] = {
        "__module__": __name__,
        "__doc__": f"Page {definition.name!r} loaded from a definitions file.",
        "url": definition.url,
    }
    for el in definition.elements:
        namespace[el.name] = ROLES[el.role](*el.locators, timeout=el.timeout)
    return type(_class_name(definition.name), (Page,), namespace)


def load_pages(path: str | Path) -> dict[str, type[Page]]:
    """Load *path* and return page classes keyed by page name."""
    return {name: build_page_class(d) for name, d in load_page_definitions(path).items()}
