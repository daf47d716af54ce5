"""Custom exception hierarchy for pageobjects."""


class PageObjectError(Exception):
    """Base exception for all pageobjects errors."""


class ConfigurationError(PageObjectError):
    """Raised when settings are invalid or missing."""


class PageDefinitionError(PageObjectError):
    """Raised when a page or element declaration is malformed."""


class LocatorError(PageDefinitionError):
    """Raised when a locator has an unknown strategy or an empty value."""


class SessionError(PageObjectError):
    """Raised when the driver session fails to start or stop."""


class NavigationError(PageObjectError):
    """Raised when a page fails to load."""


class ElementNotFoundError(PageObjectError):
    """Raised when no locator of a declared element matches in time."""


class ElementInteractionError(PageObjectError):
    """Raised when the driver rejects an interaction with a resolved element."""


class ActionError(PageObjectError):
    """Raised when a composite page action fails inside the driver."""
