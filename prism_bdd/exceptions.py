"""Exceptions raised by the Prism BDD support layer."""


class PrismBddError(Exception):
    """Base class for all Prism BDD errors."""


class ConfigurationError(PrismBddError):
    """Raised when an environment setting is missing or invalid."""


class TestDataError(PrismBddError):
    """Raised when the test data file or a key path in it cannot be found."""

    __test__ = False


class BrowserNotInitializedError(PrismBddError):
    """Raised when a browser, context or page is used before it was created."""


class ElementNotFoundError(PrismBddError):
    """Raised when every selector of a fallback chain failed to match."""
