from typing import Optional


class PageObjectError(Exception):
    """Base class for page object failures."""


class PageNotReadyError(PageObjectError):
    """Page did not become ready before the readiness deadline."""

    def __init__(self, locator: str, timeout_ms: int, reason: Optional[str] = None) -> None:
        self.locator = locator
        self.timeout_ms = timeout_ms
        message = f"Page not ready after {timeout_ms} ms waiting for '{locator}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SessionError(PageObjectError):
    """Browser session failed while querying the page (e.g. page or browser closed)."""
