"""Readiness waits and presence checks shared by the precisionFDA page objects.

Page objects hold a ``PageReadiness`` instead of inheriting from a base page,
so each page picks only the helpers it needs.
"""
import logging
import math
import time
from typing import Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

import pfda_settings
from page_errors import PageNotReadyError, SessionError

log = logging.getLogger(__name__)

# Document loaded and no jQuery ajax calls in flight
SCRIPTS_READY_JS = """() => document.readyState === 'complete'
    && (typeof window.jQuery === 'undefined' || window.jQuery.active === 0)"""
SCRIPTS_READY_LABEL = "document.readyState/jQuery.active"


def xpath_selector(xpath: str) -> str:
    """Playwright selector string for a raw XPath expression."""
    if xpath.startswith("xpath="):
        return xpath
    return f"xpath={xpath}"


class PageReadiness:
    """Blocking readiness waits and single-shot element checks for one Page."""

    def __init__(
        self,
        page: Page,
        timeout_ms: Optional[int] = None,
        poll_interval_ms: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.page = page
        self.timeout_ms = pfda_settings.PAGE_TIMEOUT_MS if timeout_ms is None else timeout_ms
        self.poll_interval_ms = (
            pfda_settings.POLL_INTERVAL_MS if poll_interval_ms is None else poll_interval_ms
        )
        self.log = logger or log

    # ---------- ELEMENTS ----------
    def element(self, xpath: str) -> Locator:
        """Fresh, lazily resolved locator for the XPath."""
        return self.page.locator(xpath_selector(xpath))

    def is_element_present(self, target: Union[Locator, str]) -> bool:
        """True if at least one node matches right now; no waiting."""
        locator = self.element(target) if isinstance(target, str) else target
        try:
            count = locator.count()
        except PlaywrightError as e:
            raise SessionError(f"Presence check failed: {e.message}") from e
        self.log.debug("Presence check %s -> %d match(es)", locator, count)
        return count > 0

    # ---------- WAITS ----------
    def wait_until_scripts_ready(self, timeout_ms: Optional[int] = None) -> None:
        """Poll until the document is complete and no jQuery requests are active."""
        timeout_ms = self._budget(SCRIPTS_READY_LABEL, timeout_ms)
        self.log.debug("Waiting up to %d ms for page scripts", timeout_ms)
        try:
            self.page.wait_for_function(
                SCRIPTS_READY_JS, timeout=timeout_ms, polling=self.poll_interval_ms
            )
        except PlaywrightTimeoutError as e:
            raise self._not_ready(SCRIPTS_READY_LABEL, timeout_ms, e) from e
        except PlaywrightError as e:
            raise SessionError(f"Scripts-ready wait failed: {e.message}") from e

    def wait_for_page_to_load_and_verify(self, xpath: str, timeout_ms: Optional[int] = None) -> None:
        """Block until the page marker element is visible."""
        timeout_ms = self._budget(xpath, timeout_ms)
        self.log.debug("Waiting up to %d ms for %s to be visible", timeout_ms, xpath)
        try:
            self.element(xpath).first.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise self._not_ready(xpath, timeout_ms, e) from e
        except PlaywrightError as e:
            raise SessionError(f"Page marker wait failed: {e.message}") from e

    def wait_until_ready(self, xpath: str, timeout_ms: Optional[int] = None) -> None:
        """Scripts-ready wait then marker wait, both within one deadline."""
        total_ms = self.timeout_ms if timeout_ms is None else timeout_ms
        deadline = time.monotonic() + total_ms / 1000

        self.wait_until_scripts_ready(total_ms)
        remaining_ms = math.floor((deadline - time.monotonic()) * 1000)
        if remaining_ms <= 0:
            raise self._not_ready(xpath, total_ms)
        self.wait_for_page_to_load_and_verify(xpath, remaining_ms)

    # ---------- HELPERS ----------
    def _budget(self, what: str, timeout_ms: Optional[int]) -> int:
        timeout_ms = self.timeout_ms if timeout_ms is None else timeout_ms
        # Playwright treats 0 as "wait forever"
        if timeout_ms <= 0:
            raise self._not_ready(what, timeout_ms)
        return timeout_ms

    def _not_ready(
        self, what: str, timeout_ms: int, error: Optional[PlaywrightError] = None
    ) -> PageNotReadyError:
        self.log.warning("Page not ready after %d ms waiting for %s", timeout_ms, what)
        reason = error.message if error is not None else "readiness deadline elapsed"
        return PageNotReadyError(what, timeout_ms, reason)
