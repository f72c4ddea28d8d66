import logging
from typing import Dict, Optional

from playwright.sync_api import Locator, Page

import apps_locators
from page_readiness import PageReadiness

log = logging.getLogger(__name__)


class AppsFeaturedPage:
    """Page Object for the precisionFDA Apps > Featured page."""

    # field name -> XPath, resolved on every access
    LOCATORS: Dict[str, str] = {
        "apps_main_div": apps_locators.APPS_MAIN_DIV,
        "apps_featured_activated_link": apps_locators.APPS_FEATURED_ACTIVATED_LINK,
    }
    READY_MARKER = "apps_main_div"

    def __init__(
        self,
        page: Page,
        readiness: Optional[PageReadiness] = None,
        logger: Optional[logging.Logger] = None,
        timeout_ms: Optional[int] = None,
    ) -> None:
        """Binds to an already-open Apps page and blocks until it is ready.

        Raises PageNotReadyError when the page scripts or the Apps main
        container are not ready in time.
        """
        self.page = page
        self.log = logger or log
        self.readiness = readiness or PageReadiness(page, timeout_ms=timeout_ms, logger=self.log)

        self.readiness.wait_until_ready(self.locator_for(self.READY_MARKER), timeout_ms)
        self.log.debug("Apps Featured page ready")

    def locator_for(self, name: str) -> str:
        return self.LOCATORS[name]

    # ---------- FEATURED TAB ----------
    def get_activated_link(self) -> Locator:
        """Locator for the Featured tab link in its activated state."""
        return self.readiness.element(self.locator_for("apps_featured_activated_link"))

    def is_featured_link_activated(self) -> bool:
        """True if the activated Featured link is in the DOM right now."""
        activated = self.readiness.is_element_present(self.get_activated_link())
        self.log.debug("Featured link activated: %s", activated)
        return activated
