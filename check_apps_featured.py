# Smoke check: is the Featured tab activated on the precisionFDA Apps page?
import argparse
import logging
import sys
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Playwright, sync_playwright

import pfda_settings
from apps_featured_page import AppsFeaturedPage
from page_errors import PageNotReadyError, SessionError

EXIT_ACTIVATED = 0
EXIT_NOT_ACTIVATED = 1
EXIT_NOT_READY = 2
EXIT_SESSION_ERROR = 3


# ---------- CHECK ----------
def check_featured_activated(playwright: Playwright, url: str, headless: bool, timeout_ms: int) -> bool:
    """Opens the Apps page and returns whether the Featured link is activated."""
    try:
        browser = playwright.chromium.launch(headless=headless)
    except PlaywrightError as e:
        raise SessionError(f"Browser launch failed: {e.message}") from e
    try:
        context = browser.new_context()
        page = context.new_page()
        try:
            page.goto(url, wait_until="domcontentloaded", timeout=pfda_settings.NAVIGATION_TIMEOUT_MS)
        except PlaywrightError as e:
            raise SessionError(f"Navigation to {url} failed: {e.message}") from e

        apps_page = AppsFeaturedPage(page, timeout_ms=timeout_ms)
        return apps_page.is_featured_link_activated()
    finally:
        browser.close()


# ---------- MAIN ----------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check the Apps > Featured tab state.")
    parser.add_argument("--url", default=pfda_settings.apps_featured_url(), help="Apps Featured page URL")
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    parser.add_argument(
        "--timeout", type=int, default=pfda_settings.PAGE_TIMEOUT_MS, help="readiness timeout in ms"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)
    headless = pfda_settings.HEADLESS and not args.headed

    try:
        with sync_playwright() as pw:
            activated = check_featured_activated(pw, args.url, headless, args.timeout)
    except PageNotReadyError as e:
        logger.error("Apps page not ready: %s", e)
        return EXIT_NOT_READY
    except (SessionError, PlaywrightError) as e:
        logger.error("Browser session failed: %s", e)
        return EXIT_SESSION_ERROR

    if activated:
        logger.info("Featured link is activated on %s", args.url)
        return EXIT_ACTIVATED
    logger.warning("Featured link is NOT activated on %s", args.url)
    return EXIT_NOT_ACTIVATED


# ---------- ENTRY POINT ----------
if __name__ == "__main__":
    sys.exit(main())
