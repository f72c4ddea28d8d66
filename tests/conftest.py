"""Shared pytest fixtures for the precisionFDA page object tests."""
from typing import Callable, Generator

import pytest
from playwright.sync_api import Browser, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from tests.support.fake_page import FakePage
from tests.support.selectors import ACTIVATED_LINK, MAIN_DIV


# =============================================================================
# Fake pages (no browser)
# =============================================================================


@pytest.fixture
def ready_page_factory() -> Callable[..., FakePage]:
    """Builds a FakePage whose Apps main container is visible."""

    def _make(activated_links: int = 0, **kwargs) -> FakePage:
        return FakePage(
            matches={MAIN_DIV: 1, ACTIVATED_LINK: activated_links},
            visible=[MAIN_DIV],
            **kwargs,
        )

    return _make


# =============================================================================
# Real browser (skipped when Chromium is not installed)
# =============================================================================


@pytest.fixture(scope="session")
def playwright_instance() -> Generator[Playwright, None, None]:
    with sync_playwright() as pw:
        yield pw


@pytest.fixture(scope="session")
def browser(playwright_instance: Playwright) -> Generator[Browser, None, None]:
    try:
        b = playwright_instance.chromium.launch(headless=True)
    except PlaywrightError as e:
        pytest.skip(f"Chromium not available: {e.message.splitlines()[0]}")
    yield b
    b.close()


@pytest.fixture
def browser_page(browser: Browser) -> Generator[Page, None, None]:
    context = browser.new_context()
    page = context.new_page()
    yield page
    context.close()
