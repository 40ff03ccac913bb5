"""
================================================================================
Playwright Bridge
================================================================================

`BrowserBridge` implementation on top of the Playwright sync API.

Responsibilities:
    - Launch Chromium or Firefox and open a single page
    - Translate harness Locators into Playwright selectors
    - Map Playwright errors onto the harness error kinds
    - Run `arguments[i]`-style scripts through page.evaluate

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    ElementHandle,
    Error as PlaywrightError,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
    sync_playwright,
)

from .errors import BridgeError, ElementNotFoundError, StaleReferenceError
from .locator import By, Locator
from .settings import BrowserKind


MAXIMIZED_VIEWPORT: Dict[str, int] = {"width": 1920, "height": 1080}

# Default browser launch options (Chromium only)
CHROMIUM_LAUNCH_ARGS: List[str] = [
    "--start-maximized",
    "--ignore-certificate-errors",
]

# Default context options
DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
    "viewport": MAXIMIZED_VIEWPORT,
    "ignore_https_errors": True,
}

# Playwright messages meaning the handle's node (or its document) is gone
STALE_MESSAGES = (
    "not attached to the DOM",
    "Execution context was destroyed",
    "JSHandle is disposed",
    "Cannot find context with specified id",
)

SCRIPT_WRAPPER = "args => (function () { %s }).apply(null, args)"


def to_selector(locator: Locator) -> str:
    """
    Translate a Locator into a Playwright selector.

    Examples:
        >>> to_selector(Locator.by_id("searchInput"))
        'css=[id="searchInput"]'
        >>> to_selector(Locator.xpath("//h1"))
        'xpath=//h1'
    """
    if locator.strategy is By.ID:
        escaped = locator.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'css=[id="{escaped}"]'
    if locator.strategy is By.XPATH:
        return f"xpath={locator.value}"
    return f"css={locator.value}"


def is_stale_error(error: Exception) -> bool:
    message = str(error)
    return any(marker in message for marker in STALE_MESSAGES)


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise Playwright errors as harness errors."""
    try:
        yield
    except PlaywrightTimeoutError as e:
        raise BridgeError(f"{action} timed out: {e}") from e
    except PlaywrightError as e:
        if is_stale_error(e):
            raise StaleReferenceError(f"{action}: element is stale ({e})") from e
        raise BridgeError(f"{action} failed: {e}") from e


class PlaywrightBridge:
    """
    Browser bridge driving one Playwright page.

    Usage:
        bridge = PlaywrightBridge.launch(BrowserKind.CHROME, headless=True)
        bridge.navigate("https://www.wikipedia.org/")
        heading = bridge.find_element(Locator.by_id("firstHeading"))
        bridge.quit()
    """

    def __init__(
        self,
        playwright: Optional[Playwright],
        browser: Optional[Browser],
        context: Optional[BrowserContext],
        page: Page,
    ):
        self._playwright = playwright
        self._browser = browser
        self._context = context
        self._page = page

    @classmethod
    def launch(cls, kind: BrowserKind, headless: bool = True) -> "PlaywrightBridge":
        """
        Start Playwright and open a page in the requested browser.

        Args:
            kind: Browser to launch; anything but FIREFOX launches Chromium
            headless: Run browser in headless mode
        """
        playwright = sync_playwright().start()
        try:
            if kind is BrowserKind.FIREFOX:
                browser = playwright.firefox.launch(headless=headless)
            else:
                browser = playwright.chromium.launch(
                    headless=headless,
                    args=CHROMIUM_LAUNCH_ARGS,
                )
            context = browser.new_context(**DEFAULT_CONTEXT_OPTIONS)
            page = context.new_page()
        except PlaywrightError as e:
            playwright.stop()
            raise BridgeError(f"Could not launch {kind.value}: {e}") from e

        logger.debug(f"Browser started: {kind.value} (headless={headless})")
        return cls(playwright, browser, context, page)

    @property
    def page(self) -> Page:
        return self._page

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self, url: str) -> None:
        with translate_errors(f"Navigate to {url}"):
            self._page.goto(url)

    def current_url(self) -> str:
        return self._page.url

    def title(self) -> str:
        with translate_errors("Read title"):
            return self._page.title()

    # =========================================================================
    # Lookup
    # =========================================================================

    def find_elements(self, locator: Locator) -> List[ElementHandle]:
        with translate_errors(f"Find {locator}"):
            return self._page.query_selector_all(to_selector(locator))

    def find_element(self, locator: Locator) -> ElementHandle:
        # wait_for_selector uses the page default timeout (implicit wait)
        try:
            element = self._page.wait_for_selector(
                to_selector(locator), state="attached"
            )
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(f"No element matches {locator}") from e
        except PlaywrightError as e:
            raise BridgeError(f"Find {locator} failed: {e}") from e
        if element is None:
            raise ElementNotFoundError(f"No element matches {locator}")
        return element

    # =========================================================================
    # Element State and Actions
    # =========================================================================

    def is_displayed(self, element: ElementHandle) -> bool:
        with translate_errors("Check visibility"):
            return element.is_visible()

    def is_enabled(self, element: ElementHandle) -> bool:
        with translate_errors("Check enabled"):
            return element.is_enabled()

    def click(self, element: ElementHandle) -> None:
        with translate_errors("Click"):
            element.click()

    def clear(self, element: ElementHandle) -> None:
        with translate_errors("Clear"):
            element.fill("")

    def send_keys(self, element: ElementHandle, text: str) -> None:
        with translate_errors("Type"):
            element.type(text)

    def press_key(self, element: ElementHandle, key: str) -> None:
        with translate_errors(f"Press {key}"):
            element.press(key)

    def get_text(self, element: ElementHandle) -> str:
        with translate_errors("Read text"):
            return element.inner_text()

    def execute_script(self, script: str, *args: Any) -> Any:
        with translate_errors("Execute script"):
            return self._page.evaluate(SCRIPT_WRAPPER % script, list(args))

    # =========================================================================
    # Session Configuration
    # =========================================================================

    def maximize_window(self) -> None:
        self._page.set_viewport_size(MAXIMIZED_VIEWPORT)

    def set_timeouts(self, implicit_seconds: int, page_load_seconds: int) -> None:
        self._page.set_default_timeout(implicit_seconds * 1000)
        self._page.set_default_navigation_timeout(page_load_seconds * 1000)

    def quit(self) -> None:
        """Close context, browser and Playwright."""
        if self._context:
            try:
                self._context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
            self._context = None

        if self._browser:
            try:
                self._browser.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser: {e}")
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")


__all__ = [
    "PlaywrightBridge",
    "to_selector",
    "translate_errors",
]
