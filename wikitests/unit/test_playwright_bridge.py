from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from wikitests.ui_testing.framework.errors import (
    BridgeError,
    ElementNotFoundError,
    StaleReferenceError,
)
from wikitests.ui_testing.framework.locator import Locator
from wikitests.ui_testing.framework.playwright_bridge import (
    PlaywrightBridge,
    to_selector,
    translate_errors,
)


@pytest.mark.parametrize(
    "locator, selector",
    [
        (Locator.by_id("searchInput"), 'css=[id="searchInput"]'),
        (Locator.by_id('odd"id'), 'css=[id="odd\\"id"]'),
        (Locator.css("a[lang='hi']"), "css=a[lang='hi']"),
        (Locator.xpath("//h1"), "xpath=//h1"),
    ],
)
def test_to_selector(locator, selector):
    assert to_selector(locator) == selector


def test_detached_element_errors_become_stale():
    with pytest.raises(StaleReferenceError):
        with translate_errors("Click"):
            raise PlaywrightError("Element is not attached to the DOM")


def test_other_errors_become_bridge_errors():
    with pytest.raises(BridgeError) as exc_info:
        with translate_errors("Navigate"):
            raise PlaywrightTimeoutError("Timeout 30000ms exceeded")
    assert not isinstance(exc_info.value, StaleReferenceError)

    with pytest.raises(BridgeError, match="Execute script failed"):
        with translate_errors("Execute script"):
            raise PlaywrightError("ReferenceError: foo is not defined")


@pytest.fixture
def page():
    return MagicMock()


@pytest.fixture
def bridge(page):
    return PlaywrightBridge(None, None, None, page)


def test_find_element_maps_timeout_to_not_found(bridge, page):
    page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 10000ms exceeded")

    with pytest.raises(ElementNotFoundError):
        bridge.find_element(Locator.by_id("missing"))

    page.wait_for_selector.assert_called_once_with('css=[id="missing"]', state="attached")


def test_execute_script_passes_handles_as_arguments(bridge, page):
    handle = object()
    page.evaluate.return_value = True

    assert bridge.execute_script("return arguments[0] !== null;", handle) is True

    expression, args = page.evaluate.call_args[0]
    assert "return arguments[0] !== null;" in expression
    assert args == [handle]


def test_timeouts_are_applied_in_milliseconds(bridge, page):
    bridge.set_timeouts(10, 30)

    page.set_default_timeout.assert_called_once_with(10000)
    page.set_default_navigation_timeout.assert_called_once_with(30000)


def test_element_actions_delegate_to_handle(bridge):
    handle = MagicMock()
    handle.inner_text.return_value = "India"

    bridge.clear(handle)
    bridge.send_keys(handle, "India")
    bridge.press_key(handle, "Enter")

    handle.fill.assert_called_once_with("")
    handle.type.assert_called_once_with("India")
    handle.press.assert_called_once_with("Enter")
    assert bridge.get_text(handle) == "India"


def test_quit_closes_everything_once():
    playwright, browser, context = MagicMock(), MagicMock(), MagicMock()
    bridge = PlaywrightBridge(playwright, browser, context, MagicMock())

    bridge.quit()
    bridge.quit()

    context.close.assert_called_once()
    browser.close.assert_called_once()
    playwright.stop.assert_called_once()


def test_quit_stops_playwright_when_browser_close_fails():
    playwright, browser, context = MagicMock(), MagicMock(), MagicMock()
    browser.close.side_effect = PlaywrightError("Target closed")
    bridge = PlaywrightBridge(playwright, browser, context, MagicMock())

    bridge.quit()

    context.close.assert_called_once()
    playwright.stop.assert_called_once()
