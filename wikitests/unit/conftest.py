"""
Fixtures for framework unit tests.

The in-memory FakeBridge stands in for a browser: tests register elements
under locators, flip their visibility/enabled/covered state, and make them
go stale a given number of times to simulate re-renders.
"""

import os
from typing import Any, Callable, Dict, List, Optional

import pytest
from loguru import logger

from wikitests.ui_testing.framework.action_executor import (
    SCRIPT_CLICK_SCRIPT,
    SCROLL_INTO_VIEW_SCRIPT,
    ActionExecutor,
)
from wikitests.ui_testing.framework.bridge import Keys
from wikitests.ui_testing.framework.errors import ElementNotFoundError, StaleReferenceError
from wikitests.ui_testing.framework.locator import Locator
from wikitests.ui_testing.framework.settings import Settings
from wikitests.ui_testing.framework.waits import HIT_TEST_SCRIPT


class FakeElement:
    def __init__(
        self,
        name: str,
        text: str = "",
        displayed: bool = True,
        enabled: bool = True,
        obscured: bool = False,
    ):
        self.name = name
        self.text = text
        self.displayed = displayed
        self.enabled = enabled
        self.obscured = obscured
        self.value = ""
        self.native_clicks = 0
        self.script_clicks = 0
        self.scrolled = False
        self.keys: List[str] = []
        # Next N operations on this element raise StaleReferenceError
        self.stale_uses = 0
        self.click_error: Optional[Exception] = None
        self.on_click: Optional[Callable[["FakeBridge"], None]] = None
        self.on_enter: Optional[Callable[["FakeBridge"], None]] = None

    def __repr__(self) -> str:
        return f"FakeElement({self.name!r})"


class FakeBridge:
    def __init__(self):
        self.dom: Dict[Locator, List[FakeElement]] = {}
        self.url = "about:blank"
        self.page_title = ""
        self.scripts: List[str] = []
        self.script_errors: Dict[str, Exception] = {}
        self.lookups = 0
        self.maximized = False
        self.timeouts: Optional[tuple] = None
        self.quit_calls = 0
        self.quit_error: Optional[Exception] = None
        # locator -> (lookups before the elements appear, elements)
        self._pending: Dict[Locator, tuple] = {}

    # -- test helpers -------------------------------------------------------

    def add(self, locator: Locator, *elements: FakeElement, after_lookups: int = 0) -> None:
        if after_lookups:
            self._pending[locator] = (after_lookups, list(elements))
        else:
            self.dom.setdefault(locator, []).extend(elements)

    def _use(self, element: FakeElement) -> None:
        if element.stale_uses > 0:
            element.stale_uses -= 1
            raise StaleReferenceError(f"{element.name} is not attached to the DOM")

    # -- BrowserBridge ------------------------------------------------------

    def navigate(self, url: str) -> None:
        self.url = url

    def find_elements(self, locator: Locator) -> List[FakeElement]:
        self.lookups += 1
        if locator in self._pending:
            remaining, elements = self._pending[locator]
            if remaining <= 1:
                del self._pending[locator]
                self.dom.setdefault(locator, []).extend(elements)
            else:
                self._pending[locator] = (remaining - 1, elements)
        return list(self.dom.get(locator, []))

    def find_element(self, locator: Locator) -> FakeElement:
        elements = self.find_elements(locator)
        if not elements:
            raise ElementNotFoundError(f"No element matches {locator}")
        return elements[0]

    def is_displayed(self, element: FakeElement) -> bool:
        return element.displayed

    def is_enabled(self, element: FakeElement) -> bool:
        return element.enabled

    def click(self, element: FakeElement) -> None:
        self._use(element)
        if element.click_error is not None:
            raise element.click_error
        element.native_clicks += 1
        if element.on_click:
            element.on_click(self)

    def clear(self, element: FakeElement) -> None:
        self._use(element)
        element.value = ""

    def send_keys(self, element: FakeElement, text: str) -> None:
        self._use(element)
        element.value += text

    def press_key(self, element: FakeElement, key: str) -> None:
        self._use(element)
        element.keys.append(key)
        if key == Keys.ENTER and element.on_enter:
            element.on_enter(self)

    def get_text(self, element: FakeElement) -> str:
        self._use(element)
        return element.text

    def execute_script(self, script: str, *args: Any) -> Any:
        self.scripts.append(script)
        if script in self.script_errors:
            raise self.script_errors[script]
        element = args[0] if args else None
        if script == HIT_TEST_SCRIPT:
            return not element.obscured
        if script == SCROLL_INTO_VIEW_SCRIPT:
            element.scrolled = True
        elif script == SCRIPT_CLICK_SCRIPT:
            element.script_clicks += 1
            if element.on_click:
                element.on_click(self)
        return None

    def current_url(self) -> str:
        return self.url

    def title(self) -> str:
        return self.page_title

    def maximize_window(self) -> None:
        self.maximized = True

    def set_timeouts(self, implicit_seconds: int, page_load_seconds: int) -> None:
        self.timeouts = (implicit_seconds, page_load_seconds)

    def quit(self) -> None:
        self.quit_calls += 1
        if self.quit_error is not None:
            raise self.quit_error


# ================================================================================
# Fixtures
# ================================================================================

@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """No UI_* env leakage and a fresh Settings singleton per test."""
    for key in list(os.environ):
        if key.startswith("UI_"):
            monkeypatch.delenv(key, raising=False)
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def make_element() -> Callable[..., FakeElement]:
    return FakeElement


@pytest.fixture
def fake_bridge() -> FakeBridge:
    return FakeBridge()


@pytest.fixture
def executor(fake_bridge: FakeBridge) -> ActionExecutor:
    return ActionExecutor(fake_bridge, timeout=0.2, poll_interval=0.01)


@pytest.fixture
def no_config(tmp_path) -> Settings:
    """Settings with no configuration file at all."""
    return Settings(config_path=tmp_path / "missing.yaml")


@pytest.fixture
def write_config(tmp_path) -> Callable[[str], Settings]:
    """Write YAML text to a config file and load Settings from it."""

    def _write(text: str) -> Settings:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        Settings.reset()
        return Settings(config_path=path)

    return _write


@pytest.fixture
def log_messages() -> List[str]:
    """Loguru messages at WARNING and above emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fake_wikipedia(fake_bridge: FakeBridge) -> FakeBridge:
    """
    Portal with a search box and a Hindi language link.

    Pressing Enter in the search box renders an article whose heading is the
    typed term; clicking the Hindi link moves to hi.wikipedia.org.
    """
    fake_bridge.url = "https://www.wikipedia.org/"
    search_input = FakeElement("searchInput")
    hindi_link = FakeElement("hindi link", text="हिन्दी")

    def open_article(bridge: FakeBridge) -> None:
        term = search_input.value
        bridge.url = f"https://en.wikipedia.org/wiki/{term}"
        bridge.page_title = f"{term} - Wikipedia"
        bridge.dom[Locator.by_id("firstHeading")] = [FakeElement("firstHeading", text=term)]

    def open_hindi(bridge: FakeBridge) -> None:
        bridge.url = "https://hi.wikipedia.org/"

    search_input.on_enter = open_article
    hindi_link.on_click = open_hindi
    fake_bridge.add(Locator.by_id("searchInput"), search_input)
    fake_bridge.add(Locator.css("a[lang='hi']"), hindi_link)
    return fake_bridge
