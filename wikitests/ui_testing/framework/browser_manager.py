"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle management for UI automation.

Features:
    - One live browser session per manager, created lazily
    - Thread-safe creation: concurrent callers get the same session
    - Browser choice and timeouts from Settings
    - Idempotent shutdown; a later get_session() starts a fresh browser

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from .action_executor import ActionExecutor
from .bridge import BrowserBridge
from .element_actions import ElementActions
from .playwright_bridge import PlaywrightBridge
from .retry import RetryPolicy
from .settings import BrowserKind, Settings


BridgeFactory = Callable[[BrowserKind, bool], BrowserBridge]


def _default_bridge_factory(kind: BrowserKind, headless: bool) -> BrowserBridge:
    return PlaywrightBridge.launch(kind, headless=headless)


@dataclass(frozen=True)
class TimeoutPolicy:
    """
    Timeouts applied to a session, in seconds.

    Attributes:
        explicit_wait: Readiness wait used by every interaction verb
        page_load_timeout: Navigation timeout
        element_presence_timeout: Implicit lookup timeout of the bridge
    """

    explicit_wait: int
    page_load_timeout: int
    element_presence_timeout: int

    @classmethod
    def from_settings(cls, settings: Settings) -> "TimeoutPolicy":
        return cls(
            explicit_wait=settings.get_explicit_wait_seconds(),
            page_load_timeout=settings.get_page_load_timeout_seconds(),
            element_presence_timeout=settings.get_implicit_wait_seconds(),
        )


class Session:
    """A live browser connection plus the timeouts it was configured with."""

    def __init__(
        self,
        bridge: BrowserBridge,
        timeouts: TimeoutPolicy,
        browser_kind: BrowserKind,
    ):
        self.bridge = bridge
        self.timeouts = timeouts
        self.browser_kind = browser_kind

    def navigate(self, url: str) -> None:
        logger.debug(f"Navigating to: {url}")
        self.bridge.navigate(url)

    def current_url(self) -> str:
        return self.bridge.current_url()

    def title(self) -> str:
        return self.bridge.title()

    def actions(self, retry_policy: Optional[RetryPolicy] = None) -> ElementActions:
        """Interaction verbs bound to this session's explicit wait."""
        executor = ActionExecutor(self.bridge, timeout=self.timeouts.explicit_wait)
        return ElementActions(executor, retry_policy)


class SessionManager:
    """
    Owns the single browser session.

    Usage:
        manager = SessionManager()
        session = manager.get_session()      # launches the browser
        session.navigate("https://www.wikipedia.org/")
        manager.shutdown()                   # safe to call repeatedly

        # Or as a context manager
        with SessionManager() as manager:
            manager.get_session().navigate(url)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        bridge_factory: Optional[BridgeFactory] = None,
    ):
        """
        Initialize session manager.

        Args:
            settings: Settings provider (process-wide Settings() by default)
            bridge_factory: Callable(kind, headless) -> BrowserBridge.
                Launches Playwright by default.
        """
        self.settings = settings or Settings()
        self._bridge_factory = bridge_factory or _default_bridge_factory
        self._session: Optional[Session] = None
        self._lock = threading.Lock()

    def __enter__(self) -> "SessionManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    @property
    def is_active(self) -> bool:
        return self._session is not None

    def get_session(self) -> Session:
        """Return the live session, creating it on first use."""
        session = self._session
        if session is not None:
            return session

        with self._lock:
            if self._session is None:
                self._session = self._create_session()
            return self._session

    def _create_session(self) -> Session:
        kind = self.settings.get_browser_kind()
        headless = self.settings.get_headless()
        timeouts = TimeoutPolicy.from_settings(self.settings)

        bridge = self._bridge_factory(kind, headless)
        try:
            bridge.maximize_window()
            bridge.set_timeouts(
                timeouts.element_presence_timeout,
                timeouts.page_load_timeout,
            )
        except Exception:
            logger.error("Browser setup failed, closing it")
            try:
                bridge.quit()
            except Exception as quit_error:
                logger.warning(f"Browser quit after failed setup also failed: {quit_error}")
            raise

        logger.info(
            f"Browser session started: {kind.value} (headless={headless}, "
            f"explicit_wait={timeouts.explicit_wait}s, "
            f"implicit_wait={timeouts.element_presence_timeout}s, "
            f"page_load={timeouts.page_load_timeout}s)"
        )
        return Session(bridge, timeouts, kind)

    def shutdown(self) -> None:
        """Quit the browser if one is running; no-op otherwise."""
        with self._lock:
            session = self._session
            if session is None:
                logger.debug("No browser session to shut down")
                return

            try:
                session.bridge.quit()
            except Exception as e:
                logger.error(f"Browser quit failed: {e}")
                raise
            finally:
                self._session = None

            logger.info("Browser session closed")


__all__ = [
    "Session",
    "SessionManager",
    "TimeoutPolicy",
]
