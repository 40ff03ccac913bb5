"""
================================================================================
UI Testing Framework
================================================================================

Resilient browser interaction layer for Wikipedia UI tests.

Components:
    - settings: YAML/env settings with timeout fallbacks
    - browser_manager: single browser session lifecycle
    - action_executor: wait-then-act verbs with click fallbacks
    - retry: stale element retry wrapper
    - element_actions: retry-wrapped verbs used by page objects
    - playwright_bridge: Playwright implementation of the browser bridge

Author: Automation Team
License: MIT
================================================================================
"""

from .action_executor import ActionExecutor, ClickStage
from .browser_manager import Session, SessionManager, TimeoutPolicy
from .element_actions import ElementActions
from .errors import (
    BridgeError,
    ElementNotFoundError,
    StaleReferenceError,
    UITestError,
    UnsupportedConfigurationError,
    WaitTimeoutError,
)
from .locator import By, Locator, LocatorTemplate
from .page_base import BasePage
from .retry import DEFAULT_RETRY_POLICY, RetryPolicy, retry_on_stale, with_retry
from .settings import BrowserKind, Settings

__all__ = [
    "ActionExecutor",
    "ClickStage",
    "Session",
    "SessionManager",
    "TimeoutPolicy",
    "ElementActions",
    "BridgeError",
    "ElementNotFoundError",
    "StaleReferenceError",
    "UITestError",
    "UnsupportedConfigurationError",
    "WaitTimeoutError",
    "By",
    "Locator",
    "LocatorTemplate",
    "BasePage",
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
    "retry_on_stale",
    "with_retry",
    "BrowserKind",
    "Settings",
]
