# ================================================================================
# Action Executor Module
# ================================================================================
#
# Turns a logical UI action on a Locator into waits plus bridge calls.
#
# Key Features:
#   - Every verb waits fresh for the readiness it needs before acting
#   - Click falls back through lookup, scroll and script click when the
#     element never becomes clickable
#   - Non-click verbs surface WaitTimeoutError and perform no action
#
# Element handles never outlive a single call; retrying on stale references
# is the caller's concern (see retry.py and element_actions.py).
#
# Click fallback states:
#
#   PRIMARY --timeout--> EXISTING_LOOKUP --> SCROLL_INTO_VIEW --> SCRIPT_CLICK
#      |                                         |                    |
#    done                                 script error          done / script error
#                                                 \                   /
#                                                  +--> NATIVE_CLICK <+
#                                                         |      |
#                                                       done   FAILED (raise)
#
# ================================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from loguru import logger

from .bridge import BrowserBridge, ElementHandle, Keys
from .errors import BridgeError, StaleReferenceError, WaitTimeoutError
from .locator import Locator
from .waits import (
    DEFAULT_POLL_INTERVAL,
    Wait,
    element_to_be_clickable,
    presence_of_all_elements_located,
    visibility_of_element_located,
)


SCROLL_INTO_VIEW_SCRIPT = "arguments[0].scrollIntoView(true);"
SCRIPT_CLICK_SCRIPT = "arguments[0].click();"

SCRIPT_ERRORS = (BridgeError, StaleReferenceError)


class ClickStage(str, Enum):
    PRIMARY = "primary"
    EXISTING_LOOKUP = "existing_lookup"
    SCROLL_INTO_VIEW = "scroll_into_view"
    SCRIPT_CLICK = "script_click"
    NATIVE_CLICK = "native_click"
    FAILED = "failed"


@dataclass
class ClickAttempt:
    """Mutable state carried between click stages."""

    locator: Locator
    element: Optional[ElementHandle] = None
    script_error: Optional[Exception] = None
    stages: List[ClickStage] = field(default_factory=list)


class ActionExecutor:
    """
    Wait-then-act implementation of each interaction verb.

    Example:
        executor = ActionExecutor(bridge, timeout=10)
        executor.wait_and_type(Locator.by_id("searchInput"), "India")
        executor.press_enter(Locator.by_id("searchInput"))
        executor.wait_and_read_text(Locator.by_id("firstHeading"))
    """

    def __init__(
        self,
        bridge: BrowserBridge,
        timeout: float,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """
        Args:
            bridge: Browser bridge to act through
            timeout: Explicit wait duration in seconds
            poll_interval: Delay between readiness checks in seconds
        """
        self.bridge = bridge
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._click_stages: Dict[ClickStage, Callable[[ClickAttempt], Optional[ClickStage]]] = {
            ClickStage.PRIMARY: self._click_primary,
            ClickStage.EXISTING_LOOKUP: self._click_lookup,
            ClickStage.SCROLL_INTO_VIEW: self._click_scroll,
            ClickStage.SCRIPT_CLICK: self._click_script,
            ClickStage.NATIVE_CLICK: self._click_native,
        }

    def _wait(self) -> Wait:
        return Wait(self.bridge, self.timeout, self.poll_interval)

    # =========================================================================
    # Click
    # =========================================================================

    def wait_and_click(self, locator: Locator) -> None:
        """
        Click once the element is clickable, falling back when it never is.

        Never raises WaitTimeoutError. Errors from the fallback lookup and the
        final native click propagate; when a scripting step failed first, it
        is chained as the native error's __cause__.
        """
        attempt = ClickAttempt(locator)
        stage: Optional[ClickStage] = ClickStage.PRIMARY

        while stage is not None:
            attempt.stages.append(stage)
            try:
                stage = self._click_stages[stage](attempt)
            except Exception:
                attempt.stages.append(ClickStage.FAILED)
                logger.error(
                    f"Click on {locator} failed after stages: "
                    f"{' -> '.join(s.value for s in attempt.stages)}"
                )
                raise

        logger.debug(
            f"Clicked {locator} via {' -> '.join(s.value for s in attempt.stages)}"
        )

    def _click_primary(self, attempt: ClickAttempt) -> Optional[ClickStage]:
        try:
            element = self._wait().until(
                element_to_be_clickable(attempt.locator),
                f"{attempt.locator} to be clickable",
            )
        except WaitTimeoutError as e:
            logger.warning(f"{attempt.locator} never became clickable, falling back: {e}")
            return ClickStage.EXISTING_LOOKUP

        self.bridge.click(element)
        return None

    def _click_lookup(self, attempt: ClickAttempt) -> Optional[ClickStage]:
        attempt.element = self.bridge.find_element(attempt.locator)
        return ClickStage.SCROLL_INTO_VIEW

    def _click_scroll(self, attempt: ClickAttempt) -> Optional[ClickStage]:
        try:
            self.bridge.execute_script(SCROLL_INTO_VIEW_SCRIPT, attempt.element)
        except SCRIPT_ERRORS as e:
            attempt.script_error = e
            logger.warning(f"Scroll into view failed for {attempt.locator}: {e}")
            return ClickStage.NATIVE_CLICK
        return ClickStage.SCRIPT_CLICK

    def _click_script(self, attempt: ClickAttempt) -> Optional[ClickStage]:
        try:
            self.bridge.execute_script(SCRIPT_CLICK_SCRIPT, attempt.element)
        except SCRIPT_ERRORS as e:
            attempt.script_error = e
            logger.warning(f"Script click failed for {attempt.locator}: {e}")
            return ClickStage.NATIVE_CLICK
        return None

    def _click_native(self, attempt: ClickAttempt) -> Optional[ClickStage]:
        try:
            self.bridge.click(attempt.element)
        except Exception as e:
            if attempt.script_error is not None:
                raise e from attempt.script_error
            raise
        return None

    # =========================================================================
    # Other Verbs
    # =========================================================================

    def wait_and_type(self, locator: Locator, text: str) -> None:
        """Wait for visibility, clear, then type `text` verbatim."""
        element = self._wait().until(
            visibility_of_element_located(locator), f"{locator} to be visible"
        )
        self.bridge.clear(element)
        self.bridge.send_keys(element, text)
        logger.debug(f"Typed into {locator}: '{text[:50]}'")

    def wait_and_read_text(self, locator: Locator) -> str:
        element = self._wait().until(
            visibility_of_element_located(locator), f"{locator} to be visible"
        )
        text = self.bridge.get_text(element)
        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    def wait_and_find_all(self, locator: Locator) -> List[ElementHandle]:
        """
        Wait for at least one match and return all matches in document order.

        Zero matches once the wait elapses is a valid answer: returns [].
        """
        try:
            return list(
                self._wait().until(
                    presence_of_all_elements_located(locator),
                    f"{locator} to be present",
                )
            )
        except WaitTimeoutError:
            logger.debug(f"No elements match {locator}")
            return []

    def press_enter(self, locator: Locator) -> None:
        element = self._wait().until(
            visibility_of_element_located(locator), f"{locator} to be visible"
        )
        self.bridge.press_key(element, Keys.ENTER)


__all__ = [
    "ActionExecutor",
    "ClickStage",
    "SCROLL_INTO_VIEW_SCRIPT",
    "SCRIPT_CLICK_SCRIPT",
]
