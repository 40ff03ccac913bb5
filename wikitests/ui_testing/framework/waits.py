# ================================================================================
# Wait Module
# ================================================================================
#
# Bounded polling waits for element readiness.
#
# A condition is a callable taking the bridge and returning a truthy value
# once satisfied (usually the element handle) or a falsy value otherwise.
# Lookups that fail because the element is missing or went stale while being
# inspected count as "not yet"; any other error propagates at once.
#
# Usage:
#   wait = Wait(bridge, timeout=10)
#   element = wait.until(element_to_be_clickable(locator), "search button")
#
# ================================================================================

import time
from typing import Any, Callable, List, Optional

from loguru import logger

from .bridge import BrowserBridge, ElementHandle
from .errors import ElementNotFoundError, StaleReferenceError, WaitTimeoutError
from .locator import Locator


Condition = Callable[[BrowserBridge], Any]

DEFAULT_POLL_INTERVAL = 0.25

# Topmost node at the element's centre must be the element or a descendant.
# Elements whose centre lies outside the viewport are not treated as covered.
HIT_TEST_SCRIPT = (
    "var el = arguments[0];"
    "var r = el.getBoundingClientRect();"
    "var x = r.left + r.width / 2, y = r.top + r.height / 2;"
    "if (x < 0 || y < 0 || x >= window.innerWidth || y >= window.innerHeight) {"
    " return true; }"
    "var top = document.elementFromPoint(x, y);"
    "return top !== null && (top === el || el.contains(top));"
)

IGNORED_EXCEPTIONS = (ElementNotFoundError, StaleReferenceError)


class Wait:
    """
    Poll a condition until it holds or the timeout elapses.

    The condition is always evaluated at least once, and once more right at
    the deadline, so a zero timeout still performs a single check.
    """

    def __init__(
        self,
        bridge: BrowserBridge,
        timeout: float,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            bridge: Browser bridge passed to the condition
            timeout: Maximum wait in seconds
            poll_interval: Delay between checks in seconds
            clock: Monotonic clock (injectable for tests)
            sleep: Sleep function (injectable for tests)
        """
        self.bridge = bridge
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    def until(self, condition: Condition, description: str = "condition") -> Any:
        """
        Wait until `condition` returns a truthy value and return it.

        Raises:
            WaitTimeoutError: If the condition did not hold within the timeout
        """
        deadline = self._clock() + self.timeout
        attempt = 0
        last_error: Optional[Exception] = None

        while True:
            attempt += 1
            try:
                value = condition(self.bridge)
                if value:
                    return value
            except IGNORED_EXCEPTIONS as e:
                last_error = e

            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            self._sleep(min(self.poll_interval, remaining))

        message = (
            f"Timed out after {self.timeout}s ({attempt} checks) waiting for: "
            f"{description}"
        )
        if last_error is not None:
            message += f". Last error: {last_error}"
        logger.debug(message)
        raise WaitTimeoutError(message)


# =============================================================================
# Readiness Conditions
# =============================================================================

def presence_of_all_elements_located(locator: Locator) -> Condition:
    """Holds once at least one element matches; returns all matches."""

    def condition(bridge: BrowserBridge) -> List[ElementHandle]:
        return bridge.find_elements(locator)

    return condition


def visibility_of_element_located(locator: Locator) -> Condition:
    """Holds once the first match is displayed; returns it."""

    def condition(bridge: BrowserBridge) -> Optional[ElementHandle]:
        elements = bridge.find_elements(locator)
        if elements and bridge.is_displayed(elements[0]):
            return elements[0]
        return None

    return condition


def element_to_be_clickable(locator: Locator) -> Condition:
    """Holds once the first match is displayed, enabled and not covered."""

    def condition(bridge: BrowserBridge) -> Optional[ElementHandle]:
        elements = bridge.find_elements(locator)
        if not elements:
            return None
        element = elements[0]
        if not (bridge.is_displayed(element) and bridge.is_enabled(element)):
            return None
        if not bridge.execute_script(HIT_TEST_SCRIPT, element):
            return None
        return element

    return condition


__all__ = [
    "Wait",
    "HIT_TEST_SCRIPT",
    "presence_of_all_elements_located",
    "visibility_of_element_located",
    "element_to_be_clickable",
]
