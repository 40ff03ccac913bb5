# ================================================================================
# Element Actions Module
# ================================================================================
#
# The interaction verbs page objects and tests call.
#
# Each verb runs the matching ActionExecutor operation inside the stale
# element retry wrapper, so a re-render between lookup and use is retried
# from scratch instead of failing the test. Callers pass Locators only and
# never hold element handles across calls.
#
# Key Features:
#   - click / type / get_text / find_all / press_enter
#   - Automatic retry on stale element references
#   - Allure step integration
#
# ================================================================================

from typing import Callable, List, Optional, TypeVar

import allure
from loguru import logger

from .action_executor import ActionExecutor
from .bridge import ElementHandle
from .locator import Locator
from .retry import DEFAULT_RETRY_POLICY, RetryPolicy, with_retry


T = TypeVar("T")


class ElementActions:
    """
    Retry-wrapped interaction verbs.

    Example:
        actions = ElementActions(ActionExecutor(bridge, timeout=10))
        actions.type(Locator.by_id("searchInput"), "India")
        actions.press_enter(Locator.by_id("searchInput"))
        title = actions.get_text(Locator.by_id("firstHeading"))
    """

    def __init__(
        self,
        executor: ActionExecutor,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Args:
            executor: Executor performing the waits and bridge calls
            retry_policy: Stale element retry budget (3 attempts, 200 ms)
        """
        self.executor = executor
        self.retry_policy = retry_policy or DEFAULT_RETRY_POLICY

    def retry(self, operation: Callable[[], T]) -> T:
        """Run a composite operation as one stale-retried unit."""
        return with_retry(operation, self.retry_policy)

    @allure.step("Click element: {locator}")
    def click(self, locator: Locator) -> None:
        logger.info(f"Clicking element: {locator}")
        self.retry(lambda: self.executor.wait_and_click(locator))

    @allure.step("Type text into: {locator}")
    def type(self, locator: Locator, text: str) -> None:
        logger.info(f"Typing into {locator}: '{text[:50]}'")
        self.retry(lambda: self.executor.wait_and_type(locator, text))

    @allure.step("Get text: {locator}")
    def get_text(self, locator: Locator) -> str:
        return self.retry(lambda: self.executor.wait_and_read_text(locator))

    @allure.step("Find elements: {locator}")
    def find_all(self, locator: Locator) -> List[ElementHandle]:
        """
        All elements matching `locator`, possibly none.

        The handles are only valid until the page re-renders; use them
        immediately or prefer the Locator-based verbs.
        """
        return self.retry(lambda: self.executor.wait_and_find_all(locator))

    @allure.step("Press Enter in: {locator}")
    def press_enter(self, locator: Locator) -> None:
        logger.info(f"Pressing Enter in: {locator}")
        self.retry(lambda: self.executor.press_enter(locator))

    submit = press_enter


__all__ = [
    "ElementActions",
]
