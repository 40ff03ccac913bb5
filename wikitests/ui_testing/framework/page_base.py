"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL access
    - Retry-wrapped element interactions via `self.actions`

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from .browser_manager import Session
from .element_actions import ElementActions
from .retry import RetryPolicy


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class ArticlePage(BasePage):
            TITLE = Locator.by_id("firstHeading")

            def get_article_title(self) -> str:
                return self.actions.get_text(self.TITLE)
    """

    # Override in subclasses
    URL: str = ""

    def __init__(
        self,
        session: Session,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Initialize page object.

        Args:
            session: Live browser session
            retry_policy: Stale element retry budget for this page's actions
        """
        self.session = session
        self.actions: ElementActions = session.actions(retry_policy)

    def open(self, url: Optional[str] = None) -> "BasePage":
        """Navigate to `url`, or to this page's URL."""
        target = url or self.URL
        if not target:
            raise ValueError(f"{type(self).__name__} has no URL to open")
        with allure.step(f"Navigate to {target}"):
            self.session.navigate(target)
            logger.debug(f"Navigated to: {target}")
        return self

    @property
    def current_url(self) -> str:
        return self.session.current_url()

    @property
    def title(self) -> str:
        return self.session.title()


__all__ = [
    "BasePage",
]
