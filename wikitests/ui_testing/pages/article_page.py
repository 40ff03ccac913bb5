"""
================================================================================
Article Page Object
================================================================================

A Wikipedia article; exposes the heading text.

================================================================================
"""

from __future__ import annotations

import allure

from wikitests.ui_testing.framework.locator import Locator
from wikitests.ui_testing.framework.page_base import BasePage


class ArticlePage(BasePage):
    """Wikipedia article page object."""

    TITLE = Locator.by_id("firstHeading")

    @allure.step("Read article title")
    def get_article_title(self) -> str:
        return self.actions.get_text(self.TITLE)
