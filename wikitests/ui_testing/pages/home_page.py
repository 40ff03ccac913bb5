"""
================================================================================
Home Page Object
================================================================================

Wikipedia portal (www.wikipedia.org): search box, autocomplete suggestions
and the language links around the globe logo.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from wikitests.ui_testing.framework.locator import By, Locator, LocatorTemplate
from wikitests.ui_testing.framework.page_base import BasePage

from .article_page import ArticlePage


class HomePage(BasePage):
    """Wikipedia portal page object."""

    URL = "https://www.wikipedia.org/"

    SEARCH_INPUT = Locator.by_id("searchInput")
    SUGGESTION_TITLE = Locator.css(".suggestion-title")
    LANGUAGE_LINK = LocatorTemplate(By.CSS, "a[lang='{}']")

    @allure.step("Open Wikipedia home page")
    def open(self, url: Optional[str] = None) -> "HomePage":
        super().open(url)
        return self

    @allure.step("Enter search term: {term}")
    def enter_search_term(self, term: str) -> None:
        self.actions.type(self.SEARCH_INPUT, term)

    @allure.step("Select first suggestion")
    def select_first_suggestion(self) -> ArticlePage:
        """
        Click the first autocomplete suggestion, or press Enter when the
        dropdown never shows up.
        """

        def pick_first() -> None:
            executor = self.actions.executor
            if executor.wait_and_find_all(self.SUGGESTION_TITLE):
                executor.wait_and_click(self.SUGGESTION_TITLE)
            else:
                logger.info("No search suggestions, submitting the query")
                executor.press_enter(self.SEARCH_INPUT)

        self.actions.retry(pick_first)
        return ArticlePage(self.session, self.actions.retry_policy)

    def search(self, term: str) -> ArticlePage:
        self.enter_search_term(term)
        return self.select_first_suggestion()

    @allure.step("Select language: {lang_code}")
    def select_language(self, lang_code: str) -> None:
        self.actions.click(self.LANGUAGE_LINK.format(lang_code))
