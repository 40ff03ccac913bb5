"""
================================================================================
Search Results Page Object
================================================================================

Whatever page a search lands on (results list or article); used for URL
assertions.

================================================================================
"""

from __future__ import annotations

from wikitests.ui_testing.framework.page_base import BasePage


class SearchResultsPage(BasePage):
    """Post-search page object."""

    def get_current_url(self) -> str:
        return self.current_url
