"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for Wikipedia pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .article_page import ArticlePage
from .home_page import HomePage
from .search_results_page import SearchResultsPage

__all__ = [
    "ArticlePage",
    "HomePage",
    "SearchResultsPage",
]
