"""
================================================================================
Locators
================================================================================

Immutable descriptions of how to find an element on the page.

Page objects declare locators as class attributes and hand them to
`ElementActions`; they never deal with live element handles.

Usage:
    SEARCH_INPUT = Locator.by_id("searchInput")
    LANGUAGE_LINK = LocatorTemplate(By.CSS, "a[lang='{}']")
    hindi = LANGUAGE_LINK.format("hi")
    same = Locator.parse("css=a[lang='hi']")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class By(str, Enum):
    """Locator strategies understood by every bridge."""

    ID = "id"
    CSS = "css"
    XPATH = "xpath"


@dataclass(frozen=True)
class Locator:
    """
    How to find an element.

    Attributes:
        strategy: Lookup strategy
        value: Strategy-specific expression (id, CSS selector, XPath)
    """

    strategy: By
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Locator value must be a non-empty string")

    @classmethod
    def by_id(cls, element_id: str) -> "Locator":
        return cls(By.ID, element_id)

    @classmethod
    def css(cls, selector: str) -> "Locator":
        return cls(By.CSS, selector)

    @classmethod
    def xpath(cls, expression: str) -> "Locator":
        return cls(By.XPATH, expression)

    @classmethod
    def parse(cls, text: str) -> "Locator":
        """
        Build a locator from compact `strategy=value` notation.

        Args:
            text: e.g. "id=searchInput" or "css=a[lang='hi']"

        Returns:
            Parsed Locator

        Raises:
            ValueError: Unknown strategy or missing separator
        """
        strategy, sep, value = text.partition("=")
        if not sep:
            raise ValueError(f"Locator must look like 'strategy=value': {text!r}")
        try:
            by = By(strategy.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown locator strategy: {strategy!r}") from None
        return cls(by, value)

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"


@dataclass(frozen=True)
class LocatorTemplate:
    """
    Locator with placeholders filled in at use time.

    Example:
        >>> LocatorTemplate(By.CSS, "a[lang='{}']").format("hi")
        Locator(strategy=<By.CSS: 'css'>, value="a[lang='hi']")
    """

    strategy: By
    template: str

    def format(self, *args: str) -> Locator:
        return Locator(self.strategy, self.template.format(*args))


__all__ = [
    "By",
    "Locator",
    "LocatorTemplate",
]
