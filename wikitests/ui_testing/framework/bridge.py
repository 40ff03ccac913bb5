"""
================================================================================
Browser Bridge Interface
================================================================================

The capability set the interaction layer needs from a browser backend.

The executor, waits and session manager depend on this protocol only; the
concrete automation library lives behind an adapter (see playwright_bridge.py).
Element handles are opaque: whatever the backend returns from
`find_elements` is passed back into it unchanged.

Error contract for implementations:
    - a handle whose node left the DOM  -> StaleReferenceError
    - `find_element` with no match      -> ElementNotFoundError
    - any other backend failure         -> BridgeError

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List, Protocol

from .locator import Locator


ElementHandle = Any


class Keys:
    """Key names accepted by `BrowserBridge.press_key`."""

    ENTER = "Enter"
    TAB = "Tab"
    ESCAPE = "Escape"


class BrowserBridge(Protocol):
    """Minimal browser capability set."""

    def navigate(self, url: str) -> None:
        ...

    def find_elements(self, locator: Locator) -> List[ElementHandle]:
        """All current matches in document order, without waiting."""
        ...

    def find_element(self, locator: Locator) -> ElementHandle:
        """First match, honouring only the implicit presence timeout."""
        ...

    def is_displayed(self, element: ElementHandle) -> bool:
        ...

    def is_enabled(self, element: ElementHandle) -> bool:
        ...

    def click(self, element: ElementHandle) -> None:
        ...

    def clear(self, element: ElementHandle) -> None:
        ...

    def send_keys(self, element: ElementHandle, text: str) -> None:
        ...

    def press_key(self, element: ElementHandle, key: str) -> None:
        ...

    def get_text(self, element: ElementHandle) -> str:
        ...

    def execute_script(self, script: str, *args: Any) -> Any:
        """Run a script body; `arguments[i]` refers to the i-th arg."""
        ...

    def current_url(self) -> str:
        ...

    def title(self) -> str:
        ...

    def maximize_window(self) -> None:
        ...

    def set_timeouts(self, implicit_seconds: int, page_load_seconds: int) -> None:
        ...

    def quit(self) -> None:
        ...


__all__ = [
    "BrowserBridge",
    "ElementHandle",
    "Keys",
]
