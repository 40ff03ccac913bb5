"""
================================================================================
Harness Error Kinds
================================================================================

Exception hierarchy shared by the interaction layer.

    UITestError
      +-- StaleReferenceError            element handle no longer in the DOM
      +-- WaitTimeoutError               readiness wait exceeded its duration
      +-- UnsupportedConfigurationError  bad setting (recovered in settings)
      +-- BridgeError                    the browser backend itself failed
            +-- ElementNotFoundError     lookup without wait found nothing

Only StaleReferenceError is retried automatically (see retry.py).

Author: Automation Team
License: MIT
================================================================================
"""


class UITestError(Exception):
    """Base class for all interaction layer errors."""
    pass


class StaleReferenceError(UITestError):
    """Raised when a resolved element no longer maps to a live DOM node."""
    pass


class WaitTimeoutError(UITestError):
    """Raised when a readiness wait times out."""
    pass


class UnsupportedConfigurationError(UITestError):
    """Raised for malformed or unrecognized settings."""
    pass


class BridgeError(UITestError):
    """Raised when the underlying browser backend errors."""
    pass


class ElementNotFoundError(BridgeError):
    """Raised when a direct lookup finds no matching element."""
    pass


__all__ = [
    "UITestError",
    "StaleReferenceError",
    "WaitTimeoutError",
    "UnsupportedConfigurationError",
    "BridgeError",
    "ElementNotFoundError",
]
