"""
================================================================================
Framework Exceptions
================================================================================

Exception hierarchy shared by the UI automation framework.

    AutomationError
    ├── ConfigurationError       missing/blank key, unreadable config file
    ├── InvalidArgumentError     None element, unknown browser / environment
    ├── SessionError             no live browser session, double launch
    ├── InteractionError         element could not be acted upon
    │   ├── ElementStateError    not displayed / not enabled
    │   ├── StaleElementError    element detached from the document
    │   └── InteractionTimeoutError
    └── ReportGenerationError    HTML report could not be produced

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AutomationError(Exception):
    """Base exception for all framework errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(AutomationError):
    """Raised when configuration loading or access fails."""
    pass


class InvalidArgumentError(AutomationError, ValueError):
    """Raised for arguments the framework can never act upon."""
    pass


class SessionError(AutomationError):
    """Raised when the browser session is missing or already running."""
    pass


class InteractionError(AutomationError):
    """Base exception for failed element interactions."""

    def __init__(
        self,
        message: str,
        action: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.action = action


class ElementStateError(InteractionError):
    """Element is not displayed or not enabled."""
    pass


class StaleElementError(InteractionError):
    """Element no longer belongs to the live document."""
    pass


class InteractionTimeoutError(InteractionError):
    """An explicit wait expired."""
    pass


class ReportGenerationError(AutomationError):
    """Raised when the HTML report cannot be generated."""
    pass


__all__ = [
    "AutomationError",
    "ConfigurationError",
    "InvalidArgumentError",
    "SessionError",
    "InteractionError",
    "ElementStateError",
    "StaleElementError",
    "InteractionTimeoutError",
    "ReportGenerationError",
]
