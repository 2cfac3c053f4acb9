"""
================================================================================
Interaction Guard
================================================================================

Pre-flight validation run before every element action.

Per call:
    None check -> wait visible -> displayed -> enabled -> ready

A staleness failure (element detached from the DOM, or the document being
replaced under it) is retried exactly once; everything else is fatal to the
action and reported with the action name.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import (
    ElementStateError,
    InteractionTimeoutError,
    InvalidArgumentError,
    StaleElementError,
)


# Playwright error messages that mean the element reference went stale
STALE_MARKERS = (
    "not attached to the dom",
    "element is detached",
    "execution context was destroyed",
    "frame was detached",
)


def is_stale_error(error: BaseException) -> bool:
    """Return True if a Playwright error reports a detached element."""
    message = str(error).lower()
    return any(marker in message for marker in STALE_MARKERS)


class InteractionGuard:
    """
    Validates that an element can be interacted with.

    Usage:
        guard = InteractionGuard(timeout=10)
        guard.validate(locator, "elementClick")
        locator.click()
    """

    def __init__(self, timeout: int):
        """
        Args:
            timeout: Visibility wait in seconds
        """
        self.timeout = timeout

    @property
    def timeout_ms(self) -> int:
        return self.timeout * 1000

    def validate(
        self,
        element: Optional[Locator],
        action: str,
        require_enabled: bool = True,
    ) -> Locator:
        """
        Ensure element is visible, displayed and enabled.

        With require_enabled=False the enabled check is skipped, for queries
        that report the enabled state instead of acting on the element.

        Raises:
            InvalidArgumentError: element is None (no wait is attempted).
            InteractionTimeoutError: no matching element appeared in time.
            ElementStateError: element exists but is not displayed, or is not enabled.
            StaleElementError: element went stale twice.
        """
        if element is None:
            raise InvalidArgumentError(
                f"{action} FAILED -> element is None", details={"action": action}
            )

        try:
            self._check(element, action, require_enabled)
        except StaleElementError:
            logger.warning(f"Stale element during {action}. Retrying once...")
            self._check(element, action, require_enabled)
        return element

    def wait_for_visible(self, element: Locator, action: str) -> Locator:
        try:
            element.wait_for(state="visible", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            # Present in the document but never shown
            if element.count() > 0:
                raise ElementStateError(
                    f"{action} FAILED -> element is NOT displayed", action=action
                ) from e
            raise InteractionTimeoutError(
                f"{action} FAILED -> element not visible within {self.timeout}s",
                action=action,
            ) from e
        except PlaywrightError as e:
            if is_stale_error(e):
                raise StaleElementError(
                    f"{action} FAILED -> element is stale", action=action
                ) from e
            raise
        return element

    def wait_for_clickable(self, element: Optional[Locator], action: str) -> Locator:
        """
        Wait until element would accept a click.

        Uses a trial click, which runs Playwright's actionability checks
        (visible, stable, enabled, receives events) without clicking.
        """
        if element is None:
            raise InvalidArgumentError(
                f"{action} FAILED -> element is None", details={"action": action}
            )
        try:
            element.click(trial=True, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            if element.count() > 0 and not element.is_visible():
                raise ElementStateError(
                    f"{action} FAILED -> element is NOT displayed", action=action
                ) from e
            raise InteractionTimeoutError(
                f"{action} FAILED -> element not clickable within {self.timeout}s",
                action=action,
            ) from e
        return element

    def _check(self, element: Locator, action: str, require_enabled: bool = True) -> None:
        self.wait_for_visible(element, action)
        try:
            displayed = element.is_visible()
            enabled = element.is_enabled(timeout=self.timeout_ms) if require_enabled else True
        except PlaywrightError as e:
            if is_stale_error(e):
                raise StaleElementError(
                    f"{action} FAILED -> element is stale", action=action
                ) from e
            raise

        if not displayed:
            raise ElementStateError(
                f"{action} FAILED -> element is NOT displayed", action=action
            )
        if not enabled:
            raise ElementStateError(
                f"{action} FAILED -> element is NOT enabled", action=action
            )


__all__ = [
    "InteractionGuard",
    "is_stale_error",
]
