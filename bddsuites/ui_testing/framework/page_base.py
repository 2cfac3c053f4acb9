"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Binding of explicit ElementLocators to the live session
    - Guarded element actions (ElementActions)
    - Page-level helpers (PageActions): alerts, frames, screenshots

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from playwright.sync_api import Locator

from .browser_manager import DriverSession
from .element_actions import ElementActions, PageActions
from .locators import ElementLocator


class BasePage:
    """
    Base class for all page objects.

    Subclasses build their locators in __init__ and bind them with find():

        class LoginPage(BasePage):
            PAGE_NAME = "Login"

            def __init__(self, session, actions=None):
                super().__init__(session, actions)
                self.txt_username = self.find(by_id("email", "username"))

            def login(self, username, password):
                self.actions.send_keys(self.txt_username, username)
    """

    # Override in subclasses
    PAGE_NAME: str = ""

    def __init__(
        self,
        session: DriverSession,
        actions: Optional[ElementActions] = None,
    ):
        """
        Initialize page object.

        Args:
            session: Live browser session (SessionError if not launched)
            actions: Shared ElementActions; a new one is built if omitted
        """
        # Touching session.page fails fast when there is no live session
        self.page = session.page
        self.session = session
        self.actions = actions or ElementActions(session)
        self.page_actions = PageActions(session)
        logger.debug(f"Initialized page object: {self.name}")

    @property
    def name(self) -> str:
        return self.PAGE_NAME or type(self).__name__

    def find(self, locator: ElementLocator) -> Locator:
        """Bind a locator to the session's current scope (page or frame)."""
        return locator.resolve(self.session.scope)

    def screenshot(self, name: str):
        """Save a timestamped screenshot of the current page."""
        return self.page_actions.screenshot_with_timestamp(name)


__all__ = [
    "BasePage",
]
