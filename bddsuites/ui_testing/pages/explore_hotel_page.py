"""
================================================================================
Explore Hotel Page Object
================================================================================

Landing page shown after a successful login.

================================================================================
"""

from __future__ import annotations

from typing import Optional

from bddsuites.ui_testing.framework.browser_manager import DriverSession
from bddsuites.ui_testing.framework.element_actions import ElementActions
from bddsuites.ui_testing.framework.locators import by_xpath
from bddsuites.ui_testing.framework.page_base import BasePage


class ExploreHotelPage(BasePage):
    """Explore hotel page object."""

    PAGE_NAME = "Explore Hotel"

    def __init__(self, session: DriverSession, actions: Optional[ElementActions] = None):
        super().__init__(session, actions)
        self.login_success_msg = self.find(
            by_xpath("//a[@data-testid='username']", "welcome message")
        )

    def login_success_message(self) -> str:
        """Greeting shown in the header, e.g. 'Welcome Prakash'."""
        return self.actions.get_element_text(self.login_success_msg)
