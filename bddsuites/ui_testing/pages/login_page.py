"""
================================================================================
Login Page Object
================================================================================

Login form of the OMR Branch hotel booking site.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from bddsuites.ui_testing.framework.browser_manager import DriverSession
from bddsuites.ui_testing.framework.element_actions import ElementActions
from bddsuites.ui_testing.framework.locators import by_id, by_xpath
from bddsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    PAGE_NAME = "Login"

    def __init__(self, session: DriverSession, actions: Optional[ElementActions] = None):
        super().__init__(session, actions)
        self.txt_username = self.find(by_id("email", "username input"))
        self.txt_password = self.find(by_id("pass", "password input"))
        self.btn_login = self.find(by_xpath("//button[@value='login']", "login button"))
        self.err_login_msg = self.find(by_id("errorMessage", "login error message"))

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        """Fill the form and submit it with the login button."""
        logger.info(f"Logging in as: {username}")
        self.actions.send_keys(self.txt_username, username)
        self.actions.send_keys(self.txt_password, password)
        self.actions.click(self.btn_login)

    @allure.step("Login with Enter key (username={username})")
    def login_with_enter_key(self, username: str, password: str) -> None:
        """Fill the form and submit it by pressing Enter in the password field."""
        logger.info(f"Logging in with Enter key as: {username}")
        self.actions.send_keys(self.txt_username, username)
        self.actions.send_keys_enter(self.txt_password, password)

    def login_error_message(self) -> str:
        return self.actions.get_element_text(self.err_login_msg)
