"""
================================================================================
Page Object Manager
================================================================================

Memoized factory for page objects.

One manager is created per scenario: its page objects are bound to that
scenario's browser session and must not outlive it.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Type, TypeVar

from loguru import logger

from .browser_manager import DriverSession
from .element_actions import ElementActions
from .page_base import BasePage

if TYPE_CHECKING:
    from bddsuites.ui_testing.pages import ExploreHotelPage, LoginPage


P = TypeVar("P", bound=BasePage)


class PageObjectManager:
    """
    Get-or-create access to page objects.

    Usage:
        pages = PageObjectManager(session)
        pages.login_page.login("user@example.com", "secret")
        assert pages.get(LoginPage) is pages.login_page
    """

    def __init__(self, session: DriverSession, actions: Optional[ElementActions] = None):
        self.session = session
        self._actions = actions
        self._pages: Dict[Type[BasePage], BasePage] = {}

    @property
    def actions(self) -> ElementActions:
        # Built lazily so the manager can exist before the browser is launched
        if self._actions is None:
            self._actions = ElementActions(self.session)
        return self._actions

    def get(self, page_class: Type[P]) -> P:
        """Return the cached page object, constructing it on first access."""
        page = self._pages.get(page_class)
        if page is None:
            logger.info(f"Initializing {page_class.__name__}...")
            page = page_class(self.session, self.actions)
            self._pages[page_class] = page
        return page

    @property
    def login_page(self) -> "LoginPage":
        from bddsuites.ui_testing.pages import LoginPage

        return self.get(LoginPage)

    @property
    def explore_hotel_page(self) -> "ExploreHotelPage":
        from bddsuites.ui_testing.pages import ExploreHotelPage

        return self.get(ExploreHotelPage)

    def clear(self) -> None:
        self._pages.clear()

    def __contains__(self, page_class: Type[BasePage]) -> bool:
        return page_class in self._pages

    def __len__(self) -> int:
        return len(self._pages)


__all__ = [
    "PageObjectManager",
]
