"""
================================================================================
Element Locators
================================================================================

Explicit (strategy, value) locator descriptions used by page objects.

Page objects construct their locators directly in __init__ and bind them to
the live session; Playwright resolves the selector on every action, so a
bound locator never needs re-binding after the DOM changes.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from playwright.sync_api import Frame, Locator, Page


class Strategy(enum.Enum):
    """Lookup strategies, rendered to Playwright selector engines."""

    ID = "id"
    NAME = "name"
    XPATH = "xpath"
    CSS = "css"
    TEXT = "text"
    TEST_ID = "data-testid"


@dataclass(frozen=True)
class ElementLocator:
    """
    A (strategy, value) pair identifying zero or more elements.

    Attributes:
        strategy: How to look the element up
        value: Strategy-specific expression
        name: Human-readable name for logs and reports
    """
    strategy: Strategy
    value: str
    name: str = ""

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        if self.strategy is Strategy.NAME:
            return f'css=[name="{self.value}"]'
        return f"{self.strategy.value}={self.value}"

    def resolve(self, scope: Union[Page, Frame]) -> Locator:
        return scope.locator(self.selector)

    def __str__(self) -> str:
        return self.name or self.selector


def by_id(value: str, name: str = "") -> ElementLocator:
    return ElementLocator(Strategy.ID, value, name)


def by_name(value: str, name: str = "") -> ElementLocator:
    return ElementLocator(Strategy.NAME, value, name)


def by_xpath(value: str, name: str = "") -> ElementLocator:
    return ElementLocator(Strategy.XPATH, value, name)


def by_css(value: str, name: str = "") -> ElementLocator:
    return ElementLocator(Strategy.CSS, value, name)


__all__ = [
    "ElementLocator",
    "Strategy",
    "by_css",
    "by_id",
    "by_name",
    "by_xpath",
]
