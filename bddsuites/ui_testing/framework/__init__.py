"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based (sync API) UI automation framework for BDD scenarios.

Components:
    - config_loader: Flat YAML configuration with fatal missing keys
    - browser_manager: Browser session lifecycle (launch / navigate / quit)
    - interaction_guard: Visible / displayed / enabled checks before actions
    - element_actions: Guarded element and page-level actions
    - locators: Explicit (strategy, value) element locators
    - page_base: Base page object
    - page_manager: Memoized page object factory
    - hooks: Scenario lifecycle, results and run log

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import Config
from .browser_manager import BrowserType, DriverSession, Environment
from .element_actions import ElementActions, PageActions
from .exceptions import (
    AutomationError,
    ConfigurationError,
    ElementStateError,
    InteractionError,
    InteractionTimeoutError,
    InvalidArgumentError,
    ReportGenerationError,
    SessionError,
    StaleElementError,
)
from .hooks import RunLog, ScenarioHooks, ScenarioResult
from .interaction_guard import InteractionGuard
from .locators import ElementLocator, Strategy
from .page_base import BasePage
from .page_manager import PageObjectManager

__all__ = [
    "AutomationError",
    "BasePage",
    "BrowserType",
    "Config",
    "ConfigurationError",
    "DriverSession",
    "ElementActions",
    "ElementLocator",
    "ElementStateError",
    "Environment",
    "InteractionError",
    "InteractionGuard",
    "InteractionTimeoutError",
    "InvalidArgumentError",
    "PageActions",
    "PageObjectManager",
    "ReportGenerationError",
    "RunLog",
    "ScenarioHooks",
    "ScenarioResult",
    "SessionError",
    "StaleElementError",
    "Strategy",
]
