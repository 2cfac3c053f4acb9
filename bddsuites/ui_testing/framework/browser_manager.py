"""
================================================================================
Browser Manager
================================================================================

Lifecycle of the single browser session used by a scenario.

Features:
    - Launch by browser-type string (CHROME, FIREFOX, EDGE)
    - Maximised window and a context-wide implicit wait from configuration
    - Navigation by environment (QA, UAT, PROD) with ENV_DETAILS override
    - Child window and frame switching
    - Idempotent teardown

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import enum
import os
from typing import Any, Callable, Dict, Optional, Union

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Frame,
    Locator,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import Config
from .exceptions import InvalidArgumentError, SessionError


# Environment variable that overrides the configured environment
ENVIRONMENT_OVERRIDE_VAR = "ENV_DETAILS"


class BrowserType(enum.Enum):
    """Browsers the suite can launch."""

    CHROME = "CHROME"
    FIREFOX = "FIREFOX"
    EDGE = "EDGE"

    @classmethod
    def parse(cls, value: Optional[str]) -> "BrowserType":
        try:
            return cls((value or "").strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Invalid browserType: {value}") from None


class Environment(enum.Enum):
    """Deployment environments and their URL keys in configuration."""

    QA = "qaUrl"
    UAT = "uatUrl"
    PROD = "prodUrl"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Environment":
        name = (value or "").strip().upper()
        if name not in cls.__members__:
            raise InvalidArgumentError(f"Invalid environment: {value}")
        return cls[name]


class DriverSession:
    """
    Owns one Playwright browser session.

    The session is passed explicitly to everything that needs the browser
    (actions, page objects, hooks); there is no process-wide handle.

    Usage:
        with DriverSession(Config.load()) as session:
            session.launch()
            session.navigate()
            session.page.title()
    """

    # Per-engine launch options
    LAUNCH_OPTIONS: Dict[str, Dict[str, Any]] = {
        "chromium": {"args": ["--start-maximized", "--ignore-certificate-errors"]},
        "firefox": {},
    }

    # Per-engine context options (Chromium follows the maximised window size)
    CONTEXT_OPTIONS: Dict[str, Dict[str, Any]] = {
        "chromium": {"no_viewport": True, "ignore_https_errors": True},
        "firefox": {"viewport": {"width": 1920, "height": 1080}, "ignore_https_errors": True},
    }

    # BrowserType -> (engine, channel)
    ENGINES: Dict[BrowserType, tuple] = {
        BrowserType.CHROME: ("chromium", None),
        BrowserType.FIREFOX: ("firefox", None),
        BrowserType.EDGE: ("chromium", "msedge"),
    }

    def __init__(
        self,
        config: Config,
        playwright_factory: Callable[[], Any] = sync_playwright,
        headless: bool = True,
    ):
        """
        Initialize the session.

        Args:
            config: Suite configuration
            playwright_factory: Callable returning a Playwright context manager
            headless: Run browser in headless mode
        """
        self.config = config
        self.headless = headless
        self._playwright_factory = playwright_factory

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._frame: Optional[Frame] = None
        self.browser_type: Optional[BrowserType] = None
        self.environment: Optional[Environment] = None

    def __enter__(self) -> "DriverSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.quit()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_active(self) -> bool:
        return self._page is not None

    @property
    def timeout(self) -> int:
        """Configured wait timeout in seconds."""
        return self.config.get_int("timeout")

    @property
    def timeout_ms(self) -> int:
        return self.timeout * 1000

    def launch(self, browser_type: Optional[str] = None) -> Page:
        """
        Launch a browser and open a maximised page.

        Args:
            browser_type: CHROME, FIREFOX or EDGE (any case). Defaults to the
                          configured browserType.

        Raises:
            InvalidArgumentError: Unknown browser type (nothing is started).
            SessionError: A session is already active.
        """
        if browser_type is None:
            browser_type = self.config.get("browserType")
        kind = BrowserType.parse(browser_type)
        timeout = self.timeout

        if self.is_active:
            raise SessionError("A browser session is already active; call quit() first")

        engine, channel = self.ENGINES[kind]
        logger.info(f"Launching browser: {kind.value}")

        launch_options = {**self.LAUNCH_OPTIONS[engine], "headless": self.headless}
        if channel:
            launch_options["channel"] = channel

        self._playwright = self._playwright_factory().start()
        try:
            launcher = getattr(self._playwright, engine)
            self._browser = launcher.launch(**launch_options)
            self._context = self._browser.new_context(**self.CONTEXT_OPTIONS[engine])
            self._context.set_default_timeout(timeout * 1000)
            self._page = self._context.new_page()
        except Exception:
            self.quit()
            raise

        self.browser_type = kind
        logger.info(
            f"Browser launched successfully | Browser={kind.value} | ImplicitWait={timeout}s"
        )
        return self._page

    def resolve_environment(self, environment: Optional[str] = None) -> Environment:
        """
        Decide which environment to open.

        An explicit argument wins; otherwise ENV_DETAILS takes precedence
        over the configured environment.
        """
        env = environment or os.environ.get(ENVIRONMENT_OVERRIDE_VAR)
        if not env:
            env = self.config.get("environment")
        return Environment.parse(env)

    def resolve_url(self, environment: Optional[str] = None) -> str:
        """Map an environment to its configured base URL."""
        return self.config.get(self.resolve_environment(environment).value)

    def navigate(self, environment: Optional[str] = None) -> str:
        """
        Open the application URL for an environment.

        Returns:
            The URL that was opened.
        """
        env = self.resolve_environment(environment)
        url = self.config.get(env.value)
        logger.info(f"Navigating to URL ({env.name}) : {url}")
        self.page.goto(url)
        self.environment = env
        return url

    def close_window(self) -> None:
        """Close the current page, leaving the browser running."""
        if self._page is not None:
            logger.info("Closing current browser window")
            self._page.close()
            remaining = self._context.pages if self._context else []
            self._page = remaining[-1] if remaining else None
            self._frame = None

    def quit(self) -> None:
        """Tear the whole session down. Safe to call repeatedly."""
        if self._playwright is None:
            return

        logger.info("Quitting browser session")
        try:
            if self._context is not None:
                self._context.close()
            if self._browser is not None:
                self._browser.close()
        finally:
            self._playwright.stop()
            self._playwright = None
            self._browser = None
            self._context = None
            self._page = None
            self._frame = None
            self.browser_type = None
            self.environment = None

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def page(self) -> Page:
        if self._page is None:
            raise SessionError("No active browser session. Call launch() first.")
        return self._page

    @property
    def context(self) -> BrowserContext:
        if self._context is None:
            raise SessionError("No active browser session. Call launch() first.")
        return self._context

    @property
    def scope(self) -> Union[Page, Frame]:
        """Frame element lookups currently run in."""
        return self._frame or self.page

    def locator(self, selector: str) -> Locator:
        return self.scope.locator(selector)

    # =========================================================================
    # Windows
    # =========================================================================

    def switch_to_child_window(self) -> Page:
        """Make the most recently opened page current."""
        pages = self.context.pages
        if len(pages) < 2:
            raise SessionError("No child window is open")
        self._page = pages[-1]
        self._frame = None
        self._page.bring_to_front()
        logger.debug(f"Switched to child window: {self._page.url}")
        return self._page

    def close_child_windows(self) -> None:
        """Close every page except the first one and switch back to it."""
        pages = self.context.pages
        for child in pages[1:]:
            child.close()
        self._page = pages[0]
        self._frame = None
        logger.debug("Closed all child windows")

    # =========================================================================
    # Frames
    # =========================================================================

    def switch_to_frame(
        self,
        name_or_id: Optional[str] = None,
        index: Optional[int] = None,
        element: Optional[Locator] = None,
    ) -> Frame:
        """
        Scope subsequent element lookups to a frame.

        Exactly one of name_or_id, index or element must be given. Index 0 is
        the first child frame of the page.
        """
        given = [arg is not None for arg in (name_or_id, index, element)]
        if sum(given) != 1:
            raise InvalidArgumentError("Pass exactly one of name_or_id, index, element")

        frame: Optional[Frame] = None
        if name_or_id is not None:
            frame = self.page.frame(name=name_or_id)
            if frame is None:
                handle = self.page.locator(f"iframe#{name_or_id}").element_handle()
                frame = handle.content_frame() if handle else None
        elif index is not None:
            children = self.page.main_frame.child_frames
            frame = children[index] if 0 <= index < len(children) else None
        else:
            handle = element.element_handle()
            frame = handle.content_frame() if handle else None

        if frame is None:
            raise InvalidArgumentError(
                f"Frame not found (name_or_id={name_or_id}, index={index})"
            )
        self._frame = frame
        logger.debug(f"Switched to frame: {frame.name or frame.url}")
        return frame

    def switch_to_default_content(self) -> None:
        self._frame = None
        logger.debug("Switched to default content")


__all__ = [
    "BrowserType",
    "DriverSession",
    "Environment",
    "ENVIRONMENT_OVERRIDE_VAR",
]
