"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module wires the scenario lifecycle into pytest-bdd and provides the
fixtures step definitions use.

Key Features:
- One browser session per scenario (launch + navigate before, quit after)
- Screenshot of the final page state attached to every scenario
- Scenario results appended to the run log for the HTML report
- In-memory hotel app by default, real browser with --live

================================================================================
"""

from typing import Generator

import pytest
from playwright.sync_api import sync_playwright

from bddsuites.ui_testing.framework.browser_manager import DriverSession
from bddsuites.ui_testing.framework.config_loader import Config
from bddsuites.ui_testing.framework.hooks import RunLog, ScenarioHooks
from bddsuites.ui_testing.framework.page_manager import PageObjectManager
from bddsuites.ui_testing.tests.fake_browser import FakePlaywrightFactory, HotelApp


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def config() -> Config:
    """Suite configuration, loaded once and validated."""
    return Config.load().validate()


@pytest.fixture(scope="session")
def run_log(config: Config) -> RunLog:
    """
    Run log shared by every scenario in the session.

    Starts empty so the report only covers this run.
    """
    log = RunLog(config.get_path("jsonFilePath"))
    log.reset()
    return log


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def playwright_factory(request):
    """Real Playwright with --live, the in-memory hotel app otherwise."""
    if request.config.getoption("--live"):
        return sync_playwright
    return FakePlaywrightFactory(HotelApp())


@pytest.fixture
def browser_session(request, config: Config, playwright_factory) -> Generator[DriverSession, None, None]:
    """
    Function-scoped browser session.

    Launched and quit by the scenario hooks; quit() here only guarantees
    nothing leaks when a scenario never reached its after-hook.
    """
    session = DriverSession(
        config,
        playwright_factory=playwright_factory,
        headless=not request.config.getoption("--headed"),
    )
    yield session
    session.quit()


@pytest.fixture
def scenario_hooks(browser_session: DriverSession, run_log: RunLog) -> ScenarioHooks:
    return ScenarioHooks(browser_session, run_log=run_log)


@pytest.fixture
def pages(browser_session: DriverSession) -> PageObjectManager:
    """
    Page objects for the current scenario.

    A new manager per scenario, so no page object outlives its session.
    """
    return PageObjectManager(browser_session)


# ================================================================================
# Scenario Lifecycle Hooks
# ================================================================================

def pytest_bdd_before_scenario(request, feature, scenario):
    """Launch the browser and open the application under test."""
    hooks = request.getfixturevalue("scenario_hooks")
    hooks.before_scenario(scenario.name, request.config.getoption("--browser-type"))


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    """Remember the failing step for the after-hook."""
    request.node.scenario_error = f"Step failed: {step.name}\n{type(exception).__name__}: {exception}"


def pytest_bdd_after_scenario(request, feature, scenario):
    """Capture the final screenshot, record the result and quit the browser."""
    hooks = request.getfixturevalue("scenario_hooks")
    error = getattr(request.node, "scenario_error", None)
    hooks.after_scenario(
        scenario.name,
        failed=error is not None,
        error=error,
        feature=feature.name,
    )
