"""
================================================================================
Scenario Hooks
================================================================================

Per-scenario lifecycle around a DriverSession.

    idle -> before_scenario (launch + navigate) -> running
         -> after_scenario (screenshot + attach + log + quit) -> idle

The session is always quit by after_scenario, including when the scenario
failed or the screenshot could not be captured.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import base64
import json
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import allure
from loguru import logger

from .browser_manager import DriverSession
from .element_actions import PageActions


def attach_screenshot(screenshot: bytes, name: str) -> None:
    """Attach PNG bytes to the Allure report."""
    allure.attach(
        screenshot,
        name=name,
        attachment_type=allure.attachment_type.PNG,
    )


@dataclass
class ScenarioResult:
    """
    Outcome of one scenario.

    Attributes:
        name: Scenario name
        status: "passed" or "failed"
        screenshot: PNG bytes captured after the scenario (None if capture failed)
        error: Failure message, if any
        feature: Feature the scenario belongs to
        started_at: ISO timestamp of the before-hook
        duration: Seconds between before- and after-hook
        browser: Browser the scenario ran on
        environment: Environment the scenario ran against
    """
    name: str
    status: str
    screenshot: Optional[bytes] = None
    error: Optional[str] = None
    feature: str = ""
    started_at: str = field(default_factory=lambda: datetime.now().isoformat())
    duration: float = 0.0
    browser: str = ""
    environment: str = ""

    @property
    def passed(self) -> bool:
        return self.status == "passed"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.screenshot is not None:
            data["screenshot"] = base64.b64encode(self.screenshot).decode("ascii")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScenarioResult":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if known.get("screenshot"):
            known["screenshot"] = base64.b64decode(known["screenshot"])
        return cls(**known)


class RunLog:
    """
    Line-delimited JSON log of scenario results.

    One object per line, appended as each scenario finishes; the reporting
    step reads it after the run.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, result: ScenarioResult) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(result.to_dict()) + "\n")
        logger.debug(f"Recorded scenario result: {result.name} ({result.status})")

    def read(self) -> List[ScenarioResult]:
        results = []
        with open(self.path, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    results.append(ScenarioResult.from_dict(json.loads(line)))
        return results

    def reset(self) -> None:
        """Start a fresh log for a new run."""
        if self.path.exists():
            self.path.unlink()


class ScenarioHooks:
    """
    Before/after callbacks for one scenario.

    Usage:
        hooks = ScenarioHooks(session, run_log=RunLog(path))
        hooks.before_scenario("Login with valid credentials")
        try:
            ...  # steps
        finally:
            result = hooks.after_scenario("Login with valid credentials", failed=False)
    """

    def __init__(
        self,
        session: DriverSession,
        run_log: Optional[RunLog] = None,
        attach: Callable[[bytes, str], None] = attach_screenshot,
    ):
        self.session = session
        self.run_log = run_log
        self.attach = attach
        self._started = 0.0
        self._started_at = ""

    def before_scenario(self, name: str, browser_type: Optional[str] = None) -> str:
        """
        Launch the browser and open the application.

        Returns:
            The URL opened.
        """
        logger.info("=" * 60)
        logger.info(f"Scenario Started : {name}")
        logger.info("=" * 60)

        self._started = time.monotonic()
        self._started_at = datetime.now().isoformat()

        try:
            self.session.launch(browser_type)
            url = self.session.navigate()
        except Exception:
            self.session.quit()
            raise

        return url

    def after_scenario(
        self,
        name: str,
        failed: bool,
        error: Optional[str] = None,
        feature: str = "",
    ) -> ScenarioResult:
        """
        Capture the final screenshot, record the result and quit the browser.

        A screenshot failure is logged and leaves the result without a
        screenshot; the session is quit regardless.
        """
        if failed:
            logger.error(f"Scenario Failed : {name}")
        else:
            logger.info(f"Scenario Passed : {name}")

        try:
            screenshot = None
            browser = self.session.browser_type.value if self.session.browser_type else ""
            try:
                logger.info("Capturing screenshot")
                screenshot = PageActions(self.session).get_screenshot_as_bytes()
                self.attach(screenshot, "screenshot")
            except Exception as e:
                logger.warning(f"Failed to capture screenshot for '{name}': {e}")

            result = ScenarioResult(
                name=name,
                status="failed" if failed else "passed",
                screenshot=screenshot,
                error=error,
                feature=feature,
                started_at=self._started_at or datetime.now().isoformat(),
                duration=round(time.monotonic() - self._started, 3) if self._started else 0.0,
                browser=browser,
                environment=self.session.environment.name if self.session.environment else "",
            )
            if self.run_log is not None:
                self.run_log.append(result)
            return result
        finally:
            logger.info("Closing browser")
            self.session.quit()
            logger.info("=" * 60)
            logger.info(f"Scenario Ended : {name}")
            logger.info("=" * 60)


__all__ = [
    "RunLog",
    "ScenarioHooks",
    "ScenarioResult",
    "attach_screenshot",
]
