from pathlib import Path

import pytest
import yaml

from bddsuites.ui_testing.framework.browser_manager import ENVIRONMENT_OVERRIDE_VAR, DriverSession
from bddsuites.ui_testing.framework.config_loader import Config
from bddsuites.ui_testing.tests.fake_browser import FakePlaywrightFactory, HotelApp


CONFIG_VALUES = {
    "browserType": "CHROME",
    "timeout": 5,
    "environment": "QA",
    "qaUrl": "https://qa.hotel.example/",
    "uatUrl": "https://uat.hotel.example/",
    "prodUrl": "https://www.hotel.example/",
    "screenshotPath": "screenshots",
    "jsonFilePath": "run-log.jsonl",
    "jvmFilePath": "reports",
    "projectName": "Hotel Booking",
    "reportAuthor": "QA Team",
}


@pytest.fixture(autouse=True)
def _no_environment_override(monkeypatch):
    monkeypatch.delenv(ENVIRONMENT_OVERRIDE_VAR, raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(values=None, **overrides) -> Path:
        data = dict(CONFIG_VALUES if values is None else values)
        data.update(overrides)
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config(write_config, tmp_path) -> Config:
    return Config.load(write_config(), root=tmp_path)


@pytest.fixture
def factory() -> FakePlaywrightFactory:
    return FakePlaywrightFactory(HotelApp())


@pytest.fixture
def session(config, factory):
    """A launched session on the in-memory browser."""
    session = DriverSession(config, playwright_factory=factory)
    session.launch()
    yield session
    session.quit()


@pytest.fixture
def page(session):
    return session.page
