"""
Repository-level pytest configuration.

Why this exists:
  - Register the command-line switches shared by every suite
  - Configure loguru once per test session
  - Keep runs against the real site opt-in (--live)
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from bdd_tools.common import init_logger


def pytest_addoption(parser):
    group = parser.getgroup("bdd", "OMR Branch BDD suite")
    group.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Drive a real browser against the configured site instead of the in-memory app",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window (only with --live)",
    )
    group.addoption(
        "--browser-type",
        default=None,
        help="CHROME, FIREFOX or EDGE; overrides browserType from config",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _session_logger() -> Generator[None, None, None]:
    """Configure loguru sinks before any test logs."""
    init_logger()
    yield
