"""
================================================================================
Suite Pytest Configuration
================================================================================

This module registers the markers used across the BDD and unit suites and
tags collected items by the directory they live in.

================================================================================
"""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority scenarios - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority scenarios - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority scenarios - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority scenarios - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification scenarios"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression suite"
    )
    config.addinivalue_line(
        "markers", "unit: Framework unit tests (in-memory browser)"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "bdd: Scenarios generated from feature files"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "login: Scenarios related to hotel site login"
    )


def pytest_collection_modifyitems(config, items):
    """
    Add directory-based markers to collected items.
    """
    for item in items:
        parts = Path(str(item.fspath)).parts

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.bdd)

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "OMR Branch Hotel Booking - BDD UI Automation",
        "=" * 60,
        "",
    ]
