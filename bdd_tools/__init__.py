"""
================================================================================
BDD Tools
================================================================================

Utilities around the BDD suite run.

Modules:
    - common: Shared loguru configuration
    - report_tools: HTML report generation from scenario run logs

Example:
    from bdd_tools.report_tools import ReportGenerator
    from bddsuites.ui_testing.framework import Config

    report_dir = ReportGenerator(Config.load()).generate()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
