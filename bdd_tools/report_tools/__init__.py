"""
================================================================================
Report Tools
================================================================================

HTML reporting for finished BDD runs.

================================================================================
"""

from .cucumber_report import ReportGenerator, ReportSummary, load_results, summarize

__all__ = [
    "ReportGenerator",
    "ReportSummary",
    "load_results",
    "summarize",
]
