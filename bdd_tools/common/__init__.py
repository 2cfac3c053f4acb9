"""
================================================================================
BDD Tools Common Utilities
================================================================================

Shared logging setup for the suite, the runner and the report tools.

Exports:
    - init_logger: Initialize loguru with the standard sinks
    - get_logger: Return the initialized logger

Usage:
    from bdd_tools.common import init_logger

    init_logger()

================================================================================
"""

from .global_config import get_logger, init_logger, reset_logger

__all__ = [
    "get_logger",
    "init_logger",
    "reset_logger",
]
