"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the hotel booking site.

Each page class encapsulates:
    - Element locators, built explicitly in __init__
    - Page-specific actions
    - Values read back for verification

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .explore_hotel_page import ExploreHotelPage

__all__ = [
    "LoginPage",
    "ExploreHotelPage",
]
