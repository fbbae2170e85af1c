"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions built from BasePage methods

Author: Automation Team
License: MIT
================================================================================
"""

from .example_page import ExamplePage
from .login_page import LoginPage
from .dashboard_page import DashboardPage

__all__ = [
    "ExamplePage",
    "LoginPage",
    "DashboardPage",
]
