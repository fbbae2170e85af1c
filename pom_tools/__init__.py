"""
================================================================================
POM Tools
================================================================================

Support utilities shared by the page-object framework and its test suites.

Modules:
    - common: Logging setup, directory/timestamp helpers, test data helpers
    - report_tools: Allure attachment helpers

Example:
    from pom_tools.common import init_logger, ensure_directory

    init_logger(level="DEBUG")
    ensure_directory("screenshots")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
