"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based Page Object Model scaffold.

Components:
    - config_loader: Read-only framework configuration
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - screenshot: Timestamped screenshot capture
    - fixtures: Pytest plugin (page, base_page, failure screenshots)

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigurationError, FrameworkConfig, get_config
from .page_base import BasePage, LocatorRef
from .browser_manager import BrowserManager

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigurationError",
    "FrameworkConfig",
    "LocatorRef",
    "get_config",
]
