"""
================================================================================
Dashboard Page Object (Async / Playwright)
================================================================================

OrangeHRM dashboard shown after a successful login.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class DashboardPage(PageBase):
    """Dashboard page object (async)."""

    URL_PATH = "/dashboard"

    header = "h6"

    async def get_header_text(self) -> str:
        return (await self.get_text(self.header)).strip()

    @allure.step("Verify dashboard loaded")
    async def is_loaded(self) -> bool:
        """True once the URL and header both point at the dashboard."""
        if "dashboard" not in self.get_current_url():
            return False
        await self.wait_for_element(self.header)
        return await self.get_header_text() == "Dashboard"
