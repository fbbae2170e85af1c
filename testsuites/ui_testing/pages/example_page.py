"""
================================================================================
Example Page Object (Async / Playwright)
================================================================================

Template for new page objects: locators as class attributes, actions built
only from BasePage methods.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class ExamplePage(PageBase):
    """Example page object (async)."""

    # Locators
    heading = "h1"
    submit_button = "#submit-button"
    input_field = "#input-field"

    async def get_heading_text(self) -> str:
        return await self.get_text(self.heading)

    @allure.step("Click submit")
    async def click_submit_button(self) -> None:
        await self.click(self.submit_button)

    @allure.step("Enter text")
    async def enter_text(self, text: str) -> None:
        await self.type(self.input_field, text)

    async def wait_for_page_load(self) -> None:
        """Wait until the heading is visible."""
        await self.wait_for_element(self.heading)
