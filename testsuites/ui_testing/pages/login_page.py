"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

OrangeHRM demo login form.

The login URL comes from `test_data.orangehrm.login_url` in config/config.yaml
so the page works regardless of the configured base URL.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import PageBase


DEFAULT_LOGIN_URL = "https://opensource-demo.orangehrmlive.com/web/index.php/auth/login"


class LoginPage(PageBase):
    """Login page object (async)."""

    username_input = "input[name='username']"
    password_input = "input[name='password']"
    login_button = "button[type='submit']"
    error_alert = ".oxd-alert-content-text"

    @property
    def login_url(self) -> str:
        orangehrm = self.config.test_data.get("orangehrm") or {}
        return orangehrm.get("login_url", DEFAULT_LOGIN_URL)

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page and wait for the form."""
        await self.navigate_to(self.login_url)
        await self.wait_for_element(self.username_input)
        return self

    @allure.step("Login (username={username})")
    async def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        """
        Fill the login form and submit it.

        Args:
            username: Defaults to `test_data.orangehrm.username`
            password: Defaults to `test_data.orangehrm.password`
        """
        orangehrm = self.config.test_data.get("orangehrm") or {}
        if username is None:
            username = orangehrm.get("username", "Admin")
        if password is None:
            password = orangehrm.get("password", "admin123")

        await self.type(self.username_input, username)
        await self.type(self.password_input, password)
        await self.click(self.login_button)
        logger.debug(f"Submitted login form for {username}")

    async def get_error_message(self) -> str:
        """Text of the invalid-credentials alert, or "" if none is shown."""
        if not await self.is_visible(self.error_alert):
            return ""
        return await self.get_text(self.error_alert)
