"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - Element interaction accepting a selector string or a Locator
    - Config-driven default timeouts
    - Screenshot and wait utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional, Union

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page, expect

from .config_loader import FrameworkConfig, get_config
from .screenshot import reserve_screenshot_path, take_timestamped_screenshot


# Selector string or an already resolved (possibly chained) Locator
LocatorRef = Union[str, Locator]

# scheme:// URLs plus the scheme-only forms Playwright accepts
_ABSOLUTE_URL = re.compile(r"^([a-z][a-z0-9+.\-]*://|about:|data:)", re.IGNORECASE)


def is_absolute_url(url: str) -> bool:
    """Return True when *url* carries its own scheme."""
    return bool(_ABSOLUTE_URL.match(url))


class BasePage:
    """
    Base class for all page objects.

    Page objects declare locators as class attributes and build their
    actions from the methods below, never from the raw Playwright page.

    Usage:
        class SearchPage(BasePage):
            URL_PATH = "/search"

            query_input = "#q"
            submit_button = "button[type='submit']"

            async def search(self, text: str) -> None:
                await self.type(self.query_input, text)
                await self.click(self.submit_button)
    """

    # Override in subclasses
    URL_PATH: str = ""

    def __init__(
        self,
        page: Page,
        config: Optional[FrameworkConfig] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            config: Framework configuration (defaults to the process-wide one)
        """
        self.page = page
        self.config = config or get_config()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _resolve(self, locator: LocatorRef) -> Locator:
        """Resolve a selector against the current page; pass Locators through."""
        if isinstance(locator, str):
            return self.page.locator(locator)
        return locator

    def _action_timeout(self, timeout: Optional[float]) -> float:
        return self.config.timeouts.action if timeout is None else timeout

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, url: str = "") -> None:
        """
        Navigate to a URL or a path relative to the base URL.

        Absolute URLs return once navigation commits; relative paths wait
        for network idle.

        Args:
            url: Absolute URL, or path joined to the configured base URL
        """
        timeout = self.config.timeouts.navigation
        if is_absolute_url(url):
            target, wait_until = url, "commit"
        else:
            target = f"{self.base_url}/{url.lstrip('/')}" if url else self.base_url
            wait_until = "networkidle"

        with allure.step(f"Navigate to {target}"):
            await self.page.goto(target, wait_until=wait_until, timeout=timeout)
            logger.debug(f"Navigated to: {target} (wait_until={wait_until})")

    async def open(self) -> "BasePage":
        """Navigate to this page's URL_PATH."""
        await self.navigate_to(self.URL_PATH)
        return self

    async def get_title(self) -> str:
        with allure.step("Get page title"):
            return await self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    async def wait_for_navigation(self, wait_until: str = "networkidle") -> None:
        """
        Wait for the page to reach a load state.

        Args:
            wait_until: 'load', 'domcontentloaded' or 'networkidle'
        """
        with allure.step(f"Wait for load state: {wait_until}"):
            await self.page.wait_for_load_state(
                wait_until, timeout=self.config.timeouts.navigation
            )

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(
        self,
        locator: LocatorRef,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> None:
        """
        Click an element.

        Args:
            locator: Selector string or Locator
            timeout: Timeout in milliseconds (defaults to timeouts.action)
            **kwargs: Additional Playwright click options
        """
        with allure.step(f"Click: {locator}"):
            await self._resolve(locator).click(
                timeout=self._action_timeout(timeout), **kwargs
            )

    async def type(
        self,
        locator: LocatorRef,
        text: str,
        delay: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Type text into an input field, replacing its value.

        Args:
            locator: Selector string or Locator of the input
            text: Text to enter
            delay: Per-keystroke delay in milliseconds; types key by key when set
            timeout: Timeout in milliseconds (defaults to timeouts.action)
        """
        element = self._resolve(locator)
        action_timeout = self._action_timeout(timeout)
        with allure.step(f"Type into {locator}"):
            if delay:
                await element.fill("", timeout=action_timeout)
                await element.press_sequentially(text, delay=delay, timeout=action_timeout)
            else:
                await element.fill(text, timeout=action_timeout)

    async def get_text(
        self,
        locator: LocatorRef,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Get text content of an element.

        Returns:
            Text content, or "" when the element has none
        """
        with allure.step(f"Get text: {locator}"):
            text = await self._resolve(locator).text_content(
                timeout=self._action_timeout(timeout)
            )
        return text or ""

    async def hover(self, locator: LocatorRef, timeout: Optional[float] = None) -> None:
        with allure.step(f"Hover: {locator}"):
            await self._resolve(locator).hover(timeout=self._action_timeout(timeout))

    async def select_option(
        self,
        locator: LocatorRef,
        value: str,
        timeout: Optional[float] = None,
    ) -> None:
        """Select an option of a <select> by value or label."""
        with allure.step(f"Select '{value}' in {locator}"):
            await self._resolve(locator).select_option(
                value, timeout=self._action_timeout(timeout)
            )

    async def set_checkbox(
        self,
        locator: LocatorRef,
        checked: bool,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Check or uncheck a checkbox.

        Args:
            locator: Selector string or Locator of the checkbox
            checked: True to check, False to uncheck
            timeout: Timeout in milliseconds (defaults to timeouts.action)
        """
        element = self._resolve(locator)
        action_timeout = self._action_timeout(timeout)
        with allure.step(f"{'Check' if checked else 'Uncheck'}: {locator}"):
            if checked:
                await element.check(timeout=action_timeout)
            else:
                await element.uncheck(timeout=action_timeout)

    async def press_key(self, key: str) -> None:
        """Press a key, e.g. 'Enter', 'Escape', 'Tab'."""
        with allure.step(f"Press key: {key}"):
            await self.page.keyboard.press(key)

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    async def wait_for_element(
        self,
        locator: LocatorRef,
        timeout: Optional[float] = None,
    ) -> None:
        """Wait for an element to become visible."""
        with allure.step(f"Wait for visible: {locator}"):
            await self._resolve(locator).wait_for(
                state="visible", timeout=self._action_timeout(timeout)
            )

    async def wait_for_element_hidden(
        self,
        locator: LocatorRef,
        timeout: Optional[float] = None,
    ) -> None:
        """Wait for an element to become hidden or detached."""
        with allure.step(f"Wait for hidden: {locator}"):
            await self._resolve(locator).wait_for(
                state="hidden", timeout=self._action_timeout(timeout)
            )

    async def is_visible(self, locator: LocatorRef) -> bool:
        """
        Check if an element is visible right now.

        Returns:
            True if visible; False when hidden, missing or unresolvable
        """
        with allure.step(f"Is visible: {locator}"):
            try:
                return await self._resolve(locator).is_visible()
            except PlaywrightError as e:
                logger.debug(f"Visibility check for {locator} failed: {e}")
                return False

    async def wait(self, milliseconds: float) -> None:
        """Wait for a fixed duration."""
        with allure.step(f"Wait {milliseconds} ms"):
            await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Assertions
    # =========================================================================

    async def expect_visible(
        self,
        locator: LocatorRef,
        timeout: Optional[float] = None,
    ) -> None:
        """Assert that an element is visible."""
        with allure.step(f"Expect visible: {locator}"):
            await expect(self._resolve(locator)).to_be_visible(
                timeout=self.config.timeouts.assertion if timeout is None else timeout
            )

    async def expect_text(
        self,
        locator: LocatorRef,
        text: str,
        timeout: Optional[float] = None,
    ) -> None:
        """Assert that an element's text equals *text*."""
        with allure.step(f"Expect text '{text}': {locator}"):
            await expect(self._resolve(locator)).to_have_text(
                text,
                timeout=self.config.timeouts.assertion if timeout is None else timeout,
            )

    # =========================================================================
    # Screenshot
    # =========================================================================

    async def take_screenshot(self, filename: Optional[str] = None) -> Path:
        """
        Take a full-page screenshot into the screenshots directory.

        Args:
            filename: File name without extension, relative to the
                screenshots directory; a timestamped "screenshot_<date>_<time>"
                name is generated when omitted

        Returns:
            Absolute path to the saved screenshot

        Raises:
            ValueError: *filename* resolves outside the screenshots directory
        """
        settings = self.config.screenshots
        with allure.step(f"Take screenshot: {filename or '(timestamped)'}"):
            if not filename:
                path = await take_timestamped_screenshot(
                    self.page, settings.path, full_page=settings.full_page
                )
            else:
                stem = filename[:-4] if filename.lower().endswith(".png") else filename
                path = reserve_screenshot_path(settings.path, stem, timestamped=False)
                try:
                    await self.page.screenshot(path=str(path), full_page=settings.full_page)
                except BaseException:
                    path.unlink(missing_ok=True)
                    raise

        logger.debug(f"Screenshot saved: {path}")
        return path


__all__ = [
    "BasePage",
    "LocatorRef",
    "PageBase",
    "is_absolute_url",
]

# Page objects subclass this name
PageBase = BasePage
