"""
Fixtures for framework unit tests (no browser required).

Playwright Page / Locator objects are replaced with MagicMock + AsyncMock.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework.config_loader import (
    FrameworkConfig,
    ScreenshotSettings,
    Timeouts,
)


def _build_locator() -> MagicMock:
    """A Locator double whose action methods are awaitable."""
    locator = MagicMock(name="locator")
    for method in (
        "click", "fill", "press_sequentially", "text_content", "wait_for",
        "is_visible", "hover", "select_option", "check", "uncheck",
    ):
        setattr(locator, method, AsyncMock(name=f"locator.{method}"))
    return locator


@pytest.fixture
def locator() -> MagicMock:
    return _build_locator()


@pytest.fixture
def mock_page(locator) -> MagicMock:
    page = MagicMock(name="page")
    page.locator.return_value = locator
    page.goto = AsyncMock()
    page.title = AsyncMock(return_value="My App")
    page.wait_for_load_state = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.keyboard.press = AsyncMock()
    page.screenshot = AsyncMock()
    page.url = "https://example.com/page"
    return page


@pytest.fixture
def framework_config(tmp_path) -> FrameworkConfig:
    return FrameworkConfig(
        base_url="https://example.com",
        timeouts=Timeouts(navigation=30000, action=10000, assertion=5000),
        screenshots=ScreenshotSettings(dir=str(tmp_path / "screenshots")),
    )


@pytest.fixture
def make_locator():
    """Factory for additional Locator doubles (e.g. chained locators)."""
    return _build_locator
