"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser tests. The page / base_page fixtures come from the
framework plugin (`testsuites.ui_testing.framework.fixtures`); this module adds:

- Screenshot capture on failure for every test in this directory
- Page Object fixtures
- `fake_site`: serves in-memory HTML for any URL, so tests need no network

================================================================================
"""

from typing import Awaitable, Callable, Dict, List

import pytest
from playwright.async_api import Page, Route

from testsuites.ui_testing.framework.config_loader import FrameworkConfig
from testsuites.ui_testing.pages.dashboard_page import DashboardPage
from testsuites.ui_testing.pages.example_page import ExamplePage
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.fixture(autouse=True)
def _screenshot_on_failure(failure_screenshot):
    """Enable the framework's failure screenshot for every UI test."""
    return failure_screenshot


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def example_page(page: Page, ui_config: FrameworkConfig) -> ExamplePage:
    return ExamplePage(page, ui_config)


@pytest.fixture
def login_page(page: Page, ui_config: FrameworkConfig) -> LoginPage:
    """
    Provides LoginPage instance.

    Use this fixture for tests that interact with the login page.
    """
    return LoginPage(page, ui_config)


@pytest.fixture
def dashboard_page(page: Page, ui_config: FrameworkConfig) -> DashboardPage:
    """
    Provides DashboardPage instance.

    Use this fixture for tests that interact with the dashboard.
    """
    return DashboardPage(page, ui_config)


# ================================================================================
# Offline Site
# ================================================================================

@pytest.fixture
def fake_site(page: Page) -> Callable[[Dict[str, str]], Awaitable[List[str]]]:
    """
    Route every request of this page to in-memory HTML.

    Usage:
        await fake_site({"https://example.com/dashboard": "<h1>Dashboard</h1>"})

    Unknown URLs answer 404. Returns the list of requested URLs, in order.
    """
    requested: List[str] = []

    async def install(pages: Dict[str, str]) -> List[str]:
        async def handle(route: Route) -> None:
            url = route.request.url
            requested.append(url)
            body = pages.get(url.rstrip("/")) or pages.get(url)
            if body is None:
                await route.fulfill(status=404, content_type="text/html", body="<h1>Not Found</h1>")
            else:
                await route.fulfill(status=200, content_type="text/html", body=body)

        await page.route("**/*", handle)
        return requested

    return install
