"""
================================================================================
UI Testing Pytest Plugin
================================================================================

Fixtures and hooks that give every UI test its own page and BasePage.

Fixtures:
    - ui_config: Process-wide FrameworkConfig (session)
    - browser_manager: Started BrowserManager (session)
    - browser_context: Isolated BrowserContext (function)
    - page: Playwright Page (function)
    - base_page: BasePage wrapping `page` (function)
    - failure_screenshot: Screenshot on failure (function, opt-in)

Hooks:
    - pytest_configure: loguru + Playwright assertion timeout
    - pytest_sessionstart / pytest_sessionfinish: output directory bootstrap
    - pytest_runtest_makereport: stash phase reports for fixtures

Register with `pytest_plugins = ["testsuites.ui_testing.framework.fixtures"]`
in the root conftest.

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page, expect

from pom_tools.common import init_logger
from .browser_manager import BrowserManager
from .config_loader import FrameworkConfig, get_config
from .page_base import BasePage
from .screenshot import capture_failure_screenshot


# Directories created before the first test runs
OUTPUT_DIRECTORIES = (
    "screenshots",
    "reports",
    "allure-results",
    "test-results",
)

# Per-item phase reports: {"setup": report, "call": report, ...}
phase_report_key = pytest.StashKey[Dict[str, pytest.TestReport]]()


# ================================================================================
# Session Hooks
# ================================================================================

def pytest_configure(config):
    """Initialize logging and Playwright's assertion timeout."""
    framework_config = get_config()
    init_logger(
        level=framework_config.logging.level,
        log_file=framework_config.logging.file,
    )
    expect.set_options(timeout=framework_config.timeouts.assertion)


def pytest_sessionstart(session):
    """Create output directories (idempotent, safe across xdist workers)."""
    framework_config = get_config()
    directories = [*OUTPUT_DIRECTORIES, framework_config.screenshots.dir]
    for directory in dict.fromkeys(directories):
        dir_path = Path(directory).resolve()
        if not dir_path.exists():
            dir_path.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created directory: {dir_path}")
    logger.debug("Global setup completed")


def pytest_sessionfinish(session, exitstatus):
    logger.debug(f"Global teardown completed (exit status: {exitstatus})")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    item.stash.setdefault(phase_report_key, {})[report.when] = report


def item_failed(item: pytest.Item) -> bool:
    """True when the setup or call phase of *item* failed."""
    reports = item.stash.get(phase_report_key, {})
    return any(
        reports[phase].failed for phase in ("setup", "call") if phase in reports
    )


def display_name(item: pytest.Item) -> str:
    """The @allure.title of *item* when it has one, else its pytest name."""
    function = getattr(item, "function", None)
    return getattr(function, "__allure_display_name__", None) or item.name


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> FrameworkConfig:
    """Read-only framework configuration."""
    return get_config()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(ui_config: FrameworkConfig) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    One browser per session (per worker under xdist), reducing launch overhead.
    """
    manager = BrowserManager(ui_config.browser)
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def browser_context(
    browser_manager: BrowserManager,
    ui_config: FrameworkConfig,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context(base_url=ui_config.base_url)
    context.set_default_timeout(ui_config.timeouts.action)
    context.set_default_navigation_timeout(ui_config.timeouts.navigation)
    yield context
    await browser_manager.release_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(browser_context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Creates a new page for each test within the browser context.
    """
    page = await browser_context.new_page()
    yield page
    await page.close()


@pytest.fixture
def base_page(page: Page, ui_config: FrameworkConfig) -> BasePage:
    """
    Provides a BasePage wrapping this test's page.

    A new instance per test; never shared across tests.
    """
    return BasePage(page, ui_config)


@pytest_asyncio.fixture(loop_scope="session")
async def failure_screenshot(
    request: pytest.FixtureRequest,
    page: Page,
    ui_config: FrameworkConfig,
) -> AsyncGenerator[None, None]:
    """
    Capture a full-page screenshot after a failed or timed-out test.

    The file is named after the test's Allure title, or its pytest name.

    Capture problems are logged and never change the test outcome.
    """
    yield
    if not ui_config.screenshots.on_failure or not item_failed(request.node):
        return
    await capture_failure_screenshot(
        page,
        ui_config.screenshots.path,
        display_name(request.node),
        full_page=ui_config.screenshots.full_page,
    )
