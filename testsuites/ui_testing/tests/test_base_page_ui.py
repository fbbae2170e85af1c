"""
================================================================================
BasePage Browser Tests (Async / Playwright)
================================================================================

Drives BasePage against a real browser. Pages are served with
`page.set_content` or the `fake_site` router, so no network is needed.

================================================================================
"""

import dataclasses
import time

import allure
import pytest
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.config_loader import (
    FrameworkConfig,
    ScreenshotSettings,
    Timeouts,
)
from testsuites.ui_testing.framework.page_base import BasePage


pytestmark = pytest.mark.asyncio(loop_scope="session")


FORM_HTML = """
<html><head><title>Form</title></head><body>
  <h1 id="title">Hello Form</h1>
  <button id="inc" onclick="this.dataset.count = (+this.dataset.count || 0) + 1">Increment</button>
  <input id="name" />
  <select id="color">
    <option value="red">Red</option>
    <option value="blue">Blue</option>
  </select>
  <input id="agree" type="checkbox" />
  <div id="hover-target" onmouseover="this.textContent = 'hovered'">idle</div>
  <div id="last-key"></div>
  <script>
    document.addEventListener('keydown', e => {
      document.getElementById('last-key').textContent = e.key;
    });
  </script>
</body></html>
"""


@pytest.fixture
def offline_page(page: Page, ui_config: FrameworkConfig, tmp_path) -> BasePage:
    """BasePage with fixed base URL, timeouts and a temporary screenshots dir."""
    config = dataclasses.replace(
        ui_config,
        base_url="https://example.com",
        timeouts=Timeouts(navigation=30000, action=10000, assertion=5000),
        screenshots=ScreenshotSettings(dir=str(tmp_path / "screenshots")),
    )
    return BasePage(page, config)


@allure.epic("UI Framework")
@allure.feature("BasePage")
class TestBasePageActions:
    """Element actions on a static form."""

    @pytest.mark.smoke
    async def test_selector_and_locator_read_same_text(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        by_selector = await offline_page.get_text("#title")
        by_locator = await offline_page.get_text(offline_page.page.locator("#title"))

        assert by_selector == by_locator == "Hello Form"

    async def test_click_with_selector_and_locator(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        await offline_page.click("#inc")
        await offline_page.click(offline_page.page.get_by_role("button", name="Increment"))

        count = await offline_page.page.get_attribute("#inc", "data-count")
        assert count == "2"

    async def test_type_replaces_value(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        await offline_page.type("#name", "first")
        await offline_page.type("#name", "second", delay=10)

        assert await offline_page.page.input_value("#name") == "second"

    async def test_select_checkbox_hover_and_key(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        await offline_page.select_option("#color", "blue")
        await offline_page.set_checkbox("#agree", True)
        await offline_page.hover("#hover-target")
        await offline_page.press_key("Escape")

        assert await offline_page.page.input_value("#color") == "blue"
        assert await offline_page.page.is_checked("#agree")
        assert await offline_page.get_text("#hover-target") == "hovered"
        assert await offline_page.get_text("#last-key") == "Escape"

        await offline_page.set_checkbox("#agree", False)
        assert not await offline_page.page.is_checked("#agree")

    async def test_get_text_of_empty_element_is_empty_string(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)
        assert await offline_page.get_text("#last-key") == ""

    async def test_title_and_expectations(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        assert await offline_page.get_title() == "Form"
        await offline_page.expect_visible("#title")
        await offline_page.expect_text("#title", "Hello Form")


@allure.epic("UI Framework")
@allure.feature("BasePage")
class TestBasePageVisibility:
    """Visibility probes and waits."""

    async def test_is_visible_missing_element_is_false(self, offline_page: BasePage):
        await offline_page.page.set_content(FORM_HTML)

        assert await offline_page.is_visible("#title") is True
        assert await offline_page.is_visible("#does-not-exist") is False
        assert await offline_page.is_visible("div.nothing >> nth=3") is False

    async def test_wait_for_late_element_within_action_timeout(self, offline_page: BasePage):
        await offline_page.page.set_content(
            """<body><script>
              setTimeout(() => {
                const el = document.createElement('p');
                el.id = 'late';
                el.textContent = 'arrived';
                document.body.appendChild(el);
              }, 2000);
            </script></body>"""
        )

        await offline_page.wait_for_element("#late")

        assert await offline_page.get_text("#late") == "arrived"

    async def test_wait_for_missing_element_fails_after_timeout(self, offline_page: BasePage):
        await offline_page.page.set_content("<body><p>static</p></body>")

        started = time.monotonic()
        with pytest.raises(PlaywrightTimeoutError):
            await offline_page.wait_for_element("#never", timeout=1500)
        elapsed = time.monotonic() - started

        assert elapsed >= 1.4

    async def test_wait_for_element_hidden(self, offline_page: BasePage):
        await offline_page.page.set_content(
            """<body><div id="spinner">loading</div><script>
              setTimeout(() => document.getElementById('spinner').remove(), 500);
            </script></body>"""
        )

        await offline_page.wait_for_element_hidden("#spinner")

        assert await offline_page.is_visible("#spinner") is False

    async def test_wait_fixed_duration(self, offline_page: BasePage):
        started = time.monotonic()
        await offline_page.wait(300)
        assert time.monotonic() - started >= 0.25


@allure.epic("UI Framework")
@allure.feature("BasePage")
class TestBasePageNavigation:
    """Relative vs absolute navigation."""

    async def test_relative_path_uses_base_url(self, offline_page: BasePage, fake_site):
        requested = await fake_site({
            "https://example.com/dashboard": "<h1>Dashboard</h1>",
        })

        await offline_page.navigate_to("/dashboard")
        await offline_page.wait_for_navigation()

        assert "/dashboard" in offline_page.get_current_url()
        assert requested[0] == "https://example.com/dashboard"

    async def test_empty_path_opens_base_url(self, offline_page: BasePage, fake_site):
        await fake_site({"https://example.com": "<h1>Home</h1>"})

        await offline_page.navigate_to()

        assert offline_page.get_current_url().rstrip("/") == "https://example.com"
        assert await offline_page.get_text("h1") == "Home"

    async def test_absolute_url_ignores_base_url(self, offline_page: BasePage, fake_site):
        requested = await fake_site({
            "https://other.com/x": "<h1>Other</h1>",
        })

        await offline_page.navigate_to("https://other.com/x")

        assert offline_page.get_current_url() == "https://other.com/x"
        assert all(not url.startswith("https://example.com") for url in requested)


@allure.epic("UI Framework")
@allure.feature("Screenshots")
class TestBasePageScreenshot:

    async def test_two_screenshots_get_distinct_paths(self, offline_page: BasePage, tmp_path):
        await offline_page.page.set_content(FORM_HTML)

        first = await offline_page.take_screenshot()
        second = await offline_page.take_screenshot()

        screenshots_dir = (tmp_path / "screenshots").resolve()
        assert first != second
        assert first.parent == second.parent == screenshots_dir
        assert first.stat().st_size > 0 and second.stat().st_size > 0

    async def test_named_screenshot(self, offline_page: BasePage, tmp_path):
        await offline_page.page.set_content(FORM_HTML)

        path = await offline_page.take_screenshot("form")

        assert path == (tmp_path / "screenshots" / "form.png").resolve()
        assert path.is_file()
