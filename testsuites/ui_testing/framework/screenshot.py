"""
================================================================================
Screenshot Helpers
================================================================================

Timestamped, collision-free screenshot capture shared by BasePage and the
failure-capture fixture.

File names follow `<name>_<YYYY-MM-DD>_<HH-MM-SS>.png`; when that file already
exists (same second, parallel worker) a numeric suffix is appended.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from playwright.async_api import Page

from pom_tools.common import ensure_directory, get_timestamp
from pom_tools.report_tools.allure_utils import attach_png, attach_text


DEFAULT_SCREENSHOT_NAME = "screenshot"

_NON_ALNUM = re.compile(r"[^a-z0-9]+", re.IGNORECASE)


def sanitize_name(name: Optional[str]) -> str:
    """
    Turn a test title into a filesystem-safe stem.

    Runs of non-alphanumeric characters collapse to a single underscore.

    Examples:
        >>> sanitize_name("Login Test - OrangeHRM")
        'login_test_orangehrm'
        >>> sanitize_name("")
        'screenshot'
    """
    cleaned = _NON_ALNUM.sub("_", name or "").strip("_").lower()
    return cleaned or DEFAULT_SCREENSHOT_NAME


def reserve_screenshot_path(
    directory: Union[str, Path],
    stem: str,
    timestamped: bool = True,
) -> Path:
    """
    Create an empty, uniquely named PNG file and return its absolute path.

    The file is created exclusively, so two callers (threads or processes)
    can never receive the same path.

    Args:
        directory: Screenshots directory (created if missing)
        stem: File name without extension; may contain subdirectories
        timestamped: Append `_<date>_<time>` to the stem

    Returns:
        Absolute path of the reserved file

    Raises:
        ValueError: The resulting path is outside *directory*
    """
    screenshots_dir = ensure_directory(directory)
    base = f"{stem}_{get_timestamp()}" if timestamped else stem

    target = (screenshots_dir / f"{base}.png").resolve()
    if not target.is_relative_to(screenshots_dir):
        raise ValueError(
            f"Screenshot path {target} is outside the screenshots directory {screenshots_dir}"
        )
    target.parent.mkdir(parents=True, exist_ok=True)
    base = target.stem

    counter = 0
    while True:
        suffix = f"_{counter}" if counter else ""
        candidate = target.parent / f"{base}{suffix}.png"
        try:
            candidate.touch(exist_ok=False)
            return candidate
        except FileExistsError:
            counter += 1


async def take_timestamped_screenshot(
    page: Page,
    directory: Union[str, Path],
    test_name: Optional[str] = None,
    full_page: bool = True,
) -> Path:
    """
    Take a timestamped screenshot and save it to the screenshots directory.

    Args:
        page: Playwright page instance
        directory: Screenshots directory
        test_name: Name of the test (sanitized); defaults to "screenshot"
        full_page: Capture full scrollable page

    Returns:
        Path to the saved screenshot
    """
    path = reserve_screenshot_path(directory, sanitize_name(test_name))
    try:
        await page.screenshot(path=str(path), full_page=full_page)
    except BaseException:
        path.unlink(missing_ok=True)
        raise
    return path


async def capture_failure_screenshot(
    page: Page,
    directory: Union[str, Path],
    test_name: str,
    full_page: bool = True,
) -> Optional[Path]:
    """
    Best-effort screenshot for a failed test.

    Never raises; errors are logged as warnings.

    Returns:
        Path to the screenshot, or None when capture failed
    """
    try:
        path = await take_timestamped_screenshot(page, directory, test_name, full_page)
    except Exception as e:
        logger.warning(f"Failed to take screenshot on test failure: {e}")
        return None

    logger.info(f"Screenshot saved: {path}")
    try:
        attach_png(path, name="failure_screenshot")
        attach_text(str(page.url), name="failure_url")
    except Exception as e:
        logger.warning(f"Failed to attach failure screenshot to Allure: {e}")
    return path


__all__ = [
    "DEFAULT_SCREENSHOT_NAME",
    "capture_failure_screenshot",
    "reserve_screenshot_path",
    "sanitize_name",
    "take_timestamped_screenshot",
]
