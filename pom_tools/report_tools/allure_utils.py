"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by the page-object framework to enrich Allure
reports with screenshots and page state.

================================================================================
"""

from pathlib import Path
from typing import Union

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(path: Union[str, Path], name: str = "Screenshot"):
    """
    Attach a PNG file from disk to Allure report.

    Args:
        path: Path to the PNG file
        name: Attachment name
    """
    allure.attach.file(
        str(path),
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
    logger.debug(f"Attached {path} to Allure as '{name}'")
