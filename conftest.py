"""
Repository-level pytest configuration.

Registers the UI framework plugin (page / base_page fixtures, failure
screenshots, output directory bootstrap) for every suite, and pytester for
the plugin's own tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest


pytest_plugins = [
    "pytester",
    "testsuites.ui_testing.framework.fixtures",
]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
