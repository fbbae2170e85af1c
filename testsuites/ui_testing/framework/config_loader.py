"""
================================================================================
Configuration Loader
================================================================================

YAML-based framework configuration with `.env` and environment variable
override support.

Features:
    - Single YAML file (config/config.yaml)
    - Named environments (dev, staging, prod) selecting a base URL
    - Environment variable overrides (BASE_URL, BROWSER, HEADLESS, ...)
    - Immutable result: loaded once per process, never mutated

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://example.com"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

_FALSE_VALUES = ("false", "0", "no", "off")


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


@dataclass(frozen=True)
class Timeouts:
    """Default timeouts in milliseconds."""
    navigation: int = 30000
    action: int = 10000
    assertion: int = 5000


@dataclass(frozen=True)
class BrowserSettings:
    """Browser launch settings."""
    name: str = "chromium"
    headless: bool = True
    viewport_width: int = 1920
    viewport_height: int = 1080


@dataclass(frozen=True)
class ScreenshotSettings:
    """Where and how screenshots are written."""
    dir: str = "screenshots"
    on_failure: bool = True
    full_page: bool = True

    @property
    def path(self) -> Path:
        """Absolute screenshots directory."""
        return Path(self.dir).resolve()


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass(frozen=True)
class FrameworkConfig:
    """
    Process-wide, read-only framework settings.

    Attributes:
        base_url: Base URL relative navigation is joined against
        environment: Selected environment name, if any
        browser: Browser launch settings
        timeouts: Navigation / action / assertion defaults
        screenshots: Screenshot directory and failure capture toggle
        logging: Log level and optional log file
        environments: Environment name -> base URL
        test_data: Free-form test data section
    """
    base_url: str = DEFAULT_BASE_URL
    environment: Optional[str] = None
    browser: BrowserSettings = field(default_factory=BrowserSettings)
    timeouts: Timeouts = field(default_factory=Timeouts)
    screenshots: ScreenshotSettings = field(default_factory=ScreenshotSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    environments: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    test_data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


# ================================================================================
# Loading
# ================================================================================

def _read_yaml(config_path: Path) -> Dict[str, Any]:
    """Read the YAML file; a missing file yields an empty dict."""
    if not config_path.exists():
        logger.warning(
            f"Configuration file not found: {config_path}. "
            f"Using defaults and environment variables only."
        )
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}"
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping: {config_path}"
        )
    logger.debug(f"Loaded configuration from: {config_path}")
    return data


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() not in _FALSE_VALUES


def _to_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}") from e


def _parse_environments(raw: Any) -> Dict[str, str]:
    environments: Dict[str, str] = {}
    for name, entry in (raw or {}).items():
        if isinstance(entry, dict):
            url = entry.get("base_url")
        else:
            url = entry
        if url:
            environments[str(name)] = str(url)
    return environments


def load_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FrameworkConfig:
    """
    Build a FrameworkConfig from YAML and environment variables.

    Base URL precedence (highest first):
        1. BASE_URL environment variable
        2. base_url of the selected environment (TEST_ENV / ENVIRONMENT / YAML)
        3. base_url in YAML
        4. https://example.com

    Args:
        config_path: YAML file to read. Uses DEFAULT_CONFIG_PATH if not specified.
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Immutable FrameworkConfig

    Raises:
        ConfigurationError: Invalid YAML, unknown browser, unknown environment
            or non-integer timeout
    """
    env = os.environ if environ is None else environ
    data = _read_yaml(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)

    environments = _parse_environments(data.get("environments"))
    environment = env.get("TEST_ENV") or env.get("ENVIRONMENT") or data.get("environment")
    if environment and environment not in environments:
        raise ConfigurationError(
            f"Unknown environment '{environment}'. "
            f"Known: {', '.join(sorted(environments)) or 'none'}"
        )

    base_url = data.get("base_url") or DEFAULT_BASE_URL
    if environment:
        base_url = environments[environment]
    base_url = env.get("BASE_URL") or base_url

    browser_data = data.get("browser") or {}
    viewport = browser_data.get("viewport") or {}
    browser_name = str(env.get("BROWSER") or browser_data.get("name", "chromium")).lower()
    if browser_name not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Unsupported browser '{browser_name}'. "
            f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
        )
    headless = browser_data.get("headless", True)
    if env.get("HEADLESS") is not None:
        headless = env["HEADLESS"]
    browser = BrowserSettings(
        name=browser_name,
        headless=_to_bool(headless),
        viewport_width=_to_int(viewport.get("width", 1920), "browser.viewport.width"),
        viewport_height=_to_int(viewport.get("height", 1080), "browser.viewport.height"),
    )

    timeouts_data = data.get("timeouts") or {}
    timeouts = Timeouts(**{
        name: _to_int(timeouts_data.get(name, default), f"timeouts.{name}")
        for name, default in (
            ("navigation", Timeouts.navigation),
            ("action", Timeouts.action),
            ("assertion", Timeouts.assertion),
        )
    })

    shots_data = data.get("screenshots") or {}
    screenshots = ScreenshotSettings(
        dir=str(env.get("SCREENSHOTS_DIR") or shots_data.get("dir", "screenshots")),
        on_failure=_to_bool(shots_data.get("on_failure", True)),
        full_page=_to_bool(shots_data.get("full_page", True)),
    )

    logging_data = data.get("logging") or {}
    logging_settings = LoggingSettings(
        level=str(env.get("LOG_LEVEL") or logging_data.get("level", "INFO")).upper(),
        file=logging_data.get("file"),
    )

    config = FrameworkConfig(
        base_url=str(base_url).rstrip("/"),
        environment=environment or None,
        browser=browser,
        timeouts=timeouts,
        screenshots=screenshots,
        logging=logging_settings,
        environments=MappingProxyType(environments),
        test_data=MappingProxyType(dict(data.get("test_data") or {})),
    )
    logger.debug(
        f"Framework config: base_url={config.base_url} "
        f"env={config.environment} browser={browser.name} headless={browser.headless}"
    )
    return config


# ================================================================================
# Process-wide Access
# ================================================================================

_config: Optional[FrameworkConfig] = None


def get_config() -> FrameworkConfig:
    """
    Return the process-wide configuration, loading it on first use.

    A `.env` file in the working directory is loaded before the environment
    is read; variables already set are not overridden.
    """
    global _config
    if _config is None:
        load_dotenv(find_dotenv(usecwd=True))
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Drop the cached configuration.

    Useful for testing when configuration needs to be reloaded
    with different settings.
    """
    global _config
    _config = None


__all__ = [
    "BrowserSettings",
    "ConfigurationError",
    "FrameworkConfig",
    "LoggingSettings",
    "ScreenshotSettings",
    "Timeouts",
    "get_config",
    "load_config",
    "reset_config",
]
