"""
================================================================================
Settings Provider
================================================================================

YAML-based harness settings with environment variable override support.

Features:
    - Single YAML source, read once per process (no hot-reload)
    - Environment variable override (UI_IMPLICIT_WAIT overrides implicitWait)
    - Dot notation path access for nested keys (logging.level)
    - Fallback chains and defaults for every timeout
    - Malformed values never raise; they fall through to the next default

Recognized keys:
    browser          chrome | firefox (anything else -> chrome)
    url              start page
    implicitWait     element-presence timeout, seconds
    pageLoadTimeout  page-load timeout, seconds
    explicitWait     readiness wait, seconds (falls back to implicitWait)
    headless         run the browser headless
    logging.level    loguru level
    logging.file     optional log file

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .errors import UnsupportedConfigurationError


# Default configuration file path (repo root /config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

CONFIG_PATH_ENV = "UI_CONFIG_FILE"
ENV_PREFIX = "UI_"

DEFAULT_URL = "https://www.wikipedia.org/"
DEFAULT_IMPLICIT_WAIT_SECONDS = 10
DEFAULT_EXPLICIT_WAIT_SECONDS = 10
DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS = 30


class BrowserKind(str, Enum):
    """Browsers the harness knows how to provision."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: Any) -> "BrowserKind":
        """Map a raw setting to a kind; unknown values map to OTHER."""
        if not isinstance(raw, str):
            return cls.OTHER
        name = raw.strip().lower()
        if name in ("chrome", "chromium"):
            return cls.CHROME
        if name == "firefox":
            return cls.FIREFOX
        return cls.OTHER


def _env_key(key: str) -> str:
    """implicitWait -> UI_IMPLICIT_WAIT, logging.level -> UI_LOGGING_LEVEL"""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key)
    return ENV_PREFIX + snake.replace(".", "_").upper()


def _parse_seconds(key: str, value: Any) -> int:
    """
    Parse a whole, non-negative number of seconds.

    Raises:
        UnsupportedConfigurationError: value is not a whole number >= 0
    """
    if isinstance(value, bool):
        raise UnsupportedConfigurationError(f"{key}: boolean is not a duration")
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, str):
        try:
            seconds = int(value.strip())
        except ValueError:
            raise UnsupportedConfigurationError(
                f"{key}: {value!r} is not an integer"
            ) from None
    else:
        raise UnsupportedConfigurationError(f"{key}: {value!r} is not an integer")

    if seconds < 0:
        raise UnsupportedConfigurationError(f"{key}: {seconds} is negative")
    return seconds


class Settings:
    """
    Process-wide settings provider.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_BROWSER, UI_EXPLICIT_WAIT, ...)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> settings = Settings()
        >>> settings.get_explicit_wait_seconds()
        10
        >>> settings.get_browser_kind()
        <BrowserKind.CHROME: 'chrome'>
    """

    _instance: Optional["Settings"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Singleton pattern - return existing instance if available.

        Settings are loaded only once per process.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize settings.

        Args:
            config_path: Path to YAML configuration file. Uses the
                UI_CONFIG_FILE env var, then DEFAULT_CONFIG_PATH, if not given.
        """
        if getattr(self, "_initialized", False):
            return

        if config_path is None:
            env_path = os.environ.get(CONFIG_PATH_ENV)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        self._config_path = Path(config_path)
        self._config: Dict[str, Any] = self._load_config()
        # Environment overrides are captured once, like the file
        self._env: Dict[str, str] = {
            key: value for key, value in os.environ.items() if key.startswith("UI_")
        }
        self._browser_kind: Optional[BrowserKind] = None
        self._initialized = True

    def _load_config(self) -> Dict[str, Any]:
        """Load the YAML source; any problem leaves an empty source."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Invalid YAML in {self._config_path}, ignoring it: {e}")
            return {}
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read {self._config_path}, ignoring it: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                f"Configuration in {self._config_path} is not a mapping, ignoring it"
            )
            return {}

        logger.debug(f"Loaded configuration from: {self._config_path}")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a raw configuration value by dot-notation path.

        Args:
            key: Dot-notation path (e.g., "implicitWait", "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_value = self._env.get(_env_key(key))
        if env_value is not None:
            return env_value

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def _get_seconds(self, key: str) -> Optional[int]:
        """Return the key as whole seconds, or None when absent or malformed."""
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return _parse_seconds(key, raw)
        except UnsupportedConfigurationError as e:
            logger.warning(f"Ignoring unsupported setting ({e})")
            return None

    # =========================================================================
    # Resolved Settings
    # =========================================================================

    def get_explicit_wait_seconds(self) -> int:
        """explicitWait, else implicitWait, else 10."""
        for key in ("explicitWait", "implicitWait"):
            seconds = self._get_seconds(key)
            if seconds is not None:
                return seconds
        return DEFAULT_EXPLICIT_WAIT_SECONDS

    def get_implicit_wait_seconds(self) -> int:
        seconds = self._get_seconds("implicitWait")
        return DEFAULT_IMPLICIT_WAIT_SECONDS if seconds is None else seconds

    def get_page_load_timeout_seconds(self) -> int:
        seconds = self._get_seconds("pageLoadTimeout")
        return DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS if seconds is None else seconds

    def get_browser_kind(self) -> BrowserKind:
        """
        Browser to provision.

        Unsupported or unset values resolve to Chrome with a warning; the
        result is cached so the warning is logged once.
        """
        if self._browser_kind is None:
            raw = self.get("browser")
            kind = BrowserKind.parse(raw)
            if kind is BrowserKind.OTHER:
                logger.warning(
                    f"Browser {raw!r} not supported, defaulting to Chrome"
                )
                kind = BrowserKind.CHROME
            self._browser_kind = kind
        return self._browser_kind

    def get_url(self) -> str:
        url = self.get("url")
        return url if isinstance(url, str) and url.strip() else DEFAULT_URL

    def get_headless(self) -> bool:
        value = self.get("headless", True)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        logger.warning(f"Ignoring unsupported setting (headless: {value!r})")
        return True

    @property
    def config_path(self) -> Path:
        return self._config_path

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None


__all__ = [
    "BrowserKind",
    "Settings",
    "DEFAULT_CONFIG_PATH",
]
