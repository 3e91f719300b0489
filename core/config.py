"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import Config, DesignSettings

    config = Config()
    settings = DesignSettings.from_config(config)
    engine = DesignStateEngine.from_settings(brand, locales, settings)

Recognized keys:
    DESIGN_DARK_MODE       true/false
    DESIGN_LOCALE          e.g. "ar-SY" (hint, resolved against supported locales)
    DESIGN_FONT_FAMILY     e.g. "Tajawal"
    DESIGN_FONT_SIZE       pixels or small|medium|large|xlarge
    DESIGN_RTL_LANGUAGES   comma-separated language codes
    LOG_LEVEL              DEBUG|INFO|WARNING|ERROR
    LOG_DIR                directory for rotating log files (optional)
"""
import os
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional
from pathlib import Path
from dotenv import load_dotenv

from config.settings import DEFAULT_SETTINGS, RTL_LANGUAGES
from config.themes.typography import Typography
from exceptions import InvalidValueError

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration lookup that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    """

    def __init__(self, env_file: Optional[str] = ".env", config_file: Optional[str] = None):
        self._env_file = Path(env_file) if env_file else None
        self._config_file_path = Path(config_file) if config_file else None
        self._config_cache: Dict[str, Any] = {}

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file is None:
            return
        if self._env_file.exists():
            load_dotenv(self._env_file)
            logger.info(f"Environment variables loaded from {self._env_file}")
        else:
            logger.debug(f"{self._env_file} not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if self._config_file_path is None:
            return
        if not self._config_file_path.exists():
            logger.warning(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config file: {e}")
            self._config_cache = {}
            return

        if not isinstance(loaded, dict):
            logger.error(f"{self._config_file_path} must contain a JSON object")
            self._config_cache = {}
            return

        self._config_cache = loaded
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(self, key: str, default: Any = None, from_env: bool = True) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.strip().lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_list(self, key: str, default: list = None, separator: str = ',') -> list:
        """
        Get list configuration value.

        Supports:
        - JSON arrays: ["item1", "item2"]
        - Comma-separated strings: "item1,item2,item3"
        """
        if default is None:
            default = []

        value = self.get(key, default)

        if isinstance(value, list):
            return value

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default

    def set(self, key: str, value: Any):
        """Override a value for this Config instance only (not persisted)."""
        self._config_cache[key] = value

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


@dataclass(frozen=True)
class DesignSettings:
    """Startup options for a DesignStateEngine."""

    dark_mode: bool = DEFAULT_SETTINGS["dark_mode"]
    locale_hint: Optional[str] = DEFAULT_SETTINGS["locale"]
    font_family: str = DEFAULT_SETTINGS["font_family"]
    font_size: int = DEFAULT_SETTINGS["font_size"]
    rtl_languages: FrozenSet[str] = RTL_LANGUAGES
    log_level: str = DEFAULT_SETTINGS["log_level"]
    log_dir: str = DEFAULT_SETTINGS["log_dir"]

    @classmethod
    def from_config(cls, config: Config) -> "DesignSettings":
        font_size_raw = config.get("DESIGN_FONT_SIZE", DEFAULT_SETTINGS["font_size"])
        try:
            font_size = Typography.resolve_font_size(font_size_raw)
        except (TypeError, ValueError):
            logger.warning(f"Invalid DESIGN_FONT_SIZE: {font_size_raw!r}, using default")
            font_size = DEFAULT_SETTINGS["font_size"]

        rtl = config.get_list("DESIGN_RTL_LANGUAGES")
        rtl_languages = frozenset(lang.lower() for lang in rtl) if rtl else RTL_LANGUAGES

        log_level = str(config.get("LOG_LEVEL", DEFAULT_SETTINGS["log_level"])).upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning(f"Invalid LOG_LEVEL: {log_level!r}, using default")
            log_level = DEFAULT_SETTINGS["log_level"]

        locale_hint = config.get("DESIGN_LOCALE", DEFAULT_SETTINGS["locale"])

        return cls(
            dark_mode=config.get_bool("DESIGN_DARK_MODE", DEFAULT_SETTINGS["dark_mode"]),
            locale_hint=locale_hint or None,
            font_family=config.get("DESIGN_FONT_FAMILY", DEFAULT_SETTINGS["font_family"]),
            font_size=font_size,
            rtl_languages=rtl_languages,
            log_level=log_level,
            log_dir=config.get("LOG_DIR", DEFAULT_SETTINGS["log_dir"]) or "",
        )

    def locale_tag(self):
        """Parsed locale hint, or None when unset or malformed."""
        from core.locale_resolver import LanguageTag

        if not self.locale_hint:
            return None
        try:
            return LanguageTag.parse(self.locale_hint)
        except InvalidValueError:
            logger.warning(f"Invalid DESIGN_LOCALE: {self.locale_hint!r}, ignoring")
            return None
