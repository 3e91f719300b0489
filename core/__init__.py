# core/__init__.py
"""
Design State Core Module
========================

Public API:
    - Engine: DesignStateEngine, AppDesignState
    - Locale: LanguageTag, Localize, LocaleResolver, resolve_locale, negotiate_locale
    - Notification: StateNotifier, Subscription
    - Context: design_scope, current_engine, current_tokens
    - Config: Config, DesignSettings, LoggingConfig

The PySide6 adapter lives in core.qt_bridge and is imported explicitly.
"""

from version import VERSION

# Locale
from .locale_resolver import (
    LanguageTag,
    Localize,
    LocaleResolution,
    LocaleResolver,
    MatchKind,
    negotiate_locale,
    resolve_locale,
    resolve_locale_detailed,
    text_direction_for,
)

# Notification
from .notifier import StateNotifier, Subscription

# Engine
from .design_state import AppDesignState, DesignStateEngine

# Context
from .context import design_scope, current_engine, current_state, current_tokens, find_engine

# Settings & Logging
from .config import Config, DesignSettings
from .logging_config import LoggingConfig

__all__ = [
    # Locale
    "LanguageTag",
    "Localize",
    "LocaleResolution",
    "LocaleResolver",
    "MatchKind",
    "negotiate_locale",
    "resolve_locale",
    "resolve_locale_detailed",
    "text_direction_for",

    # Notification
    "StateNotifier",
    "Subscription",

    # Engine
    "AppDesignState",
    "DesignStateEngine",

    # Context
    "design_scope",
    "current_engine",
    "current_state",
    "current_tokens",
    "find_engine",

    # Settings & Logging
    "Config",
    "DesignSettings",
    "LoggingConfig",
]

__version__ = VERSION
