"""
Settings Module - Design State
Default values shared by the config layer and the engine.
"""
import logging

logger = logging.getLogger(__name__)

# Values read from .env / JSON by core/config.py fall back to these

DEFAULT_SETTINGS = {
    "dark_mode": False,
    "locale": None,                 # None = use the first supported locale
    "font_size": 12,
    "font_family": "Tajawal",
    "log_level": "INFO",
    "log_dir": "",                  # empty = console logging only
}

# Languages whose scripts are written right-to-left
RTL_LANGUAGES = frozenset({"ar", "fa", "he", "ps", "ur"})

logger.debug("Settings module loaded")
