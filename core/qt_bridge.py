"""
Qt Bridge - Design State
========================

Adapter between DesignStateEngine and a PySide6 application.

• Re-emits engine snapshots as Qt signals
• Converts between QLocale and LanguageTag
• Applies the text direction to the application layout

Usage:
    bridge = DesignStateBridge(engine)
    bridge.theme_changed.connect(on_theme)
    bridge.direction_changed.connect(lambda d: apply_layout_direction(app, d))
"""

import logging
from typing import List, Optional, Union

from PySide6.QtCore import QCoreApplication, QLocale, QObject, Qt, Signal

from config.themes.design_tokens import TextDirection
from core.design_state import AppDesignState, DesignStateEngine
from core.locale_resolver import LanguageTag

logger = logging.getLogger(__name__)


class DesignStateBridge(QObject):
    """Qt-side view of one engine."""

    state_changed = Signal(object)       # every snapshot, AppDesignState
    theme_changed = Signal(str)          # "light" | "dark", only on change
    language_changed = Signal(str)       # e.g. "ar-SY", only on change
    direction_changed = Signal(str)      # "ltr" | "rtl", only on change

    def __init__(self, engine: DesignStateEngine, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._last: AppDesignState = engine.current_state()
        self._subscription = engine.subscribe(self._on_state)

    @property
    def engine(self) -> DesignStateEngine:
        return self._engine

    def dispose(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _on_state(self, state: AppDesignState) -> None:
        previous, self._last = self._last, state

        self.state_changed.emit(state)
        if state.theme_name != previous.theme_name:
            self.theme_changed.emit(state.theme_name)
        if state.locale != previous.locale:
            self.language_changed.emit(str(state.locale))
        if state.text_direction != previous.text_direction:
            self.direction_changed.emit(state.text_direction.value)


# --------------------------------------------------
# QLocale helpers
# --------------------------------------------------
def tag_from_qlocale(qlocale: QLocale) -> LanguageTag:
    # QLocale.name() is "language_TERRITORY", e.g. "ar_SY"
    return LanguageTag.parse(qlocale.name())


def tag_to_qlocale(tag: LanguageTag) -> QLocale:
    return QLocale(str(tag).replace("-", "_"))


def system_locale_hint() -> Optional[LanguageTag]:
    """The OS locale as a LanguageTag, or None if Qt reports the C locale."""
    qlocale = QLocale.system()
    if qlocale.language() == QLocale.Language.C:
        return None
    return tag_from_qlocale(qlocale)


def system_ui_languages() -> List[str]:
    """The OS preference list, suitable for negotiate_locale()."""
    return list(QLocale.system().uiLanguages())


# --------------------------------------------------
# Layout direction
# --------------------------------------------------
def apply_layout_direction(app=None, direction: Union[TextDirection, str] = TextDirection.LTR) -> bool:
    """Set the application layout direction. Returns False if there is no app."""
    if app is None:
        app = QCoreApplication.instance()
    if app is None or not hasattr(app, "setLayoutDirection"):
        logger.warning("Cannot apply layout direction: no GUI application")
        return False

    direction = TextDirection(direction)
    dir_value = (
        Qt.LayoutDirection.RightToLeft
        if direction is TextDirection.RTL
        else Qt.LayoutDirection.LeftToRight
    )
    app.setLayoutDirection(dir_value)
    logger.info(f"Direction changed to: {direction.value}")
    return True
