"""
Design State Engine
===================

Single source of truth for brand, dark/light mode, locale and the derived
DesignTokens.

• Every accepted mutation builds a whole new AppDesignState and swaps it in
• Subscribers get that snapshot synchronously, in subscription order
• current_state() never blocks on a running listener
• No dedup: every call publishes, even when nothing visible changed

Thread model:
    Mutations may come from any thread. _state_lock only covers the swap of
    the state reference. _delivery_lock serializes "swap + publish" so that
    listeners see snapshots in mutation order. Neither lock is held by the
    calling thread when a listener mutates re-entrantly: that case is
    detected first and rejected with ReentrantMutationError. A listener that
    waits on another thread's mutation will deadlock.

Usage:
    engine = DesignStateEngine(DEFAULT_BRAND, [Localize.of("en-US", "English")])
    engine.subscribe(lambda state: print(state.theme_name))
    engine.toggle_theme()
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union

from config.settings import RTL_LANGUAGES
from config.themes.brands import Brand
from config.themes.design_tokens import DesignTokens, TextDirection, build_design_tokens
from config.themes.typography import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, Typography
from core.locale_resolver import (
    LanguageTag,
    Localize,
    negotiate_locale,
    resolve_locale_detailed,
    text_direction_for,
)
from core.notifier import StateNotifier, Subscription
from exceptions import ConfigurationError, InvalidValueError, ReentrantMutationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppDesignState:
    """Immutable engine snapshot."""

    brand: Brand
    is_dark_mode: bool
    locale: LanguageTag
    supported_locales: Tuple[Localize, ...]
    tokens: DesignTokens

    @property
    def theme_name(self) -> str:
        return "dark" if self.is_dark_mode else "light"

    @property
    def text_direction(self) -> TextDirection:
        return self.tokens.text_direction

    @property
    def default_locale(self) -> LanguageTag:
        return self.supported_locales[0].locale


StateListener = Callable[[AppDesignState], None]


class DesignStateEngine:
    """
    Holds the current AppDesignState and coordinates every change to it.

    Raises:
        ConfigurationError: at construction, if ``supported_locales`` is
            empty or malformed, or ``brand`` has no ``resolve_colors``
    """

    def __init__(
        self,
        brand: Brand,
        supported_locales: Sequence[Localize],
        dark_mode: bool = False,
        locale_hint: Optional[LanguageTag] = None,
        *,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: Union[int, str] = DEFAULT_FONT_SIZE,
        rtl_languages: Iterable[str] = RTL_LANGUAGES,
    ) -> None:
        supported = tuple(supported_locales or ())
        if not supported:
            raise ConfigurationError(
                "DesignStateEngine needs at least one supported locale",
                code="NO_LOCALES",
            )
        for entry in supported:
            if not isinstance(entry, Localize):
                raise ConfigurationError(
                    "supported_locales must contain Localize entries",
                    code="BAD_LOCALE_ENTRY",
                    detail=repr(entry),
                )
        self._require_brand(brand)

        self._font_family = font_family
        self._font_size = Typography.resolve_font_size(font_size)
        self._rtl_languages = frozenset(lang.lower() for lang in rtl_languages)

        self._notifier: StateNotifier[AppDesignState] = StateNotifier("design-state")
        self._state_lock = threading.Lock()
        self._delivery_lock = threading.Lock()
        self._delivering_thread: Optional[int] = None

        locale = self._resolve(locale_hint, supported)
        self._state = self._build_state(brand, bool(dark_mode), locale, supported)

        logger.info(
            f"Design state ready: brand={brand!r} theme={self._state.theme_name} "
            f"locale={locale} direction={self._state.text_direction.value}"
        )

    @classmethod
    def from_settings(cls, brand: Brand, supported_locales: Sequence[Localize], settings) -> "DesignStateEngine":
        """Build from a core.config.DesignSettings."""
        return cls(
            brand,
            supported_locales,
            dark_mode=settings.dark_mode,
            locale_hint=settings.locale_tag(),
            font_family=settings.font_family,
            font_size=settings.font_size,
            rtl_languages=settings.rtl_languages,
        )

    # --------------------------------------------------
    # Read access
    # --------------------------------------------------
    def current_state(self) -> AppDesignState:
        with self._state_lock:
            return self._state

    @property
    def state(self) -> AppDesignState:
        return self.current_state()

    @property
    def tokens(self) -> DesignTokens:
        return self.current_state().tokens

    @property
    def supported_locales(self) -> Tuple[Localize, ...]:
        return self.current_state().supported_locales

    @property
    def default_locale(self) -> LanguageTag:
        return self.current_state().default_locale

    # --------------------------------------------------
    # Mutations
    # --------------------------------------------------
    def toggle_theme(self) -> AppDesignState:
        """Flip dark/light mode and recompute tokens."""
        return self._commit(
            "toggle_theme",
            lambda s: self._build_state(s.brand, not s.is_dark_mode, s.locale, s.supported_locales),
        )

    def update_brand(self, brand: Brand) -> AppDesignState:
        """
        Install ``brand`` and recompute tokens for the current mode.

        Raises:
            InvalidValueError: ``brand`` has no ``resolve_colors``; state is unchanged
        """
        if not self._is_brand(brand):
            raise InvalidValueError("brand", brand, "expected an object with resolve_colors(is_dark_mode)")
        return self._commit(
            "update_brand",
            lambda s: self._build_state(brand, s.is_dark_mode, s.locale, s.supported_locales),
        )

    def set_theme_language(self, lang: Union[Localize, LanguageTag, str]) -> AppDesignState:
        """
        Switch to ``lang``, resolved against the supported locales.

        Unsupported or unparsable locales fall back to the default locale;
        nothing is raised. Loading translations for the new locale is the
        caller's job.
        """
        if isinstance(lang, Localize):
            requested = lang.locale
        else:
            try:
                requested = LanguageTag.parse(lang)
            except InvalidValueError:
                logger.debug(f"Malformed locale {lang!r}, using the default locale")
                requested = None

        def build(s: AppDesignState) -> AppDesignState:
            locale = self._resolve(requested, s.supported_locales)
            return self._build_state(s.brand, s.is_dark_mode, locale, s.supported_locales)

        return self._commit("set_theme_language", build)

    # --------------------------------------------------
    # Subscriptions
    # --------------------------------------------------
    def subscribe(self, listener: StateListener) -> Subscription:
        return self._notifier.subscribe(listener)

    def unsubscribe(self, subscription: Subscription) -> bool:
        return self._notifier.unsubscribe(subscription)

    @property
    def listener_count(self) -> int:
        return self._notifier.listener_count

    def close(self) -> None:
        """Drop every subscription. The last state stays readable."""
        dropped = self._notifier.clear()
        logger.debug(f"Design state closed, {dropped} subscription(s) dropped")

    # --------------------------------------------------
    # Host framework hook
    # --------------------------------------------------
    def locale_resolution_callback(
        self,
        platform_locales: Optional[Iterable[Union[str, LanguageTag]]],
        supported: Optional[Sequence[Localize]] = None,
    ) -> LanguageTag:
        """
        Shape expected by host locale-negotiation hooks:
        ``(platform_locales, supported) -> chosen``.
        """
        return negotiate_locale(platform_locales, supported or self.supported_locales)

    # --------------------------------------------------
    # Internal Logic
    # --------------------------------------------------
    @staticmethod
    def _is_brand(brand) -> bool:
        return callable(getattr(brand, "resolve_colors", None))

    @classmethod
    def _require_brand(cls, brand) -> None:
        if not cls._is_brand(brand):
            raise ConfigurationError(
                "brand must provide resolve_colors(is_dark_mode)",
                code="BAD_BRAND",
                detail=repr(brand),
            )

    @staticmethod
    def _resolve(requested: Optional[LanguageTag], supported: Sequence[Localize]) -> LanguageTag:
        resolution = resolve_locale_detailed(requested, supported)
        if resolution.is_fallback and requested is not None:
            logger.debug(f"Locale {requested} not supported, using {resolution.locale}")
        return resolution.locale

    def _build_state(
        self,
        brand: Brand,
        is_dark_mode: bool,
        locale: LanguageTag,
        supported: Tuple[Localize, ...],
    ) -> AppDesignState:
        tokens = build_design_tokens(
            brand.resolve_colors(is_dark_mode),
            text_direction_for(locale, self._rtl_languages),
            self._font_family,
            self._font_size,
        )
        return AppDesignState(
            brand=brand,
            is_dark_mode=is_dark_mode,
            locale=locale,
            supported_locales=supported,
            tokens=tokens,
        )

    def _commit(self, operation: str, build: Callable[[AppDesignState], AppDesignState]) -> AppDesignState:
        if self._delivering_thread == threading.get_ident():
            raise ReentrantMutationError(operation)

        with self._delivery_lock:
            with self._state_lock:
                current = self._state
            # Brand code runs outside the state lock; a failure leaves state untouched
            new_state = build(current)
            with self._state_lock:
                self._state = new_state

            logger.debug(
                f"{operation}: theme={new_state.theme_name} locale={new_state.locale} "
                f"brand={new_state.brand!r}"
            )

            self._delivering_thread = threading.get_ident()
            try:
                self._notifier.publish(new_state)
            finally:
                self._delivering_thread = None

        return new_state
