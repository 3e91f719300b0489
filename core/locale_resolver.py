"""
Locale Resolution
=================

Picks the best supported locale for a requested (device) locale.

Policy, in order:
    1. nothing requested           → default (first supported entry)
    2. exact (language, region)    → that entry
    3. same language, any region   → first supported entry with that language
    4. no match                    → default

resolve_locale() is pure and deterministic. resolve_locale_detailed()
returns the same locale plus how it was chosen, for diagnostics.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable, Optional, Sequence, Union

from config.settings import RTL_LANGUAGES
from config.themes.design_tokens import TextDirection
from exceptions import ConfigurationError, InvalidValueError

logger = logging.getLogger(__name__)

_TAG_SPLIT_RE = re.compile(r"[-_]")


@dataclass(frozen=True)
class LanguageTag:
    """
    (language, region) pair, e.g. ``LanguageTag("es", "MX")``.

    Language is stored lower case and region upper case, so comparisons
    are case-insensitive.
    """

    language: str
    region: Optional[str] = None

    def __post_init__(self):
        language = (self.language or "").strip().lower()
        if not language or not language.isalpha():
            raise InvalidValueError("language", self.language, "expected an alphabetic language code")
        region = (self.region or "").strip().upper() or None
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "region", region)

    @classmethod
    def parse(cls, value: Union[str, "LanguageTag"]) -> "LanguageTag":
        """
        Parse "es", "es-MX" or "es_MX".

        Extra subtags (script, variant) are ignored: "zh-Hant-TW" → zh-TW.
        """
        if isinstance(value, LanguageTag):
            return value
        if not isinstance(value, str) or not value.strip():
            raise InvalidValueError("locale", value, "expected a language tag string")

        # POSIX forms like "en_US.UTF-8" carry an encoding suffix
        parts = [p for p in _TAG_SPLIT_RE.split(value.strip().split(".")[0]) if p]
        if not parts:
            raise InvalidValueError("locale", value, "expected a language tag string")
        language = parts[0]
        region = None
        for part in parts[1:]:
            if (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit()):
                region = part
                break
        return cls(language, region)

    def __str__(self) -> str:
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language


@dataclass(frozen=True)
class Localize:
    """A supported locale and the name shown for it in a language picker."""

    locale: LanguageTag
    display_name: str = ""

    @classmethod
    def of(cls, tag: Union[str, LanguageTag], display_name: str = "") -> "Localize":
        return cls(LanguageTag.parse(tag), display_name)


class MatchKind(str, Enum):
    EXACT = "exact"
    LANGUAGE = "language"
    DEFAULT = "default"      # nothing was requested
    FALLBACK = "fallback"    # requested locale is not supported


@dataclass(frozen=True)
class LocaleResolution:
    locale: LanguageTag
    match: MatchKind

    @property
    def is_fallback(self) -> bool:
        return self.match in (MatchKind.DEFAULT, MatchKind.FALLBACK)


def _require_supported(supported: Sequence[Localize]) -> None:
    if not supported:
        raise ConfigurationError(
            "At least one supported locale is required",
            code="NO_LOCALES",
        )


def resolve_locale_detailed(
    requested: Optional[LanguageTag],
    supported: Sequence[Localize],
) -> LocaleResolution:
    _require_supported(supported)
    default = supported[0].locale

    if requested is None:
        return LocaleResolution(default, MatchKind.DEFAULT)

    for entry in supported:
        if entry.locale == requested:
            return LocaleResolution(entry.locale, MatchKind.EXACT)

    for entry in supported:
        if entry.locale.language == requested.language:
            return LocaleResolution(entry.locale, MatchKind.LANGUAGE)

    logger.debug(f"Unsupported locale {requested}, falling back to {default}")
    return LocaleResolution(default, MatchKind.FALLBACK)


def resolve_locale(
    requested: Optional[LanguageTag],
    supported: Sequence[Localize],
) -> LanguageTag:
    """
    Resolve ``requested`` against ``supported``.

    Raises:
        ConfigurationError: if ``supported`` is empty
    """
    return resolve_locale_detailed(requested, supported).locale


def negotiate_locale(
    platform_locales: Optional[Iterable[Union[str, LanguageTag]]],
    supported: Sequence[Localize],
) -> LanguageTag:
    """
    Host-framework hook: pick a locale from the platform's preference list.

    The first platform locale that resolves by exact or language match
    wins; if none does, the default supported locale is returned.
    """
    _require_supported(supported)
    for candidate in platform_locales or ():
        try:
            tag = LanguageTag.parse(candidate)
        except InvalidValueError:
            logger.debug(f"Ignoring malformed platform locale: {candidate!r}")
            continue
        resolution = resolve_locale_detailed(tag, supported)
        if not resolution.is_fallback:
            return resolution.locale
    return supported[0].locale


def text_direction_for(
    tag: LanguageTag,
    rtl_languages: AbstractSet[str] = RTL_LANGUAGES,
) -> TextDirection:
    if tag.language in rtl_languages:
        return TextDirection.RTL
    return TextDirection.LTR


class LocaleResolver:
    """
    Locale resolution bound to one supported list.

    Usage:
        >>> resolver = LocaleResolver([Localize.of("en-US"), Localize.of("es-ES")])
        >>> str(resolver.resolve(LanguageTag("es", "MX")))
        'es-ES'
    """

    def __init__(self, supported: Sequence[Localize]):
        _require_supported(supported)
        self.supported = tuple(supported)

    @property
    def default_locale(self) -> LanguageTag:
        return self.supported[0].locale

    def resolve(self, requested: Optional[LanguageTag]) -> LanguageTag:
        return resolve_locale(requested, self.supported)

    def resolve_detailed(self, requested: Optional[LanguageTag]) -> LocaleResolution:
        return resolve_locale_detailed(requested, self.supported)

    def negotiate(self, platform_locales: Optional[Iterable[Union[str, LanguageTag]]]) -> LanguageTag:
        return negotiate_locale(platform_locales, self.supported)
