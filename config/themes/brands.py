"""
Brands
======

A brand is anything exposing ``resolve_colors(is_dark_mode) -> ColorTokens``.
The engine never checks the concrete type; brands are swapped at runtime
by reference.

Contract: ``resolve_colors`` must be a pure function of ``is_dark_mode``.
The engine relies on it to keep tokens consistent with the mode, but does
not enforce it.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from exceptions import InvalidValueError
from .colors import ColorTokens
from .palettes import ColorPalette


@runtime_checkable
class Brand(Protocol):
    """Visual identity producing a full color palette for a given mode."""

    def resolve_colors(self, is_dark_mode: bool) -> ColorTokens:
        ...


class PaletteBrand:
    """
    Brand backed by two prebuilt ColorTokens.

    Usage:
        >>> brand = PaletteBrand.from_mappings("acme", light=ColorPalette.LIGHT,
        ...                                    dark=ColorPalette.DARK)
        >>> brand.resolve_colors(True).is_dark
        True
    """

    def __init__(self, name: str, light: ColorTokens, dark: ColorTokens):
        if light.is_dark:
            raise InvalidValueError("light", name, "light palette is flagged dark")
        if not dark.is_dark:
            raise InvalidValueError("dark", name, "dark palette is flagged light")
        self.name = name
        self._light = light
        self._dark = dark

    @classmethod
    def from_mappings(
        cls,
        name: str,
        light: Mapping[str, Any],
        dark: Mapping[str, Any],
    ) -> "PaletteBrand":
        return cls(
            name,
            ColorTokens.from_mapping(light, is_dark=False),
            ColorTokens.from_mapping(dark, is_dark=True),
        )

    def resolve_colors(self, is_dark_mode: bool) -> ColorTokens:
        return self._dark if is_dark_mode else self._light

    def __repr__(self) -> str:
        return f"PaletteBrand({self.name!r})"


DEFAULT_BRAND = PaletteBrand.from_mappings(
    "default", light=ColorPalette.LIGHT, dark=ColorPalette.DARK
)

MONOCHROME_BRAND = PaletteBrand.from_mappings(
    "monochrome", light=ColorPalette.MONO_LIGHT, dark=ColorPalette.MONO_DARK
)
