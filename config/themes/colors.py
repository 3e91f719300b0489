"""
Color Tokens
============

Typed color values grouped the way brands hand them to the engine:

    ColorTokens
    ├── brand        (ColorBrand)
    ├── interaction  (ColorInteraction)
    ├── neutral      (ColorNeutral)
    └── messaging    (ColorMessaging)

A ColorTokens instance always belongs to exactly one mode (light xor dark).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Union

from exceptions import InvalidValueError

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGBA_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$"
)


@dataclass(frozen=True)
class Color:
    """
    Opaque RGBA color.

    Usage:
        >>> Color.parse("#1D1C1C").hex
        '#1D1C1C'
        >>> Color.parse("rgba(74, 126, 200, 0.1)").css
        'rgba(74, 126, 200, 0.1)'
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self):
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidValueError(channel, value, "expected int in 0..255")
        if not 0.0 <= float(self.a) <= 1.0:
            raise InvalidValueError("a", self.a, "expected float in 0..1")

    @classmethod
    def parse(cls, value: Union[str, "Color"]) -> "Color":
        """Parse '#RGB', '#RRGGBB', '#RRGGBBAA', 'rgb(...)' or 'rgba(...)'."""
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            raise InvalidValueError("color", value, "expected a color string")

        text = value.strip()
        match = _HEX_RE.match(text)
        if match:
            digits = match.group(1)
            if len(digits) == 3:
                digits = "".join(ch * 2 for ch in digits)
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
            return cls(r, g, b, round(alpha, 3))

        match = _RGBA_RE.match(text)
        if match:
            r, g, b = (int(match.group(i)) for i in (1, 2, 3))
            alpha = float(match.group(4)) if match.group(4) is not None else 1.0
            if max(r, g, b) > 255 or alpha > 1.0:
                raise InvalidValueError("color", value, "channel out of range")
            return cls(r, g, b, alpha)

        raise InvalidValueError("color", value, "unrecognized color format")

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0

    @property
    def hex(self) -> str:
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if not self.is_opaque:
            text += f"{round(self.a * 255):02X}"
        return text

    @property
    def css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a:g})"

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.r, self.g, self.b, alpha)

    def __str__(self) -> str:
        return self.hex


class _ColorGroup:
    """Shared constructor for the flat color records below."""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], prefix: str = ""):
        values: Dict[str, Color] = {}
        for f in fields(cls):
            key = f"{prefix}{f.name}"
            if key not in mapping:
                raise InvalidValueError(key, reason=f"missing from {cls.__name__} mapping")
            values[f.name] = Color.parse(mapping[key])
        return cls(**values)

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name).hex for f in fields(self)}


@dataclass(frozen=True)
class ColorBrand(_ColorGroup):
    main: Color
    on_main: Color
    accent: Color
    on_accent: Color


@dataclass(frozen=True)
class ColorInteraction(_ColorGroup):
    primary: Color
    hover: Color
    active: Color
    focus: Color
    disabled: Color


@dataclass(frozen=True)
class ColorNeutral(_ColorGroup):
    background: Color
    surface: Color
    surface_variant: Color
    border: Color
    text_primary: Color
    text_secondary: Color
    text_muted: Color


@dataclass(frozen=True)
class ColorMessaging(_ColorGroup):
    success: Color
    warning: Color
    danger: Color
    info: Color


@dataclass(frozen=True)
class ColorTokens:
    """All color groups for one (brand, mode) pair."""

    brand: ColorBrand
    interaction: ColorInteraction
    neutral: ColorNeutral
    messaging: ColorMessaging
    is_dark: bool = False

    GROUPS = ("brand", "interaction", "neutral", "messaging")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], is_dark: bool = False) -> "ColorTokens":
        """
        Build from a flat mapping keyed "<group>.<name>".

        Example:
            >>> ColorTokens.from_mapping({"brand.main": "#1D1C1C", ...})
        """
        return cls(
            brand=ColorBrand.from_mapping(mapping, "brand."),
            interaction=ColorInteraction.from_mapping(mapping, "interaction."),
            neutral=ColorNeutral.from_mapping(mapping, "neutral."),
            messaging=ColorMessaging.from_mapping(mapping, "messaging."),
            is_dark=is_dark,
        )

    def flatten(self) -> Dict[str, str]:
        """Inverse of from_mapping, values rendered as hex."""
        flat: Dict[str, str] = {}
        for group in self.GROUPS:
            for name, value in getattr(self, group).as_dict().items():
                flat[f"{group}.{name}"] = value
        return flat
