"""
Design Tokens
=============

Immutable snapshot of every visual primitive for one (brand, mode, locale)
combination. The engine builds a fresh instance on every accepted
mutation; nothing here is ever edited in place.

Quick Start:
    >>> from config.themes import build_design_tokens, DEFAULT_BRAND
    >>> tokens = build_design_tokens(DEFAULT_BRAND.resolve_colors(False))
    >>> tokens.spacings["md"]
    12
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .border_radius import BorderRadius
from .colors import ColorTokens
from .elevation import Elevation
from .icons import IconSize
from .opacity import Opacity
from .spacing import Spacing
from .typography import DEFAULT_FONT_FAMILY, TextStyle, Typography


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


# Static tables are identical for every brand, so build them once
ELEVATIONS: Mapping[str, int] = MappingProxyType(Elevation.as_dict())
SPACINGS: Mapping[str, int] = MappingProxyType(Spacing.scale())
OPACITIES: Mapping[str, float] = MappingProxyType(Opacity.as_dict())
BORDER_RADIUSES: Mapping[str, int] = MappingProxyType(BorderRadius.as_dict())
ICONS: Mapping[str, int] = MappingProxyType(IconSize.as_dict())


@dataclass(frozen=True)
class DesignTokens:
    colors: ColorTokens
    elevations: Mapping[str, int]
    spacings: Mapping[str, int]
    opacities: Mapping[str, float]
    border_radiuses: Mapping[str, int]
    text_styles: Mapping[str, TextStyle]
    icons: Mapping[str, int]
    text_direction: TextDirection = TextDirection.LTR

    @property
    def is_dark(self) -> bool:
        return self.colors.is_dark

    @property
    def is_rtl(self) -> bool:
        return self.text_direction is TextDirection.RTL


def build_design_tokens(
    colors: ColorTokens,
    text_direction: Union[TextDirection, str] = TextDirection.LTR,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size: int = 12,
) -> DesignTokens:
    """Combine a brand's colors with the static token tables."""
    return DesignTokens(
        colors=colors,
        elevations=ELEVATIONS,
        spacings=SPACINGS,
        opacities=OPACITIES,
        border_radiuses=BORDER_RADIUSES,
        text_styles=MappingProxyType(Typography.text_styles(font_family, font_size)),
        icons=ICONS,
        text_direction=TextDirection(text_direction),
    )
