"""
Design State Themes Module
==========================

Typed color tokens, static token tables and brand palettes.

Quick Start:
    >>> from config.themes import DEFAULT_BRAND, build_design_tokens
    >>> tokens = build_design_tokens(DEFAULT_BRAND.resolve_colors(is_dark_mode=True))
    >>> tokens.colors.brand.main.hex
    '#3D6DB3'
"""

from .colors import (
    Color,
    ColorBrand,
    ColorInteraction,
    ColorNeutral,
    ColorMessaging,
    ColorTokens,
)
from .palettes import ColorPalette
from .brands import Brand, PaletteBrand, DEFAULT_BRAND, MONOCHROME_BRAND
from .typography import Typography, TextStyle, FONT_SIZE_MAP
from .spacing import Spacing
from .border_radius import BorderRadius
from .elevation import Elevation
from .opacity import Opacity
from .icons import IconSize
from .design_tokens import DesignTokens, TextDirection, build_design_tokens

__all__ = [
    "Color",
    "ColorBrand",
    "ColorInteraction",
    "ColorNeutral",
    "ColorMessaging",
    "ColorTokens",
    "ColorPalette",
    "Brand",
    "PaletteBrand",
    "DEFAULT_BRAND",
    "MONOCHROME_BRAND",
    "Typography",
    "TextStyle",
    "FONT_SIZE_MAP",
    "Spacing",
    "BorderRadius",
    "Elevation",
    "Opacity",
    "IconSize",
    "DesignTokens",
    "TextDirection",
    "build_design_tokens",
]
