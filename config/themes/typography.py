"""
Typography Scale System
=======================

Provides consistent font sizing and the text-style token table.
"""

from dataclasses import dataclass
from typing import Dict, Union

# --------------------------------------------------
# Font size mapping
# --------------------------------------------------
FONT_SIZE_MAP: Dict[str, int] = {
    "small": 10,
    "medium": 12,
    "large": 14,
    "xlarge": 16,
}

DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_FAMILY = "Tajawal"


@dataclass(frozen=True)
class TextStyle:
    family: str
    size: int
    weight: int = 400
    line_height: float = 1.4


class Typography:
    """
    Font size scale based on base size.

    Usage:
        >>> sizes = Typography.scale(12)
        >>> title_size = sizes["3xl"]  # 21px
    """

    @staticmethod
    def resolve_font_size(value: Union[int, str, None]) -> int:
        """
        Accept a pixel size or a named size ("small" … "xlarge").

        Unknown names fall back to DEFAULT_FONT_SIZE.
        """
        if value is None:
            return DEFAULT_FONT_SIZE
        if isinstance(value, str):
            name = value.strip().lower()
            if name.isdigit():
                return int(name)
            return FONT_SIZE_MAP.get(name, DEFAULT_FONT_SIZE)
        return int(value)

    @staticmethod
    def scale(base_size: int = 12) -> dict:
        """
        Generate font size scale.

        Args:
            base_size: Base font size in pixels (typically 12-14)

        Returns:
            Dictionary with size names and pixel values
        """
        return {
            "xs": base_size - 2,      # 10px (base=12)
            "sm": base_size - 1,      # 11px
            "base": base_size,        # 12px
            "md": base_size + 1,      # 13px
            "lg": base_size + 2,      # 14px
            "xl": base_size + 4,      # 16px
            "2xl": base_size + 6,     # 18px
            "3xl": base_size + 9,     # 21px
            "4xl": base_size + 12,    # 24px
        }

    @staticmethod
    def get_font_weights() -> dict:
        """Standard font weights"""
        return {
            "normal": 400,
            "medium": 500,
            "semibold": 600,
            "bold": 700,
            "extrabold": 800,
        }

    @classmethod
    def text_styles(cls, family: str = DEFAULT_FONT_FAMILY, base_size: int = 12) -> Dict[str, TextStyle]:
        """Named text styles used by rendering code."""
        sizes = cls.scale(base_size)
        weights = cls.get_font_weights()
        return {
            "display": TextStyle(family, sizes["4xl"], weights["bold"], 1.2),
            "headline": TextStyle(family, sizes["3xl"], weights["bold"], 1.25),
            "title": TextStyle(family, sizes["xl"], weights["semibold"], 1.3),
            "subtitle": TextStyle(family, sizes["lg"], weights["medium"], 1.35),
            "body": TextStyle(family, sizes["base"], weights["normal"], 1.5),
            "body_strong": TextStyle(family, sizes["base"], weights["semibold"], 1.5),
            "label": TextStyle(family, sizes["sm"], weights["medium"], 1.4),
            "caption": TextStyle(family, sizes["xs"], weights["normal"], 1.4),
        }
