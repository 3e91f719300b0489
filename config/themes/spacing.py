"""
Spacing System
==============

Provides consistent spacing values (pixels).
"""


class Spacing:
    """
    Standard spacing scale.

    Usage:
        >>> Spacing.SM, Spacing.LG
        (8, 16)
    """

    NONE = 0
    XS = 4
    SM = 8
    MD = 12
    LG = 16
    XL = 20
    XXL = 24
    XXXL = 32

    NAMES = ("none", "xs", "sm", "md", "lg", "xl", "xxl", "xxxl")

    @classmethod
    def get(cls, size: str) -> int:
        """
        Get spacing value by name.

        Example:
            >>> Spacing.get("md")
            12
        """
        size_upper = size.upper()
        if size.lower() in cls.NAMES:
            return getattr(cls, size_upper)
        return cls.MD  # Default

    @classmethod
    def scale(cls, multiplier: float = 1.0) -> dict:
        """
        Generate scaled spacing.

        Args:
            multiplier: Scale factor (e.g., 1.5 for 1.5x spacing)
        """
        return {
            name: int(getattr(cls, name.upper()) * multiplier)
            for name in cls.NAMES
        }
