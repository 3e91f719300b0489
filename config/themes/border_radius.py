"""
Border Radius System
====================

Provides consistent border radius values (pixels).
"""


class BorderRadius:
    """
    Standard border radius scale.

    Usage:
        >>> btn_radius = BorderRadius.MD  # 10
    """

    NONE = 0
    SM = 6
    MD = 10
    LG = 12
    XL = 16
    XXL = 22
    FULL = 9999  # Circular

    NAMES = ("none", "sm", "md", "lg", "xl", "xxl", "full")

    @classmethod
    def get(cls, size: str) -> int:
        """Get radius by name"""
        if size.lower() in cls.NAMES:
            return getattr(cls, size.upper())
        return cls.MD

    @classmethod
    def as_dict(cls) -> dict:
        return {name: getattr(cls, name.upper()) for name in cls.NAMES}
