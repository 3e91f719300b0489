"""
Elevation System
================

Shadow depth levels (blur radius in pixels), lowest to highest.
"""


class Elevation:

    NONE = 0
    SM = 2
    MD = 4
    LG = 8
    XL = 16

    NAMES = ("none", "sm", "md", "lg", "xl")

    @classmethod
    def as_dict(cls) -> dict:
        return {name: getattr(cls, name.upper()) for name in cls.NAMES}
