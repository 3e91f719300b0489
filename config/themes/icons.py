"""
Icon Sizes
==========
"""


class IconSize:

    XS = 12
    SM = 16
    MD = 20
    LG = 24
    XL = 32

    NAMES = ("xs", "sm", "md", "lg", "xl")

    @classmethod
    def as_dict(cls) -> dict:
        return {name: getattr(cls, name.upper()) for name in cls.NAMES}
