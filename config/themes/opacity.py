"""
Opacity System
==============

Alpha levels for overlays and state layers.
"""


class Opacity:

    HOVER = 0.08
    FOCUS = 0.12
    PRESSED = 0.16
    DISABLED = 0.38
    OVERLAY = 0.5
    OPAQUE = 1.0

    NAMES = ("hover", "focus", "pressed", "disabled", "overlay", "opaque")

    @classmethod
    def as_dict(cls) -> dict:
        return {name: getattr(cls, name.upper()) for name in cls.NAMES}
