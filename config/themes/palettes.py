"""
Color Palettes for Built-in Brands
===================================

Raw color values keyed "<group>.<name>", one table per brand and mode.
Feed them to ColorTokens.from_mapping() or PaletteBrand.from_mappings().
"""


class ColorPalette:
    """
    Palettes for the brands shipped with the package.

    Usage:
        >>> palette = ColorPalette.LIGHT
        >>> palette["brand.main"]
        '#4A7EC8'
    """

    # Light Theme Palette (professional blue)
    LIGHT = {
        # Brand
        "brand.main": "#4A7EC8",
        "brand.on_main": "#FFFFFF",
        "brand.accent": "#3498DB",
        "brand.on_accent": "#FFFFFF",

        # Interaction
        "interaction.primary": "#4A7EC8",
        "interaction.hover": "#5B8ED8",
        "interaction.active": "#3A6EB8",
        "interaction.focus": "#4A7EC8",
        "interaction.disabled": "#ADB5BD",

        # Neutral
        "neutral.background": "#FFFFFF",
        "neutral.surface": "#FFFFFF",
        "neutral.surface_variant": "#F0F7FF",
        "neutral.border": "#E0E0E0",
        "neutral.text_primary": "#212529",
        "neutral.text_secondary": "#495057",
        "neutral.text_muted": "#6C757D",

        # Messaging
        "messaging.success": "#2ECC71",
        "messaging.warning": "#F39C12",
        "messaging.danger": "#E74C3C",
        "messaging.info": "#3498DB",
    }

    # Dark Theme Palette
    DARK = {
        "brand.main": "#3D6DB3",
        "brand.on_main": "#FFFFFF",
        "brand.accent": "#5DADE2",
        "brand.on_accent": "#111827",

        "interaction.primary": "#3D6DB3",
        "interaction.hover": "#5484C7",
        "interaction.active": "#2C5AA0",
        "interaction.focus": "#3D6DB3",
        "interaction.disabled": "#6B7280",

        "neutral.background": "#111827",
        "neutral.surface": "#1F2937",
        "neutral.surface_variant": "#374151",
        "neutral.border": "#374151",
        "neutral.text_primary": "#F9FAFB",
        "neutral.text_secondary": "#D1D5DB",
        "neutral.text_muted": "#9CA3AF",

        "messaging.success": "#2ECC71",
        "messaging.warning": "#F39C12",
        "messaging.danger": "#E74C3C",
        "messaging.info": "#3498DB",
    }

    # Monochrome (ink on paper / paper on ink)
    MONO_LIGHT = {
        "brand.main": "#1D1C1C",
        "brand.on_main": "#FFFFFF",
        "brand.accent": "#5A5858",
        "brand.on_accent": "#FFFFFF",

        "interaction.primary": "#1D1C1C",
        "interaction.hover": "#3A3838",
        "interaction.active": "#000000",
        "interaction.focus": "#1D1C1C",
        "interaction.disabled": "#BDBBC2",

        "neutral.background": "#FFFFFF",
        "neutral.surface": "#F7F6F9",
        "neutral.surface_variant": "#EBEAEE",
        "neutral.border": "#D6D4DB",
        "neutral.text_primary": "#1D1C1C",
        "neutral.text_secondary": "#4A4848",
        "neutral.text_muted": "#7A7878",

        "messaging.success": "#1E8E3E",
        "messaging.warning": "#B06000",
        "messaging.danger": "#C5221F",
        "messaging.info": "#1967D2",
    }

    MONO_DARK = {
        "brand.main": "#EBEAEE",
        "brand.on_main": "#1D1C1C",
        "brand.accent": "#BDBBC2",
        "brand.on_accent": "#1D1C1C",

        "interaction.primary": "#EBEAEE",
        "interaction.hover": "#FFFFFF",
        "interaction.active": "#D6D4DB",
        "interaction.focus": "#EBEAEE",
        "interaction.disabled": "#5A5858",

        "neutral.background": "#121111",
        "neutral.surface": "#1D1C1C",
        "neutral.surface_variant": "#2A2828",
        "neutral.border": "#3A3838",
        "neutral.text_primary": "#EBEAEE",
        "neutral.text_secondary": "#BDBBC2",
        "neutral.text_muted": "#8E8C93",

        "messaging.success": "#81C995",
        "messaging.warning": "#FDD663",
        "messaging.danger": "#F28B82",
        "messaging.info": "#8AB4F8",
    }

    @classmethod
    def get(cls, name: str) -> dict:
        """Get palette by name"""
        name = name.upper()
        if hasattr(cls, name):
            return getattr(cls, name)
        return cls.LIGHT  # Default
