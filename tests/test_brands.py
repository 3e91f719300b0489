# -*- coding: utf-8 -*-
"""
tests/test_brands.py
====================
Brand capability and the built-in palette brands.
"""
import pytest

from config.themes import (
    Brand,
    Color,
    ColorPalette,
    ColorTokens,
    DEFAULT_BRAND,
    MONOCHROME_BRAND,
    PaletteBrand,
)
from exceptions import InvalidValueError


class TestPaletteBrand:

    def test_monochrome_main_color_per_mode(self):
        assert MONOCHROME_BRAND.resolve_colors(False).brand.main == Color.parse("#1D1C1C")
        assert MONOCHROME_BRAND.resolve_colors(True).brand.main == Color.parse("#EBEAEE")

    def test_mode_flag_matches_request(self):
        for brand in (DEFAULT_BRAND, MONOCHROME_BRAND):
            assert brand.resolve_colors(True).is_dark is True
            assert brand.resolve_colors(False).is_dark is False

    def test_resolve_is_pure(self):
        assert DEFAULT_BRAND.resolve_colors(True) == DEFAULT_BRAND.resolve_colors(True)

    def test_rejects_swapped_palettes(self):
        light = ColorTokens.from_mapping(ColorPalette.LIGHT, is_dark=False)
        dark = ColorTokens.from_mapping(ColorPalette.DARK, is_dark=True)
        with pytest.raises(InvalidValueError):
            PaletteBrand("swapped", light=dark, dark=light)

    def test_from_mappings(self):
        brand = PaletteBrand.from_mappings("acme", ColorPalette.LIGHT, ColorPalette.DARK)
        assert brand.name == "acme"
        assert brand.resolve_colors(False).brand.main == Color.parse("#4A7EC8")
        assert "acme" in repr(brand)


class TestBrandProtocol:

    def test_palette_brand_satisfies_protocol(self):
        assert isinstance(DEFAULT_BRAND, Brand)

    def test_duck_typed_brand_satisfies_protocol(self, counting_brand):
        assert isinstance(counting_brand, Brand)

    def test_plain_object_does_not(self):
        assert not isinstance(object(), Brand)


class TestColorPalette:

    def test_get_known(self):
        assert ColorPalette.get("mono_dark") is ColorPalette.MONO_DARK

    def test_get_unknown_defaults_to_light(self):
        assert ColorPalette.get("neon") is ColorPalette.LIGHT

    @pytest.mark.parametrize("name", ["LIGHT", "DARK", "MONO_LIGHT", "MONO_DARK"])
    def test_palettes_share_keys(self, name):
        assert set(getattr(ColorPalette, name)) == set(ColorPalette.LIGHT)
