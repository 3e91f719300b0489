# -*- coding: utf-8 -*-
"""
tests/test_design_tokens.py
===========================
Static token tables, typography and DesignTokens assembly.
"""
import pytest

from config.themes import (
    BorderRadius,
    ColorPalette,
    ColorTokens,
    DesignTokens,
    Spacing,
    TextDirection,
    TextStyle,
    Typography,
    build_design_tokens,
)


@pytest.fixture
def light_colors():
    return ColorTokens.from_mapping(ColorPalette.LIGHT)


class TestTypography:

    @pytest.mark.parametrize("value, expected", [
        (13, 13),
        ("small", 10),
        ("medium", 12),
        ("LARGE", 14),
        ("xlarge", 16),
        ("huge", 12),
        ("15", 15),
        (None, 12),
    ])
    def test_resolve_font_size(self, value, expected):
        assert Typography.resolve_font_size(value) == expected

    def test_scale(self):
        sizes = Typography.scale(12)
        assert sizes["base"] == 12
        assert sizes["3xl"] == 21
        assert sizes["xs"] == 10

    def test_text_styles_follow_base_size(self):
        styles = Typography.text_styles("Inter", 14)
        assert styles["body"] == TextStyle("Inter", 14, 400, 1.5)
        assert styles["display"].size == 26
        assert all(s.family == "Inter" for s in styles.values())


class TestStaticTables:

    def test_spacing_get(self):
        assert Spacing.get("md") == 12
        assert Spacing.get("none") == 0
        assert Spacing.get("unknown") == Spacing.MD

    def test_spacing_scale(self):
        assert Spacing.scale(2.0)["lg"] == 32

    def test_border_radius(self):
        assert BorderRadius.get("full") == 9999
        assert BorderRadius.as_dict()["sm"] == 6


class TestBuildDesignTokens:

    def test_carries_colors(self, light_colors):
        tokens = build_design_tokens(light_colors)
        assert tokens.colors is light_colors
        assert tokens.is_dark is False

    def test_default_direction_is_ltr(self, light_colors):
        assert build_design_tokens(light_colors).text_direction is TextDirection.LTR

    def test_direction_from_string(self, light_colors):
        tokens = build_design_tokens(light_colors, "rtl")
        assert tokens.text_direction is TextDirection.RTL
        assert tokens.is_rtl

    def test_tables_populated(self, light_colors):
        tokens = build_design_tokens(light_colors)
        assert tokens.spacings["md"] == 12
        assert tokens.border_radiuses["md"] == 10
        assert tokens.elevations["none"] == 0
        assert tokens.opacities["disabled"] == 0.38
        assert tokens.icons["lg"] == 24
        assert "body" in tokens.text_styles

    def test_font_settings_reach_text_styles(self, light_colors):
        tokens = build_design_tokens(light_colors, font_family="Cairo", font_size=14)
        assert tokens.text_styles["body"].family == "Cairo"
        assert tokens.text_styles["body"].size == 14

    def test_tables_are_read_only(self, light_colors):
        tokens = build_design_tokens(light_colors)
        with pytest.raises(TypeError):
            tokens.spacings["md"] = 99
        with pytest.raises(TypeError):
            tokens.text_styles["body"] = None

    def test_frozen(self, light_colors):
        tokens = build_design_tokens(light_colors)
        with pytest.raises(AttributeError):
            tokens.text_direction = TextDirection.RTL

    def test_equal_inputs_give_equal_tokens(self, light_colors):
        assert build_design_tokens(light_colors) == build_design_tokens(light_colors)
        assert isinstance(build_design_tokens(light_colors), DesignTokens)
