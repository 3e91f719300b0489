"""
tests/conftest.py
=================
Shared pytest fixtures — brands, locale lists and a ready engine.
"""
import pytest

from config.themes import ColorPalette, ColorTokens, MONOCHROME_BRAND
from core.design_state import DesignStateEngine
from core.locale_resolver import Localize


class CountingBrand:
    """Brand test double: fixed palettes, records every resolve_colors call."""

    def __init__(self, light=ColorPalette.MONO_LIGHT, dark=ColorPalette.MONO_DARK):
        self._light = ColorTokens.from_mapping(light, is_dark=False)
        self._dark = ColorTokens.from_mapping(dark, is_dark=True)
        self.calls = []

    def resolve_colors(self, is_dark_mode):
        self.calls.append(is_dark_mode)
        return self._dark if is_dark_mode else self._light


class FixedBrand:
    """Returns the same ColorTokens whatever the mode."""

    def __init__(self, palette=ColorPalette.LIGHT):
        self._tokens = ColorTokens.from_mapping(palette)

    def resolve_colors(self, is_dark_mode):
        return self._tokens


@pytest.fixture
def supported():
    return [
        Localize.of("en-US", "English"),
        Localize.of("es-ES", "Español"),
    ]


@pytest.fixture
def supported_with_arabic():
    return [
        Localize.of("en-US", "English"),
        Localize.of("ar-SY", "العربية"),
        Localize.of("tr-TR", "Türkçe"),
    ]


@pytest.fixture
def counting_brand():
    return CountingBrand()


@pytest.fixture
def fixed_brand():
    return FixedBrand()


@pytest.fixture
def engine(supported):
    eng = DesignStateEngine(MONOCHROME_BRAND, supported)
    yield eng
    eng.close()


@pytest.fixture
def recorder():
    """Listener that stores every snapshot it receives."""
    received = []

    def _listener(state):
        received.append(state)

    _listener.received = received
    return _listener
