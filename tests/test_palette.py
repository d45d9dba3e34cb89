# test_palette.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termstyle.palette import PALETTE, colors, shades, resolve_variant
from termstyle.exceptions import UnknownColorVariant, TermstyleError


class TestPalette:
    """Test suite for palette lookups."""

    def test_resolve_known_variant(self):
        assert resolve_variant("red", 500) == "#ef4444"
        assert resolve_variant("sky", 50) == "#f0f9ff"

    def test_resolve_is_case_insensitive(self):
        assert resolve_variant("RED", 500) == resolve_variant("red", 500)
        assert resolve_variant("Blue", 950) == "#172554"

    def test_unknown_shade_raises(self):
        with pytest.raises(UnknownColorVariant) as exc_info:
            resolve_variant("red", 999)

        error = exc_info.value
        assert error.color == "red"
        assert error.shade == 999
        assert error.key == "RED_999"
        assert str(error) == "Color [RED_999] not found."

    def test_unknown_color_raises(self):
        with pytest.raises(UnknownColorVariant):
            resolve_variant("mauve", 500)

    def test_error_hierarchy(self):
        with pytest.raises(LookupError):
            resolve_variant("red", 1)
        with pytest.raises(TermstyleError):
            resolve_variant("red", 1)

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            PALETTE["RED_500"] = "#000000"

    def test_palette_contents(self):
        assert PALETTE["BLACK"] == "black"
        assert PALETTE["WHITE"] == "white"
        # 22 colors x 11 shades plus the two base entries
        assert len(PALETTE) == 22 * 11 + 2
        assert all(key == key.upper() for key in PALETTE)

    def test_colors_and_shades(self):
        assert "red" in colors()
        assert "neutral" in colors()
        assert shades("red") == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]
        assert shades("RED") == shades("red")
        assert shades("mauve") == []
