"""Tests for lootclock.ui.colors – color blending and contrast."""

from __future__ import annotations

import pytest

from lootclock.ui.colors import AppColors, blend_hex, text_color_for


# ===========================================================================
# AppColors – constants exist
# ===========================================================================

class TestAppColors:
    def test_timer_bg_is_black(self):
        assert AppColors.TIMER_BG == "#000000"

    def test_finished_default_is_hex(self):
        assert AppColors.FINISHED_DEFAULT.startswith("#")
        assert len(AppColors.FINISHED_DEFAULT) == 7

    def test_tile_border_is_rgba(self):
        assert AppColors.TILE_BORDER.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert all(126 <= int(result[i:i + 2], 16) <= 128 for i in (1, 3, 5))

    def test_clamps_t(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_lowercase_input(self):
        assert blend_hex("#ff0000", "#ff0000", 0.3) == "#FF0000"

    @pytest.mark.parametrize("a, b", [("red", "#FFFFFF"), ("#FF0000", "blue"), ("#GG0000", "#FFFFFF"), ("#FFF", "#FFFFFF")])
    def test_invalid_returns_a(self, a, b):
        assert blend_hex(a, b, 0.5) == a


# ===========================================================================
# text_color_for
# ===========================================================================

class TestTextColorFor:
    def test_dark_background(self):
        assert text_color_for("#000000") == "#FFFFFF"

    def test_light_background(self):
        assert text_color_for("#FFCC00") == "#000000"

    def test_invalid_falls_back_to_white(self):
        assert text_color_for("purple") == AppColors.TIMER_TEXT
