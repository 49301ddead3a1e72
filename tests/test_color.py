"""Tests for 8-bit colors."""

import pytest

from raycaster.color import Color, BLACK, average_colors, clamp_channel


class TestClampChannel:

    def test_truncates(self):
        assert clamp_channel(127.9) == 127

    def test_clamps_high(self):
        assert clamp_channel(400.0) == 255

    def test_clamps_negative(self):
        assert clamp_channel(-3.5) == 0

    def test_nan_is_black(self):
        assert clamp_channel(float('nan')) == 0


class TestColor:
    """Test Color construction and arithmetic."""

    def test_default_is_black(self):
        assert Color() == BLACK

    def test_channel_range_validated(self):
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_iter(self):
        assert tuple(Color(1, 2, 3)) == (1, 2, 3)

    def test_scaled(self):
        assert Color(200, 100, 40).scaled(0.5) == Color(100, 50, 20)

    def test_scaled_saturates(self):
        # 200 * 2.0 would overflow a byte
        assert Color(200, 100, 0).scaled(2.0) == Color(255, 200, 0)

    def test_scaled_truncates(self):
        assert Color(255, 255, 255).scaled(0.999) == Color(254, 254, 254)

    def test_scaled_by_zero(self):
        assert Color(255, 255, 255).scaled(0.0) == BLACK

    def test_blend_extremes(self):
        red = Color(200, 0, 0)
        green = Color(0, 200, 0)
        assert red.blend(green, 0.0) == red
        assert red.blend(green, 1.0) == green

    def test_blend_half(self):
        assert Color(200, 0, 0).blend(Color(0, 200, 0), 0.5) == Color(100, 100, 0)

    def test_blend_truncates(self):
        assert Color(1, 0, 0).blend(Color(0, 0, 0), 0.5) == Color(0, 0, 0)


class TestAverageColors:
    """Anti-aliasing average uses floor division."""

    def test_silhouette_edge(self):
        red = Color(255, 0, 0)
        samples = [red, red, BLACK, BLACK]
        assert average_colors(samples) == Color(127, 0, 0)

    def test_uniform(self):
        c = Color(10, 20, 30)
        assert average_colors([c] * 4) == c

    def test_floor(self):
        samples = [Color(3, 0, 0), Color(0, 0, 0), Color(0, 0, 0), Color(0, 0, 0)]
        assert average_colors(samples) == Color(0, 0, 0)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            average_colors([])
