"""Unit tests for color encoding.

Tests cover:
- Channel scaling and truncation
- Out-of-range components (no clamping) and non-finite components
- Text line formatting and writing
"""

import io

import pytest


class TestChannels:
    """Tests for to_channels and format_color."""

    def test_white(self):
        """Test white encodes to full saturation."""
        from raycore.core.color import WHITE, format_color

        assert format_color(WHITE) == "255 255 255"

    def test_black(self):
        """Test black encodes to zeros."""
        from raycore.core.color import Color, format_color

        assert format_color(Color(0.0, 0.0, 0.0)) == "0 0 0"

    def test_blue_is_truncated(self):
        """Test channels are truncated, not rounded (127.5 -> 127)."""
        from raycore.core.color import BLUE, to_channels

        assert to_channels(BLUE) == (127, 178, 255)

    def test_just_below_one_truncates(self):
        """Test 0.999 maps to 254, not 255."""
        from raycore.core.color import Color, to_channels

        assert to_channels(Color(0.999, 0.999, 0.999)) == (254, 254, 254)

    def test_out_of_range_not_clamped(self):
        """Test values outside [0, 1] produce out-of-range channels."""
        from raycore.core.color import Color, to_channels

        assert to_channels(Color(2.0, -0.5, 1.0)) == (510, -127, 255)

    def test_custom_saturation(self):
        """Test a different maximum channel value."""
        from raycore.core.color import Color, to_channels

        assert to_channels(Color(1.0, 0.5, 0.0), saturation=100) == (100, 50, 0)

    def test_channels_are_ints(self):
        """Test encoded channels are Python ints."""
        from raycore.core.color import Color, to_channels

        assert all(isinstance(c, int) for c in to_channels(Color(0.25, 0.5, 0.75)))

    def test_nan_encodes_as_zero(self):
        """Test a NaN intensity encodes as 0 instead of raising."""
        from raycore.core.color import Color, format_color

        assert format_color(Color(float("nan"), 0.5, 1.0)) == "0 127 255"

    def test_infinities_saturate(self):
        """Test infinite intensities saturate at the signed 64-bit bounds."""
        from raycore.core.color import CHANNEL_MAX, CHANNEL_MIN, Color, to_channels

        channels = to_channels(Color(float("inf"), float("-inf"), 0.0))

        assert channels == (CHANNEL_MAX, CHANNEL_MIN, 0)
        assert CHANNEL_MAX == 2**63 - 1
        assert CHANNEL_MIN == -(2**63)

    @pytest.mark.parametrize(
        "value, expected",
        [(1e300, 2**63 - 1), (-1e300, -(2**63)), (-0.9, 0), (254.99, 254)],
    )
    def test_channel_value(self, value, expected):
        """Test truncation and saturation of single scaled intensities."""
        from raycore.core.color import channel_value

        assert channel_value(value) == expected

    def test_write_color_with_nan(self):
        """Test write_color emits a line for a NaN color."""
        from raycore.core.color import Color, write_color

        writer = io.StringIO()
        write_color(writer, Color(float("nan"), float("nan"), float("nan")))

        assert writer.getvalue() == "0 0 0\n"


class TestWriteColor:
    """Tests for write_color."""

    def test_writes_line_with_newline(self):
        """Test write_color appends a single terminated line."""
        from raycore.core.color import Color, write_color

        writer = io.StringIO()
        write_color(writer, Color(1.0, 0.5, 0.0))

        assert writer.getvalue() == "255 127 0\n"

    def test_write_error_propagates(self):
        """Test stream errors are not swallowed."""
        from raycore.core.color import WHITE, write_color

        writer = io.StringIO()
        writer.close()

        with pytest.raises(ValueError):
            write_color(writer, WHITE)


class TestConstants:
    """Tests that the shared color constants keep their values."""

    def test_scaling_a_constant_leaves_it_unchanged(self):
        """Test *= on a name bound to WHITE does not change WHITE."""
        from raycore.core.color import WHITE, Color

        color = WHITE
        color *= 0.0

        assert color == Color(0.0, 0.0, 0.0)
        assert WHITE == Color(1.0, 1.0, 1.0)

    def test_blue_components_cannot_be_reassigned(self):
        """Test BLUE rejects component assignment."""
        from raycore.core.color import BLUE, Color

        with pytest.raises(AttributeError):
            BLUE.x = 0.0

        assert BLUE == Color(0.5, 0.7, 1.0)
