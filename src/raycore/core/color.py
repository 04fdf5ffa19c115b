"""RGB color representation and text encoding.

A Color is a float Vec3 holding linear RGB intensities, nominally in
[0, 1]. Encoding scales each channel by the saturation value and truncates
toward zero. Values outside [0, 1] are not clamped and produce channel
values outside [0, saturation]. NaN encodes as 0 and infinities saturate.
"""

from __future__ import annotations

import math
from typing import TextIO

from raycore.core.vector import Vec3

# Color is a float vector with r, g, b stored in x, y, z
Color = Vec3

# Maximum channel value of an 8-bit color
COLOR_SATURATION = 255

WHITE: Color[float] = Color(1.0, 1.0, 1.0)
BLUE: Color[float] = Color(0.5, 0.7, 1.0)

# Channels are signed 64-bit values; non-finite intensities saturate
CHANNEL_MIN = -(2**63)
CHANNEL_MAX = 2**63 - 1


def channel_value(value: float) -> int:
    """Truncate a scaled intensity to a channel value.

    Finite values are truncated toward zero. NaN maps to 0 and values beyond
    the signed 64-bit range, infinities included, saturate at its bounds.

    Args:
        value: Intensity already multiplied by the saturation.

    Returns:
        The channel as a Python int.
    """
    if math.isnan(value):
        return 0
    if value >= CHANNEL_MAX:
        return CHANNEL_MAX
    if value <= CHANNEL_MIN:
        return CHANNEL_MIN
    return int(value)


def to_channels(color: Color[float], saturation: float = COLOR_SATURATION) -> tuple[int, int, int]:
    """Scale a color to integer channels.

    Args:
        color: Linear color, nominally in [0, 1].
        saturation: Value a channel intensity of 1.0 maps to.

    Returns:
        The (r, g, b) channels, each truncated toward zero. See
        channel_value for NaN and infinite intensities.
    """
    scaled = color * float(saturation)
    return (channel_value(scaled.x), channel_value(scaled.y), channel_value(scaled.z))


def format_color(color: Color[float], saturation: float = COLOR_SATURATION) -> str:
    """Format a color as an ``"R G B"`` text line without newline."""
    r, g, b = to_channels(color, saturation)
    return f"{r} {g} {b}"


def write_color(
    writer: TextIO,
    color: Color[float],
    saturation: float = COLOR_SATURATION,
) -> None:
    """Write a color as one line of a plain-text image.

    Args:
        writer: Text stream receiving the line.
        color: Linear color to encode.
        saturation: Value a channel intensity of 1.0 maps to.

    Raises:
        OSError: If the underlying stream fails. The error is not handled here.
    """
    writer.write(format_color(color, saturation) + "\n")
