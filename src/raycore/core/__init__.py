"""Core rendering module.

This module contains the fundamental building blocks of the renderer:

Components:
    vector: Generic 3D vector algebra (Vec3, Point)
    ray: Ray data structure
    color: Color alias and plain-text channel encoding
    shading: Ray to color shading functions
    progress: Progress sinks consumed by the render loop
    renderer: Row-major render loop and PPM stream output
"""

from .color import BLUE, COLOR_SATURATION, WHITE, Color, format_color, to_channels, write_color
from .progress import (
    CallbackProgress,
    ConsoleProgress,
    NullProgress,
    ProgressCallback,
    ProgressSink,
)
from .ray import Ray
from .renderer import (
    PPM_IDENTIFIER,
    iter_pixels,
    render,
    render_to_array,
    write_headers,
    write_ppm_from_array,
)
from .shading import ShadeFunction, gradient_factor, ray_color
from .vector import (
    Point,
    Vec3,
    add,
    cross,
    divide,
    dot,
    magnitude,
    magnitude_squared,
    negate,
    scale,
    sub,
    unit,
)

__all__ = [
    "Vec3",
    "Point",
    "add",
    "sub",
    "scale",
    "divide",
    "negate",
    "dot",
    "cross",
    "magnitude",
    "magnitude_squared",
    "unit",
    "Ray",
    "Color",
    "WHITE",
    "BLUE",
    "COLOR_SATURATION",
    "to_channels",
    "format_color",
    "write_color",
    "ShadeFunction",
    "gradient_factor",
    "ray_color",
    "ProgressSink",
    "ProgressCallback",
    "NullProgress",
    "CallbackProgress",
    "ConsoleProgress",
    "PPM_IDENTIFIER",
    "write_headers",
    "iter_pixels",
    "render",
    "render_to_array",
    "write_ppm_from_array",
]
