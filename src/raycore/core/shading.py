"""Shading functions that resolve a ray to a color.

There is no scene yet, so every ray is shaded with a vertical sky gradient:
rays pointing down are white, rays pointing up are blue, and the blend is
linear in the y component of the unit direction. Shading is stateless and
depends on the ray direction only.
"""

from __future__ import annotations

from collections.abc import Callable

from raycore.core.color import BLUE, WHITE, Color
from raycore.core.ray import Ray

# A shading function maps a primary ray to its pixel color
ShadeFunction = Callable[[Ray[float]], Color[float]]


def gradient_factor(ray: Ray[float]) -> float:
    """Map the ray's unit direction y in [-1, 1] to a blend factor in [0, 1]."""
    unit_direction = ray.direction.unit()
    return (unit_direction.y + 1.0) * 0.5


def ray_color(ray: Ray[float]) -> Color[float]:
    """Shade a ray with the white-to-blue background gradient.

    Args:
        ray: The primary ray. Its direction must be non-zero.

    Returns:
        ``WHITE * (1 - a) + BLUE * a`` with ``a`` from gradient_factor().
    """
    a = gradient_factor(ray)
    return WHITE * (1.0 - a) + BLUE * a
