"""Ray data structure.

A ray is the parametrized line ``origin + t * direction``. It is generic
over the same scalar type as the vectors it holds.

Example:
    >>> from raycore.core.ray import Ray
    >>> from raycore.core.vector import Point, Vec3
    >>> ray = Ray(origin=Point(0.0, 0.0, 0.0), direction=Vec3(0.0, 0.0, -1.0))
    >>> ray.at(5.0)  # Point 5 units along the ray
    Vec3(0.0, 0.0, -5.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from raycore.core.vector import N, Point, Vec3


@dataclass(frozen=True)
class Ray(Generic[N]):
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not required to be
            normalized.
    """

    origin: Point[N]
    direction: Vec3[N]

    def at(self, t: N) -> Point[N]:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point ``origin + direction * t``.
        """
        return self.origin + self.direction * t
