"""Generic 3D vector algebra.

This module provides the Vec3 class used for positions, directions and
colors throughout the renderer. Components may be any numeric type that
supports the arithmetic operators and conversion to float: ``int`` vectors
are convenient for exact arithmetic in tests, ``float`` vectors are used
for rendering.

Point is an alias of Vec3. Positions and directions share one runtime
representation and are told apart by naming only.

Example:
    >>> from raycore.core.vector import Vec3, cross, dot
    >>> a = Vec3(1, 2, 3)
    >>> b = Vec3(4, 5, 6)
    >>> a + b
    Vec3(5, 7, 9)
    >>> dot(a, b)
    32
    >>> cross(a, b)
    Vec3(-3, 6, -3)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Integral
from typing import Any, Generic, TypeVar

# Scalar component type
N = TypeVar("N")


def _divide_scalar(value: Any, scalar: Any) -> Any:
    """Divide one component, keeping integral vectors integral.

    Integral operands truncate toward zero. All other operands use true
    division.
    """
    if isinstance(value, Integral) and isinstance(scalar, Integral):
        quotient = abs(value) // abs(scalar)
        return quotient if (value < 0) == (scalar < 0) else -quotient
    return value / scalar


class Vec3(Generic[N]):
    """An immutable three component vector over a generic numeric type.

    Vectors are values: every operator returns a new vector and components
    cannot be reassigned. The augmented assignment operators (``+=``, ``-=``,
    ``*=``, ``/=``) rebind the name on the left to a new vector, the way they
    do for ``int`` and ``float``, so a vector shared with a camera, a ray or a
    color constant is never changed through another name.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: N, y: N, z: N) -> None:
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Vec3 is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Vec3 is immutable, cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Vec3[N]], tuple[N, N, N]]:
        return (Vec3, (self.x, self.y, self.z))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vec3[N]) -> Vec3[N]:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vec3[N]) -> Vec3[N]:
        return self + other

    def __sub__(self, other: Vec3[N]) -> Vec3[N]:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: Vec3[N]) -> Vec3[N]:
        return self - other

    def __mul__(self, scalar: N) -> Vec3[N]:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: N) -> Vec3[N]:
        return self.__mul__(scalar)

    def __imul__(self, scalar: N) -> Vec3[N]:
        return self * scalar

    def __truediv__(self, scalar: N) -> Vec3[N]:
        return Vec3(
            _divide_scalar(self.x, scalar),
            _divide_scalar(self.y, scalar),
            _divide_scalar(self.z, scalar),
        )

    def __itruediv__(self, scalar: N) -> Vec3[N]:
        return self / scalar

    def __neg__(self) -> Vec3[N]:
        return Vec3(-self.x, -self.y, -self.z)

    def __matmul__(self, other: Vec3[N]) -> N:
        """Dot product, so ``a @ b`` reads as ``dot(a, b)``."""
        return self.dot(other)

    # -------------------------------------------------------------------------
    # Products and norms
    # -------------------------------------------------------------------------

    def dot(self, other: Vec3[N]) -> N:
        """Compute the dot product with another vector.

        Args:
            other: The second vector.

        Returns:
            The sum of the componentwise products.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3[N]) -> Vec3[N]:
        """Compute the cross product ``self x other``.

        The result is anticommutative and is the zero vector when both
        operands are parallel.
        """
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude_squared(self) -> N:
        """Compute the squared length, avoiding the square root."""
        return self.dot(self)

    def magnitude(self) -> N:
        """Compute the Euclidean length of the vector.

        The square root is taken in 64-bit float and converted back to the
        component type, so integral vectors get a truncated length.

        Returns:
            The length, in the same numeric type as the components.
        """
        squared = self.magnitude_squared()
        return type(squared)(math.sqrt(float(squared)))

    def unit(self) -> Vec3[N]:
        """Rescale the vector to unit length.

        The zero vector has no direction. It is not guarded here: for
        builtin numbers the division raises ZeroDivisionError.

        Returns:
            A vector with the same direction and a magnitude of one.
        """
        return self / self.magnitude()

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[N]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def to_tuple(self) -> tuple[N, N, N]:
        """Return the components as a plain tuple."""
        return (self.x, self.y, self.z)


# Positions use the same representation as directions
Point = Vec3


# =============================================================================
# Functional API
# =============================================================================


def add(a: Vec3[N], b: Vec3[N]) -> Vec3[N]:
    """Componentwise sum ``a + b``."""
    return a + b


def sub(a: Vec3[N], b: Vec3[N]) -> Vec3[N]:
    """Componentwise difference ``a - b``."""
    return a - b


def scale(v: Vec3[N], s: N) -> Vec3[N]:
    """Multiply every component by a scalar."""
    return v * s


def divide(v: Vec3[N], s: N) -> Vec3[N]:
    """Divide every component by a scalar. Division by zero is not guarded."""
    return v / s


def negate(v: Vec3[N]) -> Vec3[N]:
    """Componentwise negation."""
    return -v


def dot(a: Vec3[N], b: Vec3[N]) -> N:
    """Dot product of two vectors."""
    return a.dot(b)


def cross(a: Vec3[N], b: Vec3[N]) -> Vec3[N]:
    """Cross product ``a x b``."""
    return a.cross(b)


def magnitude(v: Vec3[N]) -> N:
    """Euclidean length of a vector."""
    return v.magnitude()


def magnitude_squared(v: Vec3[N]) -> N:
    """Squared Euclidean length of a vector."""
    return v.magnitude_squared()


def unit(v: Vec3[N]) -> Vec3[N]:
    """Unit vector in the direction of ``v``. ``v`` must be non-zero."""
    return v.unit()
