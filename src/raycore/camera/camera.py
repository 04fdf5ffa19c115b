"""Camera and viewport geometry.

The camera sits at ``center`` and looks down the -z axis at a viewport one
unit away. The viewport is 2 units tall; its width follows the realized
pixel ratio ``image_width / image_height`` so that pixels stay square even
when the requested aspect ratio cannot be met exactly with integer sizes.

Image row 0 is the top of the image while world-space y grows upward, so
the vertical viewport basis points down (-y).

Pixel centers are sampled, not pixel corners: the first sample point
``pixel00_center`` sits half a pixel inward from the upper-left corner of
the viewport.

Example:
    >>> from raycore.camera.camera import Camera
    >>> camera = Camera(aspect_ratio=16.0 / 9.0, image_width=400)
    >>> camera.image.height
    225
    >>> ray = camera.get_ray(0, 0)  # Ray through the top-left pixel center
"""

from __future__ import annotations

from dataclasses import dataclass, field

from raycore.core.ray import Ray
from raycore.core.vector import Point, Vec3

# Distance from the camera center to the viewport
FOCAL_LENGTH = 1.0

# World-space height of the viewport
VIEWPORT_HEIGHT = 2.0


@dataclass(frozen=True)
class Image:
    """Output image dimensions in pixels.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        """Total number of pixels."""
        return self.width * self.height


@dataclass(frozen=True)
class Viewport:
    """Pixel sampling grid on the image plane.

    Attributes:
        pixel00_center: World position of the center of pixel (0, 0).
        delta_horizontal: Offset between horizontally adjacent pixel centers.
        delta_vertical: Offset between vertically adjacent pixel centers.
    """

    pixel00_center: Point[float]
    delta_horizontal: Vec3[float]
    delta_vertical: Vec3[float]

    def pixel_center(self, row: int, col: int) -> Point[float]:
        """World position of the center of pixel (row, col).

        Indices are not bounds checked; out-of-range indices extrapolate
        linearly beyond the viewport.
        """
        return (
            self.pixel00_center
            + self.delta_horizontal * float(col)
            + self.delta_vertical * float(row)
        )


def calc_image_height(aspect_ratio: float, image_width: int) -> int:
    """Derive the image height from the width and ideal aspect ratio.

    The quotient is truncated and clamped so the image has at least one row.

    Args:
        aspect_ratio: Ideal width / height ratio.
        image_width: Image width in pixels.

    Returns:
        The image height in pixels, always >= 1.
    """
    return max(int(image_width / aspect_ratio), 1)


@dataclass(frozen=True)
class Camera:
    """A fixed pinhole camera with its image and viewport geometry.

    Only ``aspect_ratio``, ``image_width`` and optionally ``center`` are
    passed in. The image and viewport are derived once at construction and
    never change.

    Attributes:
        aspect_ratio: Requested width / height ratio.
        image_width: Image width in pixels.
        center: Camera (eye) position.
        image: Derived image dimensions.
        viewport: Derived pixel sampling grid.
    """

    aspect_ratio: float
    image_width: int
    center: Point[float] = field(default_factory=lambda: Point(0.0, 0.0, 0.0))
    image: Image = field(init=False)
    viewport: Viewport = field(init=False)

    def __post_init__(self) -> None:
        image_height = calc_image_height(self.aspect_ratio, self.image_width)

        # The requested aspect ratio may not be the realized one, so the
        # viewport width uses the integer pixel ratio.
        viewport_width = VIEWPORT_HEIGHT * self.image_width / image_height

        viewport_horizontal = Vec3(viewport_width, 0.0, 0.0)
        viewport_vertical = Vec3(0.0, -VIEWPORT_HEIGHT, 0.0)

        pixel_delta_horizontal = viewport_horizontal / float(self.image_width)
        pixel_delta_vertical = viewport_vertical / float(image_height)

        viewport_upper_left = (
            self.center
            - Vec3(0.0, 0.0, FOCAL_LENGTH)
            - viewport_horizontal / 2.0
            - viewport_vertical / 2.0
        )
        pixel00_center = viewport_upper_left + (pixel_delta_horizontal + pixel_delta_vertical) * 0.5

        # Frozen dataclass: derived fields are assigned through object.__setattr__
        object.__setattr__(self, "image", Image(width=self.image_width, height=image_height))
        object.__setattr__(
            self,
            "viewport",
            Viewport(
                pixel00_center=pixel00_center,
                delta_horizontal=pixel_delta_horizontal,
                delta_vertical=pixel_delta_vertical,
            ),
        )

    def pixel_center(self, row: int, col: int) -> Point[float]:
        """World position of the center of pixel (row, col)."""
        return self.viewport.pixel_center(row, col)

    def get_ray(self, row: int, col: int) -> Ray[float]:
        """Generate the primary ray through the center of pixel (row, col).

        Args:
            row: Pixel row, 0 is the top of the image.
            col: Pixel column, 0 is the left of the image.

        Returns:
            A ray from the camera center toward the pixel center. The direction
            is not normalized.
        """
        pixel_center = self.viewport.pixel_center(row, col)
        return Ray(origin=self.center, direction=pixel_center - self.center)
