"""Camera module for view and ray generation.

Components:
    camera: Fixed pinhole camera looking down -z with a unit focal length

Camera responsibilities:
    - Derive the image height from the width and ideal aspect ratio
    - Lay out the viewport so that pixels stay square
    - Map (row, col) pixel indices to world-space rays through pixel centers

Pixel indices follow image conventions:
    row 0: top of the image
    col 0: left of the image
"""

from .camera import FOCAL_LENGTH, VIEWPORT_HEIGHT, Camera, Image, Viewport, calc_image_height

__all__ = [
    "Camera",
    "Image",
    "Viewport",
    "calc_image_height",
    "FOCAL_LENGTH",
    "VIEWPORT_HEIGHT",
]
