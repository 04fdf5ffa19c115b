"""Preview module for output and visualization.

Components:
    display: Matplotlib-based preview display
    export: PPM/PNG image export and PPM parsing

Example:
    >>> from raycore.camera import Camera
    >>> from raycore.core.renderer import render_to_array
    >>> from raycore.preview import save_png_from_array, show_preview
    >>>
    >>> image = render_to_array(Camera(aspect_ratio=16.0 / 9.0, image_width=400))
    >>> save_png_from_array(image, "output.png")
    >>> show_preview(image)
"""

from raycore.preview.display import prepare_for_display, show_preview
from raycore.preview.export import (
    image_to_uint8,
    parse_ppm,
    read_ppm,
    save_png_from_array,
    save_ppm,
    save_ppm_from_array,
)

__all__ = [
    # Display functions
    "show_preview",
    "prepare_for_display",
    # Export functions
    "save_ppm",
    "save_ppm_from_array",
    "save_png_from_array",
    "image_to_uint8",
    "read_ppm",
    "parse_ppm",
]
