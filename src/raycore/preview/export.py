"""Image export utilities for rendered images.

This module writes rendered images to files and converts between the
plain-text PPM stream and NumPy arrays.

Supported formats:
    - PPM P3 (plain text, written pixel by pixel while rendering)
    - PNG (8-bit RGB via Pillow, from a rendered array)

Example:
    >>> from raycore.camera.camera import Camera
    >>> from raycore.core.renderer import render_to_array
    >>> from raycore.preview.export import save_png_from_array, save_ppm
    >>>
    >>> camera = Camera(aspect_ratio=16.0 / 9.0, image_width=400)
    >>> save_ppm(camera, "image.ppm")
    >>> save_png_from_array(render_to_array(camera), "image.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raycore.core.color import COLOR_SATURATION
from raycore.core.renderer import PPM_IDENTIFIER, render, write_ppm_from_array

if TYPE_CHECKING:
    from raycore.camera.camera import Camera
    from raycore.core.progress import ProgressSink


def save_ppm(
    camera: Camera,
    filepath: str | Path,
    progress: ProgressSink | None = None,
) -> Path:
    """Render the camera's image straight into a PPM file.

    Args:
        camera: Camera to render.
        filepath: Output file path (should end in .ppm).
        progress: Optional progress sink.

    Returns:
        Path to the written file.

    Raises:
        OSError: If the file cannot be created or written.
    """
    output = Path(filepath)
    with output.open("w", encoding="ascii", newline="\n") as writer:
        render(camera, writer, progress=progress)
    return output


def save_ppm_from_array(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
) -> Path:
    """Save a rendered linear color array as a PPM file.

    The file matches what save_ppm writes for the same camera, so an image
    rendered once for a preview can also be stored without rendering again.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path (should end in .ppm).

    Returns:
        Path to the written file.

    Raises:
        OSError: If the file cannot be created or written.
    """
    output = Path(filepath)
    with output.open("w", encoding="ascii", newline="\n") as writer:
        write_ppm_from_array(image, writer)
    return output


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear color image to 8-bit channels.

    Channels are scaled by 255 and truncated, matching the PPM encoding,
    then clipped to [0, 255] since uint8 cannot hold out-of-range values.
    NaN becomes 0 and infinities clip like any other out-of-range value.

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        Image array of shape (H, W, 3) with dtype uint8.
    """
    scaled = np.trunc(image.astype(np.float64) * COLOR_SATURATION)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=COLOR_SATURATION, neginf=0.0)
    return np.clip(scaled, 0, COLOR_SATURATION).astype(np.uint8)


def save_png_from_array(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
) -> Path:
    """Save a linear color array as an 8-bit RGB PNG file.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path (should end in .png).

    Returns:
        Path to the written file.
    """
    output = Path(filepath)
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(output)
    return output


def read_ppm(source: str | Path) -> npt.NDArray[np.uint8]:
    """Parse a plain-text PPM image.

    Args:
        source: Path to a .ppm file.

    Returns:
        Image array of shape (height, width, 3) with dtype uint8.

    Raises:
        ValueError: If the content is not a well formed P3 image with a
            maximum channel value of at most 255.
    """
    return parse_ppm(Path(source).read_text(encoding="ascii"))


def parse_ppm(text: str) -> npt.NDArray[np.uint8]:
    """Parse the text of a plain-text PPM image.

    Comments (``#`` to end of line) are ignored, as allowed by the format.

    Args:
        text: Complete PPM content.

    Returns:
        Image array of shape (height, width, 3) with dtype uint8.

    Raises:
        ValueError: If the content is malformed.
    """
    tokens = []
    for line in text.splitlines():
        tokens.extend(line.split("#", 1)[0].split())

    if len(tokens) < 4 or tokens[0] != PPM_IDENTIFIER:
        raise ValueError(f"Not a {PPM_IDENTIFIER} image: missing header")

    try:
        width, height, max_value = (int(token) for token in tokens[1:4])
        values = [int(token) for token in tokens[4:]]
    except ValueError as e:
        raise ValueError(f"Non-integer value in PPM content: {e}") from e

    if width < 1 or height < 1:
        raise ValueError(f"Invalid image size: {width}x{height}")
    if not 0 < max_value <= COLOR_SATURATION:
        raise ValueError(f"Unsupported maximum channel value: {max_value}")

    expected = width * height * 3
    if len(values) != expected:
        raise ValueError(f"Expected {expected} channel values, found {len(values)}")
    if any(v < 0 or v > max_value for v in values):
        raise ValueError(f"Channel value outside [0, {max_value}]")

    return np.array(values, dtype=np.uint8).reshape(height, width, 3)
