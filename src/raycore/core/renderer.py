"""Sequential render loop.

The renderer walks every pixel in row-major order (top row first, left
column first), builds the primary ray through the pixel center, shades it
and hands the color to an output sink. Two sinks are provided:

    render(): streams a plain-text PPM (P3) image to a text writer.
    render_to_array(): fills a NumPy (height, width, 3) float64 buffer.

Both share iter_pixels(), so they see the same pixels in the same order.
Rendering is deterministic: the same camera and shading function always
produce identical output.

write_ppm_from_array() encodes a rendered buffer as the same PPM stream
render() would have written, so one render can feed several outputs.

Example:
    >>> import sys
    >>> from raycore.camera.camera import Camera
    >>> from raycore.core.renderer import render
    >>> camera = Camera(aspect_ratio=1.0, image_width=2)
    >>> render(camera, sys.stdout)
    P3
    2 2
    255
    ...
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, TextIO

import numpy as np
import numpy.typing as npt

from raycore.core.color import COLOR_SATURATION, Color, write_color
from raycore.core.progress import NullProgress, ProgressSink
from raycore.core.shading import ShadeFunction, ray_color

if TYPE_CHECKING:
    from raycore.camera.camera import Camera, Image

# Magic number of the plain-text RGB variant of the PPM format
PPM_IDENTIFIER = "P3"


def write_headers(image: Image, writer: TextIO, saturation: int = COLOR_SATURATION) -> None:
    """Write the three PPM header lines.

    Args:
        image: Image dimensions.
        writer: Text stream receiving the header.
        saturation: Maximum channel value.
    """
    writer.write(f"{PPM_IDENTIFIER}\n")
    writer.write(f"{image.width} {image.height}\n")
    writer.write(f"{saturation}\n")


def iter_pixels(
    camera: Camera,
    shade: ShadeFunction = ray_color,
) -> Iterator[tuple[int, int, Color[float]]]:
    """Shade every pixel in row-major order.

    Args:
        camera: Camera providing image size and primary rays.
        shade: Shading function applied to each primary ray.

    Yields:
        Tuples of (row, col, color).
    """
    for row in range(camera.image.height):
        for col in range(camera.image.width):
            ray = camera.get_ray(row, col)
            yield row, col, shade(ray)


def render(
    camera: Camera,
    writer: TextIO,
    progress: ProgressSink | None = None,
    shade: ShadeFunction = ray_color,
) -> None:
    """Render the camera's image as a PPM stream.

    The writer is not flushed or closed; that is left to the caller once
    this function returns.

    Args:
        camera: Camera to render.
        writer: Text stream receiving the image.
        progress: Optional progress sink, incremented once per pixel.
        shade: Shading function applied to each primary ray.

    Raises:
        OSError: If writing fails. Rendering stops at the failing pixel and
            the progress sink is not finished.
    """
    if progress is None:
        progress = NullProgress()

    progress.start(camera.image.pixel_count)
    write_headers(camera.image, writer)
    for _row, _col, color in iter_pixels(camera, shade):
        write_color(writer, color, COLOR_SATURATION)
        progress.increment(1)
    progress.finish()


def render_to_array(
    camera: Camera,
    progress: ProgressSink | None = None,
    shade: ShadeFunction = ray_color,
) -> npt.NDArray[np.float64]:
    """Render the camera's image into a NumPy array of linear colors.

    Args:
        camera: Camera to render.
        progress: Optional progress sink, incremented once per pixel.
        shade: Shading function applied to each primary ray.

    Returns:
        Array of shape (height, width, 3) with dtype float64. Row 0 is the
        top of the image.
    """
    if progress is None:
        progress = NullProgress()

    image = np.zeros((camera.image.height, camera.image.width, 3), dtype=np.float64)

    progress.start(camera.image.pixel_count)
    for row, col, color in iter_pixels(camera, shade):
        image[row, col] = color.to_tuple()
        progress.increment(1)
    progress.finish()

    return image


def write_ppm_from_array(
    image: npt.NDArray[np.floating],
    writer: TextIO,
    saturation: int = COLOR_SATURATION,
) -> None:
    """Write a rendered array as a PPM stream.

    Pixels are encoded with write_color in row-major order, so the output
    is identical to render() for the camera that produced the array.

    Args:
        image: Linear image array of shape (height, width, 3).
        writer: Text stream receiving the image.
        saturation: Maximum channel value.

    Raises:
        ValueError: If the array is not of shape (height, width, 3).
        OSError: If writing fails.
    """
    from raycore.camera.camera import Image

    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an array of shape (height, width, 3), got {image.shape}")

    height, width = image.shape[:2]
    write_headers(Image(width=width, height=height), writer, saturation)
    for r, g, b in image.reshape(-1, 3).tolist():
        write_color(writer, Color(r, g, b), saturation)
