"""Matplotlib-based preview display for rendered images.

Example:
    >>> from raycore.camera.camera import Camera
    >>> from raycore.core.renderer import render_to_array
    >>> from raycore.preview.display import show_preview
    >>>
    >>> image = render_to_array(Camera(aspect_ratio=16.0 / 9.0, image_width=400))
    >>> show_preview(image)
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def prepare_for_display(image: npt.NDArray[np.floating]) -> npt.NDArray[np.float32]:
    """Clamp a linear image to [0, 1] for imshow.

    Args:
        image: Linear image array of shape (H, W, 3).

    Returns:
        Clamped float32 copy of the image.
    """
    return np.clip(image, 0.0, 1.0).astype(np.float32)


def show_preview(
    image: npt.NDArray[np.floating],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 4.5),
    block: bool = True,
) -> None:
    """Display a rendered image as a Matplotlib figure.

    Args:
        image: Linear image array of shape (H, W, 3).
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    height, width = image.shape[:2]

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(prepare_for_display(image))
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {width}x{height}")

    plt.tight_layout()
    plt.show(block=block)
