"""Render the background gradient image.

Usage:
    raycore-render [options]

Options:
    --aspect-ratio RATIO  Ideal width / height ratio (default: 16/9)
    --width WIDTH         Image width in pixels (default: 400)
    --output OUTPUT       Output file path, .ppm or .png (default: image.ppm).
                          Use "-" to write the PPM stream to stdout.
    --quiet               Suppress progress output
    --show                Open a Matplotlib preview after rendering

Example:
    raycore-render --width 800 --output gradient.png
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path

from raycore.camera.camera import Camera
from raycore.core.progress import ConsoleProgress, NullProgress, ProgressSink
from raycore.core.renderer import render, render_to_array, write_ppm_from_array

DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_IMAGE_WIDTH = 400
DEFAULT_OUTPUT = "image.ppm"

# Output path meaning "write to stdout"
STDOUT_PATH = "-"


@dataclass
class RenderSettings:
    """Settings for one render run.

    Attributes:
        aspect_ratio: Ideal width / height ratio.
        image_width: Image width in pixels.
        output: Output path; the suffix selects PPM or PNG.
        quiet: Suppress progress and status output.
        show: Open a preview window after rendering.
    """

    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    image_width: int = DEFAULT_IMAGE_WIDTH
    output: str = DEFAULT_OUTPUT
    quiet: bool = False
    show: bool = False

    @property
    def writes_png(self) -> bool:
        return Path(self.output).suffix.lower() == ".png"


def positive_ratio(value: str) -> float:
    """Parse an aspect ratio given as a number or a fraction like ``16/9``."""
    try:
        ratio = float(Fraction(value))
    except (ValueError, ZeroDivisionError) as e:
        raise argparse.ArgumentTypeError(f"invalid aspect ratio: {value!r}") from e
    if ratio <= 0:
        raise argparse.ArgumentTypeError(f"aspect ratio must be > 0, got {value}")
    return ratio


def positive_int(value: str) -> int:
    """Parse an integer that must be at least 1."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> RenderSettings:
    """Parse command-line arguments into render settings."""
    parser = argparse.ArgumentParser(
        prog="raycore-render",
        description="Render the background gradient image.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--aspect-ratio",
        type=positive_ratio,
        default=DEFAULT_ASPECT_RATIO,
        help="Ideal width / height ratio, e.g. 1.5 or 16/9 (default: 16/9)",
    )
    parser.add_argument(
        "--width",
        type=positive_int,
        default=DEFAULT_IMAGE_WIDTH,
        help=f"Image width in pixels (default: {DEFAULT_IMAGE_WIDTH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Output file path, .ppm or .png, '-' for stdout (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview after rendering",
    )
    args = parser.parse_args(argv)
    return RenderSettings(
        aspect_ratio=args.aspect_ratio,
        image_width=args.width,
        output=args.output,
        quiet=args.quiet,
        show=args.show,
    )


def run(settings: RenderSettings) -> Path | None:
    """Render according to the settings.

    The image is rendered exactly once. With --show the render goes into
    an array that both the output file and the preview are built from.

    Args:
        settings: Parsed render settings.

    Returns:
        Path to the written file, or None when writing to stdout.
    """
    # Lazy imports keep Pillow and Matplotlib off the stdout rendering path
    from raycore.preview.export import save_png_from_array, save_ppm, save_ppm_from_array

    camera = Camera(aspect_ratio=settings.aspect_ratio, image_width=settings.image_width)
    progress: ProgressSink = NullProgress() if settings.quiet else ConsoleProgress()
    to_stdout = settings.output == STDOUT_PATH

    # Status goes to stderr when stdout carries image data
    status = sys.stderr if to_stdout else sys.stdout
    if not settings.quiet:
        print(
            f"Rendering {camera.image.width}x{camera.image.height} "
            f"({camera.image.pixel_count} pixels)...",
            file=status,
        )

    start_time = time.time()
    output_file: Path | None = None
    image = None

    if settings.show:
        # Render once into an array shared by the file output and the preview
        image = render_to_array(camera, progress=progress)

    if to_stdout:
        if image is None:
            render(camera, sys.stdout, progress=progress)
        else:
            write_ppm_from_array(image, sys.stdout)
        sys.stdout.flush()
    elif settings.writes_png:
        if image is None:
            image = render_to_array(camera, progress=progress)
        output_file = save_png_from_array(image, settings.output)
    elif image is not None:
        output_file = save_ppm_from_array(image, settings.output)
    else:
        output_file = save_ppm(camera, settings.output, progress=progress)

    total_time = time.time() - start_time
    if not settings.quiet:
        if output_file is not None:
            print(f"Saved to: {output_file.absolute()}", file=status)
        print(f"Total time: {total_time:.2f}s", file=status)

    if settings.show:
        from raycore.preview.display import show_preview

        show_preview(image)

    return output_file


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    settings = parse_args(argv)

    try:
        run(settings)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
