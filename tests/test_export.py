"""Tests for the preview module.

This module tests preview/export and preview/display:
- PPM file output and parsing
- 8-bit conversion
- PNG export
- Display preparation

Note: Tests avoid displaying actual windows by not calling show_preview.
"""

import numpy as np
import pytest
from PIL import Image as PILImage


class TestSavePpm:
    """Tests for save_ppm."""

    def test_writes_header_and_pixels(self, tmp_path, square_camera):
        """Test the file holds the header plus one line per pixel."""
        from raycore.preview.export import save_ppm

        output = save_ppm(square_camera, tmp_path / "image.ppm")
        lines = output.read_text(encoding="ascii").splitlines()

        assert output == tmp_path / "image.ppm"
        assert lines[:3] == ["P3", "2 2", "255"]
        assert len(lines) == 7

    def test_reports_progress(self, tmp_path, square_camera, recording_progress):
        """Test the progress sink is passed through to the render loop."""
        from raycore.preview.export import save_ppm

        save_ppm(square_camera, tmp_path / "image.ppm", progress=recording_progress)

        assert recording_progress.current == 4
        assert recording_progress.finish_calls == 1

    def test_missing_directory_raises(self, tmp_path, square_camera):
        """Test file creation errors propagate."""
        from raycore.preview.export import save_ppm

        with pytest.raises(OSError):
            save_ppm(square_camera, tmp_path / "missing" / "image.ppm")

    def test_round_trip_through_reader(self, tmp_path, widescreen_camera):
        """Test read_ppm parses what save_ppm wrote."""
        from raycore.preview.export import read_ppm, save_ppm

        image = read_ppm(save_ppm(widescreen_camera, tmp_path / "image.ppm"))

        assert image.shape == (22, 40, 3)
        assert image.dtype == np.uint8
        # Blue blends 1.0 with 1.0; rounding may land one step below 255
        assert np.all(image[:, :, 2] >= 254)

    def test_from_array_matches_direct_render(self, tmp_path, widescreen_camera):
        """Test saving a rendered array gives the same file as save_ppm."""
        from raycore.core.renderer import render_to_array
        from raycore.preview.export import save_ppm, save_ppm_from_array

        direct = save_ppm(widescreen_camera, tmp_path / "direct.ppm")
        from_array = save_ppm_from_array(render_to_array(widescreen_camera), tmp_path / "array.ppm")

        assert from_array == tmp_path / "array.ppm"
        assert from_array.read_text(encoding="ascii") == direct.read_text(encoding="ascii")


class TestParsePpm:
    """Tests for parse_ppm validation."""

    def test_parses_pixels_row_major(self):
        """Test pixel lines fill rows left to right, top to bottom."""
        from raycore.preview.export import parse_ppm

        image = parse_ppm("P3\n2 1\n255\n1 2 3\n4 5 6\n")

        np.testing.assert_array_equal(image, [[[1, 2, 3], [4, 5, 6]]])

    def test_ignores_comments(self):
        """Test '#' comments are skipped."""
        from raycore.preview.export import parse_ppm

        image = parse_ppm("P3\n# made by hand\n1 1 # size\n255\n7 8 9\n")

        np.testing.assert_array_equal(image, [[[7, 8, 9]]])

    @pytest.mark.parametrize(
        "text, message",
        [
            ("P6\n1 1\n255\n0 0 0\n", "Not a P3"),
            ("P3\n1 1\n", "Not a P3"),
            ("P3\n1 1\n255\n0 0\n", "Expected 3"),
            ("P3\n1 1\n255\n0 0 x\n", "Non-integer"),
            ("P3\n1 1\n65535\n0 0 0\n", "Unsupported maximum"),
            ("P3\n0 1\n255\n", "Invalid image size"),
            ("P3\n1 1\n255\n0 0 256\n", "outside"),
            ("P3\n1 1\n255\n0 -1 0\n", "outside"),
        ],
    )
    def test_rejects_malformed_content(self, text, message):
        """Test malformed content raises ValueError with a reason."""
        from raycore.preview.export import parse_ppm

        with pytest.raises(ValueError, match=message):
            parse_ppm(text)


class TestImageToUint8:
    """Tests for 8-bit conversion."""

    def test_truncates_like_ppm(self):
        """Test channels are truncated, matching the text encoding."""
        from raycore.preview.export import image_to_uint8

        image = np.array([[[0.5, 0.7, 1.0]]], dtype=np.float64)

        np.testing.assert_array_equal(image_to_uint8(image), [[[127, 178, 255]]])

    def test_clips_out_of_range(self):
        """Test values outside [0, 1] are clipped for uint8 storage."""
        from raycore.preview.export import image_to_uint8

        image = np.array([[[-0.5, 2.0, 0.0]]], dtype=np.float64)
        result = image_to_uint8(image)

        assert result.dtype == np.uint8
        np.testing.assert_array_equal(result, [[[0, 255, 0]]])

    def test_non_finite_values(self):
        """Test NaN becomes 0 and infinities clip to the 8-bit range."""
        from raycore.preview.export import image_to_uint8

        image = np.array([[[np.nan, np.inf, -np.inf]]], dtype=np.float64)
        result = image_to_uint8(image)

        np.testing.assert_array_equal(result, [[[0, 255, 0]]])


class TestSavePng:
    """Tests for PNG export."""

    def test_png_dimensions_and_mode(self, tmp_path, widescreen_camera):
        """Test the PNG has the render's size and RGB mode."""
        from raycore.core.renderer import render_to_array
        from raycore.preview.export import save_png_from_array

        output = save_png_from_array(render_to_array(widescreen_camera), tmp_path / "image.png")

        with PILImage.open(output) as png:
            assert png.size == (40, 22)
            assert png.mode == "RGB"

    def test_png_pixels_match_conversion(self, tmp_path):
        """Test stored pixels equal image_to_uint8 of the input."""
        from raycore.preview.export import image_to_uint8, save_png_from_array

        image = np.linspace(0.0, 1.0, 4 * 3 * 3).reshape(4, 3, 3)
        output = save_png_from_array(image, tmp_path / "ramp.png")

        with PILImage.open(output) as png:
            np.testing.assert_array_equal(np.asarray(png), image_to_uint8(image))


class TestDisplay:
    """Tests for display preparation."""

    def test_prepare_clamps_and_casts(self):
        """Test values are clamped to [0, 1] as float32."""
        from raycore.preview.display import prepare_for_display

        image = np.array([[[-1.0, 0.5, 3.0]]], dtype=np.float64)
        result = prepare_for_display(image)

        assert result.dtype == np.float32
        np.testing.assert_allclose(result, [[[0.0, 0.5, 1.0]]])

    def test_prepare_does_not_modify_input(self):
        """Test the input array is left untouched."""
        from raycore.preview.display import prepare_for_display

        image = np.full((2, 2, 3), 2.0)
        prepare_for_display(image)

        assert np.all(image == 2.0)
