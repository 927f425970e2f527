"""
Unit tests for the PPM codec.
"""

import numpy as np
import pytest

from imaging import PPMFormatError, from_string_ppm, make_image, read_ppm, to_string_ppm, write_ppm


@pytest.fixture
def small_image():
    return make_image([
        [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
        [(1, 2, 3), (40, 50, 60), (255, 255, 255)]
    ])


SMALL_PPM = (
    "P3\n"
    "3 2\n"
    "255\n"
    "255 0 0\n"
    "0 255 0\n"
    "0 0 255\n"
    "1 2 3\n"
    "40 50 60\n"
    "255 255 255\n"
)


class TestEncode:
    """Test image to text."""

    def test_layout(self, small_image):
        assert to_string_ppm(small_image) == SMALL_PPM

    def test_empty_image(self):
        assert to_string_ppm(np.zeros((0, 0, 3), dtype=int)) == "P3\n0 0\n255\n"


class TestDecode:
    """Test text to image."""

    def test_decode(self, small_image):
        np.testing.assert_array_equal(from_string_ppm(SMALL_PPM), small_image)

    def test_flexible_whitespace_and_comments(self, small_image):
        text = "P3 # plain ppm\n3 2 255\n255 0 0 0 255 0 0 0 255\n1 2 3 40 50 60 255 255 255"
        np.testing.assert_array_equal(from_string_ppm(text), small_image)

    def test_out_of_range_kept(self):
        image = from_string_ppm("P3\n1 1\n255\n300 0 7\n")
        assert tuple(image[0, 0]) == (300, 0, 7)

    def test_bad_magic(self):
        with pytest.raises(PPMFormatError, match="magic"):
            from_string_ppm("P6\n1 1\n255\n0 0 0\n")

    def test_missing_samples(self):
        with pytest.raises(PPMFormatError, match="samples"):
            from_string_ppm("P3\n2 1\n255\n0 0 0\n")

    def test_extra_samples(self):
        with pytest.raises(PPMFormatError):
            from_string_ppm("P3\n1 1\n255\n0 0 0\n1 1 1\n")

    def test_non_integer_sample(self):
        with pytest.raises(PPMFormatError, match="sample"):
            from_string_ppm("P3\n1 1\n255\n0 x 0\n")

    def test_truncated_header(self):
        with pytest.raises(PPMFormatError):
            from_string_ppm("P3\n1 1\n")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            from_string_ppm("")


class TestFiles:
    """Test disk helpers."""

    def test_write_then_read(self, tmp_path, small_image):
        path = tmp_path / "small.ppm"
        write_ppm(path, small_image)
        assert path.read_text() == SMALL_PPM
        np.testing.assert_array_equal(read_ppm(path), small_image)
