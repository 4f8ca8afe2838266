"""
Tests for numpy and Pillow conversions.

Tests cover:
- Array export/import and validation
- Pillow export/import, including mode conversion
"""

import unittest

import numpy as np
from PIL import Image

from Gray8_Libs.ImageEditingLib.image_interop import (
    from_array,
    from_pil_image,
    to_array,
    to_pil_image,
)


class TestArrayInterop(unittest.TestCase):
    """Test numpy conversions."""

    def test_to_array_shape_and_order(self):
        """Test arrays are indexed [y, x]."""
        img = from_array([[1, 2, 3], [4, 5, 6]])
        array = to_array(img)

        self.assertEqual(array.shape, (2, 3))
        self.assertEqual(array.dtype, np.uint8)
        self.assertEqual(array[1, 0], img.get_pixel(0, 1))

    def test_to_array_is_a_copy(self):
        """Test writing to the array leaves the image alone."""
        img = from_array([[1, 2]])
        array = to_array(img)
        array[0, 0] = 99

        self.assertEqual(img.get_pixel(0, 0), 1)

    def test_from_array_keeps_maxval(self):
        """Test the maxval argument."""
        self.assertEqual(from_array([[1]], maxval=7).maxval, 7)

    def test_from_array_accepts_wider_dtypes(self):
        """Test int64 arrays within range are accepted."""
        img = from_array(np.array([[0, 255]], dtype=np.int64))

        self.assertEqual(img.tobytes(), bytes([0, 255]))

    def test_from_array_rejects_wrong_rank(self):
        """Test that 1-D and 3-D arrays raise ValueError."""
        with self.assertRaises(ValueError):
            from_array([1, 2, 3])
        with self.assertRaises(ValueError):
            from_array(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_from_array_rejects_out_of_range(self):
        """Test values outside 0-255 raise ValueError."""
        with self.assertRaises(ValueError):
            from_array([[0, 256]])
        with self.assertRaises(ValueError):
            from_array([[-1, 0]])

    def test_from_array_rejects_non_integer(self):
        """Test float arrays, including NaN, raise ValueError."""
        with self.assertRaises(ValueError):
            from_array([[1.7]])
        with self.assertRaises(ValueError):
            from_array(np.array([[np.nan]]))
        with self.assertRaises(ValueError):
            from_array(np.array([[True]]))


class TestPillowInterop(unittest.TestCase):
    """Test Pillow conversions."""

    def test_to_pil_image(self):
        """Test export to an "L" image."""
        pil_image = to_pil_image(from_array([[10, 20], [30, 40]]))

        self.assertEqual(pil_image.mode, "L")
        self.assertEqual(pil_image.size, (2, 2))
        self.assertEqual(pil_image.getpixel((1, 0)), 20)
        self.assertEqual(pil_image.getpixel((0, 1)), 30)

    def test_from_pil_grayscale(self):
        """Test import of an "L" image."""
        pil_image = Image.new("L", (3, 1))
        pil_image.putdata([5, 6, 7])

        img = from_pil_image(pil_image)

        self.assertEqual(img.size, (3, 1))
        self.assertEqual(img.tobytes(), bytes([5, 6, 7]))

    def test_from_pil_converts_color(self):
        """Test RGB images are converted to grayscale."""
        img = from_pil_image(Image.new("RGB", (4, 2), (255, 255, 255)))

        self.assertEqual(img.stats(), (255, 255))

    def test_round_trip(self):
        """Test Gray8 -> Pillow -> Gray8."""
        img = from_array(np.arange(0, 240, 20, dtype=np.uint8).reshape(3, 4))

        self.assertEqual(from_pil_image(to_pil_image(img)), img)

    def test_from_pil_rejects_other_types(self):
        """Test that non-images raise TypeError."""
        with self.assertRaises(TypeError):
            from_pil_image("not_an_image")


if __name__ == "__main__":
    unittest.main()
