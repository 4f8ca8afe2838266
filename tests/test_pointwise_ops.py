"""
Unit tests for pointwise_ops module.

Tests negative, threshold and brighten, including the fixed 255 white level
and the truncate-then-saturate rule of brighten.
"""

import math

import pytest

from Gray8_Libs.ImageEditingLib.image_errors import ContractViolation
from Gray8_Libs.ImageEditingLib.image_interop import from_array
from Gray8_Libs.ImageEditingLib.pointwise_ops import brighten, negative, threshold


class TestNegative:
    """Tests for negative function."""

    def test_inverts_levels(self, sample_image):
        """Should map each level s to 255 - s."""
        negative(sample_image)

        assert sample_image.tobytes() == bytes([245, 235, 225, 215])

    def test_is_self_inverse(self, sample_image):
        """Should restore the image when applied twice."""
        original = sample_image.copy()

        negative(sample_image)
        negative(sample_image)

        assert sample_image == original

    def test_ignores_maxval(self):
        """Should invert against 255 even when maxval is lower."""
        img = from_array([[40]], maxval=100)

        negative(img)

        assert img.get_pixel(0, 0) == 215

    def test_counts_one_read_and_one_write_per_pixel(self, sample_levels, counters):
        """Should access pixel memory twice per pixel."""
        img = from_array(sample_levels, counters=counters)
        counters.reset()

        negative(img)

        assert counters.get("pixmem") == 8


class TestThreshold:
    """Tests for threshold function."""

    def test_splits_at_threshold(self, sample_image):
        """Should send levels below thr to 0 and the rest to 255."""
        threshold(sample_image, 30)

        assert sample_image.tobytes() == bytes([0, 0, 255, 255])

    def test_zero_threshold_whitens_everything(self, sample_image):
        """Should turn every pixel white when thr is 0."""
        threshold(sample_image, 0)

        assert sample_image.stats() == (255, 255)

    def test_white_is_255_not_maxval(self):
        """Should use 255 as white regardless of maxval."""
        img = from_array([[5, 60]], maxval=60)

        threshold(img, 10)

        assert img.tobytes() == bytes([0, 255])


class TestBrighten:
    """Tests for brighten function."""

    def test_scales_and_saturates(self):
        """Should multiply levels and clamp at 255."""
        img = from_array([[10, 20], [30, 200]])

        brighten(img, 1.5)

        assert img.tobytes() == bytes([15, 30, 45, 255])

    def test_truncates_toward_zero(self):
        """Should truncate the product instead of rounding it."""
        img = from_array([[3, 5, 199]])

        brighten(img, 0.5)

        assert img.tobytes() == bytes([1, 2, 99])

    def test_zero_factor_blackens(self, sample_image):
        """Should produce a black image for factor 0."""
        brighten(sample_image, 0.0)

        assert sample_image.stats() == (0, 0)

    def test_may_exceed_maxval(self):
        """Should saturate at 255, not at maxval."""
        img = from_array([[50]], maxval=60)

        brighten(img, 2.0)

        assert img.get_pixel(0, 0) == 100

    def test_negative_factor_violates_contract(self, sample_image):
        """Should reject negative factors."""
        with pytest.raises(ContractViolation):
            brighten(sample_image, -0.1)

    def test_infinite_factor(self):
        """Should turn non-zero levels white and keep black pixels black."""
        img = from_array([[0, 10]])

        brighten(img, math.inf)

        assert img.tobytes() == bytes([0, 255])

    def test_nan_factor_violates_contract(self, sample_image):
        """Should reject a NaN factor."""
        with pytest.raises(ContractViolation):
            brighten(sample_image, math.nan)
