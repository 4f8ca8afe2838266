"""
Pixel level transformations for Gray8 images.

These change gray levels in place without touching pixel positions. They
never allocate and never fail.

Note that negative and threshold use the fixed maximum sample value 255,
not the image's own maxval.
"""

import math

from Gray8_Libs.constants import PIX_MAX
from Gray8_Libs.ImageEditingLib.image_errors import require
from Gray8_Libs.ImageEditingLib.image_models import GrayImage


def negative(img: GrayImage) -> None:
    """Turn dark pixels light and vice versa (s -> 255 - s)."""
    for y in range(img.height):
        for x in range(img.width):
            img.set_pixel(x, y, PIX_MAX - img.get_pixel(x, y))


def threshold(img: GrayImage, thr: int) -> None:
    """
    Binarize an image.

    Pixels with level < thr become 0, all others become 255.
    """
    for y in range(img.height):
        for x in range(img.width):
            level = 0 if img.get_pixel(x, y) < thr else PIX_MAX
            img.set_pixel(x, y, level)


def brighten(img: GrayImage, factor: float) -> None:
    """
    Multiply every level by factor, saturating at 255.

    The product is truncated toward zero before saturation. factor > 1.0
    brightens, factor < 1.0 darkens. An infinite factor turns every non-zero
    level white; 0 * inf stays 0.

    Raises:
        ContractViolation: If factor is negative or NaN
    """
    require(factor >= 0.0, f"factor must be >= 0, got {factor}")

    for y in range(img.height):
        for x in range(img.width):
            product = img.get_pixel(x, y) * factor
            # 0 * inf is NaN
            level = 0 if math.isnan(product) else int(min(product, PIX_MAX))
            img.set_pixel(x, y, level)
