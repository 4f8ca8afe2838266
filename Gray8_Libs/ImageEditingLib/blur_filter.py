"""
Box Blur Filter for Gray8 images.

Replaces each pixel by the mean of the (2dx+1) x (2dy+1) window centered on
it. Near the borders the window is clipped: neighbors outside the image are
left out of both the sum and the count.

Example:
    >>> from Gray8_Libs.ImageEditingLib.pgm_codec import load_image
    >>> img = load_image("photo.pgm")
    >>>
    >>> # 7x3 mean filter
    >>> blur(img, 3, 1)
"""

import logging

from Gray8_Libs.ImageEditingLib.image_errors import require
from Gray8_Libs.ImageEditingLib.image_models import GrayImage, create_image, destroy_image

logger = logging.getLogger(__name__)


# ============================================================================
# Window Mean
# ============================================================================

def _window_mean(img: GrayImage, x: int, y: int, dx: int, dy: int) -> int:
    """Truncating integer mean of the in-bounds part of the window."""
    total = 0
    count = 0

    for ny in range(max(y - dy, 0), min(y + dy, img.height - 1) + 1):
        for nx in range(max(x - dx, 0), min(x + dx, img.width - 1) + 1):
            total += img.get_pixel(nx, ny)
            count += 1

    return total // count


# ============================================================================
# Box Blur
# ============================================================================

def blur(img: GrayImage, dx: int, dy: int) -> None:
    """
    Blur an image in place with a (2dx+1) x (2dy+1) mean filter.

    Means are computed into a temporary image first, so every window reads
    original levels only. blur(img, 0, 0) leaves the image unchanged.

    Args:
        img: Image to blur
        dx: Horizontal half-width of the window (>= 0)
        dy: Vertical half-height of the window (>= 0)

    Raises:
        ContractViolation: If dx or dy is negative
        AllocationError: If the temporary image cannot be allocated
                         (img is left unchanged)
    """
    require(dx >= 0 and dy >= 0, f"dx and dy must be >= 0, got dx={dx}, dy={dy}")

    temp = create_image(img.width, img.height, img.maxval, counters=img.counters)

    for y in range(img.height):
        for x in range(img.width):
            temp.set_pixel(x, y, _window_mean(img, x, y, dx, dy))

    for y in range(img.height):
        for x in range(img.width):
            img.set_pixel(x, y, temp.get_pixel(x, y))

    temp = destroy_image(temp)
    logger.debug(f"Blurred {img!r} with dx={dx}, dy={dy}")
