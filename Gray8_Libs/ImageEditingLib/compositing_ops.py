"""
Operations on two Gray8 images.

paste and blend write a smaller image into a larger one in place.
matches_at and locate compare a pattern image against windows of a larger
image.

Functions:
    paste: Copy src into dst at (x, y)
    blend: Alpha-blend src into dst at (x, y)
    matches_at: Compare src against the window of dst at (x, y)
    locate: Find the first window of dst equal to src
"""

import math
from typing import Optional, Tuple

from Gray8_Libs.constants import PIX_MAX, PIX_MIN
from Gray8_Libs.ImageEditingLib.image_errors import ContractViolation
from Gray8_Libs.ImageEditingLib.image_models import GrayImage


def _require_fits(dst: GrayImage, x: int, y: int, src: GrayImage) -> None:
    if not dst.valid_rect(x, y, src.width, src.height):
        raise ContractViolation(f"{src!r} does not fit inside {dst!r} at ({x}, {y})")


def paste(dst: GrayImage, x: int, y: int, src: GrayImage) -> None:
    """
    Paste src into position (x, y) of dst.

    Modifies dst in place.

    Raises:
        ContractViolation: If src does not fit inside dst at (x, y)
    """
    _require_fits(dst, x, y, src)

    for dy in range(src.height):
        for dx in range(src.width):
            dst.set_pixel(x + dx, y + dy, src.get_pixel(dx, dy))


def blend(dst: GrayImage, x: int, y: int, src: GrayImage, alpha: float) -> None:
    """
    Blend src into position (x, y) of dst.

    Each covered level becomes alpha*src + (1-alpha)*dst, saturated to
    0-255 and truncated. alpha is usually within [0.0, 1.0]; values outside
    that interval extrapolate. A NaN result (from an infinite alpha) becomes 0.

    Args:
        dst: Image modified in place
        x, y: Position of src's top-left corner inside dst
        src: Image blended in
        alpha: Weight of src

    Raises:
        ContractViolation: If src does not fit inside dst at (x, y)
    """
    _require_fits(dst, x, y, src)

    for dy in range(src.height):
        for dx in range(src.width):
            over = src.get_pixel(dx, dy)
            under = dst.get_pixel(x + dx, y + dy)
            level = alpha * over + (1.0 - alpha) * under
            if math.isnan(level):
                level = PIX_MIN
            level = min(max(level, PIX_MIN), PIX_MAX)
            dst.set_pixel(x + dx, y + dy, int(level))


def matches_at(dst: GrayImage, x: int, y: int, src: GrayImage) -> bool:
    """
    Check whether src equals the window of dst whose top-left is (x, y).

    The whole window must lie inside dst, not only its corner.

    Returns:
        True if every pair of corresponding levels is equal

    Raises:
        ContractViolation: If (x, y) is not a position of dst, or src does
                           not fit inside dst at (x, y)
    """
    if not dst.valid_position(x, y):
        raise ContractViolation(f"invalid position ({x}, {y}) in {dst!r}")
    if src.width > 0 and src.height > 0:
        _require_fits(dst, x, y, src)

    for dy in range(src.height):
        for dx in range(src.width):
            if src.get_pixel(dx, dy) != dst.get_pixel(x + dx, y + dy):
                return False

    return True


def locate(dst: GrayImage, src: GrayImage) -> Optional[Tuple[int, int]]:
    """
    Search for src inside dst.

    Candidate positions are scanned in raster order (smallest y, then
    smallest x) by brute force.

    Returns:
        (x, y) of the first match, or None if src is larger than dst or
        appears nowhere
    """
    if dst.width == 0 or dst.height == 0:
        return None

    for y in range(dst.height - src.height + 1):
        for x in range(dst.width - src.width + 1):
            if matches_at(dst, x, y, src):
                return (x, y)

    return None
