"""
Geometric transformations for Gray8 images.

Each function returns a new image and leaves its input unchanged. The new
image shares the input's maxval and instrumentation counters. If the new
image cannot be allocated, AllocationError propagates and nothing is copied.

Functions:
    rotate_90_ccw: Rotate 90 degrees anti-clockwise
    mirror_horizontal: Flip left-right
    crop: Extract a rectangular sub-image
"""

from Gray8_Libs.ImageEditingLib.image_errors import ContractViolation
from Gray8_Libs.ImageEditingLib.image_models import GrayImage, create_image


def rotate_90_ccw(img: GrayImage) -> GrayImage:
    """
    Rotate an image 90 degrees anti-clockwise.

    Source pixel (x, y) lands on (y, width-1-x) of a height x width result.

    Args:
        img: Image to rotate

    Returns:
        The rotated image

    Raises:
        AllocationError: If the result cannot be allocated
    """
    rotated = create_image(img.height, img.width, img.maxval, counters=img.counters)

    for y in range(img.height):
        for x in range(img.width):
            rotated.set_pixel(y, img.width - 1 - x, img.get_pixel(x, y))

    return rotated


def mirror_horizontal(img: GrayImage) -> GrayImage:
    """
    Mirror an image left-right.

    Args:
        img: Image to mirror

    Returns:
        The mirrored image, same size as img

    Raises:
        AllocationError: If the result cannot be allocated
    """
    mirrored = create_image(img.width, img.height, img.maxval, counters=img.counters)

    for y in range(img.height):
        for x in range(img.width):
            mirrored.set_pixel(x, y, img.get_pixel(img.width - 1 - x, y))

    return mirrored


def crop(img: GrayImage, x: int, y: int, w: int, h: int) -> GrayImage:
    """
    Crop the rectangle with top-left corner (x, y) and size w x h.

    Args:
        img: Source image
        x, y: Top-left corner of the rectangle
        w, h: Rectangle size

    Returns:
        A new w x h image

    Raises:
        ContractViolation: If the rectangle is not inside img
        AllocationError: If the result cannot be allocated
    """
    if not img.valid_rect(x, y, w, h):
        raise ContractViolation(f"crop rectangle ({x}, {y}, {w}, {h}) outside {img!r}")

    cropped = create_image(w, h, img.maxval, counters=img.counters)

    for dy in range(h):
        for dx in range(w):
            cropped.set_pixel(dx, dy, img.get_pixel(x + dx, y + dy))

    return cropped
