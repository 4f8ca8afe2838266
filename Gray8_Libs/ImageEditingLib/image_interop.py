"""
Conversions between Gray8 images, numpy arrays and Pillow images.

Functions:
    to_array: Copy an image into a (height, width) uint8 array
    from_array: Build an image from a 2-D array of levels
    to_pil_image: Convert an image to a Pillow "L" image
    from_pil_image: Convert any Pillow image to a Gray8 image
"""

from typing import Any, Optional

import numpy as np
from PIL import Image

from Gray8_Libs.constants import PIL_GRAYSCALE_MODE, PIX_MAX, PIX_MIN
from Gray8_Libs.ImageEditingLib.image_models import GrayImage, create_image
from Gray8_Libs.ImageEditingLib.instrumentation import PixelCounters


def to_array(img: GrayImage) -> np.ndarray:
    """
    Copy the samples of an image into a new array.

    Returns:
        uint8 array of shape (height, width), indexed [y, x]
    """
    return np.frombuffer(img.tobytes(), dtype=np.uint8).reshape(img.height, img.width).copy()


def from_array(
    array: Any,
    maxval: int = PIX_MAX,
    counters: Optional[PixelCounters] = None,
) -> GrayImage:
    """
    Build an image from a 2-D array of gray levels.

    Args:
        array: Array-like of shape (height, width) with values in 0-255
        maxval: White level of the new image
        counters: Optional instrumentation counters for the new image

    Returns:
        A new GrayImage

    Raises:
        ValueError: If the array is not 2-D, is not of an integer dtype or
                    holds values outside 0-255
        AllocationError: If the image cannot be allocated
    """
    data = np.asarray(array)
    if data.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {data.shape}")
    # Floats would be truncated silently and NaN slips past the range check
    if data.size and not np.issubdtype(data.dtype, np.integer):
        raise ValueError(f"Expected an integer array, got dtype {data.dtype}")
    if data.size and (data.min() < PIX_MIN or data.max() > PIX_MAX):
        raise ValueError(f"Array values must be {PIX_MIN}-{PIX_MAX}")

    height, width = data.shape
    img = create_image(width, height, maxval, counters=counters)
    img.frombytes(np.ascontiguousarray(data, dtype=np.uint8).tobytes())
    return img


def to_pil_image(img: GrayImage) -> Any:
    """Convert an image to an 8-bit Pillow image (mode "L")."""
    return Image.frombytes(PIL_GRAYSCALE_MODE, img.size, img.tobytes())


def from_pil_image(
    pil_image: Any,
    maxval: int = PIX_MAX,
    counters: Optional[PixelCounters] = None,
) -> GrayImage:
    """
    Convert a Pillow image to a Gray8 image.

    Images in other modes are converted to "L" first.

    Raises:
        TypeError: If pil_image is not a Pillow image
    """
    if not hasattr(pil_image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(pil_image)}")

    if pil_image.mode != PIL_GRAYSCALE_MODE:
        pil_image = pil_image.convert(PIL_GRAYSCALE_MODE)

    width, height = pil_image.size
    img = create_image(width, height, maxval, counters=counters)
    img.frombytes(pil_image.tobytes())
    return img
