"""
Image data model for Gray8 Imaging.

This module defines the grayscale image used by every other module.

An image stores width*height 8-bit samples in a flat numpy array, in raster
order (left to right, top to bottom). Pixel (x, y) of a 100-pixel wide image
lives at index y*100 + x. Clients access samples only through get_pixel and
set_pixel, or through the bulk tobytes/frombytes transfers.

Classes:
    GrayImage: Owned, mutable 8-bit grayscale raster

Functions:
    create_image: Create a new black image
    destroy_image: Release an image's storage (None-safe)
"""

import errno
import logging
from typing import Optional, Tuple

import numpy as np

from Gray8_Libs.constants import CAUSE_ALLOCATION, COUNTER_PIXMEM, PIX_MAX, PIX_MIN
from Gray8_Libs.ImageEditingLib.image_errors import AllocationError, ContractViolation, require
from Gray8_Libs.ImageEditingLib.instrumentation import PixelCounters

logger = logging.getLogger(__name__)


class GrayImage:
    """
    An 8-bit grayscale raster with a declared white level.

    Attributes:
        counters: Optional PixelCounters notified of pixel memory accesses.
                  Images derived from this one share the same counters.

    Example:
        >>> img = GrayImage(2, 2, 255)
        >>> img.set_pixel(1, 0, 20)
        >>> img.get_pixel(1, 0)
        20
        >>> img.stats()
        (0, 20)
    """

    def __init__(
        self,
        width: int,
        height: int,
        maxval: int = PIX_MAX,
        counters: Optional[PixelCounters] = None,
    ):
        """
        Create a new black image.

        Args:
            width: Number of columns (>= 0)
            height: Number of rows (>= 0)
            maxval: Gray level that is pure white (1-255)
            counters: Optional instrumentation counters

        Raises:
            ContractViolation: If a dimension is negative or maxval out of range
            AllocationError: If the sample array cannot be allocated
        """
        require(width >= 0, f"width must be >= 0, got {width}")
        require(height >= 0, f"height must be >= 0, got {height}")
        require(0 < maxval <= PIX_MAX, f"maxval must be 0 < maxval <= {PIX_MAX}, got {maxval}")

        try:
            pixels = np.zeros(width * height, dtype=np.uint8)
        except (MemoryError, ValueError) as e:
            raise AllocationError(CAUSE_ALLOCATION, errno.ENOMEM) from e

        self._width = int(width)
        self._height = int(height)
        self._maxval = int(maxval)
        self._pixels: Optional[np.ndarray] = pixels
        self.counters = counters

    def __repr__(self) -> str:
        state = "released" if self.released else f"maxval={self._maxval}"
        return f"GrayImage({self._width}x{self._height}, {state})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrayImage):
            return NotImplemented
        if self.released or other.released:
            return self is other
        return (
            self.size == other.size
            and self._maxval == other._maxval
            and bool(np.array_equal(self._pixels, other._pixels))
        )

    __hash__ = None

    # ------------------------------------------------------------------
    # Information queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def maxval(self) -> int:
        return self._maxval

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), as in Pillow."""
        return (self._width, self._height)

    @property
    def released(self) -> bool:
        return self._pixels is None

    def valid_position(self, x: int, y: int) -> bool:
        """Check if pixel position (x, y) is inside the image."""
        return 0 <= x < self._width and 0 <= y < self._height

    def valid_rect(self, x: int, y: int, w: int, h: int) -> bool:
        """
        Check if the rectangle (x, y, w, h) lies completely inside the image.

        Both the top-left and the bottom-right corner must be valid
        positions. Empty rectangles (w <= 0 or h <= 0) are never valid.
        """
        return w > 0 and h > 0 and self.valid_position(x, y) and self.valid_position(x + w - 1, y + h - 1)

    def stats(self) -> Tuple[int, int]:
        """
        Find the minimum and maximum gray levels in the image.

        Returns:
            (min, max). An empty image yields (255, 0).
        """
        pixels = self._live_pixels()
        if pixels.size == 0:
            return (PIX_MAX, 0)
        return (int(pixels.min()), int(pixels.max()))

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------

    def _live_pixels(self) -> np.ndarray:
        require(self._pixels is not None, "image has been released")
        return self._pixels

    def _index(self, x: int, y: int) -> int:
        # Sole place where (x, y) becomes a linear offset.
        if not self.valid_position(x, y):
            raise ContractViolation(f"invalid position ({x}, {y}) in {self._width}x{self._height} image")
        index = y * self._width + x
        return index

    def _count(self, amount: int) -> None:
        if self.counters is not None:
            if COUNTER_PIXMEM not in self.counters:
                self.counters.add_counter(COUNTER_PIXMEM)
            self.counters.count(COUNTER_PIXMEM, amount)

    def get_pixel(self, x: int, y: int) -> int:
        """Get the gray level at (x, y)."""
        pixels = self._live_pixels()
        index = self._index(x, y)
        self._count(1)
        return int(pixels[index])

    def set_pixel(self, x: int, y: int, level: int) -> None:
        """Set the gray level at (x, y). level must be within 0-255."""
        pixels = self._live_pixels()
        index = self._index(x, y)
        if not PIX_MIN <= level <= PIX_MAX:
            raise ContractViolation(f"level must be {PIX_MIN}-{PIX_MAX}, got {level}")
        self._count(1)
        pixels[index] = int(level)

    # ------------------------------------------------------------------
    # Bulk transfers
    # ------------------------------------------------------------------

    def tobytes(self) -> bytes:
        """Return all samples in raster order."""
        data = self._live_pixels().tobytes()
        self._count(len(data))
        return data

    def frombytes(self, data: bytes) -> None:
        """
        Overwrite all samples from raster-order bytes.

        Raises:
            ContractViolation: If len(data) != width*height
        """
        pixels = self._live_pixels()
        require(
            len(data) == pixels.size,
            f"expected {pixels.size} samples, got {len(data)}",
        )
        pixels[:] = np.frombuffer(data, dtype=np.uint8)
        self._count(pixels.size)

    def copy(self) -> "GrayImage":
        """Return an independent image with the same samples."""
        duplicate = GrayImage(self._width, self._height, self._maxval, counters=self.counters)
        duplicate.frombytes(self.tobytes())
        return duplicate

    def release(self) -> None:
        """Drop the sample array. Releasing twice is harmless."""
        if self._pixels is not None:
            self._pixels = None
            logger.debug(f"Released {self._width}x{self._height} image")


def create_image(
    width: int,
    height: int,
    maxval: int = PIX_MAX,
    counters: Optional[PixelCounters] = None,
) -> GrayImage:
    """
    Create a new black image.

    On failure no image is returned and AllocationError is raised.
    """
    img = GrayImage(width, height, maxval, counters=counters)
    logger.debug(f"Created {img!r}")
    return img


def destroy_image(image: Optional[GrayImage]) -> None:
    """
    Release the storage of an image.

    Accepts None and already released images. Always returns None, so the
    caller can drop its handle in one step::

        img = destroy_image(img)
    """
    if image is not None:
        image.release()
    return None
