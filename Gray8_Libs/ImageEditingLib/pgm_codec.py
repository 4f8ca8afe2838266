"""
Raw PGM (P5) codec for Gray8 images.

File layout:

    P5                      magic number
    # optional comments     before width, height and maxval
    <width> <height>        decimal, whitespace separated
    <maxval>                decimal, 1-255
    <one whitespace byte>
    <width*height bytes>    samples in raster order

See http://netpbm.sourceforge.net/doc/pgm.html

Functions:
    load_image: Read a PGM file (path or binary stream) into a new image
    save_image: Write an image as PGM to a path or binary stream
    decode_image: Parse PGM bytes already held in memory
    encode_image: Serialize an image to PGM bytes
"""

import logging
import os
import re
from typing import Any, BinaryIO, Optional, Union

from Gray8_Libs.constants import (
    CAUSE_HEIGHT,
    CAUSE_MAGIC,
    CAUSE_MAXVAL,
    CAUSE_OPEN,
    CAUSE_PIXELS,
    CAUSE_READ,
    CAUSE_WHITESPACE,
    CAUSE_WIDTH,
    CAUSE_WRITE_HEADER,
    CAUSE_WRITE_PIXELS,
    PGM_COMMENT_CHAR,
    PGM_MAGIC,
    PIX_MAX,
)
from Gray8_Libs.ImageEditingLib.image_errors import (
    FormatError,
    ImageError,
    ImageIOError,
    TruncatedDataError,
)
from Gray8_Libs.ImageEditingLib.image_models import GrayImage, create_image, destroy_image
from Gray8_Libs.ImageEditingLib.instrumentation import PixelCounters

logger = logging.getLogger(__name__)

PathOrStream = Union[str, "os.PathLike[str]", BinaryIO]

_INTEGER = re.compile(rb"[+-]?\d+")


class _HeaderParser:
    """Cursor over PGM bytes, following the rules of C's fscanf."""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def skip_whitespace(self) -> None:
        while self._pos < len(self._data) and self._data[self._pos:self._pos + 1].isspace():
            self._pos += 1

    def skip_comments(self) -> int:
        """Skip whole comment lines, newline included. Returns how many."""
        skipped = 0
        while self._data.startswith(PGM_COMMENT_CHAR, self._pos):
            end = self._data.find(b"\n", self._pos)
            if end < 0:
                break
            self._pos = end + 1
            skipped += 1
        return skipped

    def read_magic(self) -> bool:
        if not self._data.startswith(PGM_MAGIC, self._pos):
            return False
        self._pos += len(PGM_MAGIC)
        self.skip_whitespace()
        return True

    def read_int(self) -> Optional[int]:
        self.skip_whitespace()
        match = _INTEGER.match(self._data, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())

    def read_separator(self) -> bool:
        """Consume exactly one whitespace byte."""
        if self._data[self._pos:self._pos + 1].isspace():
            self._pos += 1
            return True
        return False

    def read_samples(self, count: int) -> bytes:
        samples = self._data[self._pos:self._pos + count]
        if len(samples) != count:
            raise TruncatedDataError(CAUSE_PIXELS)
        self._pos += count
        return samples


def _is_path(target: Any) -> bool:
    return isinstance(target, (str, os.PathLike))


def _read_source(source: PathOrStream) -> bytes:
    if _is_path(source):
        try:
            stream = open(source, "rb")
        except OSError as e:
            raise ImageIOError(CAUSE_OPEN, e.errno) from e
        with stream:
            return _read_stream(stream)
    return _read_stream(source)


def _read_stream(stream: BinaryIO) -> bytes:
    try:
        return stream.read()
    except OSError as e:
        raise ImageIOError(CAUSE_READ, e.errno) from e


def decode_image(data: bytes, counters: Optional[PixelCounters] = None) -> GrayImage:
    """
    Parse a raw PGM image held in memory.

    Args:
        data: Complete PGM file contents
        counters: Optional instrumentation counters for the new image

    Returns:
        A new GrayImage

    Raises:
        FormatError: If the header is malformed
        TruncatedDataError: If fewer than width*height samples follow
        AllocationError: If the image cannot be allocated
    """
    parser = _HeaderParser(bytes(data))

    if not parser.read_magic():
        raise FormatError(CAUSE_MAGIC)

    parser.skip_comments()
    width = parser.read_int()
    if width is None or width < 0:
        raise FormatError(CAUSE_WIDTH)

    parser.skip_whitespace()
    parser.skip_comments()
    height = parser.read_int()
    if height is None or height < 0:
        raise FormatError(CAUSE_HEIGHT)

    parser.skip_whitespace()
    parser.skip_comments()
    maxval = parser.read_int()
    if maxval is None or not (0 < maxval <= PIX_MAX):
        raise FormatError(CAUSE_MAXVAL)

    if not parser.read_separator():
        raise FormatError(CAUSE_WHITESPACE)

    img = create_image(width, height, maxval, counters=counters)
    try:
        img.frombytes(parser.read_samples(width * height))
    except ImageError:
        destroy_image(img)
        raise
    return img


def load_image(source: PathOrStream, counters: Optional[PixelCounters] = None) -> GrayImage:
    """
    Load a raw PGM file. Only 8-bit (maxval <= 255) files are accepted.

    Args:
        source: File path or readable binary stream
        counters: Optional instrumentation counters for the new image

    Returns:
        A new GrayImage

    Raises:
        ImageIOError: If the source cannot be opened or read
        FormatError: If the header is malformed
        TruncatedDataError: If fewer than width*height samples follow
        AllocationError: If the image cannot be allocated
    """
    img = decode_image(_read_source(source), counters=counters)
    logger.debug(f"Loaded {img!r} from {source}")
    return img


def _encode_header(image: GrayImage) -> bytes:
    return f"P5\n{image.width} {image.height}\n{image.maxval}\n".encode("ascii")


def encode_image(image: GrayImage) -> bytes:
    """Serialize an image to raw PGM bytes."""
    return _encode_header(image) + image.tobytes()


def _write_stream(image: GrayImage, stream: BinaryIO) -> None:
    try:
        stream.write(_encode_header(image))
    except OSError as e:
        raise ImageIOError(CAUSE_WRITE_HEADER, e.errno) from e
    try:
        stream.write(image.tobytes())
    except OSError as e:
        raise ImageIOError(CAUSE_WRITE_PIXELS, e.errno) from e


def save_image(image: GrayImage, sink: PathOrStream) -> None:
    """
    Save an image as a raw PGM file.

    A failed save may leave a partial, invalid file behind.

    Args:
        image: The image to save
        sink: File path or writable binary stream

    Raises:
        ImageIOError: If the file cannot be opened or written
    """
    if _is_path(sink):
        try:
            stream = open(sink, "wb")
        except OSError as e:
            raise ImageIOError(CAUSE_OPEN, e.errno) from e
        try:
            with stream:
                _write_stream(image, stream)
        except OSError as e:
            # Buffered data can still fail to flush on close.
            raise ImageIOError(CAUSE_WRITE_PIXELS, e.errno) from e
    else:
        _write_stream(image, sink)
    logger.debug(f"Saved {image!r} to {sink}")
