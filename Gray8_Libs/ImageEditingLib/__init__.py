"""
ImageEditingLib - Core grayscale image functionality

This module provides the image model, the PGM codec and the pixel
transformation engines for the Gray8 Imaging project.
"""

from Gray8_Libs.ImageEditingLib.image_errors import (
    ImageError,
    AllocationError,
    ImageIOError,
    FormatError,
    TruncatedDataError,
    ContractViolation,
)
from Gray8_Libs.ImageEditingLib.instrumentation import PixelCounters, create_default_counters
from Gray8_Libs.ImageEditingLib.image_models import GrayImage, create_image, destroy_image
from Gray8_Libs.ImageEditingLib.pgm_codec import (
    load_image,
    save_image,
    decode_image,
    encode_image,
)
from Gray8_Libs.ImageEditingLib.geometry_ops import rotate_90_ccw, mirror_horizontal, crop
from Gray8_Libs.ImageEditingLib.pointwise_ops import negative, threshold, brighten
from Gray8_Libs.ImageEditingLib.compositing_ops import paste, blend, matches_at, locate
from Gray8_Libs.ImageEditingLib.blur_filter import blur
from Gray8_Libs.ImageEditingLib.image_interop import (
    to_array,
    from_array,
    to_pil_image,
    from_pil_image,
)

__all__ = [
    "ImageError",
    "AllocationError",
    "ImageIOError",
    "FormatError",
    "TruncatedDataError",
    "ContractViolation",
    "PixelCounters",
    "create_default_counters",
    "GrayImage",
    "create_image",
    "destroy_image",
    "load_image",
    "save_image",
    "decode_image",
    "encode_image",
    "rotate_90_ccw",
    "mirror_horizontal",
    "crop",
    "negative",
    "threshold",
    "brighten",
    "paste",
    "blend",
    "matches_at",
    "locate",
    "blur",
    "to_array",
    "from_array",
    "to_pil_image",
    "from_pil_image",
]
