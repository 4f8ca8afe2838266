"""
Error types for Gray8 image operations.

Fallible operations (allocation and file I/O) raise an ImageError subclass.
Each error carries the short failure cause and the OS error code that was
active when the failure happened, so callers can format a combined message.

Precondition failures are programming errors and raise ContractViolation.
They are not meant to be caught.

Classes:
    ImageError: Base class for recoverable image errors
    AllocationError: Pixel storage could not be obtained
    ImageIOError: Opening, reading or writing a byte stream failed
    FormatError: The PGM header is malformed
    TruncatedDataError: Fewer sample bytes than the header promises
    ContractViolation: A documented precondition was violated

Functions:
    require: Raise ContractViolation unless a condition holds
"""

import os
from typing import Optional


class ImageError(Exception):
    """
    Base class for recoverable image errors.

    Attributes:
        cause: Short description of the failed step (e.g. "Invalid width")
        errno: OS error code preserved from the underlying failure, or None
    """

    def __init__(self, cause: str, errno: Optional[int] = None):
        self.cause = cause
        self.errno = errno
        super().__init__(self._format())

    def _format(self) -> str:
        if self.errno:
            return f"{self.cause}: {os.strerror(self.errno)}"
        return self.cause


class AllocationError(ImageError):
    """Storage for an image or a working buffer could not be obtained."""


class ImageIOError(ImageError):
    """Opening, reading, or writing the underlying byte stream failed."""


class FormatError(ImageError):
    """The header does not conform to the raw PGM grammar."""


class TruncatedDataError(ImageError):
    """The header parsed but fewer than width*height samples followed."""


class ContractViolation(AssertionError):
    """A precondition of an image operation was violated."""


def require(condition: bool, message: str) -> None:
    """
    Check a precondition.

    Unlike the assert statement this check survives ``python -O``.

    Args:
        condition: The precondition that must hold
        message: Description of the violated precondition

    Raises:
        ContractViolation: If condition is false
    """
    if not condition:
        raise ContractViolation(message)
