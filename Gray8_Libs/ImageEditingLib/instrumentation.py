"""
Operation counters for Gray8 image operations.

Images may carry a PixelCounters object. Every single pixel get/set adds one
to the ``pixmem`` counter and every bulk transfer (codec, array interop)
adds width*height. An image registers ``pixmem`` on its counters the first
time it counts, so a bare PixelCounters() works too. Images without counters
are not instrumented, and counting never changes the result of an operation.

Classes:
    PixelCounters: A set of named integer counters with a reset clock

Functions:
    create_default_counters: Build counters with the standard names registered
"""

import logging
import time
from typing import Dict, List, Optional

from Gray8_Libs.constants import COUNTER_DESCRIPTIONS, COUNTER_PIXMEM

logger = logging.getLogger(__name__)


class PixelCounters:
    """
    Named counters used to measure the work done by image operations.

    Example:
        >>> counters = create_default_counters()
        >>> img = GrayImage(4, 4, 255, counters=counters)
        >>> img.get_pixel(0, 0)
        0
        >>> counters.snapshot()
        {'pixmem': 1}
    """

    def __init__(self, names: Optional[List[str]] = None):
        self._counts: Dict[str, int] = {}
        for name in names or []:
            self.add_counter(name)
        self._started = time.perf_counter()

    def __contains__(self, name: str) -> bool:
        return name in self._counts

    def add_counter(self, name: str) -> None:
        """
        Register a counter, starting at zero.

        Raises:
            ValueError: If name is empty
        """
        name = str(name).strip()
        if not name:
            raise ValueError("counter name cannot be empty")
        self._counts.setdefault(name, 0)

    @property
    def names(self) -> List[str]:
        return list(self._counts)

    @property
    def counts(self) -> List[int]:
        return list(self._counts.values())

    def count(self, name: str, amount: int = 1) -> None:
        """
        Add amount to a registered counter.

        Raises:
            KeyError: If name was never registered
        """
        if name not in self._counts:
            raise KeyError(f"Unknown counter: {name}")
        self._counts[name] += amount

    def get(self, name: str) -> int:
        return self._counts[name]

    def reset(self) -> None:
        """Zero all counters and restart the clock."""
        for name in self._counts:
            self._counts[name] = 0
        self._started = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since construction or the last reset."""
        return time.perf_counter() - self._started

    def snapshot(self) -> Dict[str, int]:
        return dict(self._counts)

    def report(self) -> Dict[str, int]:
        """
        Log the current counter values and return them.

        Returns:
            Dictionary mapping counter name to its value
        """
        values = self.snapshot()
        parts = ", ".join(
            f"{name}={value} ({COUNTER_DESCRIPTIONS.get(name, name)})"
            for name, value in values.items()
        )
        logger.info(f"Counters after {self.elapsed():.6f}s: {parts}")
        return values


def create_default_counters() -> PixelCounters:
    """Create counters with the pixel memory access counter registered."""
    return PixelCounters([COUNTER_PIXMEM])
