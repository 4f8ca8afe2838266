"""
Instrumentation demonstration for sub-image search and box blur.

Counts pixel memory accesses (pixmem) made by locate() and blur() on
images of increasing size, showing how the brute-force search and the
mean filter scale.

Run from the repository root:
    python examples/locate_instrumentation_demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging

import numpy as np

from Gray8_Libs.constants import COUNTER_PIXMEM
from Gray8_Libs.ImageEditingLib import (
    blur,
    create_default_counters,
    crop,
    from_array,
    locate,
)


def benchmark_locate(size, pattern_size, counters):
    """Search for the bottom-right corner block of a random image."""
    print(f"\nLocating {pattern_size}x{pattern_size} pattern in {size}x{size} image")
    print("-" * 60)

    rng = np.random.default_rng(seed=size)
    img = from_array(rng.integers(0, 256, size=(size, size), dtype=np.uint8), counters=counters)
    corner = size - pattern_size
    pattern = crop(img, corner, corner, pattern_size, pattern_size)

    counters.reset()
    found = locate(img, pattern)
    accesses = counters.get(COUNTER_PIXMEM)
    elapsed = counters.elapsed()

    print(f"  Found at: {found}")
    print(f"  pixmem:   {accesses}")
    print(f"  time:     {elapsed:.3f}s")
    return accesses, elapsed


def benchmark_blur(size, radius, counters):
    """Blur a gradient image with a square window."""
    print(f"\nBlurring {size}x{size} image with dx=dy={radius}")
    print("-" * 60)

    ramp = np.tile(np.arange(size, dtype=np.uint8), (size, 1))
    img = from_array(ramp, counters=counters)

    counters.reset()
    blur(img, radius, radius)
    accesses = counters.get(COUNTER_PIXMEM)
    elapsed = counters.elapsed()

    print(f"  pixmem:   {accesses}")
    print(f"  time:     {elapsed:.3f}s")
    return accesses, elapsed


def main():
    """Run instrumentation benchmarks."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    counters = create_default_counters()

    print("=" * 60)
    print("Gray8 Instrumentation Demonstration")
    print("=" * 60)

    results = []
    for size, pattern_size in [(16, 4), (32, 4), (32, 8), (64, 8)]:
        accesses, elapsed = benchmark_locate(size, pattern_size, counters)
        results.append(("locate", size, pattern_size, accesses, elapsed))

    for size, radius in [(32, 1), (32, 3), (64, 3)]:
        accesses, elapsed = benchmark_blur(size, radius, counters)
        results.append(("blur", size, radius, accesses, elapsed))

    counters.report()

    # Summary
    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print("Op      Size      Param   pixmem        Time")
    print("-" * 60)
    for op, size, param, accesses, elapsed in results:
        print(f"{op:7s} {size:4d}x{size:<4d} {param:3d}     {accesses:10d}  {elapsed:7.3f}s")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
