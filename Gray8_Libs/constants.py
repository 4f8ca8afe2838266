"""
Constants and configuration values for Gray8 Imaging.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Sample range
PIX_MIN = 0
PIX_MAX = 255

# PGM file constants
PGM_MAGIC = b"P5"
PGM_COMMENT_CHAR = b"#"

# Instrumentation counters
COUNTER_PIXMEM = "pixmem"
COUNTER_DESCRIPTIONS = {
    COUNTER_PIXMEM: "pixel memory accesses",
}

# Error causes
CAUSE_ALLOCATION = "Memory allocation failed"
CAUSE_OPEN = "Open failed"
CAUSE_READ = "Read failed"
CAUSE_MAGIC = "Invalid file format"
CAUSE_WIDTH = "Invalid width"
CAUSE_HEIGHT = "Invalid height"
CAUSE_MAXVAL = "Invalid maxval"
CAUSE_WHITESPACE = "Whitespace expected"
CAUSE_PIXELS = "Reading pixels"
CAUSE_WRITE_HEADER = "Writing header failed"
CAUSE_WRITE_PIXELS = "Writing pixels failed"

# Pillow interop
PIL_GRAYSCALE_MODE = "L"
