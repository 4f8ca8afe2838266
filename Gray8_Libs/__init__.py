"""
Gray8_Libs - Gray8 Imaging Library Modules

This package contains the core functionality for working with 8-bit
grayscale raster images:

- ImageEditingLib: Image model, PGM codec and pixel transformation engines
"""

__version__ = "0.1.0"
