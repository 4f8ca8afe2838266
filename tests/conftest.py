"""
Pytest configuration and shared fixtures for Gray8 Imaging tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from Gray8_Libs.ImageEditingLib.image_interop import from_array
from Gray8_Libs.ImageEditingLib.instrumentation import create_default_counters


@pytest.fixture
def temp_image_dir(tmp_path):
    """
    Provide a temporary directory for PGM files.
    
    Args:
        tmp_path: Pytest's built-in temporary directory fixture
        
    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def sample_levels():
    """
    Provide the gray levels of a small 2x2 test image, one list per row.
    """
    return [
        [10, 20],
        [30, 40],
    ]


@pytest.fixture
def sample_image(sample_levels):
    """Provide a 2x2 image with levels [10, 20, 30, 40] in raster order."""
    return from_array(sample_levels)


@pytest.fixture
def counters():
    """Provide fresh instrumentation counters with pixmem registered."""
    return create_default_counters()
