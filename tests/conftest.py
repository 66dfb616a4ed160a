"""
Shared fixtures for pnmtool tests.
"""
import pytest

from helpers import p3_bytes, p6_bytes
from pnmtool import Encoding, Raster


@pytest.fixture
def blue_grey_p6():
    """3x3 binary color image, every pixel (100, 150, 200)."""
    return p6_bytes(3, 3, [(100, 150, 200)] * 9)


@pytest.fixture
def mixed_pixels():
    return [
        (10, 20, 30), (200, 100, 50), (0, 255, 0),
        (255, 255, 255), (0, 0, 0), (50, 50, 50),
        (1, 2, 3), (90, 60, 30), (40, 80, 120),
    ]


@pytest.fixture
def mixed_grays():
    """Expected 0.3/0.6/0.1 gray values for mixed_pixels."""
    return [18, 125, 153, 255, 0, 50, 2, 66, 72]


@pytest.fixture
def mixed_p3(mixed_pixels):
    """3x3 ASCII color image with assorted pixels."""
    return p3_bytes(3, 3, mixed_pixels)


@pytest.fixture
def mixed_raster(mixed_pixels):
    rows = [mixed_pixels[i : i + 3] for i in range(0, 9, 3)]
    return Raster.from_pixels(rows, encoding=Encoding.ASCII_COLOR)
