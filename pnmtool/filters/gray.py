from __future__ import annotations

import logging
from typing import Tuple

from ..raster import MAX_SAMPLE, Plane, Raster

logger = logging.getLogger(__name__)

RED_WEIGHT = 0.3
GREEN_WEIGHT = 0.6
BLUE_WEIGHT = 0.1


def luminance(red: int, green: int, blue: int) -> int:
    """Weighted gray value, rounded half up and capped at 255."""
    value = red * RED_WEIGHT + green * GREEN_WEIGHT + blue * BLUE_WEIGHT
    if value > MAX_SAMPLE:
        return MAX_SAMPLE
    return int(value + 0.5)


def gray_plane(raster: Raster) -> Tuple[Plane, int, int]:
    """Derive a gray plane from the color planes, returning it with its min and max."""
    red, green, blue = raster.color_planes
    samples = bytearray(raster.width * raster.height)
    highest = -1
    lowest = MAX_SAMPLE + 1
    for index, (r, g, b) in enumerate(zip(red.samples, green.samples, blue.samples)):
        value = luminance(r, g, b)
        samples[index] = value
        if value > highest:
            highest = value
        if value < lowest:
            lowest = value
    return Plane(raster.width, raster.height, samples), lowest, highest


def grayscale(raster: Raster) -> Raster:
    """Replace the color planes with a single weighted-luminance gray plane."""
    plane, _, _ = gray_plane(raster)
    raster.set_gray(plane)
    return raster


def contrast(raster: Raster) -> Raster:
    """Grayscale, then stretch the gray range linearly onto [0, 255].

    An image whose gray values are all equal has no range to stretch; every
    sample then maps to 0.
    """
    plane, lowest, highest = gray_plane(raster)
    samples = plane.samples
    if highest == lowest:
        logger.debug("Contrast on uniform gray %d, output is all zero", lowest)
        samples[:] = bytes(len(samples))
    else:
        scale = 255.0 / (highest - lowest)
        logger.debug("Contrast stretch %d..%d, scale %.4f", lowest, highest, scale)
        for index, value in enumerate(samples):
            stretched = scale * (value - lowest)
            samples[index] = MAX_SAMPLE if stretched > 255.0 else int(stretched)
    raster.set_gray(plane)
    return raster
