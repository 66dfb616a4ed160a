from __future__ import annotations

from ..raster import MAX_SAMPLE, Raster
from .clamp import store_clamped_planes


def negate(raster: Raster) -> Raster:
    """Invert every color sample in place."""
    for plane in raster.color_planes:
        samples = plane.samples
        for index, value in enumerate(samples):
            samples[index] = MAX_SAMPLE - value
    return raster


def brighten(raster: Raster, amount: int) -> Raster:
    """Add a signed amount to every color sample in place, clamping to [0, 255]."""
    red, green, blue = raster.color_planes
    for row in range(raster.height):
        for col in range(raster.width):
            store_clamped_planes(
                red,
                green,
                blue,
                row,
                col,
                red.get(row, col) + amount,
                green.get(row, col) + amount,
                blue.get(row, col) + amount,
            )
    return raster
