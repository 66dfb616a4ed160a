from __future__ import annotations

from typing import Callable

from ..raster import Plane, Raster
from .clamp import store_clamped_planes

# Computes one channel's new value at (row, col) from the source plane.
Kernel = Callable[[Plane, int, int], int]


def sharpen_at(plane: Plane, row: int, col: int) -> int:
    return (
        5 * plane.get(row, col)
        - plane.get(row - 1, col)
        - plane.get(row + 1, col)
        - plane.get(row, col - 1)
        - plane.get(row, col + 1)
    )


def smooth_at(plane: Plane, row: int, col: int) -> int:
    total = 0
    for r in range(row - 1, row + 2):
        for c in range(col - 1, col + 2):
            total += plane.get(r, c)
    return total // 9


def apply_kernel(raster: Raster, kernel: Kernel) -> Raster:
    """Run a 3x3 neighbourhood kernel over the interior of the color planes.

    New values are computed from the untouched source planes into fresh
    replacement planes, which are then swapped in. Border pixels (first and
    last row and column) are left at zero in all channels.
    """
    red, green, blue = raster.color_planes
    width, height = raster.width, raster.height
    new_red = Plane.blank(width, height)
    new_green = Plane.blank(width, height)
    new_blue = Plane.blank(width, height)
    for row in range(1, height - 1):
        for col in range(1, width - 1):
            store_clamped_planes(
                new_red,
                new_green,
                new_blue,
                row,
                col,
                kernel(red, row, col),
                kernel(green, row, col),
                kernel(blue, row, col),
            )
    raster.set_color(new_red, new_green, new_blue)
    return raster


def sharpen(raster: Raster) -> Raster:
    return apply_kernel(raster, sharpen_at)


def smooth(raster: Raster) -> Raster:
    return apply_kernel(raster, smooth_at)
