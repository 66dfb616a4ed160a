from __future__ import annotations

from ..raster import MAX_SAMPLE, Plane, Raster


def clamp(value: int) -> int:
    """Restrict a sample candidate to the inclusive range [0, 255]."""
    if value > MAX_SAMPLE:
        return MAX_SAMPLE
    if value < 0:
        return 0
    return value


def store_clamped_planes(
    red: Plane, green: Plane, blue: Plane, row: int, col: int, r: int, g: int, b: int
) -> None:
    """Clamp each channel candidate independently and store it at (row, col)."""
    index = row * red.width + col
    red.samples[index] = clamp(r)
    green.samples[index] = clamp(g)
    blue.samples[index] = clamp(b)


def store_clamped(raster: Raster, row: int, col: int, r: int, g: int, b: int) -> None:
    """Clamp and write a pixel into the raster's own color planes."""
    red, green, blue = raster.color_planes
    store_clamped_planes(red, green, blue, row, col, r, g, b)
