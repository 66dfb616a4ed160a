"""
Builders for small test images.
"""
from pnmtool import Raster


def p6_bytes(width, height, pixels, comment=b""):
    """Build a binary color image from a flat list of (r, g, b) tuples."""
    header = b"P6\n" + comment + b"%d %d\n255\n" % (width, height)
    return header + bytes(channel for pixel in pixels for channel in pixel)


def p3_bytes(width, height, pixels, comment=b""):
    """Build an ASCII color image, one row of pixels per line."""
    lines = [b"P3", b"%d %d" % (width, height), b"255"]
    if comment:
        lines.insert(1, comment.rstrip(b"\n"))
    for row in range(height):
        row_pixels = pixels[row * width : (row + 1) * width]
        lines.append(b" ".join(b"%d %d %d" % pixel for pixel in row_pixels))
    return b"\n".join(lines) + b"\n"


def uniform(width, height, value):
    """Color raster with every pixel set to the same (r, g, b) tuple."""
    return Raster.from_pixels([[value] * width for _ in range(height)])


def gray_pixels(values, width):
    """Rows of neutral (v, v, v) pixels from a flat list of gray values."""
    pixels = [(v, v, v) for v in values]
    return [pixels[i : i + width] for i in range(0, len(pixels), width)]
