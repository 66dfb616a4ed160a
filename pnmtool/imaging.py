"""In-memory conversion between rasters and Pillow images.

Lets callers hand a decoded or filtered raster to Pillow-based code, or build
a raster from an image Pillow already holds. No files are read or written here.
"""
from __future__ import annotations

from PIL import Image

from .raster import Encoding, Plane, Raster


def raster_to_image(raster: Raster) -> Image.Image:
    """Build an in-memory Pillow image ("L" or "RGB") holding the raster's samples."""
    raster.validate()
    size = (raster.width, raster.height)
    if raster.gray is not None:
        return Image.frombytes("L", size, bytes(raster.gray.samples))
    bands = [Image.frombytes("L", size, bytes(plane.samples)) for plane in raster.color_planes]
    return Image.merge("RGB", bands)


def _normalize_image(img: Image.Image) -> Image.Image:
    if img.mode not in ("RGB", "L"):
        return img.convert("RGB")
    return img


def image_to_raster(img: Image.Image, comment: str = "", binary: bool = True) -> Raster:
    """Copy a Pillow image into a raster; grayscale images become gray rasters."""
    img = _normalize_image(img)
    width, height = img.size
    if img.mode == "L":
        raster = Raster(
            Encoding.for_output(gray=True, binary=binary),
            width,
            height,
            comment=comment,
            gray=Plane(width, height, bytearray(img.tobytes())),
        )
    else:
        red, green, blue = (bytearray(band.tobytes()) for band in img.split())
        raster = Raster(
            Encoding.for_output(gray=False, binary=binary),
            width,
            height,
            comment=comment,
            red=Plane(width, height, red),
            green=Plane(width, height, green),
            blue=Plane(width, height, blue),
        )
    raster.validate()
    return raster
