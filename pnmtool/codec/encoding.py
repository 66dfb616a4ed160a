from __future__ import annotations

import logging
from typing import BinaryIO, List

from ..errors import EncodeError
from ..raster import Encoding, Plane, Raster
from .header import format_header

logger = logging.getLogger(__name__)


def write_ascii_pixels(planes: List[Plane]) -> bytes:
    """Each sample as a decimal integer followed by one space, as a flat stream."""
    if len(planes) == 1:
        samples = planes[0].samples
        return "".join(f"{value} " for value in samples).encode("ascii")
    red, green, blue = (plane.samples for plane in planes)
    return "".join(f"{r} {g} {b} " for r, g, b in zip(red, green, blue)).encode("ascii")


def write_binary_pixels(planes: List[Plane]) -> bytes:
    """One raw byte per sample, channels interleaved per pixel."""
    if len(planes) == 1:
        return bytes(planes[0].samples)
    red, green, blue = (plane.samples for plane in planes)
    out = bytearray(len(red) * 3)
    out[0::3] = red
    out[1::3] = green
    out[2::3] = blue
    return bytes(out)


def encode(raster: Raster, encoding: Encoding) -> bytes:
    """Encode the raster in the requested container.

    The raster's mode must match the target: gray rasters go to P2/P5 and
    color rasters to P3/P6. The header's max value is copied as-is.
    """
    raster.validate()
    if encoding.is_gray != raster.is_gray:
        mode = "gray" if raster.is_gray else "color"
        raise EncodeError(f"Cannot write a {mode} raster as {encoding.signature}")
    planes = raster.planes
    header = format_header(encoding, raster.width, raster.height, raster.max_value, raster.comment)
    if encoding.is_binary:
        body = write_binary_pixels(planes)
    else:
        body = write_ascii_pixels(planes)
    raster.encoding = encoding
    logger.debug(
        "Encoded %dx%d raster as %s (%d bytes)",
        raster.width,
        raster.height,
        encoding.signature,
        len(header) + len(body),
    )
    return header + body


def write(raster: Raster, sink: BinaryIO, encoding: Encoding) -> int:
    """Encode the raster into a writable binary stream, returning the byte count."""
    data = encode(raster, encoding)
    sink.write(data)
    return len(data)
