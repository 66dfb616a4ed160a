from __future__ import annotations

import logging
from typing import BinaryIO, Tuple

from ..errors import MalformedPixelData, TruncatedData
from ..raster import Plane, Raster
from .header import HEADER_CHARSET, ByteScanner, Header, parse_int, read_header

logger = logging.getLogger(__name__)

Planes = Tuple[bytearray, bytearray, bytearray]


def read_ascii_pixels(scanner: ByteScanner, width: int, height: int) -> Planes:
    """Read red, green, blue decimal tokens for every pixel, row-major."""
    count = width * height
    # One digit per sample plus a separator between samples.
    if scanner.remaining < count * 6 - 1:
        raise TruncatedData(
            f"Pixel data too short for {count} pixels: {scanner.remaining} bytes left"
        )
    red, green, blue = bytearray(count), bytearray(count), bytearray(count)
    for index in range(count):
        for plane in (red, green, blue):
            token = scanner.token()
            if token is None:
                raise TruncatedData(f"Pixel data ended after {index} of {count} pixels")
            value = parse_int(token)
            if value is None:
                raise MalformedPixelData(
                    f"Invalid sample {token.decode(HEADER_CHARSET)!r} at pixel {index}"
                )
            plane[index] = value & 0xFF
    return red, green, blue


def read_binary_pixels(scanner: ByteScanner, width: int, height: int) -> Planes:
    """Read three raw bytes per pixel, row-major, no delimiters."""
    count = width * height
    data = scanner.read(count * 3)
    if len(data) < count * 3:
        raise TruncatedData(f"Expected {count * 3} bytes of pixel data, got {len(data)}")
    return bytearray(data[0::3]), bytearray(data[1::3]), bytearray(data[2::3])


def decode_bytes(data: bytes) -> Raster:
    """Decode a whole P3 or P6 image held in memory."""
    scanner = ByteScanner(data)
    header = read_header(scanner)
    if header.encoding.is_binary:
        red, green, blue = read_binary_pixels(scanner, header.width, header.height)
    else:
        red, green, blue = read_ascii_pixels(scanner, header.width, header.height)
    raster = _build_raster(header, red, green, blue)
    logger.debug("Decoded %dx%d %s raster", raster.width, raster.height, header.encoding.signature)
    return raster


def decode(source: BinaryIO) -> Raster:
    """Decode an image from a readable binary stream."""
    return decode_bytes(source.read())


def _build_raster(header: Header, red: bytearray, green: bytearray, blue: bytearray) -> Raster:
    width, height = header.width, header.height
    raster = Raster(
        header.encoding,
        width,
        height,
        max_value=header.max_value,
        comment=header.comment,
        red=Plane(width, height, red),
        green=Plane(width, height, green),
        blue=Plane(width, height, blue),
    )
    raster.validate()
    return raster
