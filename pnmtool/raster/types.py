from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

MAX_SAMPLE = 255


class Encoding(Enum):
    """Container signature, covering both channel mode and data layout."""

    ASCII_GRAY = "P2"
    ASCII_COLOR = "P3"
    BINARY_GRAY = "P5"
    BINARY_COLOR = "P6"

    @property
    def signature(self) -> str:
        return self.value

    @property
    def is_gray(self) -> bool:
        return self in (Encoding.ASCII_GRAY, Encoding.BINARY_GRAY)

    @property
    def is_binary(self) -> bool:
        return self in (Encoding.BINARY_GRAY, Encoding.BINARY_COLOR)

    @property
    def channels(self) -> int:
        return 1 if self.is_gray else 3

    @classmethod
    def for_output(cls, gray: bool, binary: bool) -> "Encoding":
        if gray:
            return cls.BINARY_GRAY if binary else cls.ASCII_GRAY
        return cls.BINARY_COLOR if binary else cls.ASCII_COLOR

    @classmethod
    def from_signature(cls, signature: str) -> Optional["Encoding"]:
        for encoding in cls:
            if encoding.value == signature:
                return encoding
        return None


@dataclass
class Plane:
    """Row-major grid of 8-bit samples for a single channel."""

    width: int
    height: int
    samples: bytearray

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Plane dimensions must be greater than zero")
        if len(self.samples) != self.width * self.height:
            raise ValueError("Sample count must equal width * height")

    @classmethod
    def blank(cls, width: int, height: int) -> "Plane":
        return cls(width, height, bytearray(width * height))

    @classmethod
    def filled(cls, width: int, height: int, value: int) -> "Plane":
        return cls(width, height, bytearray([value]) * (width * height))

    def get(self, row: int, col: int) -> int:
        return self.samples[row * self.width + col]

    def set(self, row: int, col: int, value: int) -> None:
        self.samples[row * self.width + col] = value

    def row(self, index: int) -> bytes:
        start = index * self.width
        return bytes(self.samples[start : start + self.width])

    def copy(self) -> "Plane":
        return Plane(self.width, self.height, bytearray(self.samples))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width


@dataclass
class Raster:
    """Decoded image: header fields plus either three color planes or one gray plane."""

    encoding: Encoding
    width: int
    height: int
    max_value: str = str(MAX_SAMPLE)
    comment: str = ""
    red: Optional[Plane] = None
    green: Optional[Plane] = None
    blue: Optional[Plane] = None
    gray: Optional[Plane] = None

    @property
    def is_gray(self) -> bool:
        return self.gray is not None

    @property
    def color_planes(self) -> Tuple[Plane, Plane, Plane]:
        if self.red is None or self.green is None or self.blue is None:
            raise ValueError("Raster has no color planes")
        return self.red, self.green, self.blue

    @property
    def planes(self) -> List[Plane]:
        """Planes in output order: gray alone, or red, green, blue."""
        if self.gray is not None:
            return [self.gray]
        return list(self.color_planes)

    def validate(self) -> None:
        """Check dimensions, mode exclusivity and plane shapes."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be greater than zero")
        color = [self.red, self.green, self.blue]
        has_color = any(plane is not None for plane in color)
        if self.gray is not None and has_color:
            raise ValueError("Raster cannot hold gray and color planes at once")
        if self.gray is None and not all(plane is not None for plane in color):
            raise ValueError("Raster needs either a gray plane or all three color planes")
        for plane in self.planes:
            if plane.shape != (self.height, self.width):
                raise ValueError("Plane shape does not match raster dimensions")

    def set_color(self, red: Plane, green: Plane, blue: Plane) -> None:
        """Swap in a full set of color planes, dropping any gray plane."""
        self.red, self.green, self.blue = red, green, blue
        self.gray = None
        self.validate()

    def set_gray(self, gray: Plane) -> None:
        """Swap in a gray plane, dropping the color planes."""
        self.gray = gray
        self.red = self.green = self.blue = None
        self.validate()

    def pixel(self, row: int, col: int) -> Tuple[int, ...]:
        return tuple(plane.get(row, col) for plane in self.planes)

    @classmethod
    def from_pixels(
        cls,
        pixels: List[List[Tuple[int, int, int]]],
        encoding: Encoding = Encoding.BINARY_COLOR,
        comment: str = "",
    ) -> "Raster":
        """Build a color raster from rows of (red, green, blue) tuples."""
        height = len(pixels)
        width = len(pixels[0]) if height else 0
        red, green, blue = bytearray(), bytearray(), bytearray()
        for row in pixels:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            for r, g, b in row:
                red.append(r)
                green.append(g)
                blue.append(b)
        raster = cls(
            encoding,
            width,
            height,
            comment=comment,
            red=Plane(width, height, red),
            green=Plane(width, height, green),
            blue=Plane(width, height, blue),
        )
        raster.validate()
        return raster
