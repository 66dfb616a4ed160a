from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO

from .codec import decode, decode_bytes, encode
from .filters import FilterSpec, apply_spec
from .raster import Encoding, Raster

logger = logging.getLogger(__name__)

GRAY_EXTENSION = ".pgm"
COLOR_EXTENSION = ".ppm"


@dataclass
class TransformSettings:
    filter: FilterSpec = field(default_factory=FilterSpec)
    binary: bool = True

    @property
    def output_encoding(self) -> Encoding:
        return Encoding.for_output(gray=self.filter.kind.produces_gray, binary=self.binary)

    @property
    def output_extension(self) -> str:
        return GRAY_EXTENSION if self.output_encoding.is_gray else COLOR_EXTENSION


class TransformJob:
    """Decode one image, apply at most one filter, and encode the result."""

    def __init__(self, settings: TransformSettings) -> None:
        self.settings = settings
        self.settings.filter.validate()

    def run(self, source: BinaryIO) -> bytes:
        return self._finish(decode(source))

    def run_bytes(self, data: bytes) -> bytes:
        return self._finish(decode_bytes(data))

    def transform_file(self, input_path: str, basename: str) -> str:
        """Transform input_path into basename plus .ppm or .pgm; return the output path."""
        self._validate_input_path(input_path)
        with open(input_path, "rb") as handle:
            data = self.run(handle)
        output_path = basename + self.settings.output_extension
        with open(output_path, "wb") as handle:
            handle.write(data)
        logger.info("Wrote %s (%d bytes)", output_path, len(data))
        return output_path

    def _finish(self, raster: Raster) -> bytes:
        spec = self.settings.filter
        logger.info(
            "Read %dx%d %s image, filter: %s",
            raster.width,
            raster.height,
            raster.encoding.signature,
            spec.kind.value,
        )
        raster = apply_spec(raster, spec)
        return encode(raster, self.settings.output_encoding)

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
