from __future__ import annotations


class PnmError(Exception):
    """Base class for every error raised by pnmtool."""


class DecodeError(PnmError, ValueError):
    """The input could not be decoded into a raster."""


class MalformedHeader(DecodeError):
    pass


class TruncatedData(DecodeError):
    pass


class MalformedPixelData(DecodeError):
    pass


class EncodeError(PnmError, ValueError):
    """The raster cannot be written in the requested encoding."""


class FilterError(PnmError, ValueError):
    """A filter was applied to a raster it cannot handle."""
