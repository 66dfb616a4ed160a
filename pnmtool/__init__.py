from .codec import decode, decode_bytes, encode, write
from .errors import (
    DecodeError,
    EncodeError,
    FilterError,
    MalformedHeader,
    MalformedPixelData,
    PnmError,
    TruncatedData,
)
from .filters import FilterKind, FilterSpec, apply_filter
from .raster import Encoding, Plane, Raster
from .transform import TransformJob, TransformSettings

__version__ = "0.1.0"

__all__ = [
    "apply_filter",
    "decode",
    "decode_bytes",
    "DecodeError",
    "encode",
    "Encoding",
    "EncodeError",
    "FilterError",
    "FilterKind",
    "FilterSpec",
    "MalformedHeader",
    "MalformedPixelData",
    "Plane",
    "PnmError",
    "Raster",
    "TransformJob",
    "TransformSettings",
    "TruncatedData",
    "write",
]
