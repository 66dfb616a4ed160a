from .clamp import clamp, store_clamped, store_clamped_planes
from .dispatch import FilterKind, FilterSpec, apply_filter, apply_spec
from .gray import contrast, gray_plane, grayscale, luminance
from .kernels import apply_kernel, sharpen, smooth
from .tonal import brighten, negate

__all__ = [
    "apply_filter",
    "apply_kernel",
    "apply_spec",
    "brighten",
    "clamp",
    "contrast",
    "FilterKind",
    "FilterSpec",
    "gray_plane",
    "grayscale",
    "luminance",
    "negate",
    "sharpen",
    "smooth",
    "store_clamped",
    "store_clamped_planes",
]
