from .types import MAX_SAMPLE, Encoding, Plane, Raster

__all__ = ["Encoding", "MAX_SAMPLE", "Plane", "Raster"]
