from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from ..errors import FilterError
from ..raster import Raster
from .gray import contrast, grayscale
from .kernels import sharpen, smooth
from .tonal import brighten, negate

logger = logging.getLogger(__name__)


class FilterKind(Enum):
    NEGATE = "negate"
    BRIGHTEN = "brighten"
    SHARPEN = "sharpen"
    SMOOTH = "smooth"
    GRAYSCALE = "grayscale"
    CONTRAST = "contrast"
    NONE = "none"

    @property
    def produces_gray(self) -> bool:
        return self in (FilterKind.GRAYSCALE, FilterKind.CONTRAST)

    @property
    def takes_amount(self) -> bool:
        return self is FilterKind.BRIGHTEN


@dataclass(frozen=True)
class FilterSpec:
    kind: FilterKind = FilterKind.NONE
    amount: Optional[int] = None

    def validate(self) -> None:
        if self.kind.takes_amount and self.amount is None:
            raise FilterError(f"{self.kind.value} requires an integer amount")
        if not self.kind.takes_amount and self.amount is not None:
            raise FilterError(f"{self.kind.value} does not take an amount")

    @classmethod
    def parse(cls, name: str, amount: Optional[int] = None) -> "FilterSpec":
        try:
            kind = FilterKind(name.strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in FilterKind)
            raise FilterError(f"Unknown filter '{name}' (choose from: {choices})") from None
        spec = cls(kind, amount)
        spec.validate()
        return spec


_HANDLERS: Dict[FilterKind, Callable[[Raster, Optional[int]], Raster]] = {
    FilterKind.NEGATE: lambda raster, _: negate(raster),
    FilterKind.BRIGHTEN: brighten,
    FilterKind.SHARPEN: lambda raster, _: sharpen(raster),
    FilterKind.SMOOTH: lambda raster, _: smooth(raster),
    FilterKind.GRAYSCALE: lambda raster, _: grayscale(raster),
    FilterKind.CONTRAST: lambda raster, _: contrast(raster),
}


def apply_filter(raster: Raster, kind: FilterKind, amount: Optional[int] = None) -> Raster:
    """Run one filter over a decoded color raster and return the result.

    Negate and brighten modify the planes in place; sharpen and smooth swap in
    replacement planes; grayscale and contrast leave the raster in gray mode.
    FilterKind.NONE returns the raster untouched. The amount is required for
    brighten and rejected with FilterError for every other kind.
    """
    FilterSpec(kind, amount).validate()
    if kind is FilterKind.NONE:
        return raster
    if raster.is_gray:
        raise FilterError(f"{kind.value} needs a color raster, got a gray one")
    raster.validate()
    logger.debug("Applying %s to %dx%d raster", kind.value, raster.width, raster.height)
    return _HANDLERS[kind](raster, amount)


def apply_spec(raster: Raster, spec: FilterSpec) -> Raster:
    return apply_filter(raster, spec.kind, spec.amount)
