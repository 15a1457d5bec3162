"""
Kind-specific implementations of min, max, argmin and argmax.

Extrema are registered for the ordered kinds only (BOOLEAN, INT, LONG,
DOUBLE). COMPLEX arrays fall through to the trap and raise
``TypeMismatchError``.
"""

import numpy as np

from ..._array_builder import REAL_KINDS, register_kinds
from .....domain._array import IArray, Number

from ._base import ArrayMixinReduction as AMR, reduction_axis


@register_kinds(AMR, AMR.min, REAL_KINDS)
def array_min(self: IArray) -> Number:
    reduction_axis(self, None, "min")
    return np.min(self.data).item()


@register_kinds(AMR, AMR.max, REAL_KINDS)
def array_max(self: IArray) -> Number:
    reduction_axis(self, None, "max")
    return np.max(self.data).item()


@register_kinds(AMR, AMR.argmin, REAL_KINDS)
def array_argmin(self: IArray) -> int:
    reduction_axis(self, None, "argmin")
    return int(np.argmin(self.data))


@register_kinds(AMR, AMR.argmax, REAL_KINDS)
def array_argmax(self: IArray) -> int:
    reduction_axis(self, None, "argmax")
    return int(np.argmax(self.data))
