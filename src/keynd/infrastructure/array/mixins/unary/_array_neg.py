"""
Kind-specific implementations of Array negation and absolute value.
"""

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._kind import ElementKind

from ._base import ArrayMixinUnary as AMU


@register_kinds(AMU, AMU.neg, NUMERIC_KINDS)
def array_neg(self: IArray) -> "IArray":
    """
    Elementwise ``-self``, preserving the kind.

    Notes
    -----
    Integer negation wraps around for the most negative value, matching
    two's-complement arithmetic.
    """
    return type(self)._wrap(np.negative(self.data), self.kind)


@register_kinds(AMU, AMU.abs, NUMERIC_KINDS)
def array_abs(self: IArray) -> "IArray":
    """
    Elementwise absolute value.

    COMPLEX inputs return their modulus as a DOUBLE array.
    """
    kind = ElementKind.DOUBLE if self.kind is ElementKind.COMPLEX else self.kind
    return type(self)._wrap(np.abs(self.data), kind)
