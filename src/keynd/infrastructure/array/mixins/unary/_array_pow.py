"""
Kind-specific implementation of elementwise power.
"""

from typing import Union

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from ..._dtypes import dtype_of
from .....domain._array import IArray, Number
from .....domain._kind import ElementKind

from ._base import ArrayMixinUnary as AMU


@register_kinds(AMU, AMU.pow, NUMERIC_KINDS)
def array_pow(self: IArray, exponent: Union["IArray", Number]) -> "IArray":
    """
    Elementwise ``self ** exponent``.

    Integral operands stay integral while every exponent is non-negative;
    a negative integral exponent switches the computation to DOUBLE, since
    NumPy refuses negative integer powers of integers.
    """
    a, b, kind = self._binary_operands(exponent, "pow")
    if kind.is_integral() and np.any(b < 0):
        kind = ElementKind.DOUBLE
        a = a.astype(dtype_of(kind))
        b = b.astype(dtype_of(kind))
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return type(self)._wrap(np.power(a, b), kind)
