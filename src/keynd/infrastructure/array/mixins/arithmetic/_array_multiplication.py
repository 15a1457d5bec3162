"""
Kind-specific implementation of Array multiplication via control-path dispatch.

COMPLEX operands are multiplied with complex arithmetic
(``(a + bi)(c + di) = (ac - bd) + (ad + bc)i``), never componentwise.
"""

from typing import Union

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from .....domain._array import IArray, Number

from ._base import ArrayMixinArithmetic as AMA


@register_kinds(AMA, AMA.mul, NUMERIC_KINDS)
def array_mul(self: IArray, other: Union["IArray", Number]) -> "IArray":
    """
    Elementwise ``self * other`` with broadcasting.

    Returns
    -------
    IArray
        New array of the promoted kind and broadcast shape.
    """
    a, b, kind = self._binary_operands(other, "mul")
    return type(self)._wrap(np.multiply(a, b), kind)
