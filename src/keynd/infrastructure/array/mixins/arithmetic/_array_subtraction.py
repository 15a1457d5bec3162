"""
Kind-specific implementation of Array subtraction via control-path dispatch.
"""

from typing import Union

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from .....domain._array import IArray, Number

from ._base import ArrayMixinArithmetic as AMA


@register_kinds(AMA, AMA.sub, NUMERIC_KINDS)
def array_sub(self: IArray, other: Union["IArray", Number]) -> "IArray":
    """
    Elementwise ``self - other`` with broadcasting.

    Returns
    -------
    IArray
        New array of the promoted kind and broadcast shape.
    """
    a, b, kind = self._binary_operands(other, "sub")
    return type(self)._wrap(np.subtract(a, b), kind)
