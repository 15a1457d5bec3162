"""
Kind-specific implementation of Array addition via control-path dispatch.

One implementation serves every numeric kind: operands are promoted to a
common kind before NumPy adds them. BOOLEAN arrays have no registered path
and raise ``TypeMismatchError``.
"""

from typing import Union

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from .....domain._array import IArray, Number

from ._base import ArrayMixinArithmetic as AMA


@register_kinds(AMA, AMA.add, NUMERIC_KINDS)
def array_add(self: IArray, other: Union["IArray", Number]) -> "IArray":
    """
    Elementwise ``self + other`` with broadcasting.

    Parameters
    ----------
    self : IArray
        Left-hand operand (INT, LONG, DOUBLE or COMPLEX).
    other : Union[IArray, Number]
        Right-hand operand.

    Returns
    -------
    IArray
        New array of the promoted kind and broadcast shape.
    """
    a, b, kind = self._binary_operands(other, "add")
    return type(self)._wrap(np.add(a, b), kind)
