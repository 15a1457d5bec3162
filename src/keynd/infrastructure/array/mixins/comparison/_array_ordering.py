"""
Kind-specific implementations of ordering comparisons (lt, le, gt, ge).

Ordering is registered for BOOLEAN, INT, LONG and DOUBLE arrays. COMPLEX
numbers have no natural order: COMPLEX receivers hit the trap and COMPLEX
right-hand operands are rejected explicitly.
"""

from typing import Callable

import numpy as np

from ..._array_builder import REAL_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._errors import TypeMismatchError

from ._base import ArrayMixinComparison as AMC, Operand


def _ordering(self: IArray, other: Operand, op: str, fn: Callable) -> "IArray":
    a, b, kind = self._binary_operands(other, op, numeric=False)
    if not kind.is_real():
        raise TypeMismatchError(f"{op} is not supported for COMPLEX arrays")
    return type(self)._wrap(fn(a, b))


@register_kinds(AMC, AMC.lt, REAL_KINDS)
def array_lt(self: IArray, other: Operand) -> "IArray":
    return _ordering(self, other, "lt", np.less)


@register_kinds(AMC, AMC.le, REAL_KINDS)
def array_le(self: IArray, other: Operand) -> "IArray":
    return _ordering(self, other, "le", np.less_equal)


@register_kinds(AMC, AMC.gt, REAL_KINDS)
def array_gt(self: IArray, other: Operand) -> "IArray":
    return _ordering(self, other, "gt", np.greater)


@register_kinds(AMC, AMC.ge, REAL_KINDS)
def array_ge(self: IArray, other: Operand) -> "IArray":
    return _ordering(self, other, "ge", np.greater_equal)
