"""
Kind-specific implementations of equality comparisons (eq, neq).

Equality is defined for every kind, including BOOLEAN and COMPLEX.
"""

import numpy as np

from ..._array_builder import ALL_KINDS, register_kinds
from .....domain._array import IArray

from ._base import ArrayMixinComparison as AMC, Operand


@register_kinds(AMC, AMC.eq, ALL_KINDS)
def array_eq(self: IArray, other: Operand) -> "IArray":
    a, b, _ = self._binary_operands(other, "eq", numeric=False)
    return type(self)._wrap(np.equal(a, b))


@register_kinds(AMC, AMC.neq, ALL_KINDS)
def array_neq(self: IArray, other: Operand) -> "IArray":
    a, b, _ = self._binary_operands(other, "neq", numeric=False)
    return type(self)._wrap(np.not_equal(a, b))
