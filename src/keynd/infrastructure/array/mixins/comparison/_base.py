"""
Comparison mixin defining elementwise Array comparison operators.

This module declares :class:`ArrayMixinComparison`, an abstract mixin that
specifies the public API of elementwise comparisons: ``lt``, ``le``, ``gt``,
``ge``, ``eq`` and ``neq``, plus the matching Python operators.

Every comparison produces a BOOLEAN array of the broadcast shape whose element
``i`` is the comparator applied to the corresponding operand elements.
"""

from typing import Union
from abc import ABC

import numpy as np

from .....domain._array import IArray, Number
from .....domain._errors import TypeMismatchError

Operand = Union["IArray", Number]


class ArrayMixinComparison(ABC):
    """
    Abstract mixin defining elementwise comparisons for arrays.

    Notes
    -----
    - Ordering comparisons (``lt``, ``le``, ``gt``, ``ge``) are undefined for
      COMPLEX arrays and raise ``TypeMismatchError``.
    - Equality comparisons (``eq``, ``neq``) are defined for every kind.
    - Operands are compared in their promoted kind, so ``INT`` elements
      compare exactly against ``DOUBLE`` elements.
    - ``==`` and ``!=`` are elementwise; arrays are therefore unhashable.
    """

    def lt(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self < other`` as a BOOLEAN array."""
        ...

    def le(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self <= other`` as a BOOLEAN array."""
        ...

    def gt(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self > other`` as a BOOLEAN array."""
        ...

    def ge(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self >= other`` as a BOOLEAN array."""
        ...

    def eq(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self == other`` as a BOOLEAN array."""
        ...

    def neq(self: IArray, other: Operand) -> "IArray":
        """Elementwise ``self != other`` as a BOOLEAN array."""
        ...

    def __lt__(self, other: Operand) -> "IArray":
        return self.lt(other)

    def __le__(self, other: Operand) -> "IArray":
        return self.le(other)

    def __gt__(self, other: Operand) -> "IArray":
        return self.gt(other)

    def __ge__(self, other: Operand) -> "IArray":
        return self.ge(other)

    def __eq__(self, other: Operand) -> "IArray":  # type: ignore[override]
        # Non-numeric operands fall back to Python's identity comparison.
        try:
            return self.eq(other)
        except TypeMismatchError:
            return NotImplemented

    def __ne__(self, other: Operand) -> "IArray":  # type: ignore[override]
        try:
            return self.neq(other)
        except TypeMismatchError:
            return NotImplemented

    def equals(self: IArray, other: object) -> bool:
        """
        Return True if `other` is an array with the same shape and elements.

        Unlike ``==``, this is a whole-array predicate and never raises for
        mismatched shapes or kinds.
        """
        if not isinstance(other, IArray):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self.to_numpy(), other.to_numpy()))
