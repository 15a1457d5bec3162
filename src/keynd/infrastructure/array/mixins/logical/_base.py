"""
Logical mixin defining elementwise boolean operators.

This module declares :class:`ArrayMixinLogical`. Logical operators are only
defined between BOOLEAN arrays (or Python bools); any other kind raises
``TypeMismatchError``.
"""

from typing import Union
from abc import ABC

from .....domain._array import IArray, Number

BoolOperand = Union["IArray", bool]


class ArrayMixinLogical(ABC):
    """Abstract mixin defining the logical operators and ``where``."""

    def and_(self: IArray, other: BoolOperand) -> "IArray":
        """Elementwise logical AND with broadcasting."""
        ...

    def or_(self: IArray, other: BoolOperand) -> "IArray":
        """Elementwise logical OR with broadcasting."""
        ...

    def xor(self: IArray, other: BoolOperand) -> "IArray":
        """Elementwise logical XOR with broadcasting."""
        ...

    def not_(self: IArray) -> "IArray":
        """Elementwise logical negation."""
        ...

    def where(
        self: IArray, x: Union["IArray", Number], y: Union["IArray", Number]
    ) -> "IArray":
        """
        Select from `x` where this mask is True and from `y` elsewhere.

        Parameters
        ----------
        x, y : Union[IArray, Number]
            Scalars or arrays. The mask, `x` and `y` are broadcast together;
            the result kind is the promotion of the kinds of `x` and `y`.

        Raises
        ------
        TypeMismatchError
            If the receiver is not BOOLEAN, or exactly one of `x` and `y` is.
        ShapeMismatchError
            If the three shapes cannot be broadcast together.
        """
        ...

    def __and__(self, other: BoolOperand) -> "IArray":
        return self.and_(other)

    def __rand__(self, other: BoolOperand) -> "IArray":
        return self.and_(other)

    def __or__(self, other: BoolOperand) -> "IArray":
        return self.or_(other)

    def __ror__(self, other: BoolOperand) -> "IArray":
        return self.or_(other)

    def __xor__(self, other: BoolOperand) -> "IArray":
        return self.xor(other)

    def __rxor__(self, other: BoolOperand) -> "IArray":
        return self.xor(other)

    def __invert__(self) -> "IArray":
        return self.not_()
