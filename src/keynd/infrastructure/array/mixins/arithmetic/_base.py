"""
Arithmetic mixin defining elementwise Array operators.

This module declares :class:`ArrayMixinArithmetic`, an abstract mixin that
specifies the public API and semantics of elementwise arithmetic on arrays.

The named methods (`add`, `sub`, `mul`, `div`) carry no implementation here.
Kind-specific implementations are registered via the control-path dispatch
mechanism and selected by ``self.kind``. The Python operators are thin sugar
over the named methods.
"""

from typing import Union
from abc import ABC

from .....domain._array import IArray, Number


class ArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic for arrays.

    Notes
    -----
    - The right-hand operand is either a scalar (lifted to a 0-d array and
      broadcast to every element) or an array whose shape is
      broadcast-compatible with the receiver's.
    - The result kind is the promotion of both operand kinds
      (``INT < LONG < DOUBLE < COMPLEX``).
    - BOOLEAN operands are rejected with ``TypeMismatchError``.
    - Incompatible shapes raise ``ShapeMismatchError``.
    """

    # ----------------------------
    # Addition
    # ----------------------------
    def add(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[IArray, Number]
            Right-hand operand.

        Returns
        -------
        IArray
            New array holding ``self + other`` with the broadcast shape.
        """
        ...

    def __add__(self, other: Union["IArray", Number]) -> "IArray":
        return self.add(other)

    def __radd__(self, other: Number) -> "IArray":
        # Addition is commutative.
        return self.add(other)

    def __iadd__(self, other: Union["IArray", Number]) -> "IArray":
        return self.assign(self.add(other))

    # ----------------------------
    # Subtraction
    # ----------------------------
    def sub(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Elementwise subtraction.

        Returns
        -------
        IArray
            New array holding ``self - other``.
        """
        ...

    def rsub(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Right-hand subtraction: ``other - self``.

        Parameters
        ----------
        other : Union[IArray, Number]
            Left-hand operand of the mathematical expression.

        Notes
        -----
        The operand is promoted to an array and subtraction is dispatched on
        it, so no commutativity is assumed.
        """
        other_a = self._as_array_like(other, self)
        return other_a.sub(self)

    def __sub__(self, other: Union["IArray", Number]) -> "IArray":
        return self.sub(other)

    def __rsub__(self, other: Number) -> "IArray":
        return self.rsub(other)

    def __isub__(self, other: Union["IArray", Number]) -> "IArray":
        return self.assign(self.sub(other))

    # ----------------------------
    # Multiplication
    # ----------------------------
    def mul(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Elementwise multiplication.

        Returns
        -------
        IArray
            New array holding ``self * other``. COMPLEX operands use complex
            multiplication.
        """
        ...

    def __mul__(self, other: Union["IArray", Number]) -> "IArray":
        return self.mul(other)

    def __rmul__(self, other: Number) -> "IArray":
        # Multiplication is commutative.
        return self.mul(other)

    def __imul__(self, other: Union["IArray", Number]) -> "IArray":
        return self.assign(self.mul(other))

    # ----------------------------
    # Division
    # ----------------------------
    def div(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Elementwise division.

        Returns
        -------
        IArray
            New array holding ``self / other``.

        Notes
        -----
        - DOUBLE: IEEE division; division by zero yields ``inf``/``nan``.
        - COMPLEX: complex division.
        - INT/LONG (when both operands are integral): integer division
          truncating toward zero, kind preserved.

        Raises
        ------
        ZeroDivisionError
            For integer division by zero.
        """
        ...

    def rdiv(self: IArray, other: Union["IArray", Number]) -> "IArray":
        """
        Right-hand division: ``other / self``.
        """
        other_a = self._as_array_like(other, self)
        return other_a.div(self)

    def __truediv__(self, other: Union["IArray", Number]) -> "IArray":
        return self.div(other)

    def __rtruediv__(self, other: Number) -> "IArray":
        return self.rdiv(other)

    def __itruediv__(self, other: Union["IArray", Number]) -> "IArray":
        return self.assign(self.div(other))
