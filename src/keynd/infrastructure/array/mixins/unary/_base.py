"""
Unary operation mixin defining elementwise Array math.

This module declares :class:`ArrayMixinUnary`, an abstract mixin that
specifies the public interface of elementwise unary operations (negation,
absolute value, square root, exponential, logarithm, trigonometric and
hyperbolic functions, rounding, sign) and of ``pow``.

Kind rules
----------
- BOOLEAN arrays support none of these operations.
- ``neg`` preserves the kind; ``abs`` preserves real kinds and maps COMPLEX
  to DOUBLE (the modulus).
- ``sqrt``/``exp``/``log`` produce DOUBLE for INT, LONG and DOUBLE inputs
  and COMPLEX for COMPLEX inputs. Out-of-domain real inputs yield ``nan``.
- ``pow`` keeps integral kinds for non-negative integral exponents and
  produces DOUBLE otherwise.
- Trigonometric and hyperbolic functions follow ``sqrt``: DOUBLE for real
  inputs, COMPLEX for COMPLEX inputs.
- ``floor``, ``ceil`` and ``signum`` keep integral kinds unchanged and map
  DOUBLE to DOUBLE. ``round`` maps DOUBLE to LONG. COMPLEX supports
  ``floor`` and ``ceil`` (componentwise) only.
"""

from typing import Union
from abc import ABC

from .....domain._array import IArray, Number


class ArrayMixinUnary(ABC):
    """Abstract mixin defining elementwise unary operations for arrays."""

    def neg(self: IArray) -> "IArray":
        """Elementwise negation ``-self``."""
        ...

    def abs(self: IArray) -> "IArray":
        """Elementwise absolute value (modulus for COMPLEX)."""
        ...

    def sqrt(self: IArray) -> "IArray":
        """Elementwise square root."""
        ...

    def exp(self: IArray) -> "IArray":
        """Elementwise natural exponential."""
        ...

    def log(self: IArray) -> "IArray":
        """Elementwise natural logarithm."""
        ...

    def sin(self: IArray) -> "IArray":
        ...

    def cos(self: IArray) -> "IArray":
        ...

    def tan(self: IArray) -> "IArray":
        ...

    def asin(self: IArray) -> "IArray":
        """Elementwise inverse sine; real inputs outside ``[-1, 1]`` give ``nan``."""
        ...

    def acos(self: IArray) -> "IArray":
        """Elementwise inverse cosine; real inputs outside ``[-1, 1]`` give ``nan``."""
        ...

    def atan(self: IArray) -> "IArray":
        ...

    def sinh(self: IArray) -> "IArray":
        ...

    def cosh(self: IArray) -> "IArray":
        ...

    def tanh(self: IArray) -> "IArray":
        ...

    def floor(self: IArray) -> "IArray":
        """Largest integer not greater than each element."""
        ...

    def ceil(self: IArray) -> "IArray":
        """Smallest integer not less than each element."""
        ...

    def round(self: IArray) -> "IArray":
        """
        Round each element to the nearest integer, halves toward ``+inf``.

        Returns
        -------
        IArray
            A LONG array for DOUBLE input; integral inputs are copied as-is.

        Raises
        ------
        InvalidArgumentError
            If an element is ``nan``, infinite or outside the int64 range.
        """
        ...

    def signum(self: IArray) -> "IArray":
        """Elementwise sign: -1, 0 or 1 (``nan`` stays ``nan``)."""
        ...

    def pow(self: IArray, exponent: Union["IArray", Number]) -> "IArray":
        """
        Elementwise power ``self ** exponent``.

        Parameters
        ----------
        exponent : Union[IArray, Number]
            Scalar or broadcast-compatible array exponent.
        """
        ...

    def __neg__(self) -> "IArray":
        return self.neg()

    def __abs__(self) -> "IArray":
        return self.abs()

    def __pow__(self, exponent: Union["IArray", Number]) -> "IArray":
        return self.pow(exponent)

    def __rpow__(self, base: Number) -> "IArray":
        return self._as_array_like(base, self).pow(self)
