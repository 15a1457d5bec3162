"""
Reduction mixin defining the public Array reduction API.

This module declares :class:`ArrayMixinReduction`, an abstract mixin that
specifies the *interface and semantics* of reductions (`mean`, `sum`, `prod`,
`var`, `std`, `min`, `max`, `argmin`, `argmax`, `cumsum`, `trace`).

Concrete implementations are registered elsewhere via the control-path
dispatch mechanism and selected by ``self.kind``.
"""

from typing import Optional, Union
from abc import ABC

from .....domain._array import IArray, Number
from .....domain._errors import EmptyArrayError


def reduction_axis(
    self: IArray, axis: Optional[int], op: str, *, require_elements: bool = True
) -> Optional[int]:
    """
    Validate the reduction axis and, if required, that something is reduced.

    Returns
    -------
    Optional[int]
        The normalized axis, or None for a whole-array reduction.

    Raises
    ------
    EmptyArrayError
        If `require_elements` and the reduced extent is zero.
    """
    if axis is None:
        if require_elements and self.size == 0:
            raise EmptyArrayError(op)
        return None
    ax = self._normalize_axis(axis, op)
    if require_elements and self.shape[ax] == 0:
        raise EmptyArrayError(op)
    return ax


class ArrayMixinReduction(ABC):
    """
    Abstract mixin defining reduction operations for arrays.

    Notes
    -----
    - Without an axis, reductions return a Python scalar. With an axis they
      return an array with that axis removed.
    - Reductions that are undefined without elements (mean, var, std, min,
      max, argmin, argmax) raise ``EmptyArrayError``.
    - Integral and BOOLEAN inputs are accumulated in floating point for
      mean/var/std and in 64-bit integers for sum/cumsum.
    """

    def mean(self: IArray, axis: Optional[int] = None) -> Union[Number, "IArray"]:
        """
        Compute the arithmetic mean.

        Parameters
        ----------
        axis : Optional[int]
            Axis to reduce. None reduces every element to a scalar.

        Returns
        -------
        Union[Number, IArray]
            A float (complex for COMPLEX arrays), or a DOUBLE/COMPLEX array
            one dimension smaller holding the per-slice means.

        Raises
        ------
        EmptyArrayError
            If there is nothing to average.
        """
        ...

    def var(self: IArray, axis: Optional[int] = None) -> Union[Number, "IArray"]:
        """Population variance (``ddof=0``); always real."""
        ...

    def std(self: IArray, axis: Optional[int] = None) -> Union[Number, "IArray"]:
        """Population standard deviation (``ddof=0``); always real."""
        ...

    def sum(self: IArray, axis: Optional[int] = None) -> Union[Number, "IArray"]:
        """
        Compute the sum of elements.

        Empty inputs sum to zero. INT, LONG and BOOLEAN inputs sum as LONG.
        """
        ...

    def prod(self: IArray, axis: Optional[int] = None) -> Union[Number, "IArray"]:
        """
        Compute the product of elements.

        The product of no elements is one. Kinds follow :meth:`sum`; integer
        products wrap around on overflow.
        """
        ...

    def cumsum(self: IArray, axis: Optional[int] = None) -> "IArray":
        """
        Cumulative sum along `axis`; None flattens the array first.
        """
        ...

    def trace(self: IArray) -> Number:
        """
        Sum of the main diagonal of a 2-D array.

        Raises
        ------
        InvalidArgumentError
            If the array is not 2-D.
        """
        ...

    def min(self: IArray) -> Number:
        """
        Smallest element.

        Raises
        ------
        EmptyArrayError
            On a zero-element array.
        TypeMismatchError
            On COMPLEX arrays, which have no natural order.
        """
        ...

    def max(self: IArray) -> Number:
        """
        Largest element.

        Raises
        ------
        EmptyArrayError
            On a zero-element array.
        TypeMismatchError
            On COMPLEX arrays, which have no natural order.
        """
        ...

    def argmin(self: IArray) -> int:
        """Flat (row-major) index of the first smallest element."""
        ...

    def argmax(self: IArray) -> int:
        """Flat (row-major) index of the first largest element."""
        ...
