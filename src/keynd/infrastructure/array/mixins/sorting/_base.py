"""
Sorting mixin defining the public Array sorting API.
"""

from typing import Callable, Optional
from abc import ABC

from .....domain._array import IArray

IndexComparator = Callable[["IArray", int, int], int]
"""Three-way comparator ``cmp(lane, i, j)`` over positions of a 1-D lane."""


class ArrayMixinSorting(ABC):
    """Abstract mixin defining sorting for arrays."""

    def sort(
        self: IArray, axis: int = 0, comparator: Optional[IndexComparator] = None
    ) -> "IArray":
        """
        Return a copy sorted along `axis`.

        Every 1-D lane along `axis` is sorted independently. The sort is
        stable: elements that compare equal keep their relative order.

        Parameters
        ----------
        axis : int
            Axis to sort along. Defaults to 0.
        comparator : Optional[IndexComparator]
            ``comparator(lane, i, j)`` returns a negative number, zero or a
            positive number when element `i` of `lane` orders before, equal
            to or after element `j`. `lane` is a 1-D array. If None, the
            natural ordering is used (lexicographic on (real, imag) for
            COMPLEX).

        Returns
        -------
        IArray
            A new array of the same shape and kind. The receiver is not
            modified.

        Raises
        ------
        InvalidArgumentError
            If `axis` does not exist.
        """
        ...

    def argsort(
        self: IArray, axis: int = 0, comparator: Optional[IndexComparator] = None
    ) -> "IArray":
        """
        Return the positions that would sort each lane along `axis`.

        ``a.argsort(axis)`` holds, for every lane, the indices ``k`` such that
        taking ``lane[k]`` in order yields ``a.sort(axis)``. Ties keep their
        original order.

        Returns
        -------
        IArray
            An INT array of the receiver's shape (LONG if the sorted extent
            exceeds the int32 range).

        Raises
        ------
        InvalidArgumentError
            If `axis` does not exist, or the array is 0-d.
        """
        ...
