"""
Array memory / conversion mixin.

This module defines :class:`ArrayMixinMemory`, the mixin that provides
in-place writes (`assign`, `fill`), copies (`copy`, `to_numpy`) and kind
conversion (`astype` and the `as_*` shorthands) for the concrete `Array`.

Notes
-----
- `assign` and `fill` write through the receiver's buffer, so every view
  sharing that buffer observes the change.
- `astype` is dispatched by the source kind; the `as_*` shorthands are plain
  wrappers around it.
"""

from typing import Union
from abc import ABC

import numpy as np

from .....domain._array import IArray, Number
from .....domain._kind import ElementKind
from .....domain._errors import ShapeMismatchError, TypeMismatchError


class ArrayMixinMemory(ABC):
    """
    Mixin that implements in-place writes, copies and kind conversion.
    """

    def assign(self: IArray, value: Union["IArray", Number]) -> "IArray":
        """
        Overwrite every element of this array in place.

        Parameters
        ----------
        value : Union[IArray, Number]
            A scalar written to every element, or an array whose shape
            broadcasts to this array's shape.

        Returns
        -------
        IArray
            The receiver, for chaining.

        Raises
        ------
        TypeMismatchError
            If `value` is COMPLEX and this array is not.
        ShapeMismatchError
            If `value` does not broadcast to this array's shape.

        Notes
        -----
        Values are cast to the receiver's kind: floats are truncated toward
        zero when written into integral arrays and nonzero values become
        True in BOOLEAN arrays.
        """
        src = self._as_array_like(value, self)
        if src.kind is ElementKind.COMPLEX and self.kind is not ElementKind.COMPLEX:
            raise TypeMismatchError(
                f"Cannot assign COMPLEX values into a {self.kind.name} array"
            )
        try:
            np.copyto(self.data, src.data, casting="unsafe")
        except ValueError:
            raise ShapeMismatchError("assign", self.shape, src.shape) from None
        return self

    def fill(self: IArray, value: Number) -> "IArray":
        """Write the scalar `value` into every element; returns the receiver."""
        return self.assign(value)

    def copy(self: IArray) -> "IArray":
        """Return a row-major copy that owns its own buffer."""
        return type(self)._wrap(np.array(self.data, order="C", copy=True), self.kind)

    def to_numpy(self: IArray) -> np.ndarray:
        """
        Return the elements as a new NumPy ndarray.

        The result never shares memory with this array.
        """
        return np.array(self.data, copy=True)

    def astype(self: IArray, kind: ElementKind) -> "IArray":
        """
        Convert every element to `kind`.

        Parameters
        ----------
        kind : ElementKind
            Target element kind.

        Returns
        -------
        IArray
            The receiver itself if it already has `kind`, otherwise a new
            array.

        Notes
        -----
        - DOUBLE to INT/LONG truncates toward zero.
        - Any kind to BOOLEAN maps nonzero to True.
        - COMPLEX to a real kind keeps the real part and emits a
          ``RuntimeWarning`` if a nonzero imaginary part is discarded.
        """
        ...

    def as_int(self: IArray) -> "IArray":
        return self.astype(ElementKind.INT)

    def as_long(self: IArray) -> "IArray":
        return self.astype(ElementKind.LONG)

    def as_double(self: IArray) -> "IArray":
        return self.astype(ElementKind.DOUBLE)

    def as_complex(self: IArray) -> "IArray":
        return self.astype(ElementKind.COMPLEX)

    def as_boolean(self: IArray) -> "IArray":
        return self.astype(ElementKind.BOOLEAN)
