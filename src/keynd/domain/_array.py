"""
Array interface definitions.

This module defines the domain-level interface for array-like objects using
structural typing. The interface captures the backend-agnostic surface that
higher layers (and the operation mixins) rely on, so that mixins can type
against it without importing the concrete NumPy-backed `Array`.

Notes
-----
`IArray` is not thread-safe by contract: views share storage with their
source, and concurrent mutation of overlapping views is undefined. Callers
needing concurrent access must serialize externally or partition work over
disjoint views.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ._kind import ElementKind

Number = Union[bool, int, float, complex]
"""Scalar types accepted as array operands."""


@runtime_checkable
class IArray(Protocol):
    """
    Array interface.

    An `IArray` is an n-dimensional container of elements of a single
    :class:`ElementKind`, laid out over a (possibly shared) buffer.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the extents of the array, one per axis.

        Returns
        -------
        tuple[int, ...]
            The array's shape; ``()`` for a scalar array.
        """
        ...

    @property
    def kind(self) -> ElementKind:
        """
        Return the element kind of the array.

        Returns
        -------
        ElementKind
            The kind shared by every element.
        """
        ...

    @property
    def ndim(self) -> int:
        """Number of axes."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements (the product of the extents)."""
        ...

    @property
    def is_view(self) -> bool:
        """True if this array shares its buffer with another array."""
        ...

    def to_numpy(self) -> Any:
        """
        Return a copy of the elements as a backend-native array.

        Returns
        -------
        Any
            Backend-native array (``np.ndarray`` in the NumPy backend).
        """
        ...

    def assign(self, value: Union["IArray", Number]) -> "IArray":
        """
        Overwrite every element in place and return the receiver.

        Parameters
        ----------
        value : Union[IArray, Number]
            Scalar, or array broadcast-compatible with this array's shape.
        """
        ...

    def copy(self) -> "IArray":
        """Return a new array owning a copy of this array's elements."""
        ...
