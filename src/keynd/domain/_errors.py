"""
Array-related exceptions for KeyND.

This module defines the custom errors raised by array operations. Each error
subclasses both :class:`ArrayError` and the closest builtin exception, so
callers may catch either the library-specific type or the familiar builtin
(e.g. ``except ValueError``).

All failures are local and synchronous: they are raised to the immediate
caller and never retried internally.
"""

from typing import Any, Optional


class ArrayError(Exception):
    """Base class of every error raised by KeyND array operations."""


class ShapeMismatchError(ArrayError, ValueError):
    """
    Raised when operand shapes are incompatible.

    This covers broadcasting failures in elementwise operations, extent
    conflicts in stacking/concatenation, element-count mismatches in reshape,
    and boolean masks whose length does not match the indexed axis.

    Attributes
    ----------
    op : str
        The operation that was attempted (e.g., "add", "hstack").
    shape_a : tuple[int, ...]
        Shape of the first operand.
    shape_b : tuple[int, ...]
        Shape of the second operand (or the requested shape).
    """

    def __init__(
        self, op: str, shape_a: tuple[int, ...], shape_b: tuple[int, ...]
    ) -> None:
        super().__init__(
            f"{op}: incompatible shapes {tuple(shape_a)} and {tuple(shape_b)}."
        )
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)


class IndexOutOfRangeError(ArrayError, IndexError):
    """
    Raised when a resolved index falls outside ``[0, extent)``.

    Attributes
    ----------
    index : Any
        The offending index value.
    extent : Optional[int]
        Extent of the indexed axis, if known.
    axis : Optional[int]
        The indexed axis, if known.
    """

    def __init__(
        self,
        index: Any,
        extent: Optional[int] = None,
        axis: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"index {index!r} is out of range for axis {axis} with extent {extent}."
        super().__init__(message)
        self.index = index
        self.extent = extent
        self.axis = axis


class TypeMismatchError(ArrayError, TypeError):
    """
    Raised when element kinds are incompatible with an operation.

    Examples are mixing booleans with numbers in a literal, arithmetic on
    boolean arrays, ordering comparisons on complex arrays, or assigning
    complex values into a real array.
    """


class InvalidArgumentError(ArrayError, ValueError):
    """Raised for nonsensical numeric arguments (zero step, ``count < 1``, ...)."""


class EmptyArrayError(ArrayError, ValueError):
    """
    Raised when a reduction is requested on an array without elements.

    Attributes
    ----------
    op : str
        The reduction that was attempted (e.g., "min", "mean").
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} is undefined for an array with zero elements.")
        self.op = op
