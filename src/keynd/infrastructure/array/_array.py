"""
Concrete Array implementation (NumPy backend).

This module provides the concrete `Array` class that satisfies the
domain-level `IArray` protocol. Elements are stored in a NumPy ndarray whose
dtype is fixed by the array's :class:`ElementKind`.

Design notes
------------
- Operations are declared by mixins (arithmetic, comparison, logical, unary,
  reduction, sorting, memory, shape/indexing, factories). Kind-specific
  implementations register themselves through
  `array_control_path_manager` and are selected by ``self.kind`` at runtime.
- Freshly allocated buffers are row-major (C order).
- Views (slicing, transpose, reshape where possible) share their buffer with
  the source through NumPy's reference-counted ``base`` chain: the buffer
  stays alive as long as any array referencing it does.
- Arrays are not thread-safe. Concurrent mutation of overlapping views must
  be serialized by the caller.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence, Union

import numpy as np

from ...domain._array import IArray, Number
from ...domain._kind import ElementKind
from ...domain._errors import (
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ._dtypes import dtype_of, is_scalar, kind_of_dtype, kind_of_scalar
from ._format import format_array

from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.comparison import ArrayMixinComparison
from .mixins.logical import ArrayMixinLogical
from .mixins.unary import ArrayMixinUnary
from .mixins.reduction import ArrayMixinReduction
from .mixins.sorting import ArrayMixinSorting
from .mixins.memory import ArrayMixinMemory
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from ._factories import ArrayFactoriesMixin


class Array(
    ArrayMixinArithmetic,
    ArrayMixinComparison,
    ArrayMixinLogical,
    ArrayMixinUnary,
    ArrayMixinReduction,
    ArrayMixinSorting,
    ArrayMixinMemory,
    ArrayShapeAndIndexingMixin,
    ArrayFactoriesMixin,
    IArray,
):
    """
    Typed n-dimensional array backed by a NumPy buffer.

    Parameters
    ----------
    shape : Union[int, Sequence[int]]
        Array shape. An int is shorthand for a 1-D shape.
    kind : ElementKind, optional
        Element kind. Defaults to ``ElementKind.DOUBLE``.

    Notes
    -----
    - The constructor allocates a zero-filled buffer. Use the factories
      (`of`, `from_nested`, `zeros`, `range`, `linspace`, ...) to build arrays
      with content.
    - `_data` always holds an ndarray whose dtype equals ``dtype_of(kind)``.
    """

    __hash__ = None  # elementwise __eq__
    # NumPy operands on the left defer to the reflected operators.
    __array_ufunc__ = None

    def __init__(
        self,
        shape: Union[int, Sequence[int]],
        kind: ElementKind = ElementKind.DOUBLE,
    ) -> None:
        self._kind = kind
        self._data = np.zeros(self._as_shape(shape), dtype=dtype_of(kind))
        self._is_view = False

    @classmethod
    def _wrap(
        cls, data: Any, kind: Optional[ElementKind] = None, *, view: bool = False
    ) -> "Array":
        """
        Build an Array around an existing buffer without copying it.

        Parameters
        ----------
        data : array-like
            Backing buffer. NumPy ndarrays are used as-is when their dtype
            already matches the kind; otherwise they are converted.
        kind : Optional[ElementKind]
            Target kind. If None, it is derived from the buffer's dtype.
        view : bool
            True when `data` shares memory with another array. Ignored if a
            dtype conversion copies the buffer.

        Returns
        -------
        Array
            An array sharing `data` whenever no conversion was needed.
        """
        arr = np.asarray(data)
        if kind is None:
            kind = kind_of_dtype(arr.dtype)
        dt = dtype_of(kind)
        if arr.dtype != dt:
            arr = arr.astype(dt)
            view = False
        out = cls.__new__(cls)
        out._kind = kind
        out._data = arr
        out._is_view = view
        return out

    # ----------------------------
    # Properties
    # ----------------------------
    @property
    def kind(self) -> ElementKind:
        """
        Return the element kind of this array.

        Returns
        -------
        ElementKind
            The kind of every element; also the control-path dispatch key.
        """
        return self._kind

    @property
    def dtype(self) -> np.dtype:
        """NumPy dtype of the backing buffer."""
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return the underlying buffer.

        Returns
        -------
        numpy.ndarray
            The backing ndarray. Writing into it mutates this array and every
            view sharing the buffer.
        """
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def size(self) -> int:
        return int(self._data.size)

    @property
    def strides(self) -> tuple[int, ...]:
        """Byte strides of the backing buffer, one per axis."""
        return tuple(self._data.strides)

    @property
    def is_view(self) -> bool:
        """True if this array shares its buffer with another array."""
        return self._is_view

    def numel(self) -> int:
        """Return the total number of elements (alias of `size`)."""
        return self.size

    # ----------------------------
    # Python protocol
    # ----------------------------
    def __repr__(self) -> str:
        return format_array(self)

    def __str__(self) -> str:
        return np.array2string(self._data, separator=", ")

    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of a 0-d array")
        return self.shape[0]

    def __iter__(self) -> Iterator[Any]:
        if self.ndim == 0:
            raise TypeError("iteration over a 0-d array")
        for i in range(self.shape[0]):
            yield self[i]

    def __bool__(self) -> bool:
        if self.size != 1:
            raise InvalidArgumentError(
                "The truth value of an array with more than one element is "
                "ambiguous; use any() or all()"
            )
        return bool(self._data.reshape(()))

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> np.ndarray:
        if dtype is None:
            return self._data.copy() if copy else self._data
        return self._data.astype(dtype)

    def item(self) -> Number:
        """
        Return the only element as a Python scalar.

        Raises
        ------
        InvalidArgumentError
            If the array does not hold exactly one element.
        """
        if self.size != 1:
            raise InvalidArgumentError(
                f"item() requires exactly one element, array has {self.size}"
            )
        return self._data.reshape(()).item()

    def tolist(self) -> Any:
        """Return the elements as (nested) Python lists of Python scalars."""
        return self._data.tolist()

    def any(self) -> bool:
        return bool(np.any(self._data))

    def all(self) -> bool:
        return bool(np.all(self._data))

    # ----------------------------
    # Internal helpers
    # ----------------------------
    @staticmethod
    def _as_shape(shape: Union[int, Sequence[int]]) -> tuple[int, ...]:
        """
        Normalize a shape argument into a tuple of non-negative ints.

        Raises
        ------
        InvalidArgumentError
            If any extent is negative or not an integer.
        """
        if isinstance(shape, (int, np.integer)):
            shape = (shape,)
        out = []
        for d in shape:
            if isinstance(d, bool) or not isinstance(d, (int, np.integer)):
                raise InvalidArgumentError(f"Shape extents must be ints, got {d!r}")
            if d < 0:
                raise InvalidArgumentError(f"Negative extent {d} in shape {tuple(shape)}")
            out.append(int(d))
        return tuple(out)

    @classmethod
    def _as_array_like(cls, x: Union["Array", Number, Any], like: "Array") -> "Array":
        """
        Convert an operand into an Array.

        Arrays are returned as-is, scalars become 0-d arrays of their inferred
        kind (so that broadcasting lifts them to the partner's shape), and
        ndarrays or nested sequences are wrapped.

        Parameters
        ----------
        x : Union[Array, Number, array-like]
            Operand to convert.
        like : Array
            Reference array (used for the concrete class).

        Raises
        ------
        TypeMismatchError
            If `x` cannot be interpreted as numeric data.
        """
        if isinstance(x, Array):
            return x
        ArrayClass = type(like)
        if is_scalar(x):
            kind = kind_of_scalar(x)
            return ArrayClass._wrap(np.array(x, dtype=dtype_of(kind)), kind)
        if isinstance(x, np.ndarray):
            return ArrayClass._wrap(x)
        if isinstance(x, (list, tuple)):
            return ArrayClass.from_nested(x)
        raise TypeMismatchError(f"Unsupported operand type: {type(x).__name__!r}")

    @staticmethod
    def _broadcast_shape(
        op: str, a: tuple[int, ...], b: tuple[int, ...]
    ) -> tuple[int, ...]:
        """
        Return the broadcast shape of `a` and `b`.

        Two shapes are compatible when, aligned from the trailing axis, every
        pair of extents is equal or one of them is 1.

        Raises
        ------
        ShapeMismatchError
            If the shapes cannot be broadcast together.
        """
        try:
            return tuple(np.broadcast_shapes(a, b))
        except ValueError:
            raise ShapeMismatchError(op, a, b) from None

    def _binary_operands(
        self, other: Union["Array", Number], op: str, *, numeric: bool = True
    ) -> tuple[np.ndarray, np.ndarray, ElementKind]:
        """
        Prepare both operands of a binary elementwise operation.

        Parameters
        ----------
        other : Union[Array, Number]
            Right-hand operand.
        op : str
            Operation name used in error messages.
        numeric : bool
            If True, boolean operands are rejected.

        Returns
        -------
        tuple[np.ndarray, np.ndarray, ElementKind]
            Both buffers cast to the promoted kind's dtype, and that kind.

        Raises
        ------
        TypeMismatchError
            If `numeric` and either operand is BOOLEAN.
        ShapeMismatchError
            If the shapes are not broadcast-compatible.
        """
        other_a = self._as_array_like(other, self)
        if numeric and not (self.kind.is_numeric() and other_a.kind.is_numeric()):
            raise TypeMismatchError(f"{op} is not supported for BOOLEAN arrays")
        kind = ElementKind.promote(self.kind, other_a.kind)
        self._broadcast_shape(op, self.shape, other_a.shape)
        dt = dtype_of(kind)
        return (
            self._data.astype(dt, copy=False),
            other_a._data.astype(dt, copy=False),
            kind,
        )

    def _normalize_axis(self, axis: int, op: str) -> int:
        """
        Resolve a possibly negative `axis` against this array's ndim.

        Raises
        ------
        InvalidArgumentError
            If the axis does not exist.
        """
        ndim = self.ndim
        if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
            raise InvalidArgumentError(f"{op}: axis must be an int, got {axis!r}")
        ax = int(axis) + ndim if axis < 0 else int(axis)
        if not 0 <= ax < ndim:
            raise InvalidArgumentError(
                f"{op}: axis {axis} is out of bounds for an array with ndim {ndim}"
            )
        return ax
