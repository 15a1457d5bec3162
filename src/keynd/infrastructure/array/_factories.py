"""
Array construction mixin.

This module defines `ArrayFactoriesMixin`, which provides the classmethod
factories of the concrete `Array`: literals (`of`, `from_nested`,
`from_numpy`), constant fills (`zeros`, `ones`, `full`, `eye`), progressions
(`range`, `linspace`) and random arrays (`rand`, `randn`, `randi`), plus
the random permutation `shuffle`.

Notes
-----
- Every factory returns an array that owns a freshly allocated row-major
  buffer (except `from_numpy` with ``copy=False``).
- Random factories draw from an injected :class:`IRandomSource`; without one
  they use the process-wide `NumpyRandomSource`.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional, Sequence, Type, Union

import numpy as np

from ...domain._array import IArray, Number
from ...domain._kind import INT32_MAX, INT32_MIN, ElementKind
from ...domain._random import IRandomSource
from ...domain._errors import (
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ..random._numpy_source import default_source
from ._dtypes import dtype_of, kind_of_dtype, kind_of_scalar, to_python_scalar

Shape = Union[int, Sequence[int]]


def _require_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeMismatchError(f"{name} must be an int, got {value!r}")
    return int(value)


def _integer_kind(lo: int, hi: int) -> ElementKind:
    """INT if ``[lo, hi]`` fits in 32 bits, LONG otherwise."""
    if INT32_MIN <= lo and hi <= INT32_MAX:
        return ElementKind.INT
    return ElementKind.LONG


def _flatten(data: Any) -> tuple[list, tuple[int, ...]]:
    """
    Flatten a nested literal into row-major values and its shape.

    Raises
    ------
    InvalidArgumentError
        If sibling sub-sequences have different shapes.
    """
    if isinstance(data, np.ndarray) or hasattr(data, "kind"):
        arr = np.asarray(data)
        return arr.ravel().tolist(), tuple(arr.shape)
    if isinstance(data, (list, tuple)):
        if len(data) == 0:
            return [], (0,)
        parts = [_flatten(d) for d in data]
        inner = parts[0][1]
        for _, s in parts[1:]:
            if s != inner:
                raise InvalidArgumentError(
                    f"Ragged nested sequence: found sub-shapes {inner} and {s}"
                )
        return [v for vals, _ in parts for v in vals], (len(data),) + inner
    return [to_python_scalar(data)], ()


class ArrayFactoriesMixin(ABC):
    """Classmethod factories of the concrete Array."""

    @classmethod
    def _from_values(
        cls: Type[IArray],
        values: list,
        shape: tuple[int, ...],
        kind: Optional[ElementKind],
    ) -> "IArray":
        inferred = ElementKind.infer(values)
        if kind is not None and not isinstance(kind, ElementKind):
            raise TypeMismatchError(f"kind must be an ElementKind, got {kind!r}")
        target = kind or inferred or ElementKind.DOUBLE
        if inferred is ElementKind.COMPLEX and target is not ElementKind.COMPLEX:
            raise TypeMismatchError(
                f"Cannot build a {target.name} array from complex values"
            )
        if inferred is None:
            return cls._wrap(np.zeros(shape, dtype=dtype_of(target)), target)
        data = np.array(values, dtype=dtype_of(inferred)).reshape(shape)
        return cls._wrap(data, target)

    @classmethod
    def of(cls: Type[IArray], *values: Number, kind: Optional[ElementKind] = None) -> "IArray":
        """
        Build a 1-D array from literal values.

        Parameters
        ----------
        *values : Number
            Elements, in order. The kind is inferred: all bools -> BOOLEAN;
            ints -> INT (LONG if any value lies outside int32); any float ->
            DOUBLE; any complex -> COMPLEX. A single list or tuple argument is
            unpacked.
        kind : Optional[ElementKind]
            Explicit kind overriding inference. Values are cast to it.

        Returns
        -------
        IArray
            A new 1-D array.

        Raises
        ------
        TypeMismatchError
            If bools are mixed with numbers, a value is not numeric, or complex
            values are forced into a real kind.

        Examples
        --------
        ``Array.of(1, 2, 3)`` is an INT array, ``Array.of(1, 2.5)`` a DOUBLE one.
        """
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])
        vals = [to_python_scalar(v) for v in values]
        return cls._from_values(vals, (len(vals),), kind)

    @classmethod
    def from_nested(cls: Type[IArray], data: Any, kind: Optional[ElementKind] = None) -> "IArray":
        """
        Build an n-d array from nested lists (or tuples) of scalars.

        Kind inference follows :meth:`of`. A bare scalar yields a 0-d array.

        Raises
        ------
        InvalidArgumentError
            If the nesting is ragged.
        TypeMismatchError
            On non-numeric or mixed boolean/numeric values.
        """
        values, shape = _flatten(data)
        return cls._from_values(values, shape, kind)

    @classmethod
    def from_numpy(
        cls: Type[IArray],
        arr: Any,
        kind: Optional[ElementKind] = None,
        copy: bool = True,
    ) -> "IArray":
        """
        Wrap a NumPy array (or anything ``np.asarray`` accepts).

        Parameters
        ----------
        arr : array-like
            Source data. Its dtype determines the kind unless `kind` is given.
        kind : Optional[ElementKind]
            Target kind; the data is converted with :meth:`astype` semantics.
        copy : bool
            If False and no conversion is needed, the array shares `arr`'s
            buffer.

        Raises
        ------
        TypeMismatchError
            If the dtype is not boolean or numeric.
        """
        data = np.array(arr, copy=True) if copy else np.asarray(arr)
        shared = not copy and isinstance(arr, np.ndarray) and np.may_share_memory(data, arr)
        out = cls._wrap(data, kind_of_dtype(data.dtype), view=shared)
        if kind is None:
            return out
        return out.astype(kind)

    @classmethod
    def zeros(cls: Type[IArray], shape: Shape, kind: ElementKind = ElementKind.DOUBLE) -> "IArray":
        return cls(shape, kind)

    @classmethod
    def ones(cls: Type[IArray], shape: Shape, kind: ElementKind = ElementKind.DOUBLE) -> "IArray":
        return cls._wrap(np.ones(cls._as_shape(shape), dtype=dtype_of(kind)), kind)

    @classmethod
    def full(
        cls: Type[IArray],
        shape: Shape,
        value: Number,
        kind: Optional[ElementKind] = None,
    ) -> "IArray":
        """
        Create an array with every element set to `value`.

        If `kind` is None it is inferred from `value`.

        Raises
        ------
        TypeMismatchError
            If `value` is complex and `kind` is real.
        """
        inferred = kind_of_scalar(value)
        target = kind or inferred
        if inferred is ElementKind.COMPLEX and target is not ElementKind.COMPLEX:
            raise TypeMismatchError(f"Cannot fill a {target.name} array with {value!r}")
        data = np.full(cls._as_shape(shape), to_python_scalar(value), dtype=dtype_of(target))
        return cls._wrap(data, target)

    @classmethod
    def eye(cls: Type[IArray], n: int, kind: ElementKind = ElementKind.DOUBLE) -> "IArray":
        """``n x n`` identity matrix."""
        n = _require_int("n", n)
        if n < 0:
            raise InvalidArgumentError(f"eye: n must be non-negative, got {n}")
        return cls._wrap(np.eye(n, dtype=dtype_of(kind)), kind)

    @classmethod
    def range(
        cls: Type[IArray], start: int, end: Optional[int] = None, step: int = 1
    ) -> "IArray":
        """
        Arithmetic progression ``start, start + step, ...`` excluding `end`.

        ``range(n)`` means ``range(0, n)``. The result is an INT array, or a
        LONG array when a value falls outside the int32 range.

        Raises
        ------
        InvalidArgumentError
            If `step` is zero.
        TypeMismatchError
            If an argument is not an int.

        Examples
        --------
        ``range(0, 5, 1)`` yields ``[0, 1, 2, 3, 4]``.
        """
        if end is None:
            start, end = 0, start
        start = _require_int("start", start)
        end = _require_int("end", end)
        step = _require_int("step", step)
        if step == 0:
            raise InvalidArgumentError("range: step must be non-zero")
        data = np.arange(start, end, step, dtype=np.int64)
        if data.size == 0:
            return cls._wrap(data, ElementKind.INT)
        return cls._wrap(data, _integer_kind(int(data.min()), int(data.max())))

    @classmethod
    def linspace(cls: Type[IArray], start: float, end: float, count: int) -> "IArray":
        """
        `count` evenly spaced DOUBLE samples over ``[start, end]``, inclusive.

        Raises
        ------
        InvalidArgumentError
            If `count` is smaller than 1.

        Examples
        --------
        ``linspace(0.0, 1.0, 5)`` yields ``[0.0, 0.25, 0.5, 0.75, 1.0]``.
        """
        count = _require_int("count", count)
        if count < 1:
            raise InvalidArgumentError(f"linspace: count must be >= 1, got {count}")
        for name, v in (("start", start), ("end", end)):
            if not ElementKind.of_scalar(to_python_scalar(v)).is_real():
                raise TypeMismatchError(f"linspace: {name} must be real, got {v!r}")
        data = np.linspace(float(start), float(end), count, dtype=np.float64)
        return cls._wrap(data, ElementKind.DOUBLE)

    # ----------------------------
    # Random factories
    # ----------------------------
    @classmethod
    def _draw(
        cls: Type[IArray], op: str, shape: tuple[int, ...], samples: Any, kind: ElementKind
    ) -> "IArray":
        data = np.asarray(samples)
        if tuple(data.shape) != shape:
            raise ShapeMismatchError(op, shape, data.shape)
        return cls._wrap(data.astype(dtype_of(kind), copy=False), kind)

    @classmethod
    def rand(
        cls: Type[IArray], shape: Shape, *, source: Optional[IRandomSource] = None
    ) -> "IArray":
        """DOUBLE array of uniform samples on ``[0, 1)``."""
        shape = cls._as_shape(shape)
        src = source or default_source()
        return cls._draw("rand", shape, src.uniform(shape), ElementKind.DOUBLE)

    @classmethod
    def randn(
        cls: Type[IArray], shape: Shape, *, source: Optional[IRandomSource] = None
    ) -> "IArray":
        """DOUBLE array of standard normal samples."""
        shape = cls._as_shape(shape)
        src = source or default_source()
        return cls._draw("randn", shape, src.normal(shape), ElementKind.DOUBLE)

    @classmethod
    def randi(
        cls: Type[IArray],
        shape: Shape,
        low: int,
        high: int,
        *,
        source: Optional[IRandomSource] = None,
    ) -> "IArray":
        """
        Uniform integers on ``[low, high]`` (both bounds inclusive).

        The result is an INT array when both bounds fit in int32, otherwise
        LONG.

        Raises
        ------
        InvalidArgumentError
            If ``low > high``.
        """
        shape = cls._as_shape(shape)
        low = _require_int("low", low)
        high = _require_int("high", high)
        if low > high:
            raise InvalidArgumentError(f"randi: low ({low}) must not exceed high ({high})")
        src = source or default_source()
        return cls._draw(
            "randi", shape, src.integers(low, high + 1, shape), _integer_kind(low, high)
        )

    def shuffle(self: IArray, *, source: Optional[IRandomSource] = None) -> "IArray":
        """
        Return a copy with the elements randomly permuted.

        Every element may move to any position: the permutation is drawn over
        the row-major flattening and the result keeps the receiver's shape
        and kind.

        Parameters
        ----------
        source : Optional[IRandomSource]
            Random source; the permutation orders one uniform draw per
            element. Defaults to the process-wide source.
        """
        if self.size == 0:
            return self.copy()
        src = source or default_source()
        keys = np.asarray(src.uniform((self.size,))).reshape(self.size)
        perm = np.argsort(keys, kind="stable")
        out = self.data.reshape(-1)[perm].reshape(self.shape)
        return type(self)._wrap(out, self.kind)
