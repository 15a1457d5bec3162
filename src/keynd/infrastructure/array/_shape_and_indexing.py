"""
Array shape, indexing, and structural ops mixin (NumPy backend).

This module defines `ArrayShapeAndIndexingMixin`, a cohesive mixin that
implements shape-transforming, indexing and structural Array methods.

Design notes
------------
- To avoid circular imports, the implementation does not import `Array`
  directly; new arrays are built via ``type(self)`` (instance methods) or
  ``type(first)`` (staticmethods).
- Selections made only of integers, spans, Python slices and ``ALL`` are
  basic NumPy indexing and therefore views. As soon as one axis uses a
  `Mask` or `Take`, the selection is gathered into a copy.
- Writes through `__setitem__` always land in the receiver's buffer, for
  every index kind (gathers included).
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._array import IArray, Number
from ...domain._kind import ElementKind
from ...domain._index import ALL, At, IndexTag, Mask, Span, Take
from ...domain._errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ._dtypes import dtype_of

# An axis resolves to an int (axis removed), a slice (view) or an int64
# position array (gather).
_Resolved = Union[int, slice, np.ndarray]


def _as_expr(key: Any) -> Any:
    """
    Normalize one Python key into an index expression.

    ``int -> At``, ``range -> Span`` (or `Take` for negative steps), boolean
    arrays and lists of bools -> `Mask`, other arrays and lists -> `Take`.
    Python slices are kept as they are.
    """
    if isinstance(key, (At, Span, Mask, Take, IndexTag, slice)):
        return key
    if isinstance(key, (bool, np.bool_)):
        raise TypeMismatchError("A boolean scalar is not a valid index")
    if isinstance(key, (int, np.integer)):
        return At(int(key))
    if isinstance(key, range):
        if key.step > 0:
            return Span.of(key)
        return Take(list(key))
    if isinstance(key, np.ndarray) or hasattr(key, "kind"):
        data = np.asarray(key)
        if data.dtype == np.bool_:
            return Mask(data)
        return Take(data)
    if isinstance(key, (list, tuple)):
        if len(key) > 0 and all(isinstance(k, (bool, np.bool_)) for k in key):
            return Mask(np.asarray(key, dtype=np.bool_))
        return Take(list(key))
    raise TypeMismatchError(f"Unsupported index type: {type(key).__name__!r}")


def _check_position(i: int, extent: int, axis: int) -> int:
    j = i + extent if i < 0 else i
    if not 0 <= j < extent:
        raise IndexOutOfRangeError(i, extent, axis)
    return j


def _resolve_axis(expr: Any, axis: int, extent: int) -> _Resolved:
    """Resolve one index expression against an axis of the given extent."""
    if expr is ALL:
        return slice(None)
    if isinstance(expr, slice):
        return expr
    if isinstance(expr, At):
        return _check_position(int(expr.index), extent, axis)
    if isinstance(expr, Span):
        start = expr.start + extent if expr.start < 0 else expr.start
        end = extent if expr.end is None else expr.end
        end = end + extent if end < 0 else end
        if not 0 <= start <= extent:
            raise IndexOutOfRangeError(expr.start, extent, axis)
        if not 0 <= end <= extent:
            raise IndexOutOfRangeError(expr.end, extent, axis)
        return slice(start, end, expr.step)
    if isinstance(expr, Mask):
        flags = np.asarray(expr.flags)
        if flags.dtype != np.bool_:
            raise TypeMismatchError(f"Mask flags must be boolean, got {flags.dtype}")
        if flags.shape != (extent,):
            raise ShapeMismatchError("slice", (extent,), flags.shape)
        return np.flatnonzero(flags).astype(np.int64)
    if isinstance(expr, Take):
        idx = np.asarray(expr.indices)
        if idx.size == 0:
            return np.zeros(0, dtype=np.int64)
        if idx.dtype.kind not in "iu":
            raise TypeMismatchError(f"Take indices must be integers, got {idx.dtype}")
        idx = idx.astype(np.int64).reshape(-1)
        norm = np.where(idx < 0, idx + extent, idx)
        bad = np.flatnonzero((norm < 0) | (norm >= extent))
        if bad.size:
            raise IndexOutOfRangeError(int(idx[bad[0]]), extent, axis)
        return norm
    raise TypeMismatchError(f"Unsupported index expression: {expr!r}")


class ArrayShapeAndIndexingMixin(ABC):
    """
    Shape and indexing operations for the concrete Array implementation.

    This mixin groups together Array methods that primarily:
    - change the logical shape of arrays (reshape, ravel, transpose),
    - compose or decompose arrays structurally (concatenate, hstack, vstack,
      split, hsplit, vsplit, repeat, diag), and
    - provide indexing semantics (slice, take, __getitem__, __setitem__).
    """

    # ----------------------------
    # Index resolution
    # ----------------------------
    def _index_exprs(self: IArray, key: Any) -> tuple:
        exprs = key if isinstance(key, tuple) else (key,)
        return tuple(_as_expr(k) for k in exprs)

    def _full_mask(self: IArray, exprs: tuple) -> Optional[np.ndarray]:
        """
        Return the mask if `exprs` is a single boolean array over several axes.

        Raises
        ------
        ShapeMismatchError
            If such a mask does not match this array's shape.
        """
        if len(exprs) != 1 or not isinstance(exprs[0], Mask):
            return None
        flags = np.asarray(exprs[0].flags)
        if flags.ndim < 2:
            return None
        if flags.shape != self.shape:
            raise ShapeMismatchError("slice", self.shape, flags.shape)
        return flags

    def _resolve(self: IArray, exprs: tuple) -> list[_Resolved]:
        if len(exprs) > self.ndim:
            raise IndexOutOfRangeError(
                len(exprs),
                self.ndim,
                message=(
                    f"too many indices: array is {self.ndim}-dimensional, "
                    f"but {len(exprs)} were given"
                ),
            )
        out = [
            _resolve_axis(e, axis, self.shape[axis]) for axis, e in enumerate(exprs)
        ]
        out.extend(slice(None) for _ in range(self.ndim - len(exprs)))
        return out

    @staticmethod
    def _split_gather(
        resolved: list[_Resolved],
    ) -> tuple[tuple, Optional[list[np.ndarray]]]:
        """
        Split a resolved selection into a basic-indexing tuple and a gather.

        Returns
        -------
        tuple
            ``(basic, None)`` if the selection is a view, or ``(basic, lists)``
            where `lists` hold the per-axis positions to gather from the
            result of ``data[basic]``.
        """
        if not any(isinstance(r, np.ndarray) for r in resolved):
            # Trailing Ellipsis keeps an all-integer selection a 0-d view.
            return tuple(resolved) + (Ellipsis,), None
        basic = tuple(
            slice(None) if isinstance(r, np.ndarray) else r for r in resolved
        ) + (Ellipsis,)
        gather = [r for r in resolved if not isinstance(r, int)]
        return basic, gather

    def slice(self: IArray, *exprs: Any) -> "IArray":
        """
        Select a sub-array, one index expression per axis.

        Parameters
        ----------
        *exprs : IndexExpr or Python key
            At most ``ndim`` expressions; trailing axes default to ``ALL``.
            Python ints, slices, ranges, lists and boolean arrays are accepted
            and normalized into expressions.

        Returns
        -------
        IArray
            A view sharing this array's buffer when every axis uses `At`,
            `Span`, a Python slice or ``ALL``; a copy when any axis uses `Mask`
            or `Take`. Selecting with `At` on every axis yields a 0-d view.

        Raises
        ------
        IndexOutOfRangeError
            If a resolved index lies outside ``[0, extent)`` (negative indices
            are first normalized by adding the extent), or if more expressions
            than axes are given.
        ShapeMismatchError
            If a mask's length differs from the extent of its axis.

        Notes
        -----
        A single boolean array with this array's full shape gathers the
        selected elements into a 1-D copy, in row-major order.
        """
        exprs = tuple(_as_expr(e) for e in exprs)
        full = self._full_mask(exprs)
        if full is not None:
            return type(self)._wrap(self.data[full], self.kind)

        basic, gather = self._split_gather(self._resolve(exprs))
        sub = self.data[basic]
        if gather is None:
            return type(self)._wrap(sub, self.kind, view=True)
        return type(self)._wrap(sub[_gather_mesh(sub, gather)], self.kind)

    def __getitem__(self: IArray, key: Any) -> Union["IArray", Number]:
        """
        Index with Python keys or index expressions.

        Integer indices on every axis return a Python scalar; every other key
        returns an array as described in :meth:`slice`.
        """
        exprs = self._index_exprs(key)
        if len(exprs) == self.ndim and all(isinstance(e, At) for e in exprs):
            return self.slice(*exprs).item()
        return self.slice(*exprs)

    def __setitem__(self: IArray, key: Any, value: Union["IArray", Number]) -> None:
        """
        Write `value` into the selected positions of this array.

        Every index kind writes through to the receiver's buffer, including
        masks and index lists. `value` is broadcast to the selection's shape
        and cast to this array's kind.

        Raises
        ------
        TypeMismatchError
            If `value` is COMPLEX and this array is not.
        ShapeMismatchError
            If `value` does not broadcast to the selection.
        """
        src = self._as_array_like(value, self)
        if src.kind is ElementKind.COMPLEX and self.kind is not ElementKind.COMPLEX:
            raise TypeMismatchError(
                f"Cannot assign COMPLEX values into a {self.kind.name} array"
            )
        values = src.data.astype(self.dtype, copy=False)

        exprs = self._index_exprs(key)
        try:
            full = self._full_mask(exprs)
            if full is not None:
                self.data[full] = values
                return
            basic, gather = self._split_gather(self._resolve(exprs))
            if gather is None:
                self.data[basic] = values
                return
            sub = self.data[basic]
            sub[_gather_mesh(sub, gather)] = values
        except ValueError as e:
            if isinstance(e, (ShapeMismatchError, InvalidArgumentError)):
                raise
            raise ShapeMismatchError("setitem", self.shape, src.shape) from None

    # ----------------------------
    # Shape
    # ----------------------------
    def reshape(self: IArray, *shape: Union[int, Sequence[int]]) -> "IArray":
        """
        Reinterpret the elements under a new shape.

        Parameters
        ----------
        *shape : int or Sequence[int]
            New extents, given either as separate ints or as one sequence. At
            most one extent may be ``-1``; it is inferred from the others.

        Returns
        -------
        IArray
            A view when the current layout permits (always for row-major
            contiguous arrays), otherwise a copy.

        Raises
        ------
        ShapeMismatchError
            If the element counts differ.
        InvalidArgumentError
            If more than one extent is ``-1`` or any other extent is negative.
        """
        if len(shape) == 1 and isinstance(shape[0], (tuple, list)):
            shape = tuple(shape[0])
        if sum(1 for d in shape if isinstance(d, (int, np.integer)) and d == -1) > 1:
            raise InvalidArgumentError("reshape: can only infer one extent (-1)")

        known = self._as_shape(
            tuple(d for d in shape if not (isinstance(d, (int, np.integer)) and d == -1))
        )
        count = int(np.prod(known, dtype=np.int64)) if known else 1
        if len(known) != len(shape):
            if count == 0 or self.size % count != 0:
                raise ShapeMismatchError("reshape", self.shape, tuple(shape))
            new_shape = tuple(self.size // count if d == -1 else int(d) for d in shape)
        else:
            new_shape = known
            if count != self.size:
                raise ShapeMismatchError("reshape", self.shape, new_shape)
        out = self.data.reshape(new_shape)
        return type(self)._wrap(out, self.kind, view=np.may_share_memory(out, self.data))

    def ravel(self: IArray) -> "IArray":
        """Flatten to 1-D in row-major order (a view when contiguous)."""
        out = np.ravel(self.data)
        return type(self)._wrap(out, self.kind, view=np.may_share_memory(out, self.data))

    def transpose(self: IArray, *axes: Union[int, Sequence[int]]) -> "IArray":
        """
        Permute the axes of this array without copying.

        Parameters
        ----------
        *axes : int or Sequence[int]
            A permutation of ``range(ndim)``. If omitted, the axis order is
            reversed.

        Returns
        -------
        IArray
            A view with permuted strides.

        Raises
        ------
        InvalidArgumentError
            If `axes` is not a permutation of the array's axes.
        """
        if len(axes) == 1 and isinstance(axes[0], (tuple, list)):
            axes = tuple(axes[0])
        if not axes:
            return type(self)._wrap(self.data.transpose(), self.kind, view=True)
        if len(axes) != self.ndim:
            raise InvalidArgumentError(
                f"transpose: expected {self.ndim} axes, got {len(axes)}"
            )
        perm = tuple(self._normalize_axis(a, "transpose") for a in axes)
        if sorted(perm) != list(range(self.ndim)):
            raise InvalidArgumentError(f"transpose: {tuple(axes)} is not a permutation")
        return type(self)._wrap(self.data.transpose(perm), self.kind, view=True)

    @property
    def T(self: IArray) -> "IArray":
        """Reversed-axes transpose (same as ``transpose()``)."""
        return self.transpose()

    # ----------------------------
    # Structure
    # ----------------------------
    @staticmethod
    def concatenate(arrays: Sequence[Any], axis: int = 0) -> "IArray":
        """
        Join arrays along an existing axis.

        Parameters
        ----------
        arrays : Sequence[IArray]
            Arrays with equal ndim and equal extents on every axis except
            `axis`. The result kind is the promotion of every input kind.
        axis : int
            Join axis. Negative values count from the end.

        Returns
        -------
        IArray
            A new array.

        Raises
        ------
        InvalidArgumentError
            If `arrays` is empty or `axis` does not exist.
        ShapeMismatchError
            If the inputs disagree on ndim or on any non-joined extent.
        """
        return _join(list(arrays), axis, "concatenate")

    @staticmethod
    def hstack(*arrays: Any) -> "IArray":
        """
        Concatenate along the column axis.

        1-D inputs are joined end to end; inputs with two or more axes are
        joined along axis 1. A single sequence argument is unpacked.
        """
        arrays = _unpack(arrays)
        if not arrays:
            raise InvalidArgumentError("hstack requires at least one array")
        first = _first_array(arrays)
        items = [first._as_array_like(a, first) for a in arrays]
        items = [a.reshape(1) if a.ndim == 0 else a for a in items]
        axis = 0 if items[0].ndim == 1 else 1
        return _join(items, axis, "hstack")

    @staticmethod
    def vstack(*arrays: Any) -> "IArray":
        """
        Concatenate along the row axis.

        1-D inputs of length ``n`` are treated as rows of shape ``(1, n)``.
        A single sequence argument is unpacked.
        """
        arrays = _unpack(arrays)
        if not arrays:
            raise InvalidArgumentError("vstack requires at least one array")
        first = _first_array(arrays)
        items = []
        for a in arrays:
            a = first._as_array_like(a, first)
            if a.ndim < 2:
                a = a.reshape(1, a.size)
            items.append(a)
        return _join(items, 0, "vstack")

    def split(self: IArray, parts: int, axis: int = 0) -> list["IArray"]:
        """
        Split into `parts` equal pieces along `axis`.

        Returns
        -------
        list[IArray]
            Views into this array, in order.

        Raises
        ------
        InvalidArgumentError
            If `parts` is not a positive int dividing the extent of `axis`.
        """
        ax = self._normalize_axis(axis, "split")
        if isinstance(parts, bool) or not isinstance(parts, (int, np.integer)) or parts < 1:
            raise InvalidArgumentError(f"split: parts must be a positive int, got {parts!r}")
        extent = self.shape[ax]
        if extent % parts != 0:
            raise InvalidArgumentError(
                f"split: {parts} parts do not evenly divide extent {extent} of axis {ax}"
            )
        pieces = np.split(self.data, int(parts), axis=ax)
        return [type(self)._wrap(p, self.kind, view=True) for p in pieces]

    def hsplit(self: IArray, parts: int) -> list["IArray"]:
        """Split along the column axis: axis 0 for 1-D arrays, axis 1 otherwise."""
        return self.split(parts, 0 if self.ndim == 1 else 1)

    def vsplit(self: IArray, parts: int) -> list["IArray"]:
        """
        Split along the row axis (axis 0) of an array with at least two axes.

        Raises
        ------
        InvalidArgumentError
            If the array has fewer than two axes.
        """
        if self.ndim < 2:
            raise InvalidArgumentError(f"vsplit requires ndim >= 2, got {self.ndim}")
        return self.split(parts, 0)

    def take(self: IArray, indices: Any, axis: Optional[int] = None) -> "IArray":
        """
        Gather elements by position.

        Parameters
        ----------
        indices : int array-like
            Positions to gather. Negative positions count from the end.
        axis : Optional[int]
            Axis to gather along. If None, positions refer to the row-major
            flattening of the array.

        Returns
        -------
        IArray
            A new array. With ``axis=None`` its shape is that of `indices`;
            otherwise `axis` is replaced by the shape of `indices`.

        Raises
        ------
        IndexOutOfRangeError
            If a position is outside the gathered extent.
        TypeMismatchError
            If `indices` are not integers.

        Examples
        --------
        ``create(10, 20, 30).take([2, 0])`` yields ``[30, 10]``.
        """
        idx_shape = np.shape(np.asarray(indices))
        if axis is None:
            src, ax = self.data.reshape(-1), 0
        else:
            src, ax = self.data, self._normalize_axis(axis, "take")
        positions = _resolve_axis(Take(indices), ax, src.shape[ax])
        out = np.take(src, positions.reshape(idx_shape), axis=ax)
        return type(self)._wrap(out, self.kind)

    def repeat(self: IArray, count: int, axis: Optional[int] = None) -> "IArray":
        """
        Repeat every element `count` times.

        With ``axis=None`` the array is flattened first and the result is
        1-D; otherwise repetition happens along `axis`.

        Raises
        ------
        InvalidArgumentError
            If `count` is not a non-negative int.

        Examples
        --------
        ``create(1, 2).repeat(2)`` yields ``[1, 1, 2, 2]``.
        """
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 0:
            raise InvalidArgumentError(f"repeat: count must be a non-negative int, got {count!r}")
        ax = None if axis is None else self._normalize_axis(axis, "repeat")
        return type(self)._wrap(np.repeat(self.data, int(count), axis=ax), self.kind)

    def diag(self: IArray) -> "IArray":
        """
        Diagonal of a matrix, or a diagonal matrix built from a vector.

        Returns
        -------
        IArray
            For a 1-D array of length ``n``, a new ``n x n`` array holding it
            on the main diagonal and zeros elsewhere. For a 2-D array, a 1-D
            view of its main diagonal: writes through it reach the matrix.

        Raises
        ------
        InvalidArgumentError
            If the array is neither 1-D nor 2-D.
        """
        if self.ndim == 1:
            return type(self)._wrap(np.diag(self.data), self.kind)
        if self.ndim != 2:
            raise InvalidArgumentError(f"diag requires a 1-D or 2-D array, got ndim {self.ndim}")
        n = min(self.shape)
        view = np.lib.stride_tricks.as_strided(
            self.data, shape=(n,), strides=(sum(self.strides),)
        )
        return type(self)._wrap(view, self.kind, view=True)


def _gather_mesh(sub: np.ndarray, gather: list) -> tuple:
    """
    Open mesh selecting the gathered positions from `sub`.

    Axes already narrowed by a slice contribute all of their positions.
    """
    return np.ix_(
        *[g if isinstance(g, np.ndarray) else np.arange(n) for g, n in zip(gather, sub.shape)]
    )


def _unpack(arrays: tuple) -> list:
    if len(arrays) == 1 and isinstance(arrays[0], (list, tuple)):
        return list(arrays[0])
    return list(arrays)


def _first_array(items: list) -> IArray:
    """Return the first concrete array, used to pick the result class."""
    for a in items:
        if isinstance(a, IArray):
            return a
    raise TypeMismatchError("Expected at least one array among the inputs")


def _join(arrays: list, axis: int, op: str) -> IArray:
    if not arrays:
        raise InvalidArgumentError(f"{op} requires at least one array")
    first = _first_array(arrays)
    items = [first._as_array_like(a, first) for a in arrays]
    ref = items[0]
    ax = ref._normalize_axis(axis, op)

    kind = ref.kind
    for a in items[1:]:
        if a.ndim != ref.ndim:
            raise ShapeMismatchError(op, ref.shape, a.shape)
        for d in range(ref.ndim):
            if d != ax and a.shape[d] != ref.shape[d]:
                raise ShapeMismatchError(op, ref.shape, a.shape)
        kind = ElementKind.promote(kind, a.kind)

    dt = dtype_of(kind)
    out = np.concatenate([a.data.astype(dt, copy=False) for a in items], axis=ax)
    return type(first)._wrap(out, kind)
