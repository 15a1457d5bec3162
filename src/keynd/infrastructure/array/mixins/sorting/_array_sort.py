"""
Kind-specific implementations of Array sorting and argsort.
"""

from functools import cmp_to_key
from typing import Optional

import numpy as np

from ..._array_builder import ALL_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._kind import INT32_MAX, ElementKind
from .....domain._errors import InvalidArgumentError

from ._base import ArrayMixinSorting as AMS, IndexComparator


def _lane_order(
    self: IArray, ax: int, comparator: Optional[IndexComparator]
) -> np.ndarray:
    """Stable per-lane sort positions along `ax`, shaped like the receiver."""
    if comparator is None:
        return np.argsort(self.data, axis=ax, kind="stable")

    # Move the sorted axis last and walk the lanes in row-major order.
    moved = np.moveaxis(self.data, ax, -1)
    n = moved.shape[-1]
    lanes = moved.reshape(-1, n)
    order = np.empty(lanes.shape, dtype=np.int64)
    for r in range(lanes.shape[0]):
        lane = type(self)._wrap(lanes[r], self.kind)
        order[r] = sorted(range(n), key=cmp_to_key(lambda i, j: comparator(lane, i, j)))
    return np.moveaxis(order.reshape(moved.shape), -1, ax)


@register_kinds(AMS, AMS.sort, ALL_KINDS)
def array_sort(
    self: IArray, axis: int = 0, comparator: Optional[IndexComparator] = None
) -> "IArray":
    if self.ndim == 0:
        return self.copy()
    ax = self._normalize_axis(axis, "sort")
    if self.size == 0:
        return self.copy()
    if comparator is None:
        return type(self)._wrap(np.sort(self.data, axis=ax, kind="stable"), self.kind)
    out = np.take_along_axis(self.data, _lane_order(self, ax, comparator), axis=ax)
    return type(self)._wrap(np.ascontiguousarray(out), self.kind)


@register_kinds(AMS, AMS.argsort, ALL_KINDS)
def array_argsort(
    self: IArray, axis: int = 0, comparator: Optional[IndexComparator] = None
) -> "IArray":
    if self.ndim == 0:
        raise InvalidArgumentError("argsort requires at least one axis")
    ax = self._normalize_axis(axis, "argsort")
    kind = ElementKind.INT if self.shape[ax] <= INT32_MAX else ElementKind.LONG
    if self.size == 0:
        return type(self)._wrap(np.zeros(self.shape, dtype=np.int64), kind)
    order = np.ascontiguousarray(_lane_order(self, ax, comparator))
    return type(self)._wrap(order, kind)
