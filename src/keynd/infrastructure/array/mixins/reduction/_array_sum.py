"""
Kind-specific implementations of sum, prod, cumsum and trace.
"""

from typing import Optional

import numpy as np

from ..._array_builder import ALL_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._kind import ElementKind
from .....domain._errors import InvalidArgumentError

from ._base import ArrayMixinReduction as AMR, reduction_axis


def _sum_kind(kind: ElementKind) -> ElementKind:
    """INT, LONG and BOOLEAN accumulate as LONG; DOUBLE and COMPLEX keep their kind."""
    if kind in (ElementKind.DOUBLE, ElementKind.COMPLEX):
        return kind
    return ElementKind.LONG


@register_kinds(AMR, AMR.sum, ALL_KINDS)
def array_sum(self: IArray, axis: Optional[int] = None):
    ax = reduction_axis(self, axis, "sum", require_elements=False)
    kind = _sum_kind(self.kind)
    out = np.sum(self.data, axis=ax, dtype=kind.dtype_name)
    if ax is None:
        return out.item()
    return type(self)._wrap(out, kind)


@register_kinds(AMR, AMR.cumsum, ALL_KINDS)
def array_cumsum(self: IArray, axis: Optional[int] = None) -> "IArray":
    """
    Running totals along `axis`.

    With ``axis=None`` the array is flattened in row-major order and a 1-D
    array of the same size is returned.
    """
    ax = reduction_axis(self, axis, "cumsum", require_elements=False)
    kind = _sum_kind(self.kind)
    out = np.cumsum(self.data, axis=ax, dtype=kind.dtype_name)
    return type(self)._wrap(out, kind)


@register_kinds(AMR, AMR.prod, ALL_KINDS)
def array_prod(self: IArray, axis: Optional[int] = None):
    ax = reduction_axis(self, axis, "prod", require_elements=False)
    kind = _sum_kind(self.kind)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.prod(self.data, axis=ax, dtype=kind.dtype_name)
    if ax is None:
        return out.item()
    return type(self)._wrap(out, kind)


@register_kinds(AMR, AMR.trace, ALL_KINDS)
def array_trace(self: IArray):
    if self.ndim != 2:
        raise InvalidArgumentError(f"trace requires a 2-D array, got ndim {self.ndim}")
    return np.trace(self.data, dtype=_sum_kind(self.kind).dtype_name).item()
