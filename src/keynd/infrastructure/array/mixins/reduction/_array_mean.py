"""
Kind-specific implementations of mean, var and std.

Every kind accumulates in floating point: INT, LONG, BOOLEAN and DOUBLE in
float64, COMPLEX in complex128. Means of COMPLEX arrays stay COMPLEX, while
variance and standard deviation are always real.
"""

from typing import Callable, Optional

import numpy as np

from ..._array_builder import ALL_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._kind import ElementKind

from ._base import ArrayMixinReduction as AMR, reduction_axis


def _moment(
    self: IArray,
    axis: Optional[int],
    op: str,
    fn: Callable,
    out_kind: ElementKind,
):
    ax = reduction_axis(self, axis, op)
    if self.kind is ElementKind.COMPLEX:
        x = self.data
    else:
        x = self.data.astype(np.float64, copy=False)
    out = fn(x, axis=ax)
    if ax is None:
        return np.asarray(out).astype(out_kind.dtype_name).item()
    return type(self)._wrap(out, out_kind)


@register_kinds(AMR, AMR.mean, ALL_KINDS)
def array_mean(self: IArray, axis: Optional[int] = None):
    """
    Arithmetic mean over all elements, or per slice along `axis`.

    Examples
    --------
    ``mean([1, 2, 3, 4]) == 2.5`` and ``mean([[1, 2], [3, 4]], axis=0)``
    is ``[2.0, 3.0]``.
    """
    kind = ElementKind.COMPLEX if self.kind is ElementKind.COMPLEX else ElementKind.DOUBLE
    return _moment(self, axis, "mean", np.mean, kind)


@register_kinds(AMR, AMR.var, ALL_KINDS)
def array_var(self: IArray, axis: Optional[int] = None):
    return _moment(self, axis, "var", np.var, ElementKind.DOUBLE)


@register_kinds(AMR, AMR.std, ALL_KINDS)
def array_std(self: IArray, axis: Optional[int] = None):
    return _moment(self, axis, "std", np.std, ElementKind.DOUBLE)
