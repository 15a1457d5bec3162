"""
Kind-specific implementations of sqrt, exp, log and the trigonometric and
hyperbolic functions.

Integral inputs are converted to DOUBLE before evaluation. Real inputs
outside the function's domain (``sqrt(-1)``, ``log(0)``, ``asin(2)``) yield
``nan`` or ``-inf`` silently, and overflow yields ``inf``; use COMPLEX arrays
for complex results.
"""

from typing import Callable

import numpy as np

from ..._array_builder import NUMERIC_KINDS, register_kinds
from .....domain._array import IArray
from .....domain._kind import ElementKind

from ._base import ArrayMixinUnary as AMU


def _elementary(self: IArray, fn: Callable) -> "IArray":
    kind = ElementKind.COMPLEX if self.kind is ElementKind.COMPLEX else ElementKind.DOUBLE
    x = self.data.astype(kind.dtype_name, copy=False)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return type(self)._wrap(fn(x), kind)


@register_kinds(AMU, AMU.sqrt, NUMERIC_KINDS)
def array_sqrt(self: IArray) -> "IArray":
    return _elementary(self, np.sqrt)


@register_kinds(AMU, AMU.exp, NUMERIC_KINDS)
def array_exp(self: IArray) -> "IArray":
    return _elementary(self, np.exp)


@register_kinds(AMU, AMU.log, NUMERIC_KINDS)
def array_log(self: IArray) -> "IArray":
    return _elementary(self, np.log)


@register_kinds(AMU, AMU.sin, NUMERIC_KINDS)
def array_sin(self: IArray) -> "IArray":
    return _elementary(self, np.sin)


@register_kinds(AMU, AMU.cos, NUMERIC_KINDS)
def array_cos(self: IArray) -> "IArray":
    return _elementary(self, np.cos)


@register_kinds(AMU, AMU.tan, NUMERIC_KINDS)
def array_tan(self: IArray) -> "IArray":
    return _elementary(self, np.tan)


@register_kinds(AMU, AMU.asin, NUMERIC_KINDS)
def array_asin(self: IArray) -> "IArray":
    return _elementary(self, np.arcsin)


@register_kinds(AMU, AMU.acos, NUMERIC_KINDS)
def array_acos(self: IArray) -> "IArray":
    return _elementary(self, np.arccos)


@register_kinds(AMU, AMU.atan, NUMERIC_KINDS)
def array_atan(self: IArray) -> "IArray":
    return _elementary(self, np.arctan)


@register_kinds(AMU, AMU.sinh, NUMERIC_KINDS)
def array_sinh(self: IArray) -> "IArray":
    return _elementary(self, np.sinh)


@register_kinds(AMU, AMU.cosh, NUMERIC_KINDS)
def array_cosh(self: IArray) -> "IArray":
    return _elementary(self, np.cosh)


@register_kinds(AMU, AMU.tanh, NUMERIC_KINDS)
def array_tanh(self: IArray) -> "IArray":
    return _elementary(self, np.tanh)
