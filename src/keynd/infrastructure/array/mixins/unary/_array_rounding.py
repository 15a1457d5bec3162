"""
Kind-specific implementations of floor, ceil, round and signum.

Integral arrays are already whole numbers: floor, ceil and round return a
copy of the same kind. COMPLEX floor and ceil act on the real and imaginary
parts separately.
"""

from typing import Callable

import numpy as np

from ..._array_builder import register_kinds
from .....domain._array import IArray
from .....domain._kind import ElementKind
from .....domain._errors import InvalidArgumentError

from ._base import ArrayMixinUnary as AMU

_INTEGRAL = (ElementKind.INT, ElementKind.LONG)
_INT64_BOUND = 2.0**63


def _componentwise(self: IArray, fn: Callable) -> "IArray":
    out = np.empty_like(self.data)
    out.real = fn(self.data.real)
    out.imag = fn(self.data.imag)
    return type(self)._wrap(out, ElementKind.COMPLEX)


@register_kinds(AMU, AMU.floor, _INTEGRAL)
@register_kinds(AMU, AMU.ceil, _INTEGRAL)
@register_kinds(AMU, AMU.round, _INTEGRAL)
def array_round_integral(self: IArray) -> "IArray":
    return self.copy()


@register_kinds(AMU, AMU.floor, (ElementKind.DOUBLE,))
def array_floor_double(self: IArray) -> "IArray":
    return type(self)._wrap(np.floor(self.data), ElementKind.DOUBLE)


@register_kinds(AMU, AMU.ceil, (ElementKind.DOUBLE,))
def array_ceil_double(self: IArray) -> "IArray":
    return type(self)._wrap(np.ceil(self.data), ElementKind.DOUBLE)


@register_kinds(AMU, AMU.floor, (ElementKind.COMPLEX,))
def array_floor_complex(self: IArray) -> "IArray":
    return _componentwise(self, np.floor)


@register_kinds(AMU, AMU.ceil, (ElementKind.COMPLEX,))
def array_ceil_complex(self: IArray) -> "IArray":
    return _componentwise(self, np.ceil)


@register_kinds(AMU, AMU.round, (ElementKind.DOUBLE,))
def array_round_double(self: IArray) -> "IArray":
    """
    Round half up (``floor(x + 0.5)``) into a LONG array.

    Examples
    --------
    ``round([1.5, 2.5, -1.5])`` yields ``[2, 3, -1]``.
    """
    r = np.floor(self.data + 0.5)
    in_range = np.isfinite(r) & (r >= -_INT64_BOUND) & (r < _INT64_BOUND)
    if not np.all(in_range):
        raise InvalidArgumentError(
            "round: every element must be finite and fit in a 64-bit integer"
        )
    return type(self)._wrap(r.astype(np.int64), ElementKind.LONG)


@register_kinds(AMU, AMU.signum, (ElementKind.INT, ElementKind.LONG, ElementKind.DOUBLE))
def array_signum(self: IArray) -> "IArray":
    return type(self)._wrap(np.sign(self.data), self.kind)
