"""
Kind-specific implementations of Array division via control-path dispatch.

This module registers two control paths for `ArrayMixinArithmetic.div`:

- DOUBLE / COMPLEX: IEEE floating-point (or complex) division. Division by
  zero produces ``inf``/``nan`` without emitting NumPy warnings.
- INT / LONG: integer division truncating toward zero, preserving the
  integral kind. If the right-hand operand promotes the result to a floating
  kind (e.g. ``int_array / 2.0``), the floating path is used instead.
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager, kind_not_supported
from .....domain._array import IArray, Number
from .....domain._kind import ElementKind

from ._base import ArrayMixinArithmetic as AMA


def _true_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(a, b)


def _truncating_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Integer quotient rounded toward zero (floor_divide rounds toward -inf).

    The most negative value divided by -1 wraps around to itself.
    """
    with np.errstate(over="ignore"):
        q = np.floor_divide(a, b)
        r = np.remainder(a, b)
    fix = (r != 0) & ((a < 0) != (b < 0))
    return (q + fix).astype(q.dtype, copy=False)


@array_control_path_manager(AMA, AMA.div, ElementKind.COMPLEX, kind_not_supported)
@array_control_path_manager(AMA, AMA.div, ElementKind.DOUBLE, kind_not_supported)
def array_div_float(self: IArray, other: Union["IArray", Number]) -> "IArray":
    """
    Floating-point elementwise ``self / other``.

    Returns
    -------
    IArray
        New DOUBLE (or COMPLEX) array with the broadcast shape.
    """
    a, b, kind = self._binary_operands(other, "div")
    return type(self)._wrap(_true_divide(a, b), kind)


@array_control_path_manager(AMA, AMA.div, ElementKind.LONG, kind_not_supported)
@array_control_path_manager(AMA, AMA.div, ElementKind.INT, kind_not_supported)
def array_div_integral(self: IArray, other: Union["IArray", Number]) -> "IArray":
    """
    Integer elementwise ``self / other``, truncating toward zero.

    Raises
    ------
    ZeroDivisionError
        If any divisor element is zero.
    """
    a, b, kind = self._binary_operands(other, "div")
    if not kind.is_integral():
        return type(self)._wrap(_true_divide(a, b), kind)
    if np.any(b == 0):
        raise ZeroDivisionError("integer division by zero")
    return type(self)._wrap(_truncating_divide(a, b), kind)
