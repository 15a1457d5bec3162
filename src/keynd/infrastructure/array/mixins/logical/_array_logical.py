"""
BOOLEAN control paths for the logical operators and ``where``.
"""

from typing import Callable, Union

import numpy as np

from ..._array_builder import array_control_path_manager, kind_not_supported
from .....domain._array import IArray, Number
from .....domain._errors import TypeMismatchError
from .....domain._kind import ElementKind

from ._base import ArrayMixinLogical as AML, BoolOperand

BOOLEAN = ElementKind.BOOLEAN


def _logical(self: IArray, other: BoolOperand, op: str, fn: Callable) -> "IArray":
    other_a = self._as_array_like(other, self)
    if other_a.kind is not BOOLEAN:
        raise TypeMismatchError(
            f"{op} requires BOOLEAN operands, got {other_a.kind.name}"
        )
    self._broadcast_shape(op, self.shape, other_a.shape)
    return type(self)._wrap(fn(self.data, other_a.data), BOOLEAN)


@array_control_path_manager(AML, AML.and_, BOOLEAN, kind_not_supported)
def array_and(self: IArray, other: BoolOperand) -> "IArray":
    return _logical(self, other, "and_", np.logical_and)


@array_control_path_manager(AML, AML.or_, BOOLEAN, kind_not_supported)
def array_or(self: IArray, other: BoolOperand) -> "IArray":
    return _logical(self, other, "or_", np.logical_or)


@array_control_path_manager(AML, AML.xor, BOOLEAN, kind_not_supported)
def array_xor(self: IArray, other: BoolOperand) -> "IArray":
    return _logical(self, other, "xor", np.logical_xor)


@array_control_path_manager(AML, AML.not_, BOOLEAN, kind_not_supported)
def array_not(self: IArray) -> "IArray":
    return type(self)._wrap(np.logical_not(self.data), BOOLEAN)


@array_control_path_manager(AML, AML.where, BOOLEAN, kind_not_supported)
def array_where(
    self: IArray, x: Union["IArray", Number], y: Union["IArray", Number]
) -> "IArray":
    xa = self._as_array_like(x, self)
    ya = self._as_array_like(y, self)
    if (xa.kind is BOOLEAN) != (ya.kind is BOOLEAN):
        raise TypeMismatchError(
            f"where cannot mix {xa.kind.name} and {ya.kind.name} branches"
        )
    shape = self._broadcast_shape("where", self.shape, xa.shape)
    self._broadcast_shape("where", shape, ya.shape)
    kind = ElementKind.promote(xa.kind, ya.kind)
    dt = kind.dtype_name
    out = np.where(self.data, xa.data.astype(dt, copy=False), ya.data.astype(dt, copy=False))
    return type(self)._wrap(out, kind)
