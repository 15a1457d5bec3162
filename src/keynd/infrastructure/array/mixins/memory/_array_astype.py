"""
Kind conversion implementations for `Array.astype()`.

Real kinds convert with a plain NumPy cast. COMPLEX sources are handled
separately so that dropping imaginary parts is reported instead of
surfacing NumPy's ``ComplexWarning``.
"""

import os
import sys
import warnings
from pathlib import Path

import numpy as np

from ..._array_builder import REAL_KINDS, register_kinds
from ..._dtypes import dtype_of
from .....domain._array import IArray
from .....domain._kind import ElementKind
from .....domain._errors import TypeMismatchError

from ._base import ArrayMixinMemory as AMM

# Root directory of the keynd package.
_PACKAGE_DIR = str(Path(__file__).resolve().parents[4]) + os.sep


def _caller_stacklevel() -> int:
    """`stacklevel` of the first frame outside keynd, relative to our caller."""
    level = 1
    frame = sys._getframe(1)
    while frame is not None and os.path.realpath(frame.f_code.co_filename).startswith(
        _PACKAGE_DIR
    ):
        frame = frame.f_back
        level += 1
    return level


def _check_target(kind: ElementKind) -> None:
    if not isinstance(kind, ElementKind):
        raise TypeMismatchError(f"astype expects an ElementKind, got {kind!r}")


@register_kinds(AMM, AMM.astype, REAL_KINDS)
def array_astype_real(self: IArray, kind: ElementKind) -> "IArray":
    _check_target(kind)
    if kind is self.kind:
        return self
    return type(self)._wrap(self.data.astype(dtype_of(kind)), kind)


@register_kinds(AMM, AMM.astype, (ElementKind.COMPLEX,))
def array_astype_complex(self: IArray, kind: ElementKind) -> "IArray":
    _check_target(kind)
    if kind is ElementKind.COMPLEX:
        return self
    if kind is ElementKind.BOOLEAN:
        return type(self)._wrap(self.data != 0, kind)
    if np.any(self.data.imag != 0):
        warnings.warn(
            f"Discarding non-zero imaginary parts when converting COMPLEX to {kind.name}",
            RuntimeWarning,
            stacklevel=_caller_stacklevel(),
        )
    return type(self)._wrap(self.data.real.astype(dtype_of(kind)), kind)
