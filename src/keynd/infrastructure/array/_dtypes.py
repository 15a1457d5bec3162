"""
Mapping between :class:`ElementKind` and NumPy dtypes.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._kind import ElementKind

# Storage dtype for every float and complex width.
_WIDEST = {"f": "float64", "c": "complex128"}


def dtype_of(kind: ElementKind) -> np.dtype:
    """Return the NumPy dtype backing `kind`."""
    return np.dtype(kind.dtype_name)


def kind_of_dtype(dtype: Any) -> ElementKind:
    """
    Return the kind that stores elements of `dtype`.

    Narrow integer dtypes map to INT; 64-bit and unsigned 32-bit integers map
    to LONG; every float width maps to DOUBLE and every complex width to
    COMPLEX.

    Raises
    ------
    TypeMismatchError
        If `dtype` is not boolean or numeric.
    """
    dt = np.dtype(dtype)
    if dt.kind in "iu":
        fits_int32 = dt.itemsize < 4 or (dt.kind == "i" and dt.itemsize == 4)
        name = "int32" if fits_int32 else "int64"
    else:
        name = _WIDEST.get(dt.kind, dt.name)
    return ElementKind.from_dtype_name(name)


def is_scalar(x: Any) -> bool:
    """True for Python numbers and NumPy scalars."""
    return isinstance(x, (bool, int, float, complex, np.generic))


def kind_of_scalar(x: Any) -> ElementKind:
    """
    Infer the kind of a Python or NumPy scalar.

    NumPy integers are classified by value (like Python ints) so that an
    ``np.int64(3)`` operand does not widen an INT array.
    """
    if isinstance(x, np.generic):
        if isinstance(x, np.bool_):
            return ElementKind.BOOLEAN
        if isinstance(x, np.integer):
            return ElementKind.of_scalar(int(x))
        return kind_of_dtype(x.dtype)
    return ElementKind.of_scalar(x)


def to_python_scalar(x: Any) -> Any:
    """Unwrap a NumPy scalar into the equivalent Python number."""
    if isinstance(x, np.generic):
        return x.item()
    return x
