"""
KeyND: a typed n-dimensional array library on top of NumPy.

The public API re-exports the concrete :class:`Array`, the element kinds,
index expressions and errors, and offers the array factories as free
functions::

    import keynd as nd

    a = nd.create(1, 2, 3)                 # INT array
    b = nd.linspace(0.0, 1.0, 5)           # DOUBLE array
    m = nd.from_nested([[1, 2], [3, 4]]) + 10
    m[0, nd.ALL]                           # view of the first row
"""

from .domain import (
    ALL,
    ArrayError,
    At,
    ElementKind,
    EmptyArrayError,
    IArray,
    IndexExpr,
    IndexOutOfRangeError,
    IndexTag,
    InvalidArgumentError,
    IRandomSource,
    Mask,
    ShapeMismatchError,
    Span,
    Take,
    TypeMismatchError,
)
from .infrastructure.array import Array
from .infrastructure.random import NumpyRandomSource, seed

BOOLEAN = ElementKind.BOOLEAN
INT = ElementKind.INT
LONG = ElementKind.LONG
DOUBLE = ElementKind.DOUBLE
COMPLEX = ElementKind.COMPLEX

create = Array.of
from_nested = Array.from_nested
from_numpy = Array.from_numpy
zeros = Array.zeros
ones = Array.ones
full = Array.full
eye = Array.eye
range = Array.range
linspace = Array.linspace
rand = Array.rand
randn = Array.randn
randi = Array.randi
concatenate = Array.concatenate
hstack = Array.hstack
vstack = Array.vstack


def split(array: Array, parts: int, axis: int = 0) -> list[Array]:
    """Split `array` into `parts` equal views along `axis`."""
    return array.split(parts, axis)


def hsplit(array: Array, parts: int) -> list[Array]:
    return array.hsplit(parts)


def vsplit(array: Array, parts: int) -> list[Array]:
    return array.vsplit(parts)


def where(condition, x, y) -> Array:
    """
    Pick elements from `x` where `condition` holds and from `y` elsewhere.

    `condition` is a BOOLEAN array, or anything :meth:`Array.from_numpy`
    accepts with a boolean dtype.
    """
    if not isinstance(condition, Array):
        condition = Array.from_numpy(condition)
    return condition.where(x, y)


__all__ = [
    "ALL",
    "Array",
    "ArrayError",
    "At",
    "BOOLEAN",
    "COMPLEX",
    "DOUBLE",
    "ElementKind",
    "EmptyArrayError",
    "IArray",
    "INT",
    "IRandomSource",
    "IndexExpr",
    "IndexOutOfRangeError",
    "IndexTag",
    "InvalidArgumentError",
    "LONG",
    "Mask",
    "NumpyRandomSource",
    "ShapeMismatchError",
    "Span",
    "Take",
    "TypeMismatchError",
    "concatenate",
    "create",
    "eye",
    "from_nested",
    "from_numpy",
    "full",
    "hsplit",
    "hstack",
    "linspace",
    "ones",
    "rand",
    "randi",
    "randn",
    "range",
    "seed",
    "split",
    "vsplit",
    "vstack",
    "where",
    "zeros",
]
