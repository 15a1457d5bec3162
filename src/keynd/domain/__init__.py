"""
Backend-agnostic domain layer: kinds, index expressions, protocols and errors.

Nothing in this package imports NumPy.
"""

from ._errors import (
    ArrayError,
    EmptyArrayError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ._kind import ElementKind
from ._index import ALL, At, IndexExpr, IndexTag, Mask, Span, Take
from ._array import IArray, Number
from ._random import IRandomSource

__all__ = [
    "ALL",
    "ArrayError",
    "At",
    "ElementKind",
    "EmptyArrayError",
    "IArray",
    "IRandomSource",
    "IndexExpr",
    "IndexOutOfRangeError",
    "IndexTag",
    "InvalidArgumentError",
    "Mask",
    "Number",
    "ShapeMismatchError",
    "Span",
    "Take",
    "TypeMismatchError",
]
