"""
Element-kind abstraction for KeyND arrays.

This module defines :class:`ElementKind`, the enumeration of element types an
array may hold, together with the promotion rules used by binary operations
and the inference rules used by literal construction.

The domain layer does not import NumPy: each kind records the *name* of its
storage dtype, and the infrastructure layer maps that name onto a concrete
``numpy.dtype``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional

from ._errors import TypeMismatchError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ElementKind(Enum):
    """
    Enumeration of supported element kinds.

    Attributes
    ----------
    BOOLEAN : ElementKind
        Boolean elements (``bool``).
    INT : ElementKind
        32-bit signed integers (``int32``).
    LONG : ElementKind
        64-bit signed integers (``int64``).
    DOUBLE : ElementKind
        64-bit floating point (``float64``).
    COMPLEX : ElementKind
        128-bit complex numbers (``complex128``).

    Notes
    -----
    Members are declared in promotion order: a binary operation between two
    kinds yields the later of the two (see :meth:`promote`).
    """

    BOOLEAN = "bool"
    INT = "int32"
    LONG = "int64"
    DOUBLE = "float64"
    COMPLEX = "complex128"

    @property
    def dtype_name(self) -> str:
        """Name of the storage dtype backing this kind."""
        return self.value

    @property
    def rank(self) -> int:
        """Position of this kind in the promotion order."""
        return _ORDER.index(self)

    def is_integral(self) -> bool:
        return self is ElementKind.INT or self is ElementKind.LONG

    def is_numeric(self) -> bool:
        return self is not ElementKind.BOOLEAN

    def is_real(self) -> bool:
        return self is not ElementKind.COMPLEX

    @staticmethod
    def promote(a: "ElementKind", b: "ElementKind") -> "ElementKind":
        """
        Return the result kind of a binary operation between `a` and `b`.

        Parameters
        ----------
        a, b : ElementKind
            Operand kinds.

        Returns
        -------
        ElementKind
            The wider of the two kinds under
            ``BOOLEAN < INT < LONG < DOUBLE < COMPLEX``.
        """
        return a if a.rank >= b.rank else b

    @staticmethod
    def from_dtype_name(name: str) -> "ElementKind":
        """
        Resolve the kind whose storage dtype is `name`.

        Raises
        ------
        TypeMismatchError
            If no kind is backed by the given dtype.
        """
        for kind in _ORDER:
            if kind.value == name:
                return kind
        raise TypeMismatchError(f"Unsupported element dtype: {name!r}")

    @staticmethod
    def of_scalar(value: Any) -> "ElementKind":
        """
        Infer the kind of a single Python scalar.

        ``bool`` maps to BOOLEAN, ``int`` to INT (or LONG when outside the
        int32 range), ``float`` to DOUBLE, ``complex`` to COMPLEX.

        Raises
        ------
        TypeMismatchError
            If `value` is not a Python number.
        """
        # bool must be checked before int: bool is a subclass of int.
        if isinstance(value, bool):
            return ElementKind.BOOLEAN
        if isinstance(value, int):
            if INT32_MIN <= value <= INT32_MAX:
                return ElementKind.INT
            if INT64_MIN <= value <= INT64_MAX:
                return ElementKind.LONG
            raise TypeMismatchError(f"Integer {value} does not fit in 64 bits")
        if isinstance(value, float):
            return ElementKind.DOUBLE
        if isinstance(value, complex):
            return ElementKind.COMPLEX
        raise TypeMismatchError(
            f"Unsupported element type {type(value).__name__!r} (value={value!r})"
        )

    @staticmethod
    def infer(values: Iterable[Any]) -> Optional["ElementKind"]:
        """
        Infer a common kind for a literal sequence.

        Returns
        -------
        Optional[ElementKind]
            The promoted kind of all values, or None for an empty sequence.

        Raises
        ------
        TypeMismatchError
            If booleans are mixed with numbers, or a value is not a number.
        """
        kind: Optional[ElementKind] = None
        for v in values:
            k = ElementKind.of_scalar(v)
            if kind is None:
                kind = k
                continue
            if (kind is ElementKind.BOOLEAN) != (k is ElementKind.BOOLEAN):
                raise TypeMismatchError(
                    "Cannot mix boolean and numeric values in one array literal"
                )
            kind = ElementKind.promote(kind, k)
        return kind


_ORDER = (
    ElementKind.BOOLEAN,
    ElementKind.INT,
    ElementKind.LONG,
    ElementKind.DOUBLE,
    ElementKind.COMPLEX,
)
