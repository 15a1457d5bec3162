"""
Index expressions for array slicing.

An index expression selects positions along one axis of an array. The
supported variants form a small sum type:

- :class:`At`   : a single integer position (removes the axis)
- :class:`Span` : a contiguous range ``[start, end)`` with a positive step
- :class:`Mask` : a boolean mask with one flag per position
- :class:`Take` : an explicit list of positions
- ``ALL``       : the :class:`IndexTag` member meaning the full extent

`At`, `Span` and `ALL` select regularly strided positions and therefore
produce views; `Mask` and `Take` gather arbitrary positions and produce
copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

from ._errors import InvalidArgumentError


class IndexTag(Enum):
    """Tag variants of the index-expression sum type."""

    ALL = "all"

    def __repr__(self) -> str:
        return "ALL"


ALL = IndexTag.ALL
"""Select the full extent of an axis."""


@dataclass(frozen=True)
class At:
    """Select a single position. Negative positions count from the end."""

    index: int


@dataclass(frozen=True)
class Span:
    """
    Select ``start, start + step, ...`` up to (excluding) ``end``.

    Attributes
    ----------
    start : int
        First position. Defaults to 0.
    end : Optional[int]
        Exclusive upper bound. None means the full extent.
    step : int
        Positive stride between positions. Defaults to 1.

    Raises
    ------
    InvalidArgumentError
        If `step` is not a positive integer.
    """

    start: int = 0
    end: Optional[int] = None
    step: int = 1

    def __post_init__(self) -> None:
        if self.step == 0:
            raise InvalidArgumentError("Span step must be non-zero")
        if self.step < 0:
            raise InvalidArgumentError(
                f"Span step must be positive, got {self.step}"
            )

    @classmethod
    def of(cls, r: range) -> "Span":
        """Convert a Python ``range`` with a positive step into a Span."""
        return cls(r.start, r.stop, r.step)


@dataclass(frozen=True)
class Mask:
    """Select the positions whose flag is True. `flags` may be any boolean 1-D array-like."""

    flags: Any


@dataclass(frozen=True)
class Take:
    """Select the listed positions, in order. Repeats are allowed."""

    indices: Sequence[int]


IndexExpr = Union[At, Span, Mask, Take, IndexTag]
"""Any index expression accepted by ``Array.slice``."""
