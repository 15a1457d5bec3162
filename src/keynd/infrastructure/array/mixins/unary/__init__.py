"""
Unary mixins and kind-specific implementations for Array operations.

This package aggregates the unary mixin and its control paths:

- negation / absolute value (``neg``, ``abs``)
- elementary functions      (``sqrt``, ``exp``, ``log``, trigonometric and
                              hyperbolic functions)
- rounding and sign         (``floor``, ``ceil``, ``round``, ``signum``)
- power                     (``pow`` / ``**``)

Public API
----------
- ``ArrayMixinUnary``
"""

from ._array_neg import *
from ._array_elementary import *
from ._array_rounding import *
from ._array_pow import *
from ._base import ArrayMixinUnary

__all__ = [
    ArrayMixinUnary.__name__,
]
