"""
Arithmetic mixins and kind-specific implementations for Array operations.

This package aggregates the arithmetic mixin and its concrete control-path
implementations:

- addition       (``add`` / ``+``)
- subtraction    (``sub`` / ``rsub`` / ``-``)
- multiplication (``mul`` / ``*``)
- division       (``div`` / ``rdiv`` / ``/``)

Concrete implementation modules are imported for their *side effects*:
registering control paths with the array control-path manager.

Public API
----------
- ``ArrayMixinArithmetic``
"""

from ._array_addition import *
from ._array_subtraction import *
from ._array_multiplication import *
from ._array_division import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]
