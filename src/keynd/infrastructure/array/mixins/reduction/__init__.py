"""
Reduction mixins and kind-specific implementations for Array operations.

This package aggregates the reduction mixin and its control paths:

- ``mean`` / ``var`` / ``std`` : floating-point moments
- ``sum`` / ``prod`` / ``cumsum`` / ``trace`` : totals and products
- ``min`` / ``max`` / ``argmin`` / ``argmax`` : extrema

The concrete implementation modules are imported for side effects so that
their control paths are registered.

Public API
----------
- ``ArrayMixinReduction``
"""

from ._array_mean import *
from ._array_sum import *
from ._array_extrema import *
from ._base import ArrayMixinReduction

__all__ = [
    ArrayMixinReduction.__name__,
]
