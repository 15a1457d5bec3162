"""
Comparison mixins and kind-specific implementations for Array operations.

Concrete implementation modules (ordering and equality) are imported for
their side effects of registering control paths.

Public API
----------
- ``ArrayMixinComparison``
"""

from ._array_ordering import *
from ._array_equality import *
from ._base import ArrayMixinComparison

__all__ = [
    ArrayMixinComparison.__name__,
]
