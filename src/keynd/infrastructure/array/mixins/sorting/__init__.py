"""
Sorting mixin and its control paths.

Public API
----------
- ``ArrayMixinSorting``
"""

from ._array_sort import *
from ._base import ArrayMixinSorting

__all__ = [
    ArrayMixinSorting.__name__,
]
