"""
Logical mixin and its BOOLEAN control paths.

Public API
----------
- ``ArrayMixinLogical``
"""

from ._array_logical import *
from ._base import ArrayMixinLogical

__all__ = [
    ArrayMixinLogical.__name__,
]
