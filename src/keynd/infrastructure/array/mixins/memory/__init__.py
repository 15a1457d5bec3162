"""
Array memory operation registrations.

This package aggregates the memory/conversion mixin and the kind-specific
implementations of `astype`:

- `assign` / `fill`   : in-place writes through the receiver's buffer
- `copy` / `to_numpy` : owning copies
- `astype`, `as_*`    : kind conversion

Public API
----------
Only `ArrayMixinMemory` is re-exported. Implementation modules are imported
for their registration side effects.
"""

from ._array_astype import *
from ._base import ArrayMixinMemory

__all__ = [
    ArrayMixinMemory.__name__,
]
