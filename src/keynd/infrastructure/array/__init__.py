from ._array import Array

__all__ = [Array.__name__]
