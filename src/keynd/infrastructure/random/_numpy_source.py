"""
NumPy-backed implementation of :class:`IRandomSource`.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._config import load_config


class NumpyRandomSource:
    """
    Random source wrapping a :class:`numpy.random.Generator`.

    Parameters
    ----------
    seed : Optional[int]
        Seed passed to ``numpy.random.default_rng``. None draws fresh entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def uniform(self, size: tuple[int, ...]) -> np.ndarray:
        return self._rng.random(size, dtype=np.float64)

    def normal(self, size: tuple[int, ...]) -> np.ndarray:
        return self._rng.standard_normal(size, dtype=np.float64)

    def integers(self, low: int, high: int, size: tuple[int, ...]) -> np.ndarray:
        return self._rng.integers(low, high, size=size, dtype=np.int64)


_default_source: Optional[NumpyRandomSource] = None


def default_source() -> NumpyRandomSource:
    """
    Return the process-wide random source, creating it on first use.

    The source is seeded from ``KEYND_SEED`` when that variable is set.
    """
    global _default_source
    if _default_source is None:
        _default_source = NumpyRandomSource(load_config().seed)
    return _default_source


def seed(value: Optional[int]) -> None:
    """Replace the process-wide random source with one seeded by `value`."""
    global _default_source
    _default_source = NumpyRandomSource(value)
