"""
Random-source contract used by the random array factories.

The factories ``rand``, ``randn`` and ``randi`` never draw numbers themselves;
they ask an injected :class:`IRandomSource`. Any object with these three
methods can be supplied, which keeps random factories deterministic under
test.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IRandomSource(Protocol):
    """
    Duck-typed random number source.

    Every method returns a backend-native array (``np.ndarray`` in the NumPy
    backend) of the requested `size`.
    """

    def uniform(self, size: tuple[int, ...]) -> Any:
        """Samples from the uniform distribution on ``[0, 1)``."""
        ...

    def normal(self, size: tuple[int, ...]) -> Any:
        """Samples from the standard normal distribution."""
        ...

    def integers(self, low: int, high: int, size: tuple[int, ...]) -> Any:
        """Uniform integer samples from ``[low, high)``."""
        ...
