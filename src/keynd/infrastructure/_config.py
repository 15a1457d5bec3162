"""
Environment-driven configuration for KeyND.

Settings are read from environment variables each time :func:`load_config`
is called, so tests and applications may adjust them at runtime.

Variables
---------
KEYND_SEED
    Optional integer seed for the default random source.
KEYND_PRINT_PRECISION
    Digits printed for floating-point kinds in ``repr`` (default 4).
KEYND_PRINT_THRESHOLD
    Element count above which ``repr`` summarizes its output (default 1000).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PRINT_PRECISION = 4
DEFAULT_PRINT_THRESHOLD = 1000


@dataclass(frozen=True)
class ArrayConfig:
    """Snapshot of the library settings."""

    seed: Optional[int] = None
    print_precision: int = DEFAULT_PRINT_PRECISION
    print_threshold: int = DEFAULT_PRINT_THRESHOLD


def _read_int(name: str, default: Optional[int], *, minimum: int = 0) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_config() -> ArrayConfig:
    """
    Build an :class:`ArrayConfig` from the current environment.

    Raises
    ------
    ValueError
        If a variable is set to something other than a non-negative integer.
    """
    return ArrayConfig(
        seed=_read_int("KEYND_SEED", None),
        print_precision=_read_int("KEYND_PRINT_PRECISION", DEFAULT_PRINT_PRECISION),
        print_threshold=_read_int(
            "KEYND_PRINT_THRESHOLD", DEFAULT_PRINT_THRESHOLD, minimum=1
        ),
    )
