"""
Human-readable rendering of arrays.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .._config import load_config

if TYPE_CHECKING:
    from ._array import Array


def format_array(array: "Array") -> str:
    """
    Render `array` as ``array([...], kind=KIND)``.

    Floating precision and the summarization threshold come from
    ``KEYND_PRINT_PRECISION`` and ``KEYND_PRINT_THRESHOLD``.
    """
    cfg = load_config()
    prefix = "array("
    body = np.array2string(
        array.data,
        precision=cfg.print_precision,
        threshold=cfg.print_threshold,
        separator=", ",
        prefix=prefix,
    )
    return f"{prefix}{body}, kind={array.kind.name})"
