"""
Corner smoothing for quantized direction paths.

A clean right-angle turn often yields one noisy diagonal sample at the
pivot, e.g. R, DR, D for a right-then-down corner. The diagonal is an
artifact of quantization and is collapsed so that the path reads R, D.
"""

from typing import List, Optional, Sequence

from .directions import (
    direction_from_unit_vector,
    is_cardinal,
    unit_vector,
)


def corner_diagonal(first: str, last: str) -> Optional[str]:
    """
    Diagonal that bridges a corner between two cardinal directions.

    Returns None unless both are cardinal and differ on both axes (one
    horizontal, one vertical). Reversals such as R then L have no bridge.
    """
    if first == last or not (is_cardinal(first) and is_cardinal(last)):
        return None
    ax, ay = unit_vector(first)
    cx, cy = unit_vector(last)
    if ax == cx or ay == cy:
        return None
    return direction_from_unit_vector(ax + cx, ay + cy)


def collapse_bridge(path: List[str]) -> bool:
    """
    Remove a bridge diagonal from the last three entries of ``path`` in place.

    Args:
        path: Mutable direction path

    Returns:
        True if a direction was removed
    """
    if len(path) < 3:
        return False
    first, middle, last = path[-3:]
    bridge = corner_diagonal(first, last)
    if bridge is None or middle != bridge:
        return False
    del path[-2]
    return True


def smooth_path(path: Sequence[str]) -> List[str]:
    """Return a copy of ``path`` with a trailing bridge diagonal collapsed."""
    smoothed = list(path)
    collapse_bridge(smoothed)
    return smoothed
