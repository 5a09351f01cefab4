"""
Matching of direction paths against the gesture table.

Three checks live here:

* ``path_can_still_match`` - prefix test run while the gesture is being
  drawn, used to flag paths that cannot succeed however they end.
* ``detect_exact_action`` - same-length match under angular tolerance,
  scored by cumulative angular error.
* ``detect_closest_action`` - weighted edit distance, which also compares
  paths of different lengths.

In every case the gesture table is scanned in order and only a strictly
better score replaces the current best, so the first-defined gesture wins
ties.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..config.settings import GestureConfig, GestureDefinition
from .directions import direction_difference, directions_compatible


@dataclass
class MatchResult:
    """Winning gesture with its score and the matcher that picked it."""
    action: str
    score: float
    method: str


def path_can_still_match(path: Sequence[str], gestures: Sequence[GestureDefinition],
                         inaccuracy_degrees: float) -> bool:
    """
    Check whether ``path`` is a compatible prefix of any configured gesture.

    Args:
        path: Directions observed so far
        gestures: Gesture table
        inaccuracy_degrees: Angular tolerance

    Returns:
        False once no gesture can be completed from this path
    """
    for gesture in gestures:
        expected = gesture.directions
        if len(expected) < len(path):
            continue
        if all(directions_compatible(observed, wanted, inaccuracy_degrees)
               for observed, wanted in zip(path, expected)):
            return True
    return False


def detect_exact_action(path: Sequence[str], gestures: Sequence[GestureDefinition],
                        inaccuracy_degrees: float) -> Optional[MatchResult]:
    """
    Find the same-length gesture closest to ``path``.

    Every position must be within tolerance; the score is the sum of the
    per-position angular differences. Lowest score wins, first-defined on ties.
    """
    if not path:
        return None

    best = None
    for gesture in gestures:
        expected = gesture.directions
        if len(expected) != len(path):
            continue

        score = 0.0
        for observed, wanted in zip(path, expected):
            if not directions_compatible(observed, wanted, inaccuracy_degrees):
                break
            score += direction_difference(observed, wanted)
        else:
            if best is None or score < best.score:
                best = MatchResult(gesture.action, score, 'exact')

    return best


def substitution_cost(observed: str, expected: str, inaccuracy_degrees: float) -> float:
    """Graded penalty for aligning two directions, 0 for equal up to 1.0."""
    if observed == expected:
        return 0.0
    diff = direction_difference(observed, expected)
    close, near, far, opposite = GestureConfig.SUBSTITUTION_COSTS
    if diff <= inaccuracy_degrees:
        return close
    if diff <= inaccuracy_degrees + 45:
        return near
    if diff <= inaccuracy_degrees + 90:
        return far
    return opposite


def edit_distance(observed: Sequence[str], expected: Sequence[str],
                  inaccuracy_degrees: float) -> float:
    """
    Weighted edit distance between two direction paths.

    Insertions and deletions cost ``GestureConfig.INSERT_DELETE_COST``;
    substitutions use ``substitution_cost``. The total is divided by the
    longer path length so distances are comparable across gesture lengths.
    """
    m, n = len(observed), len(expected)
    if m == 0 and n == 0:
        return 0.0

    gap = GestureConfig.INSERT_DELETE_COST
    table = np.zeros((m + 1, n + 1))
    table[:, 0] = np.arange(m + 1) * gap
    table[0, :] = np.arange(n + 1) * gap

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            table[i, j] = min(
                table[i - 1, j] + gap,
                table[i, j - 1] + gap,
                table[i - 1, j - 1] + substitution_cost(
                    observed[i - 1], expected[j - 1], inaccuracy_degrees
                )
            )

    return float(table[m, n]) / max(m, n)


def detect_closest_action(path: Sequence[str], gestures: Sequence[GestureDefinition],
                          inaccuracy_degrees: float,
                          max_distance: Optional[float] = None) -> Optional[MatchResult]:
    """
    Find the gesture with the lowest edit distance to ``path``.

    Unassigned gestures are skipped. When ``max_distance`` is given, a best
    match farther than it is rejected.
    """
    if not path:
        return None

    best = None
    for gesture in gestures:
        if not gesture.directions:
            continue
        distance = edit_distance(path, gesture.directions, inaccuracy_degrees)
        if best is None or distance < best.score:
            best = MatchResult(gesture.action, distance, 'approximate')

    if best is None:
        return None
    if max_distance is not None and best.score > max_distance:
        return None
    return best
