"""
Direction quantization and angular helpers.

Pointer motion is reduced to one of eight compass directions. Angles are
measured clockwise from east because screen Y grows downwards:
R=0, DR=45, D=90, DL=135, L=180, UL=225, U=270, UR=315.
"""

import math
from typing import Optional, Tuple

from ..config.settings import GestureConfig

CARDINALS = ('R', 'D', 'L', 'U')

_UNIT_VECTORS = {
    'R': (1, 0), 'DR': (1, 1), 'D': (0, 1), 'DL': (-1, 1),
    'L': (-1, 0), 'UL': (-1, -1), 'U': (0, -1), 'UR': (1, -1)
}
_DIRECTIONS_BY_VECTOR = {vector: direction for direction, vector in _UNIT_VECTORS.items()}


def vector_to_direction(dx: float, dy: float) -> str:
    """
    Quantize a non-zero displacement to the nearest of the 8 directions.

    An angle exactly halfway between two sectors rounds to the higher one.
    """
    return angle_to_direction(math.degrees(math.atan2(dy, dx)))


def angle_to_direction(angle: float) -> str:
    """Nearest direction for an angle in degrees (any range)."""
    angle = (angle + 360) % 360
    index = math.floor(angle / 45 + 0.5) % 8
    return GestureConfig.SECTORS[index]


def angle_for_direction(direction: str) -> int:
    return GestureConfig.DIRECTION_ANGLES[direction]


def angular_difference(a: float, b: float) -> float:
    """Absolute difference between two angles, wrapped to at most 180."""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def direction_difference(observed: str, expected: str) -> float:
    return angular_difference(angle_for_direction(observed), angle_for_direction(expected))


def directions_compatible(observed: str, expected: str, inaccuracy_degrees: float) -> bool:
    """Two directions match if equal or within the angular tolerance."""
    if observed == expected:
        return True
    return direction_difference(observed, expected) <= inaccuracy_degrees


def is_cardinal(direction: str) -> bool:
    return direction in CARDINALS


def unit_vector(direction: str) -> Tuple[int, int]:
    return _UNIT_VECTORS[direction]


def direction_from_unit_vector(dx: int, dy: int) -> Optional[str]:
    return _DIRECTIONS_BY_VECTOR.get((dx, dy))
