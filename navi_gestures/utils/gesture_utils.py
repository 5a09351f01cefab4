"""
Shared geometry utilities for gesture tracking.

This module provides the point type used by the recognizer, the input
listener and the demo.
"""

import math
from typing import Tuple


class Point:
    """Represents a 2D pointer position."""

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def offset_to(self, other: 'Point') -> Tuple[float, float]:
        """Displacement ``(dx, dy)`` from this point to ``other``."""
        return other.x - self.x, other.y - self.y

    @classmethod
    def coerce(cls, value) -> 'Point':
        """Accept a Point, an ``(x, y)`` pair or a ``{'x', 'y'}`` dict."""
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            return cls(value['x'], value['y'])
        x, y = value
        return cls(x, y)
