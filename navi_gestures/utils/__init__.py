"""
Utilities package for gesture tracking.

This package provides the shared point type and the console/debug-file
logger used by the input listener.
"""

from .gesture_utils import Point
from .logger import GestureLogger

__all__ = [
    'Point',
    'GestureLogger'
]
