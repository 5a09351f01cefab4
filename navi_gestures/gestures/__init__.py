"""
Gesture recognition core.

This module turns pointer samples into quantized direction paths and
resolves completed paths against the configured gesture table.
"""

from .directions import vector_to_direction, directions_compatible, angular_difference
from .path_smoother import collapse_bridge, smooth_path
from .gesture_matcher import (
    MatchResult,
    path_can_still_match,
    detect_exact_action,
    detect_closest_action,
    edit_distance
)
from .gesture_recognizer import (
    Recognizer,
    RecognitionState,
    RecognitionResult,
    Begin,
    Extend,
    End,
    Cancel
)

__all__ = [
    'vector_to_direction',
    'directions_compatible',
    'angular_difference',
    'collapse_bridge',
    'smooth_path',
    'MatchResult',
    'path_can_still_match',
    'detect_exact_action',
    'detect_closest_action',
    'edit_distance',
    'Recognizer',
    'RecognitionState',
    'RecognitionResult',
    'Begin',
    'Extend',
    'End',
    'Cancel'
]
