"""
Navi Gestures Package
Directional mouse gesture recognition mapped to named navigation actions.

The evdev input listener lives in ``navi_gestures.core.listener`` and is
imported explicitly so the recognizer can be used on any platform.
"""

from .config.settings import GestureConfig, GestureDefinition, GestureSettings, sanitize_settings, load_settings
from .gestures.gesture_recognizer import Recognizer, RecognitionResult

__version__ = "1.0.0"
__all__ = [
    "GestureConfig",
    "GestureDefinition",
    "GestureSettings",
    "sanitize_settings",
    "load_settings",
    "Recognizer",
    "RecognitionResult"
]
