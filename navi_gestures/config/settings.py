"""
Configuration settings for the mouse gesture recognizer.
"""

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple


class GestureConfig:
    """Configuration constants for mouse gesture recognition."""

    # Directions, indexed clockwise from east (screen Y points down)
    SECTORS = ['R', 'DR', 'D', 'DL', 'L', 'UL', 'U', 'UR']
    VALID_DIRECTIONS = ['U', 'D', 'L', 'R', 'UL', 'UR', 'DL', 'DR']
    DIRECTION_ANGLES = {
        'R': 0, 'DR': 45, 'D': 90, 'DL': 135,
        'L': 180, 'UL': 225, 'U': 270, 'UR': 315
    }

    ACTIONS = [
        'reload',
        'closeTab',
        'forward',
        'back',
        'newTab',
        'zoomIn',
        'zoomOut',
        'scrollLeft',
        'scrollRight',
        'toggleMaximizeWindow',
        'maximizeWindow',
        'minimizeWindow',
        'toggleFullscreen'
    ]
    ACTION_LABELS = {
        'none': 'Do nothing',
        'reload': 'Reload page',
        'closeTab': 'Close tab',
        'forward': 'Go forward',
        'back': 'Go back',
        'newTab': 'Open new tab',
        'zoomIn': 'Zoom in',
        'zoomOut': 'Zoom out',
        'scrollLeft': 'Scroll left',
        'scrollRight': 'Scroll right',
        'toggleMaximizeWindow': 'Toggle maximize window',
        'maximizeWindow': 'Maximize window',
        'minimizeWindow': 'Minimize window',
        'toggleFullscreen': 'Toggle fullscreen'
    }
    ROCKER_ASSIGNABLE_ACTIONS = ['none'] + ACTIONS
    VALID_MOUSE_BUTTONS = ['right', 'middle']
    VALID_MODIFIERS = ['unset', 'alt', 'shift', 'ctrl']

    DEFAULT_SETTINGS = {
        'gestures': {
            'reload': ['D', 'U'],
            'closeTab': ['D', 'R'],
            'forward': ['R'],
            'back': ['L'],
            'newTab': ['UR'],
            'zoomIn': [],
            'zoomOut': [],
            'scrollLeft': [],
            'scrollRight': [],
            'toggleMaximizeWindow': [],
            'maximizeWindow': [],
            'minimizeWindow': [],
            'toggleFullscreen': []
        },
        'minSegmentPx': 18,
        'inaccuracyDegrees': 50,
        'fuzzyMaxDistance': None,
        'trailColor': '#24a1ff',
        'trailWidth': 3,
        'triggerMouseButton': 'right',
        'triggerModifier': 'unset',
        'rockerMiddleLeftAction': 'back',
        'rockerMiddleRightAction': 'forward',
        'showDebugLogWindow': False
    }

    # Clamp ranges for numeric settings
    MIN_SEGMENT_PX_RANGE = (8, 80)
    INACCURACY_DEGREES_RANGE = (10, 85)
    TRAIL_WIDTH_RANGE = (1, 16)
    FUZZY_MAX_DISTANCE_RANGE = (0.0, 1.0)

    # Edit distance weights
    INSERT_DELETE_COST = 0.7
    SUBSTITUTION_COSTS = (0.2, 0.5, 0.8, 1.0)

    # Feedback
    INVALID_TRAIL_COLOR = '#ff3b30'
    SUPPRESS_DISTANCE_FACTOR = 1.5


@dataclass(frozen=True)
class GestureDefinition:
    """An action bound to its ordered expected directions (empty = unassigned)."""
    action: str
    directions: Tuple[str, ...]


@dataclass(frozen=True)
class GestureSettings:
    """Immutable snapshot of the recognizer configuration.

    ``gestures`` is the gesture table. Its order is significant: when two
    gestures score the same, the one defined first wins.
    """
    gestures: Tuple[GestureDefinition, ...]
    min_segment_px: float = 18
    inaccuracy_degrees: float = 50
    fuzzy_max_distance: Optional[float] = None
    trail_color: str = '#24a1ff'
    trail_width: int = 3
    trigger_mouse_button: str = 'right'
    trigger_modifier: str = 'unset'
    rocker_middle_left_action: str = 'back'
    rocker_middle_right_action: str = 'forward'
    show_debug_log: bool = False

    @classmethod
    def from_table(cls, table: Dict[str, Sequence[str]], **kwargs) -> 'GestureSettings':
        """Build settings from an ``{action: [directions]}`` mapping, keeping its order."""
        gestures = tuple(
            GestureDefinition(action, tuple(directions))
            for action, directions in table.items()
        )
        return cls(gestures=gestures, **kwargs)

    def directions_for(self, action: str) -> Tuple[str, ...]:
        for gesture in self.gestures:
            if gesture.action == action:
                return gesture.directions
        return ()


MISSING = object()


def to_number(value: Any) -> float:
    """
    Coerce a settings value to a number the way JavaScript's ``Number()`` does.

    ``null`` and blank strings are 0, booleans are 0/1, a missing key and
    anything unparsable are NaN.
    """
    if value is MISSING:
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def clamp_number(value: Any, minimum: float, maximum: float, fallback: float) -> int:
    """Round and clamp a numeric value, falling back for anything non-finite."""
    num = to_number(value)
    if not math.isfinite(num):
        return fallback
    return min(maximum, max(minimum, math.floor(num + 0.5)))


def normalize_gesture_array(value: Any, fallback: Sequence[str]) -> List[str]:
    """Keep only valid direction tokens; an empty result falls back."""
    source = value if isinstance(value, (list, tuple)) else fallback
    out = []
    for part in source:
        token = str(part or '').strip().upper()
        if token in GestureConfig.VALID_DIRECTIONS:
            out.append(token)
    return out if out else list(fallback)


def parse_gesture_input(text: Any, fallback: Sequence[str]) -> List[str]:
    """
    Parse a user-typed gesture such as ``"D-U"``, ``"d > u"`` or ``"D,U"``.

    Args:
        text: Raw text from the settings editor
        fallback: Directions to use when nothing valid was typed

    Returns:
        List of direction tokens
    """
    if not isinstance(text, str):
        return list(fallback)
    cleaned = re.sub(r'[-=>]', ' ', text.upper())
    tokens = [token for token in re.split(r'[\s,]+', cleaned) if token]
    return normalize_gesture_array(tokens, fallback)


def normalize_hex_color(value: Any, fallback: str) -> str:
    """Normalize ``abc``, ``#abc`` and ``#AABBCC`` to lower-case ``#aabbcc``."""
    if not isinstance(value, str):
        return fallback
    color = value.strip()
    if not color:
        return fallback
    if not color.startswith('#'):
        color = '#' + color
    if re.fullmatch(r'#[0-9a-fA-F]{3}', color):
        return '#' + ''.join(c * 2 for c in color[1:]).lower()
    if re.fullmatch(r'#[0-9a-fA-F]{6}', color):
        return color.lower()
    return fallback


def normalize_choice(value: Any, choices: Sequence[str], fallback: str) -> str:
    normalized = str(value or '').strip().lower()
    for choice in choices:
        if choice.lower() == normalized:
            return choice
    return fallback


def normalize_boolean(value: Any, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    return fallback


def normalize_fuzzy_distance(value: Any, fallback: Optional[float]) -> Optional[float]:
    """Fuzzy cutoff is optional: ``None`` disables the approximate fallback."""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        num = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(num):
        return fallback
    low, high = GestureConfig.FUZZY_MAX_DISTANCE_RANGE
    return min(high, max(low, num))


def sanitize_settings(raw: Any) -> GestureSettings:
    """
    Turn an untrusted settings mapping into a GestureSettings snapshot.

    Every field is validated independently; anything malformed falls back to
    its default rather than raising.
    """
    defaults = GestureConfig.DEFAULT_SETTINGS
    base = raw if isinstance(raw, dict) else {}
    raw_gestures = base.get('gestures')
    if not isinstance(raw_gestures, dict):
        raw_gestures = {}

    gestures = tuple(
        GestureDefinition(
            action,
            tuple(normalize_gesture_array(raw_gestures.get(action), defaults['gestures'][action]))
        )
        for action in GestureConfig.ACTIONS
    )

    return GestureSettings(
        gestures=gestures,
        min_segment_px=clamp_number(
            base.get('minSegmentPx', MISSING), *GestureConfig.MIN_SEGMENT_PX_RANGE, defaults['minSegmentPx']
        ),
        inaccuracy_degrees=clamp_number(
            base.get('inaccuracyDegrees', MISSING), *GestureConfig.INACCURACY_DEGREES_RANGE,
            defaults['inaccuracyDegrees']
        ),
        fuzzy_max_distance=normalize_fuzzy_distance(
            base.get('fuzzyMaxDistance'), defaults['fuzzyMaxDistance']
        ),
        trail_color=normalize_hex_color(base.get('trailColor'), defaults['trailColor']),
        trail_width=clamp_number(
            base.get('trailWidth', MISSING), *GestureConfig.TRAIL_WIDTH_RANGE, defaults['trailWidth']
        ),
        trigger_mouse_button=normalize_choice(
            base.get('triggerMouseButton'), GestureConfig.VALID_MOUSE_BUTTONS,
            defaults['triggerMouseButton']
        ),
        trigger_modifier=normalize_choice(
            base.get('triggerModifier'), GestureConfig.VALID_MODIFIERS, defaults['triggerModifier']
        ),
        rocker_middle_left_action=normalize_choice(
            base.get('rockerMiddleLeftAction'), GestureConfig.ROCKER_ASSIGNABLE_ACTIONS,
            defaults['rockerMiddleLeftAction']
        ),
        rocker_middle_right_action=normalize_choice(
            base.get('rockerMiddleRightAction'), GestureConfig.ROCKER_ASSIGNABLE_ACTIONS,
            defaults['rockerMiddleRightAction']
        ),
        show_debug_log=normalize_boolean(
            base.get('showDebugLogWindow'), defaults['showDebugLogWindow']
        )
    )


def default_settings() -> GestureSettings:
    return sanitize_settings(GestureConfig.DEFAULT_SETTINGS)


def load_settings(path: str) -> GestureSettings:
    """
    Load settings from a JSON file.

    The file may hold the settings object directly or wrapped in a
    top-level ``"settings"`` key.

    Raises:
        ValueError: If the file does not contain a JSON object
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    if isinstance(data.get('settings'), dict):
        data = data['settings']
    return sanitize_settings(data)
