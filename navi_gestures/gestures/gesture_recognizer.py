"""
Incremental mouse gesture recognizer.

The recognizer is a synchronous state machine driven by four events:
``Begin`` when the trigger button goes down, ``Extend`` for every pointer
sample, ``End`` on release and ``Cancel`` when tracking must be abandoned.
It owns exactly one RecognitionState; gestures never overlap.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..config.settings import GestureConfig, GestureSettings
from ..utils.gesture_utils import Point
from .directions import vector_to_direction
from .gesture_matcher import (
    MatchResult,
    detect_closest_action,
    detect_exact_action,
    path_can_still_match,
)
from .path_smoother import collapse_bridge


@dataclass
class Begin:
    point: Point


@dataclass
class Extend:
    point: Point


@dataclass
class End:
    release_allowed: bool = True


@dataclass
class Cancel:
    pass


GestureEvent = Union[Begin, Extend, End, Cancel]


@dataclass
class RecognitionState:
    """Mutable record of the gesture currently being drawn."""
    tracking: bool = False
    path: List[str] = field(default_factory=list)
    last_point: Optional[Point] = None
    total_distance: float = 0.0
    invalid: bool = False


@dataclass
class RecognitionResult:
    """Outcome of a completed gesture."""
    action: Optional[str]
    path: Tuple[str, ...]
    total_distance: float
    invalid: bool
    matched_by: Optional[str] = None
    score: Optional[float] = None
    suppress_default: bool = False


class Recognizer:
    """
    Turns pointer samples into a direction path and resolves it to an action.

    Settings are an immutable snapshot supplied at construction and may be
    swapped between events with ``update_settings``.
    """

    def __init__(self, settings: GestureSettings):
        self.settings = settings
        self.state = RecognitionState()

    def update_settings(self, settings: GestureSettings):
        self.settings = settings

    @property
    def tracking(self) -> bool:
        return self.state.tracking

    @property
    def invalid(self) -> bool:
        return self.state.invalid

    @property
    def path(self) -> Tuple[str, ...]:
        return tuple(self.state.path)

    def handle(self, event: GestureEvent):
        """Apply one event and return what the matching method returns."""
        if isinstance(event, Begin):
            return self.begin(event.point)
        if isinstance(event, Extend):
            return self.extend(event.point)
        if isinstance(event, End):
            return self.end(event.release_allowed)
        if isinstance(event, Cancel):
            return self.cancel()
        raise TypeError(f"Unsupported gesture event: {event!r}")

    def begin(self, point) -> None:
        """
        Start tracking a new gesture at ``point``.

        Beginning while a gesture is already tracked discards the old one,
        exactly as if ``cancel`` had been called first.
        """
        self.state = RecognitionState(tracking=True, last_point=Point.coerce(point))

    def extend(self, point) -> bool:
        """
        Feed a pointer sample.

        Returns:
            The current invalid flag, for trail recoloring. False when idle.
        """
        state = self.state
        if not state.tracking or state.last_point is None:
            return False

        point = Point.coerce(point)
        dx, dy = state.last_point.offset_to(point)
        dist = state.last_point.distance_to(point)
        state.total_distance += dist

        # Small steps keep the old reference point so they add up
        if dist == 0 or dist < self.settings.min_segment_px:
            return state.invalid

        direction = vector_to_direction(dx, dy)
        if not state.path or state.path[-1] != direction:
            state.path.append(direction)
            collapse_bridge(state.path)
            if not state.invalid and not path_can_still_match(
                state.path, self.settings.gestures, self.settings.inaccuracy_degrees
            ):
                state.invalid = True

        state.last_point = point
        return state.invalid

    def end(self, release_allowed: bool = True) -> Optional[RecognitionResult]:
        """
        Finish the gesture and resolve it.

        Args:
            release_allowed: False when the trigger was lost without a proper
                release; bookkeeping completes but no match is attempted.

        Returns:
            RecognitionResult, or None when no gesture was being tracked
        """
        if not self.state.tracking:
            return None

        observed = self.state
        self.state = RecognitionState()

        result = RecognitionResult(
            action=None,
            path=tuple(observed.path),
            total_distance=observed.total_distance,
            invalid=observed.invalid
        )
        if not release_allowed:
            return result
        if (not observed.path or observed.invalid
                or observed.total_distance < self.settings.min_segment_px):
            return result

        match = self._match(observed.path)
        if match is not None:
            result.action = match.action
            result.matched_by = match.method
            result.score = match.score
            result.suppress_default = True
        else:
            # A long unmatched drag was still meant as a gesture
            result.suppress_default = observed.total_distance >= (
                self.settings.min_segment_px * GestureConfig.SUPPRESS_DISTANCE_FACTOR
            )
        return result

    def cancel(self) -> None:
        """Drop any in-progress gesture and return to idle."""
        self.state = RecognitionState()

    def _match(self, path: List[str]) -> Optional[MatchResult]:
        settings = self.settings
        match = detect_exact_action(path, settings.gestures, settings.inaccuracy_degrees)
        if match is None and settings.fuzzy_max_distance is not None:
            match = detect_closest_action(
                path, settings.gestures, settings.inaccuracy_degrees,
                max_distance=settings.fuzzy_max_distance
            )
        return match
