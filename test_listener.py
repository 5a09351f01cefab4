"""Tests for translating evdev input frames into gestures."""

import pytest

evdev = pytest.importorskip("evdev")

from evdev import InputEvent, ecodes

from navi_gestures.config.settings import sanitize_settings
from navi_gestures.core.dispatcher import ActionDispatcher
from navi_gestures.core.listener import MouseGestureListener
from navi_gestures.utils.logger import GestureLogger


def frame(*events):
    """One SYN_REPORT-terminated batch of (type, code, value) events."""
    batch = [InputEvent(0, 0, etype, code, value) for etype, code, value in events]
    batch.append(InputEvent(0, 0, ecodes.EV_SYN, ecodes.SYN_REPORT, 0))
    return batch


def press(code):
    return frame((ecodes.EV_KEY, code, 1))


def release(code):
    return frame((ecodes.EV_KEY, code, 0))


def move(dx, dy):
    return frame((ecodes.EV_REL, ecodes.REL_X, dx), (ecodes.EV_REL, ecodes.REL_Y, dy))


@pytest.fixture
def dispatched():
    return []


def make_listener(dispatched, raw_settings=None):
    dispatcher = ActionDispatcher(use_default_handlers=False)
    for action in ('back', 'forward', 'reload', 'closeTab', 'newTab'):
        dispatcher.register(action, lambda action=action: dispatched.append(action))
    return MouseGestureListener(sanitize_settings(raw_settings or {}), dispatcher, GestureLogger())


def feed(listener, *batches):
    for batch in batches:
        listener._process_event_batch(batch)


def test_right_drag_dispatches_back(dispatched):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_RIGHT), move(-40, 2), release(ecodes.BTN_RIGHT))

    assert dispatched == ['back']
    assert not listener.recognizer.tracking


def test_motion_in_release_frame_is_applied_first(dispatched):
    listener = make_listener(dispatched)
    feed(listener,
         press(ecodes.BTN_RIGHT),
         frame((ecodes.EV_REL, ecodes.REL_X, -40), (ecodes.EV_KEY, ecodes.BTN_RIGHT, 0)))

    assert dispatched == ['back']
    assert not listener.recognizer.tracking


def test_two_stroke_gesture(dispatched):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_RIGHT), move(0, 40), move(0, -40), release(ecodes.BTN_RIGHT))
    assert dispatched == ['reload']


def test_motion_without_trigger_is_ignored(dispatched):
    listener = make_listener(dispatched)
    feed(listener, move(-40, 0), press(ecodes.BTN_LEFT), release(ecodes.BTN_LEFT))

    assert dispatched == []
    assert listener.position.x == -40


def test_middle_trigger(dispatched):
    listener = make_listener(dispatched, {'triggerMouseButton': 'middle'})
    feed(listener, press(ecodes.BTN_RIGHT), move(40, 0), release(ecodes.BTN_RIGHT))
    assert dispatched == []

    feed(listener, press(ecodes.BTN_MIDDLE), move(40, 0), release(ecodes.BTN_MIDDLE))
    assert dispatched == ['forward']


def test_modifier_is_required_when_configured(dispatched):
    listener = make_listener(dispatched, {'triggerModifier': 'ctrl'})
    feed(listener, press(ecodes.BTN_RIGHT))
    assert not listener.recognizer.tracking
    feed(listener, release(ecodes.BTN_RIGHT))

    feed(listener, press(ecodes.KEY_LEFTCTRL), press(ecodes.BTN_RIGHT))
    assert listener.recognizer.tracking
    feed(listener, move(40, 0), release(ecodes.BTN_RIGHT))
    assert dispatched == ['forward']


def test_rocker_gestures(dispatched):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_MIDDLE), press(ecodes.BTN_LEFT), release(ecodes.BTN_LEFT))
    feed(listener, press(ecodes.BTN_RIGHT), release(ecodes.BTN_RIGHT), release(ecodes.BTN_MIDDLE))

    assert dispatched == ['back', 'forward']


def test_rocker_can_be_disabled(dispatched):
    listener = make_listener(dispatched, {'rockerMiddleLeftAction': 'none'})
    feed(listener, press(ecodes.BTN_MIDDLE), press(ecodes.BTN_LEFT))
    assert dispatched == []


def test_feedback_reports_invalid_paths(dispatched):
    listener = make_listener(dispatched)
    feedback = []
    listener.on_feedback = feedback.append

    feed(listener, press(ecodes.BTN_RIGHT), move(30, 0), move(0, 30))
    assert feedback == [True]

    feed(listener, release(ecodes.BTN_RIGHT))
    assert feedback == [True, False]
    assert dispatched == []


def test_cancel_drops_gesture(dispatched):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_RIGHT), move(40, 0))
    listener.cancel()
    feed(listener, release(ecodes.BTN_RIGHT))

    assert dispatched == []
    assert not listener.recognizer.tracking


def test_lost_device_never_dispatches(dispatched):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_RIGHT), move(40, 0))

    result = listener._complete_gesture(False)
    assert result.path == ('R',)
    assert result.action is None
    assert dispatched == []


def test_suppress_default_is_logged(dispatched, caplog):
    listener = make_listener(dispatched)
    feed(listener, press(ecodes.BTN_RIGHT), move(30, 0), move(0, 30))

    with caplog.at_level('DEBUG'):
        result = listener._complete_gesture(True)

    assert result.invalid
    assert not result.suppress_default
    assert 'suppress_default=False' in caplog.text
