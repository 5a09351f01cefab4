"""Tests for settings sanitizing and loading."""

import json

import pytest

from navi_gestures.config.settings import (
    GestureConfig,
    default_settings,
    load_settings,
    normalize_hex_color,
    parse_gesture_input,
    sanitize_settings,
)


def test_defaults():
    settings = default_settings()
    assert settings.min_segment_px == 18
    assert settings.inaccuracy_degrees == 50
    assert settings.fuzzy_max_distance is None
    assert settings.directions_for('reload') == ('D', 'U')
    assert settings.directions_for('zoomIn') == ()
    assert [g.action for g in settings.gestures] == GestureConfig.ACTIONS


def test_garbage_falls_back_to_defaults():
    assert sanitize_settings(None) == default_settings()
    assert sanitize_settings("nope") == default_settings()
    assert sanitize_settings({'gestures': []}) == default_settings()


@pytest.mark.parametrize("value, expected", [
    (2, 8),
    (500, 80),
    (30.5, 31),
    ('25', 25),
    ('abc', 18),
    (True, 8),
    (None, 8),
    ('', 8),
    ('  40 ', 40),
    (float('nan'), 18),
])
def test_min_segment_is_clamped(value, expected):
    assert sanitize_settings({'minSegmentPx': value}).min_segment_px == expected


def test_inaccuracy_is_clamped():
    assert sanitize_settings({'inaccuracyDegrees': 0}).inaccuracy_degrees == 10
    assert sanitize_settings({'inaccuracyDegrees': 179}).inaccuracy_degrees == 85
    assert sanitize_settings({'inaccuracyDegrees': 12.6}).inaccuracy_degrees == 13


def test_missing_numbers_use_defaults():
    settings = sanitize_settings({'gestures': {}})
    assert settings.min_segment_px == 18
    assert settings.inaccuracy_degrees == 50
    assert settings.trail_width == 3


def test_null_trail_width_clamps_to_minimum():
    assert sanitize_settings({'trailWidth': None}).trail_width == 1


def test_gesture_directions_are_normalized():
    settings = sanitize_settings({'gestures': {
        'back': ['r', ' dl ', 'bogus'],
        'forward': ['bogus'],
        'reload': 'D',
        'zoomIn': ['U', 'D'],
    }})
    assert settings.directions_for('back') == ('R', 'DL')
    assert settings.directions_for('forward') == ('R',)
    assert settings.directions_for('reload') == ('D', 'U')
    assert settings.directions_for('zoomIn') == ('U', 'D')


def test_unknown_actions_are_dropped():
    settings = sanitize_settings({'gestures': {'launchRockets': ['U']}})
    assert settings.directions_for('launchRockets') == ()


@pytest.mark.parametrize("text, expected", [
    ('D-U', ['D', 'U']),
    ('d > u', ['D', 'U']),
    ('D=>R', ['D', 'R']),
    ('ul, dr', ['UL', 'DR']),
    ('  L  ', ['L']),
])
def test_parse_gesture_input(text, expected):
    assert parse_gesture_input(text, ['L']) == expected


def test_parse_gesture_input_fallback():
    assert parse_gesture_input('xyz', ['L']) == ['L']
    assert parse_gesture_input(None, ['R']) == ['R']


@pytest.mark.parametrize("value, expected", [
    ('ABC', '#aabbcc'),
    ('#12AB9F', '#12ab9f'),
    (' #fff ', '#ffffff'),
    ('zzz', '#000000'),
    ('', '#000000'),
    (42, '#000000'),
])
def test_normalize_hex_color(value, expected):
    assert normalize_hex_color(value, '#000000') == expected


def test_choices_and_booleans():
    settings = sanitize_settings({
        'triggerMouseButton': 'MIDDLE',
        'triggerModifier': 'Ctrl',
        'rockerMiddleLeftAction': 'none',
        'rockerMiddleRightAction': 'selfDestruct',
        'showDebugLogWindow': 'yes',
    })
    assert settings.trigger_mouse_button == 'middle'
    assert settings.trigger_modifier == 'ctrl'
    assert settings.rocker_middle_left_action == 'none'
    assert settings.rocker_middle_right_action == 'forward'
    assert settings.show_debug_log is False

    assert sanitize_settings({'triggerMouseButton': 'left'}).trigger_mouse_button == 'right'
    assert sanitize_settings({'showDebugLogWindow': True}).show_debug_log is True


def test_fuzzy_distance():
    assert sanitize_settings({'fuzzyMaxDistance': 0.4}).fuzzy_max_distance == 0.4
    assert sanitize_settings({'fuzzyMaxDistance': 5}).fuzzy_max_distance == 1.0
    assert sanitize_settings({'fuzzyMaxDistance': 'x'}).fuzzy_max_distance is None


def test_load_settings(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps({'settings': {'minSegmentPx': 30, 'gestures': {'back': ['UL']}}}))
    settings = load_settings(str(path))
    assert settings.min_segment_px == 30
    assert settings.directions_for('back') == ('UL',)

    path.write_text(json.dumps({'inaccuracyDegrees': 20}))
    assert load_settings(str(path)).inaccuracy_degrees == 20


def test_load_settings_rejects_non_objects(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text('[1, 2, 3]')
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_load_settings_reads_utf8(tmp_path):
    path = tmp_path / 'settings.json'
    payload = {'note': 'café à la carte', 'minSegmentPx': 30, 'trailColor': '#ABC'}
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
    settings = load_settings(str(path))
    assert settings.min_segment_px == 30
    assert settings.trail_color == '#aabbcc'
