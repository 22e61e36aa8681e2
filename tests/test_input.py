import pytest

from duckengine.input import Action, Input
from duckengine.keys import Key, MouseButton


def test_initial_state():
    state = Input()
    assert state.mouse_position == (0.0, 0.0)
    assert state.mouse_delta == (0.0, 0.0)
    assert not state.key_pressed(Key.A)
    assert not state.key_held(Key.A)


def test_key_press_and_release_within_frame():
    state = Input()
    state.key_callback(Key.W, Action.PRESS)
    assert state.key_pressed(Key.W)
    assert state.key_held(Key.W)
    assert not state.key_released(Key.W)
    state.key_callback(Key.W, Action.RELEASE)
    assert state.key_released(Key.W)
    assert not state.key_held(Key.W)


def test_process_clears_frame_events_but_not_held():
    state = Input()
    state.key_callback(Key.SPACE, Action.PRESS)
    state.mouse_button_callback(MouseButton.LEFT, Action.PRESS)
    state.process(0.0, 0.0)
    assert not state.key_pressed(Key.SPACE)
    assert state.key_held(Key.SPACE)
    assert not state.mouse_button_pressed(MouseButton.LEFT)
    assert state.mouse_button_held(MouseButton.LEFT)


def test_repeat_is_ignored():
    state = Input()
    state.key_callback(Key.A, Action.REPEAT)
    assert not state.key_pressed(Key.A)
    assert not state.key_released(Key.A)
    assert not state.key_held(Key.A)


def test_mouse_buttons():
    state = Input()
    state.mouse_button_callback(MouseButton.RIGHT, Action.PRESS)
    assert state.mouse_button_pressed(MouseButton.RIGHT)
    assert not state.mouse_button_pressed(MouseButton.LEFT)
    state.mouse_button_callback(MouseButton.RIGHT, Action.RELEASE)
    assert state.mouse_button_released(MouseButton.RIGHT)
    assert not state.mouse_button_held(MouseButton.RIGHT)


def test_mouse_delta_tracks_cursor():
    state = Input()
    positions = [(10.0, 20.0), (13.0, 25.0), (13.0, 25.0), (-4.0, 2.5)]
    previous = (0.0, 0.0)
    for x, y in positions:
        state.process(x, y)
        assert state.mouse_position == (x, y)
        assert state.mouse_delta == (x - previous[0], y - previous[1])
        previous = (x, y)


def test_plain_int_actions_accepted():
    state = Input()
    state.key_callback(int(Key.Q), 1)
    assert state.key_pressed(Key.Q)


def test_invalid_action_rejected():
    state = Input()
    with pytest.raises(ValueError):
        state.key_callback(Key.Q, 7)