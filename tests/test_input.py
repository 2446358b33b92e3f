import pytest

from viengine.input import InputState, KeyboardInput, MouseInput
from viengine.keycodes import EKeyCode, EKeyState, EMouseButton


@pytest.fixture
def keyboard():
    states = {
        int(EKeyCode.A): EKeyState.PRESSED,
        int(EKeyCode.B): EKeyState.HELD,
        int(EKeyCode.C): EKeyState.RELEASED,
    }
    return KeyboardInput(states.get)


def test_keyboard_reports_polled_states(keyboard):
    assert keyboard.get_state(EKeyCode.A) is EKeyState.PRESSED
    assert keyboard.get_state(EKeyCode.B) is EKeyState.HELD
    assert keyboard.get_state(EKeyCode.C) is EKeyState.RELEASED
    assert keyboard.get_state(EKeyCode.D) is EKeyState.NONE


def test_keyboard_predicates(keyboard):
    assert keyboard.is_pressed(EKeyCode.A)
    assert not keyboard.is_pressed(EKeyCode.B)
    assert keyboard.is_held(EKeyCode.B)
    assert keyboard.is_released(EKeyCode.C)
    assert not keyboard.is_released(EKeyCode.D)


def test_keyboard_value_is_one_while_down(keyboard):
    assert keyboard.get_value(EKeyCode.A) == 1
    assert keyboard.get_value(EKeyCode.B) == 1
    assert keyboard.get_value(EKeyCode.C) == 0
    assert keyboard.get_value(EKeyCode.D) == 0


def test_keyboard_accepts_plain_integer_codes(keyboard):
    assert keyboard.is_pressed(int(EKeyCode.A)) == keyboard.is_pressed(EKeyCode.A)


def test_default_keyboard_has_no_input():
    board = KeyboardInput()
    assert board.get_state(EKeyCode.SPACE) is EKeyState.NONE
    assert board.get_value(EKeyCode.SPACE) == 0


def test_mouse_buttons():
    mouse = MouseInput({int(EMouseButton.BUTTON_LEFT): EKeyState.PRESSED}.get)
    assert mouse.is_pressed(EMouseButton.BUTTON_1)
    assert mouse.get_value(EMouseButton.BUTTON_LEFT) == 1
    assert mouse.get_state(EMouseButton.BUTTON_RIGHT) is EKeyState.NONE
    assert not mouse.is_held(EMouseButton.BUTTON_LEFT)


def test_mouse_position_offset_and_scroll_round_trip():
    mouse = MouseInput()
    mouse.set_position(3.0, 4.0)
    mouse.set_offset(-1.5, 2.5)
    mouse.set_scroll(0.0, -1.0)
    assert (mouse.x, mouse.y) == (3.0, 4.0)
    assert (mouse.offset_x, mouse.offset_y) == (-1.5, 2.5)
    assert (mouse.scroll_x, mouse.scroll_y) == (0.0, -1.0)


def test_input_state_holds_devices():
    board = KeyboardInput()
    mouse = MouseInput()
    state = InputState(board, mouse)
    assert state.keyboard is board
    assert state.mouse is mouse