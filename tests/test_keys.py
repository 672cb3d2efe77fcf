import string

import pytest

from magpie.keys import (
    GAMEPAD_BUTTON_COUNT,
    KEYBOARD_KEY_COUNT,
    MOUSE_BUTTON_COUNT,
    GamepadAxis,
    GamepadButton,
    GamepadType,
    KeyboardKey,
    MouseButton,
)


@pytest.mark.parametrize(
    "code, key",
    [
        (4, KeyboardKey.A),
        (29, KeyboardKey.Z),
        (41, KeyboardKey.ESCAPE),
        (44, KeyboardKey.SPACE),
        (225, KeyboardKey.LEFT_SHIFT),
        (231, KeyboardKey.RIGHT_SUPER),
    ],
)
def test_keyboard_scancode_lookup(code, key):
    assert KeyboardKey(code) is key


def test_keyboard_gaps_are_not_keys():
    with pytest.raises(ValueError):
        KeyboardKey(130)
    with pytest.raises(ValueError):
        KeyboardKey(1)


def test_keyboard_count_covers_every_key():
    assert all(0 <= key < KEYBOARD_KEY_COUNT for key in KeyboardKey)
    assert KeyboardKey(KEYBOARD_KEY_COUNT - 1) is KeyboardKey.RIGHT_SUPER


def test_letters_are_contiguous():
    for offset, letter in enumerate(string.ascii_uppercase):
        assert KeyboardKey(4 + offset) is KeyboardKey[letter]


def test_mouse_buttons():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(3) is MouseButton.RIGHT
    assert all(b < MOUSE_BUTTON_COUNT for b in MouseButton)


def test_gamepad_buttons_are_dense_from_zero():
    looked_up = [GamepadButton(code) for code in range(GAMEPAD_BUTTON_COUNT)]
    assert looked_up == list(GamepadButton)
    with pytest.raises(ValueError):
        GamepadButton(GAMEPAD_BUTTON_COUNT)


def test_gamepad_axes_and_types_are_dense():
    assert sorted(int(a) for a in GamepadAxis) == list(range(len(GamepadAxis)))
    assert sorted(int(t) for t in GamepadType) == list(range(len(GamepadType)))
    assert GamepadType(0) is GamepadType.STANDARD