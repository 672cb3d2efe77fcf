"""Frame-by-frame input state for keyboard, mouse and gamepads."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple, Union

from .keys import (
    GAMEPAD_BUTTON_COUNT,
    KEYBOARD_KEY_COUNT,
    MAX_GAMEPADS,
    MAX_TEXT_INPUT,
    MOUSE_BUTTON_COUNT,
    GamepadAxis,
    GamepadButton,
    KeyboardKey,
    MouseButton,
)

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]
Button = Union[KeyboardKey, MouseButton, GamepadButton]


@dataclass
class _GamepadState:
    down: Set[int] = field(default_factory=set)
    left_stick: Vec2 = (0.0, 0.0)
    right_stick: Vec2 = (0.0, 0.0)
    left_trigger: float = 0.0
    right_trigger: float = 0.0


@dataclass
class _InputData:
    keys_down: Set[int] = field(default_factory=set)
    text: str = ""
    mouse_down: Set[int] = field(default_factory=set)
    mouse_screen_position: Vec2 = (0.0, 0.0)
    mouse_position: Vec2 = (0.0, 0.0)
    mouse_wheel: Vec2 = (0.0, 0.0)
    gamepads: List[_GamepadState] = field(
        default_factory=lambda: [_GamepadState() for _ in range(MAX_GAMEPADS)]
    )


def _check_range(value: int, limit: int, what: str) -> int:
    value = int(value)
    if not 0 <= value < limit:
        raise ValueError(f"{what} {value} out of range 0..{limit - 1}")
    return value


def _check_gamepad(gamepad: Optional[int]) -> int:
    if gamepad is None:
        raise TypeError("a gamepad index is required for gamepad buttons")
    if not 0 <= gamepad < MAX_GAMEPADS:
        raise IndexError(f"gamepad index {gamepad} out of range 0..{MAX_GAMEPADS - 1}")
    return gamepad


class InputState:
    """Collects input events and exposes the current and previous frame.

    Events update a pending state; :meth:`update` promotes it to current and
    keeps the old current as previous, so presses and releases can be told
    apart from held buttons.
    """

    def __init__(self) -> None:
        self._current = _InputData()
        self._next = _InputData()
        self._prev = _InputData()

    def update(self) -> None:
        """Advance one frame."""
        self._prev = self._current
        self._current = copy.deepcopy(self._next)

    def _down_set(self, state: _InputData, button: Button, gamepad: Optional[int]) -> Set[int]:
        if isinstance(button, KeyboardKey):
            return state.keys_down
        if isinstance(button, MouseButton):
            return state.mouse_down
        if isinstance(button, GamepadButton):
            return state.gamepads[_check_gamepad(gamepad)].down
        raise TypeError(f"unsupported button type {type(button).__name__}")

    def is_down(self, button: Button, gamepad: Optional[int] = None) -> bool:
        """Whether ``button`` is held this frame."""
        return int(button) in self._down_set(self._current, button, gamepad)

    def is_pressed(self, button: Button, gamepad: Optional[int] = None) -> bool:
        """Whether ``button`` went down this frame."""
        now = int(button) in self._down_set(self._current, button, gamepad)
        before = int(button) in self._down_set(self._prev, button, gamepad)
        return now and not before

    def is_released(self, button: Button, gamepad: Optional[int] = None) -> bool:
        """Whether ``button`` came up this frame."""
        now = int(button) in self._down_set(self._current, button, gamepad)
        before = int(button) in self._down_set(self._prev, button, gamepad)
        return before and not now

    def mouse_position(self) -> Vec2:
        return self._current.mouse_position

    def mouse_screen_position(self) -> Vec2:
        return self._current.mouse_screen_position

    def mouse_wheel(self) -> Vec2:
        return self._current.mouse_wheel

    def shift(self) -> bool:
        return self.is_down(KeyboardKey.LEFT_SHIFT) or self.is_down(KeyboardKey.RIGHT_SHIFT)

    def ctrl(self) -> bool:
        return self.is_down(KeyboardKey.LEFT_CONTROL) or self.is_down(KeyboardKey.RIGHT_CONTROL)

    def alt(self) -> bool:
        return self.is_down(KeyboardKey.LEFT_ALT) or self.is_down(KeyboardKey.RIGHT_ALT)

    def text(self) -> str:
        """Text typed so far, as of the current frame."""
        return self._current.text

    def left_stick(self, gamepad: int) -> Vec2:
        return self._current.gamepads[_check_gamepad(gamepad)].left_stick

    def right_stick(self, gamepad: int) -> Vec2:
        return self._current.gamepads[_check_gamepad(gamepad)].right_stick

    def left_trigger(self, gamepad: int) -> float:
        return self._current.gamepads[_check_gamepad(gamepad)].left_trigger

    def right_trigger(self, gamepad: int) -> float:
        return self._current.gamepads[_check_gamepad(gamepad)].right_trigger

    def on_mouse_wheel(self, x: float, y: float) -> None:
        self._next.mouse_wheel = (float(x), float(y))

    def on_mouse_screen_move(self, x: float, y: float) -> None:
        self._next.mouse_screen_position = (float(x), float(y))

    def on_mouse_move(self, x: float, y: float) -> None:
        self._next.mouse_position = (float(x), float(y))

    def on_mouse_down(self, button: int) -> None:
        self._next.mouse_down.add(_check_range(button, MOUSE_BUTTON_COUNT, "mouse button"))

    def on_mouse_up(self, button: int) -> None:
        self._next.mouse_down.discard(_check_range(button, MOUSE_BUTTON_COUNT, "mouse button"))

    def on_key_down(self, key: int) -> None:
        self._next.keys_down.add(_check_range(key, KEYBOARD_KEY_COUNT, "key"))

    def on_key_up(self, key: int) -> None:
        self._next.keys_down.discard(_check_range(key, KEYBOARD_KEY_COUNT, "key"))

    def on_text(self, text: str) -> None:
        """Append typed text; the buffer holds at most MAX_TEXT_INPUT - 1 characters."""
        combined = self._next.text + text[:MAX_TEXT_INPUT]
        self._next.text = combined[: MAX_TEXT_INPUT - 1]

    def on_gamepad_button_down(self, button: int, gamepad: int) -> None:
        if gamepad < 0:
            return
        index = _check_gamepad(gamepad)
        self._next.gamepads[index].down.add(
            _check_range(button, GAMEPAD_BUTTON_COUNT, "gamepad button")
        )

    def on_gamepad_button_up(self, button: int, gamepad: int) -> None:
        if gamepad < 0:
            return
        index = _check_gamepad(gamepad)
        self._next.gamepads[index].down.discard(
            _check_range(button, GAMEPAD_BUTTON_COUNT, "gamepad button")
        )

    def on_gamepad_motion(self, gamepad: int, axis: int, value: float) -> None:
        """Record an axis value; unknown axes are ignored."""
        if gamepad < 0:
            return
        pad = self._next.gamepads[_check_gamepad(gamepad)]
        value = float(value)
        if axis == GamepadAxis.LEFT_X:
            pad.left_stick = (value, pad.left_stick[1])
        elif axis == GamepadAxis.LEFT_Y:
            pad.left_stick = (pad.left_stick[0], value)
        elif axis == GamepadAxis.RIGHT_X:
            pad.right_stick = (value, pad.right_stick[1])
        elif axis == GamepadAxis.RIGHT_Y:
            pad.right_stick = (pad.right_stick[0], value)
        elif axis == GamepadAxis.TRIGGER_LEFT:
            pad.left_trigger = value
        elif axis == GamepadAxis.TRIGGER_RIGHT:
            pad.right_trigger = value