"""A free-flying perspective camera."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .input import InputState
from .keys import KeyboardKey

logger = logging.getLogger(__name__)

MOUSE_DEADZONE = 0.001
TURN_SPEED = 1.0
MOVE_SPEED = 2.5


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _look_at(eye: np.ndarray, centre: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix, column-vector convention."""
    f = _normalize(centre - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]."""
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[3, 2] = -1.0
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    return matrix


class Camera:
    """Perspective camera steered by mouse look and WASD movement.

    ``fov`` is the vertical field of view in degrees.
    """

    def __init__(self, aspect: float, fov: float, near: float, far: float) -> None:
        self.position = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.direction = np.array([0.0, 0.0, -1.0])
        self.aspect = aspect
        self.fov = fov
        self.near = near
        self.far = far
        self._yaw = 0.0
        self._target_yaw = 0.0
        self._pitch = 0.0
        self._target_pitch = 0.0

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    def update(self, input_state: InputState, window_size: Sequence[float], dt: float) -> None:
        """Turn towards the mouse offset from the window centre and move by held keys."""
        mouse_x, mouse_y = input_state.mouse_position()
        width, height = window_size
        dx = mouse_x - width * 0.5
        dy = mouse_y - height * 0.5

        if dx * dx + dy * dy > MOUSE_DEADZONE * MOUSE_DEADZONE:
            self._target_yaw -= dx * TURN_SPEED * dt
            self._target_pitch -= dy * TURN_SPEED * dt

        t = dt * 50.0
        self._yaw += t * (self._target_yaw - self._yaw)
        self._pitch += t * (self._target_pitch - self._pitch)

        yaw = self._yaw + math.pi / 2.0
        pitch = self._pitch

        if input_state.is_down(KeyboardKey.L):
            self.position = np.array([-2.0, 2.0, 1.0])
            self.direction = _normalize(np.array([1.0, -1.0, -1.0]))
        else:
            self.direction = np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    -math.sin(yaw) * math.cos(pitch),
                ]
            )

        right = _normalize(np.cross(self.direction, np.array([0.0, 1.0, 0.0])))
        upward = _normalize(np.cross(right, self.direction))
        step = MOVE_SPEED * dt

        if input_state.is_down(KeyboardKey.A):
            self.position = self.position - right * step
        elif input_state.is_down(KeyboardKey.D):
            self.position = self.position + right * step

        if input_state.is_down(KeyboardKey.W):
            self.position = self.position + self.direction * step
        elif input_state.is_down(KeyboardKey.S):
            self.position = self.position - self.direction * step

        if input_state.shift() or input_state.ctrl():
            self.position = self.position - upward * step
        elif input_state.is_down(KeyboardKey.SPACE):
            self.position = self.position + upward * step

        logger.debug("camera position %f %f %f", *self.position)

    def view(self) -> np.ndarray:
        return _look_at(self.position, self.position + self.direction, self.up)

    def rotation_matrix(self) -> np.ndarray:
        """The view matrix without translation."""
        return _look_at(np.zeros(3), self.direction, self.up)

    def projection(self) -> np.ndarray:
        return _perspective(math.radians(self.fov), self.aspect, self.near, self.far)

    def set_yaw(self, yaw: float) -> None:
        self._yaw = self._target_yaw = float(yaw)

    def set_pitch(self, pitch: float) -> None:
        self._pitch = self._target_pitch = float(pitch)

    def _basis(self) -> Tuple[np.ndarray, np.ndarray]:
        right = _normalize(np.cross(self.direction, self.up))
        return right, np.cross(right, self.direction)