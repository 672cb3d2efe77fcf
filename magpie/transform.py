"""Position, origin, rotation and scale combined into a model matrix."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _translation(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _scaling(scale: np.ndarray) -> np.ndarray:
    return np.diag([scale[0], scale[1], scale[2], 1.0])


def _quat_to_matrix(quat: np.ndarray) -> np.ndarray:
    w, x, y, z = quat
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return matrix


class Transform:
    """A lazily rebuilt 4x4 model matrix (column-vector convention)."""

    def __init__(self) -> None:
        self._matrix = np.identity(4)
        self._dirty = False
        self._position = np.zeros(3)
        self._origin = np.zeros(3)
        self._rotation = np.array([1.0, 0.0, 0.0, 0.0])  # w, x, y, z
        self._scale = np.ones(3)

    def matrix(self) -> np.ndarray:
        """The model matrix: translate(position) @ scale @ rotation @ translate(-origin)."""
        if self._dirty:
            self._matrix = (
                _translation(self._position)
                @ _scaling(self._scale)
                @ _quat_to_matrix(self._rotation)
                @ _translation(-self._origin)
            )
            self._dirty = False
        return self._matrix.copy()

    def set_position(self, position: Sequence[float]) -> None:
        self._position = np.asarray(position, dtype=float)
        self._dirty = True

    def set_origin(self, origin: Sequence[float]) -> None:
        self._origin = np.asarray(origin, dtype=float)
        self._dirty = True

    def set_rotation(self, angle: float, axis: Sequence[float]) -> None:
        """Rotate by ``angle`` radians about ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        ax = np.asarray(axis, dtype=float)
        self._rotation = np.array([math.cos(half), ax[0] * s, ax[1] * s, ax[2] * s])
        self._dirty = True

    def set_scale(self, scale: Sequence[float]) -> None:
        self._scale = np.asarray(scale, dtype=float)
        self._dirty = True