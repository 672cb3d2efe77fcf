"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0

    @classmethod
    def zero(cls) -> "Rect":
        return cls(0, 0, 0, 0)

    @classmethod
    def one(cls) -> "Rect":
        return cls(0, 0, 1, 1)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies strictly inside the rectangle."""
        px, py = point
        return self.left() < px < self.right() and self.top() < py < self.bottom()

    def intersects(self, other: "Rect") -> bool:
        """Whether the two rectangles overlap with non-zero area."""
        return (
            self.left() < other.right()
            and self.right() > other.left()
            and self.top() < other.bottom()
            and self.bottom() > other.top()
        )

    def position(self) -> Point:
        return (self.x, self.y)

    def size(self) -> Point:
        return (self.w, self.h)

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.w

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.h

    def top_left(self) -> Point:
        return (self.left(), self.top())

    def top_right(self) -> Point:
        return (self.right(), self.top())

    def bottom_left(self) -> Point:
        return (self.left(), self.bottom())

    def bottom_right(self) -> Point:
        return (self.right(), self.bottom())

    def __add__(self, other: "Rect") -> "Rect":
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(self.x + other.x, self.y + other.y, self.w + other.w, self.h + other.h)

    def __sub__(self, other: "Rect") -> "Rect":
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(self.x - other.x, self.y - other.y, self.w - other.w, self.h - other.h)

    def __mul__(self, other: "Rect") -> "Rect":
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(self.x * other.x, self.y * other.y, self.w * other.w, self.h * other.h)

    def __truediv__(self, other: "Rect") -> "Rect":
        if not isinstance(other, Rect):
            return NotImplemented
        return Rect(self.x / other.x, self.y / other.y, self.w / other.w, self.h / other.h)

    def __neg__(self) -> "Rect":
        return Rect(-self.x, -self.y, -self.w, -self.h)