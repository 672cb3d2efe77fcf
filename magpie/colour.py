"""32-bit RGBA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


def _byte(value: float) -> int:
    """Truncate towards zero and wrap into an unsigned byte."""
    return int(value) & 0xFF


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with 0-255 per channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    @classmethod
    def empty(cls) -> "Colour":
        return cls(0, 0, 0, 0)

    @classmethod
    def black(cls) -> "Colour":
        return cls(0, 0, 0, 255)

    @classmethod
    def white(cls) -> "Colour":
        return cls(255, 255, 255, 255)

    @classmethod
    def red(cls) -> "Colour":
        return cls(255, 0, 0, 255)

    @classmethod
    def green(cls) -> "Colour":
        return cls(0, 255, 0, 255)

    @classmethod
    def blue(cls) -> "Colour":
        return cls(0, 0, 255, 255)

    @classmethod
    def yellow(cls) -> "Colour":
        return cls(255, 255, 0, 255)

    @classmethod
    def magenta(cls) -> "Colour":
        return cls(255, 0, 255, 255)

    @classmethod
    def cyan(cls) -> "Colour":
        return cls(0, 255, 255, 255)

    @classmethod
    def from_packed(cls, packed: int) -> "Colour":
        """Unpack a 32-bit value laid out as alpha, red, green, blue from the low byte up."""
        return cls(
            r=(packed >> 8) & 0xFF,
            g=(packed >> 16) & 0xFF,
            b=(packed >> 24) & 0xFF,
            a=packed & 0xFF,
        )

    def packed(self) -> int:
        """Pack the colour into a single 32-bit integer."""
        return self.a | (self.r << 8) | (self.g << 16) | (self.b << 24)

    @classmethod
    def from_hsv(cls, hue: float, sat: float, val: float, alpha: int = 255) -> "Colour":
        """Build a colour from hue (degrees, 0-360), saturation and value (0-1).

        Hues outside [0, 360) produce only the value offset.
        """
        chroma = sat * val
        x = chroma * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
        m = val - chroma

        r = g = b = 0.0
        if 0 <= hue < 60:
            r, g, b = chroma, x, 0.0
        elif 60 <= hue < 120:
            r, g, b = x, chroma, 0.0
        elif 120 <= hue < 180:
            r, g, b = 0.0, chroma, x
        elif 180 <= hue < 240:
            r, g, b = 0.0, x, chroma
        elif 240 <= hue < 300:
            r, g, b = x, 0.0, chroma
        elif 300 <= hue < 360:
            r, g, b = chroma, 0.0, x

        return cls(
            _byte((r + m) * 255.0),
            _byte((g + m) * 255.0),
            _byte((b + m) * 255.0),
            alpha,
        )

    @classmethod
    def lerp(cls, start: "Colour", end: "Colour", amount: float) -> "Colour":
        """Linearly interpolate each channel between two colours."""

        def mix(p: int, q: int) -> int:
            return _byte(p + (q - p) * amount)

        return cls(
            mix(start.r, end.r),
            mix(start.g, end.g),
            mix(start.b, end.b),
            mix(start.a, end.a),
        )

    def premultiplied(self) -> "Colour":
        """This colour with alpha folded into the other channels, fully opaque."""
        return Colour(
            _byte(self.r * self.a / 255.0),
            _byte(self.g * self.a / 255.0),
            _byte(self.b * self.a / 255.0),
            255,
        )

    def display_colour(self) -> Tuple[float, float, float]:
        """RGB channels as floats in [0, 1]."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def to_bytes(self) -> bytes:
        """The channels in RGBA order as four bytes."""
        return bytes((self.r, self.g, self.b, self.a))

    def to_floats(self) -> Tuple[float, float, float, float]:
        """The channels in RGBA order as floats in [0, 1]."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def __neg__(self) -> "Colour":
        return Colour(255 - self.r, 255 - self.g, 255 - self.b, self.a)

    def __mul__(self, factor: float) -> "Colour":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Colour(
            _byte(self.r * factor),
            _byte(self.g * factor),
            _byte(self.b * factor),
            _byte(self.a * factor),
        )

    def __truediv__(self, factor: float) -> "Colour":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Colour(
            _byte(self.r / factor),
            _byte(self.g / factor),
            _byte(self.b / factor),
            _byte(self.a / factor),
        )