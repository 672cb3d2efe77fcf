"""Application and window configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class WindowMode(enum.IntEnum):
    NONE = 0
    WINDOWED = 1
    BORDERLESS = 2
    FULLSCREEN = 3
    BORDERLESS_FULLSCREEN = 4


class ConfigFlag(enum.IntFlag):
    NONE = 0
    RESIZABLE = 1 << 0
    VSYNC = 1 << 1
    CURSOR_INVISIBLE = 1 << 2
    CENTRE_WINDOW = 1 << 3
    HIGH_PIXEL_DENSITY = 1 << 4
    LOCK_CURSOR = 1 << 5


@dataclass(frozen=True)
class Version:
    variant: int = 0
    major: int = 1
    minor: int = 0
    patch: int = 0


@dataclass
class Config:
    """Settings the application starts with."""

    window_name: Optional[str] = None
    engine_name: Optional[str] = None
    app_version: Version = field(default_factory=Version)
    engine_version: Version = field(default_factory=Version)
    width: int = 1280
    height: int = 720
    target_fps: int = 60
    opacity: float = 1.0
    flags: ConfigFlag = ConfigFlag.NONE
    vsync: bool = False
    window_mode: WindowMode = WindowMode.WINDOWED

    def has_flag(self, flag: ConfigFlag) -> bool:
        return bool(self.flags & flag)


def demo_config() -> Config:
    """The configuration the demo application runs with."""
    return Config(
        window_name="Magpie Demo",
        engine_name="Magpie",
        width=1280,
        height=720,
        target_fps=144,
        opacity=1.0,
        vsync=True,
        window_mode=WindowMode.WINDOWED,
        flags=ConfigFlag.CENTRE_WINDOW | ConfigFlag.RESIZABLE,
    )