"""Scene lights."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Tuple

from .colour import Colour
from .shadow_atlas import AtlasRegion

MAX_POINT_LIGHTS = 16

Vec3 = Tuple[float, float, float]


class LightType(enum.Enum):
    POINT = 0


@dataclass
class Light:
    """A light source and its shadow settings."""

    type: LightType = LightType.POINT
    colour: Colour = field(default_factory=Colour.empty)
    shadows_enabled: bool = False
    shadow_atlas_region: AtlasRegion = field(default_factory=AtlasRegion)
    intensity: float = 0.0
    falloff: float = 0.0
    direction: Vec3 = (1.0, 0.0, 0.0)
    position: Vec3 = (0.0, 0.0, 0.0)

    @property
    def is_shadow_caster(self) -> bool:
        return self.shadows_enabled

    def toggle_shadows(self, enabled: bool) -> None:
        """Turn shadow casting on or off."""
        self.shadows_enabled = bool(enabled)