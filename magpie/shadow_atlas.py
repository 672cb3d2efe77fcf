"""Allocation of square regions on a shared shadow-map atlas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .rect import Rect

ATLAS_SIZE = 4096


@dataclass(frozen=True)
class AtlasRegion:
    """A region of the atlas, in texels."""

    area: Rect = field(default_factory=Rect.zero)


class ShadowMapAtlas:
    """Hands out non-overlapping tiles of a square atlas.

    A region of quality ``q`` is ``size >> q`` texels on each side; a higher
    quality number means a smaller region.
    """

    def __init__(self, size: int = ATLAS_SIZE) -> None:
        self.size = size
        self._regions: List[AtlasRegion] = []

    def allocate(self, quality: int) -> Optional[AtlasRegion]:
        """Reserve a tile of the given quality, or return None if none fits.

        The bottom-right candidate is never used, so the atlas is never filled.
        """
        width = self.size >> quality
        height = self.size >> quality

        for i in range(quality + 1):
            for j in range(quality + 1):
                if i == quality and j == quality:
                    return None

                potential = AtlasRegion(Rect(j * width, i * height, width, height))
                if not any(r.area.intersects(potential.area) for r in self._regions):
                    self._regions.append(potential)
                    return potential

        return None

    def adaptive_alloc(self, ideal_quality: int, worst_quality: int = 5) -> Optional[AtlasRegion]:
        """Try ``ideal_quality`` and progressively worse ones below ``worst_quality``."""
        for quality in range(ideal_quality, worst_quality):
            region = self.allocate(quality)
            if region is not None:
                return region
        return None

    def clear(self) -> None:
        """Release every allocated region."""
        self._regions.clear()

    def regions(self) -> List[AtlasRegion]:
        """The currently allocated regions, in allocation order."""
        return list(self._regions)