"""Render objects, their meshes and the scene's lights."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .light import MAX_POINT_LIGHTS, Light, LightType
from .model import Mesh, Model
from .transform import Transform


@dataclass(eq=False)
class RenderObject:
    """Something drawn in the scene: a model placed by a transform."""

    transform: Transform = field(default_factory=Transform)
    model: Optional[Model] = None


def _material_key(mesh: Mesh) -> int:
    return mesh.material.hash_value() if mesh.material is not None else 0


class Scene:
    """Holds render objects and a fixed ring of point lights."""

    def __init__(self) -> None:
        self._objects: List[RenderObject] = []
        self._render_list: List[Mesh] = []
        self._dirty = True
        self._point_lights: List[Light] = [Light() for _ in range(MAX_POINT_LIGHTS)]
        self._point_light_count = 0

    @property
    def render_objects(self) -> List[RenderObject]:
        return self._objects

    def create_render_object(self) -> RenderObject:
        """Add an empty render object and return it."""
        self._dirty = True
        obj = RenderObject()
        self._objects.append(obj)
        return obj

    def foreach_object(self, fn: Callable[[int, RenderObject], bool]) -> None:
        """Call ``fn(index, obj)`` for each object until it returns false."""
        for index, obj in enumerate(self._objects):
            if not fn(index, obj):
                return

    def foreach_mesh(self, fn: Callable[[int, Mesh], bool]) -> None:
        """Call ``fn(index, mesh)`` over the render list until it returns false."""
        for index, mesh in enumerate(self.render_list()):
            if not fn(index, mesh):
                return

    def render_list(self) -> List[Mesh]:
        """Every mesh of every object, ordered by material hash.

        The list is rebuilt only after a render object has been created.
        """
        if self._dirty:
            meshes = [
                mesh for obj in self._objects if obj.model is not None for mesh in obj.model
            ]
            self._render_list = sorted(meshes, key=_material_key)
            self._dirty = False
        return list(self._render_list)

    def add_light(self, light: Light) -> None:
        """Store a copy of a point light; the slots wrap after MAX_POINT_LIGHTS."""
        if light.type is LightType.POINT:
            self._point_lights[self._point_light_count] = dataclasses.replace(light)
            self._point_light_count = (self._point_light_count + 1) % MAX_POINT_LIGHTS

    def point_lights(self) -> List[Light]:
        return self._point_lights

    def point_light_count(self) -> int:
        return self._point_light_count