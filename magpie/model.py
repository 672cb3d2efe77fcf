"""Models made of one or more meshes."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence

import numpy as np

from .material import Material

_MAX_INDEX = 0xFFFF


class Mesh:
    """A vertex list with 16-bit indices and an optional material."""

    def __init__(self) -> None:
        self.parent: Optional["Model"] = None
        self.vertex_format: Any = None
        self.material: Optional[Material] = None
        self.vertices: List[Any] = []
        self.indices = np.zeros(0, dtype=np.uint16)

    def build(self, vertices: Sequence[Any], indices: Sequence[int]) -> None:
        """Store vertex and index data; indices must fit in 16 bits."""
        index_array = np.asarray(indices, dtype=np.int64).reshape(-1)
        if index_array.size and (index_array.min() < 0 or index_array.max() > _MAX_INDEX):
            raise ValueError("indices must lie in 0..65535")
        self.vertices = list(vertices)
        self.indices = index_array.astype(np.uint16)

    def vertex_count(self) -> int:
        return len(self.vertices)

    def index_count(self) -> int:
        return int(self.indices.size)


class Model:
    """A collection of meshes loaded from one place."""

    def __init__(self, directory: str = "") -> None:
        self.owner: Any = None
        self.directory = directory
        self._submeshes: List[Mesh] = []

    def create_mesh(self) -> Mesh:
        """Add a new empty mesh owned by this model and return it."""
        mesh = Mesh()
        mesh.parent = self
        self._submeshes.append(mesh)
        return mesh

    def submesh_count(self) -> int:
        return len(self._submeshes)

    def submesh(self, index: int) -> Mesh:
        return self._submeshes[index]

    def __iter__(self) -> Iterator[Mesh]:
        return iter(self._submeshes)