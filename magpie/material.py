"""Material descriptions and their hashes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .common import combine

_HANDLE_SIZE = 4


def _handle_bytes(handle: int) -> bytes:
    """The in-memory bytes of a bindless handle (32-bit, little endian)."""
    return int(handle).to_bytes(_HANDLE_SIZE, "little")


class ShaderPassType(enum.IntEnum):
    DEFERRED = 0
    FORWARD = 1


@dataclass
class MaterialData:
    """The inputs a material is built from."""

    technique: str = "UNDEFINED"
    textures: List[int] = field(default_factory=list)
    parameters: Optional[bytes] = None

    @property
    def parameter_size(self) -> int:
        return len(self.parameters) if self.parameters is not None else 0

    def hash_value(self) -> int:
        """Hash of the texture handles followed by the technique name."""
        result = 0
        for texture in self.textures:
            result = combine(result, _handle_bytes(texture))
        return combine(result, self.technique)


def _empty_passes() -> List[Optional[str]]:
    return [None] * len(ShaderPassType)


@dataclass
class Material:
    """A built material: bound textures and one shader per pass.

    ``passes`` holds the shader name used for each :class:`ShaderPassType`,
    or None where the pass is unused.
    """

    textures: List[int] = field(default_factory=list)
    parameter_buffer: Optional[bytes] = None
    passes: List[Optional[str]] = field(default_factory=_empty_passes)
    bindless_handle: int = 0

    def hash_value(self) -> int:
        """Hash of the texture handles followed by every pass."""
        result = 0
        for texture in self.textures:
            result = combine(result, _handle_bytes(texture))
        for shader in self.passes:
            result = combine(result, shader if shader is not None else "")
        return result