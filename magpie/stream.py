"""Byte streams over files and fixed blocks of memory."""

from __future__ import annotations

import io
import os
from typing import Any, Optional, Tuple, Union

_Buffer = Union[bytes, bytearray, memoryview]


class _FixedBuffer:
    """A seekable view over memory that never grows; read-only for bytes."""

    def __init__(self, memory: _Buffer) -> None:
        self._view = memoryview(memory).cast("B")
        self._pos = 0

    def read(self, length: int) -> bytes:
        count = max(0, min(length, len(self._view) - self._pos))
        data = bytes(self._view[self._pos:self._pos + count])
        self._pos += count
        return data

    def write(self, data: bytes) -> int:
        if self._view.readonly:
            return 0
        count = min(len(data), len(self._view) - self._pos)
        self._view[self._pos:self._pos + count] = data[:count]
        self._pos += count
        return count

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        base = {io.SEEK_SET: 0, io.SEEK_CUR: self._pos, io.SEEK_END: len(self._view)}[whence]
        self._pos = max(0, min(base + offset, len(self._view)))
        return self._pos

    def tell(self) -> int:
        return self._pos

    def close(self) -> None:
        self._view.release()


class Stream:
    """A byte stream; every operation is a no-op while nothing is open."""

    def __init__(self) -> None:
        self._handle: Any = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; empty when closed or at the end."""
        if self._handle is None:
            return b""
        if length < 0:
            raise ValueError("length must not be negative")
        return self._handle.read(length)

    def write(self, data: _Buffer) -> int:
        """Write ``data`` and return how many bytes were written."""
        if self._handle is None:
            return 0
        return self._handle.write(bytes(data)) or 0

    def seek(self, offset: int) -> None:
        """Move to ``offset`` bytes from the start."""
        if self._handle is not None:
            self._handle.seek(offset)

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None

    def position(self) -> int:
        """The current offset, or -1 when closed."""
        if self._handle is None:
            return -1
        return self._handle.tell()

    def size(self) -> int:
        """The total length in bytes, or -1 when closed."""
        if self._handle is None:
            return -1
        current = self._handle.tell()
        end = self._handle.seek(0, io.SEEK_END)
        self._handle.seek(current)
        return end

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class FileStream(Stream):
    """A stream over a file on disk, always opened in binary mode."""

    def __init__(self, filename: Union[str, os.PathLike, None] = None, mode: str = "rb") -> None:
        super().__init__()
        if filename is not None:
            self.open(filename, mode)

    def open(self, filename: Union[str, os.PathLike], mode: str = "rb") -> "FileStream":
        """Open ``filename``, closing whatever was open before."""
        self.close()
        if "b" not in mode:
            mode += "b"
        self._handle = open(filename, mode)
        return self

    def get_line(self, pointer: int) -> Optional[Tuple[str, int]]:
        """Read from the current position up to and including a newline.

        ``pointer`` is the caller's running offset. Returns the line and the
        advanced offset, or None if the end is reached before a newline.
        """
        line = bytearray()
        total = self.size()
        while True:
            char = self.read(1)
            line += char
            pointer += 1
            if pointer > total:
                return None
            self.seek(pointer)
            if char == b"\n":
                return line.decode("utf-8", errors="replace"), pointer


class MemoryStream(Stream):
    """A stream over a fixed block of memory.

    Writable buffers such as ``bytearray`` are written in place and never
    grow; ``bytes`` gives a read-only stream.
    """

    def __init__(self, memory: Optional[_Buffer] = None) -> None:
        super().__init__()
        if memory is not None:
            self.open(memory)

    def open(self, memory: _Buffer) -> "MemoryStream":
        self.close()
        self._handle = _FixedBuffer(memory)
        return self