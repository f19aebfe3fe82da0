"""Bounds-checked byte cursor shared by encode and decode paths."""

from __future__ import annotations

import io
import os

from .errors import TruncatedInputError


class ByteCursor:
    """A growable byte buffer with a single read/write position.

    A cursor belongs to one encode or decode call; it is never shared.
    """

    __slots__ = ("_stream",)

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._stream = io.BytesIO(bytes(data))

    @property
    def stream(self) -> io.BytesIO:
        return self._stream

    @property
    def position(self) -> int:
        return self._stream.tell()

    def __len__(self) -> int:
        with self._stream.getbuffer() as view:
            return len(view)

    @property
    def remaining(self) -> int:
        return len(self) - self.position

    def at_end(self) -> bool:
        return self.remaining <= 0

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"Negative read size {size}")
        if size > self.remaining:
            raise TruncatedInputError(
                f"Need {size} bytes at offset {self.position}, only {self.remaining} remain"
            )
        return self._stream.read(size)

    def peek(self, size: int) -> bytes:
        data = self.read(size)
        self._stream.seek(-len(data), os.SEEK_CUR)
        return data

    def take(self, size: int) -> ByteCursor:
        """Split off the next ``size`` bytes as an independent cursor."""
        return ByteCursor(self.read(size))

    def write(self, data: bytes | bytearray) -> None:
        self._stream.write(data)

    def getvalue(self) -> bytes:
        return self._stream.getvalue()
