"""Sequential big-endian reader over an in-memory buffer."""

from __future__ import annotations

import struct

_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")


class ShortReadError(EOFError):
    """Raised when fewer bytes remain than a read requires."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"needed {needed} bytes, {available} available")
        self.needed = needed
        self.available = available


class ByteReader:
    """
    Read cursor over a bytes-like object.

    Integers are read in network byte order. A failed read leaves the
    position where it was.

    Examples:
        >>> r = ByteReader(b"\\x00\\x01\\x00\\x00\\x00\\x02")
        >>> r.read_u16(), r.read_u32()
        (1, 2)
        >>> r.remaining
        0
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int) -> memoryview:
        if size < 0:
            raise ValueError(f"read size must be non-negative, got {size}")
        if self.remaining < size:
            raise ShortReadError(size, self.remaining)
        start = self._pos
        self._pos += size
        return self._data[start : self._pos]

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        return bytes(self._take(size))

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return _U16.unpack(self._take(2))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self._take(4))[0]


__all__ = ["ByteReader", "ShortReadError"]
