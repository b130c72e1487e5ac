"""A fixed-size byte buffer with a read/write position."""

from __future__ import annotations

import os
from typing import Union

_Content = Union[None, int, str, bytes, bytearray, memoryview]


class Data:
    """Byte buffer that can be read and overwritten like a seekable stream.

    Writing never grows the buffer; use resize() for that.
    """

    def __init__(self, content: _Content = None) -> None:
        if content is None:
            buffer = bytearray()
        elif isinstance(content, bool):
            raise TypeError("content must be a size or bytes")
        elif isinstance(content, int):
            if content < 0:
                raise ValueError("size must not be negative")
            buffer = bytearray(content)
        elif isinstance(content, str):
            buffer = bytearray(content.encode("utf-8"))
        else:
            buffer = bytearray(content)
        self._buffer = buffer
        self._position = 0

    @property
    def position(self) -> int:
        """Current read/write offset."""
        return self._position

    def size(self) -> int:
        """Number of bytes held."""
        return len(self._buffer)

    def resize(self, count: int) -> None:
        """Grow with zero bytes or truncate to count bytes."""
        if count < 0:
            raise ValueError("size must not be negative")
        if count > len(self._buffer):
            self._buffer.extend(bytes(count - len(self._buffer)))
        else:
            del self._buffer[count:]
        self._position = min(self._position, count)

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes from the position; all remaining if size < 0."""
        remaining = len(self._buffer) - self._position
        if size < 0 or size > remaining:
            size = remaining
        chunk = bytes(self._buffer[self._position:self._position + size])
        self._position += len(chunk)
        return chunk

    def write(self, buffer: bytes | bytearray | memoryview) -> int:
        """Overwrite bytes at the position; return how many fitted."""
        payload = bytes(buffer)
        count = min(len(payload), len(self._buffer) - self._position)
        self._buffer[self._position:self._position + count] = payload[:count]
        self._position += count
        return count

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """Move the position and return it."""
        bases = {
            os.SEEK_SET: 0,
            os.SEEK_CUR: self._position,
            os.SEEK_END: len(self._buffer),
        }
        if whence not in bases:
            raise ValueError("Bad seek direction")
        target = bases[whence] + offset
        if not 0 <= target <= len(self._buffer):
            raise ValueError("Bad seek offset")
        self._position = target
        return target

    def tell(self) -> int:
        """Current read/write offset."""
        return self._position

    def string(self) -> str:
        """Content decoded as UTF-8, undecodable bytes replaced."""
        return self._buffer.decode("utf-8", errors="replace")

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Data):
            return self._buffer == other._buffer
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buffer == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Data({bytes(self._buffer)!r})"