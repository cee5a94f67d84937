"""Byte-level packing and unpacking utilities.

This module provides the 24-bit little-endian integer primitives the replay
format is built from. All operations are deterministic and byte-aligned.
"""

from __future__ import annotations

UINT24_SIZE = 3
UINT24_MAX = (1 << 24) - 1


class BytePacker:
    """Packs 24-bit unsigned integers into a byte buffer.

    Example:
        >>> packer = BytePacker()
        >>> packer.write_uint24(1)
        >>> packer.write_uint24(42)
        >>> packer.to_bytes()
        b'\\x01\\x00\\x00*\\x00\\x00'
    """

    def __init__(self) -> None:
        """Initialize an empty byte packer."""
        self._buffer = bytearray()

    def write_uint24(self, value: int) -> None:
        """Write an unsigned integer as three little-endian bytes.

        Args:
            value: Unsigned integer value to write (0 to 2^24-1)

        Raises:
            ValueError: If value is negative or doesn't fit in 24 bits
        """
        if value < 0:
            raise ValueError(f"write_uint24 requires non-negative value, got {value}")
        if value > UINT24_MAX:
            raise ValueError(f"Value {value} requires more than 24 bits (max: {UINT24_MAX})")

        self._buffer.extend(value.to_bytes(UINT24_SIZE, "little"))

    def to_bytes(self) -> bytes:
        """Return the packed bytes."""
        return bytes(self._buffer)


class ByteUnpacker:
    """Unpacks 24-bit unsigned integers from a byte buffer.

    Every read is bounds-checked; nothing is ever read past the end of the
    buffer.

    Example:
        >>> unpacker = ByteUnpacker(b"\\x01\\x00\\x00*\\x00\\x00")
        >>> unpacker.read_uint24()
        1
        >>> unpacker.read_uint24()
        42
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a byte unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = memoryview(bytes(data))
        self._position = 0

    def require(self, num_bytes: int) -> None:
        """Check that at least num_bytes are left to read.

        Raises:
            IndexError: If fewer than num_bytes remain
        """
        if num_bytes > self.bytes_remaining():
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

    def read_uint24(self) -> int:
        """Read a three-byte little-endian unsigned integer.

        Raises:
            IndexError: If fewer than three bytes remain
        """
        self.require(UINT24_SIZE)
        start = self._position
        self._position += UINT24_SIZE
        return int.from_bytes(self._data[start : self._position], "little")

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
