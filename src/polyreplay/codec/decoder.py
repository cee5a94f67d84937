"""Frame-delta decoder for movements.

This module provides the decode() function that converts a raw replay buffer
back to a Movement. Every read is bounds-checked, and a declared channel count
is validated against the remaining bytes before anything is allocated for it.
"""

from __future__ import annotations

import logging

from ..exceptions import TrailingBytes, TruncatedBuffer, ValueOutOfRange
from ..models import CHANNEL_ORDER, Movement
from .bytepack import UINT24_MAX, UINT24_SIZE, ByteUnpacker

logger = logging.getLogger(__name__)


def decode(data: bytes, *, strict: bool = True) -> Movement:
    """Decode a raw replay buffer to a Movement.

    Channels are read strictly in wire order. Deltas are unsigned 24-bit
    values and are never sign-extended.

    Args:
        data: Raw (decompressed) replay buffer
        strict: If True, bytes left after the fifth channel are an error;
            otherwise they are logged and ignored

    Returns:
        Decoded Movement

    Raises:
        TruncatedBuffer: If the buffer ends before all declared data is read
        TrailingBytes: If strict and bytes remain after the last channel
        ValueOutOfRange: If accumulated frame indices overflow 24 bits

    Examples:
        ```python
        from polyreplay import decode

        data = b"\\x01\\x00\\x00\\x2a\\x00\\x00" + b"\\x00\\x00\\x00" * 4
        assert decode(data).up == (42,)
        ```
    """
    unpacker = ByteUnpacker(data)

    channels: dict[str, tuple[int, ...]] = {}
    for channel in CHANNEL_ORDER:
        channels[channel.value] = _decode_channel(unpacker, channel.value)

    remaining = unpacker.bytes_remaining()
    if remaining:
        if strict:
            raise TrailingBytes(
                f"{remaining} trailing bytes after the last channel "
                f"(buffer is {len(data)} bytes)"
            )
        logger.warning("Ignoring %d trailing bytes after the last channel", remaining)

    return Movement(**channels)


def _decode_channel(unpacker: ByteUnpacker, name: str) -> tuple[int, ...]:
    """Decode a single channel.

    Args:
        unpacker: ByteUnpacker to read from
        name: Channel name, used in error messages

    Returns:
        Frame indices of the channel

    Raises:
        TruncatedBuffer: If data is truncated
        ValueOutOfRange: If a frame index overflows 24 bits
    """
    try:
        count = unpacker.read_uint24()
    except IndexError as e:
        raise TruncatedBuffer(
            f"Truncated data while reading the count of channel {name} "
            f"at offset {unpacker.position()}: {e}"
        ) from e

    try:
        unpacker.require(count * UINT24_SIZE)
    except IndexError as e:
        raise TruncatedBuffer(
            f"Truncated data in channel {name} at offset {unpacker.position()}: "
            f"declared {count} frame indices: {e}"
        ) from e

    frames = []
    previous = 0
    for i in range(count):
        frame = previous + unpacker.read_uint24()
        if frame > UINT24_MAX:
            raise ValueOutOfRange(
                f"Channel {name}[{i}]: decoded frame index {frame} exceeds max {UINT24_MAX}"
            )
        frames.append(frame)
        previous = frame

    return tuple(frames)
