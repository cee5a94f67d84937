"""Frame-delta encoder for movements.

This module provides the encode() function that converts a Movement into the
raw replay buffer: for each channel in wire order, a 24-bit little-endian
count followed by one 24-bit little-endian delta per frame index.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..exceptions import EncodeError, NonMonotonicSequence, ValueOutOfRange
from ..models import Movement
from .bytepack import UINT24_MAX, BytePacker

logger = logging.getLogger(__name__)


def encode(movement: Movement) -> bytes:
    """Encode a movement to the raw replay buffer.

    Channels are written in the fixed order up, right, down, left, reset with
    no separators and no overall length prefix.

    Args:
        movement: Movement to encode

    Returns:
        Raw (uncompressed) replay buffer

    Raises:
        ValueOutOfRange: If a channel length or frame index doesn't fit in 24 bits
        NonMonotonicSequence: If a channel's frame indices decrease
        EncodeError: If a frame index is not an integer

    Examples:
        ```python
        from polyreplay import Movement, encode

        data = encode(Movement(up=[42]))
        assert data[:6] == b"\\x01\\x00\\x00\\x2a\\x00\\x00"
        assert len(data) == 18
        ```
    """
    packer = BytePacker()

    for channel, frames in movement.channels():
        _encode_channel(packer, channel.value, frames)

    encoded = packer.to_bytes()
    logger.debug("Encoded %d frame indices into %d bytes", movement.total_frames, len(encoded))
    return encoded


def _encode_channel(packer: BytePacker, name: str, frames: Sequence[int]) -> None:
    """Encode a single channel.

    Args:
        packer: BytePacker to write to
        name: Channel name, used in error messages
        frames: Frame indices of the channel

    Raises:
        EncodeError: If the channel is invalid
    """
    if len(frames) > UINT24_MAX:
        raise ValueOutOfRange(
            f"Channel {name}: {len(frames)} frame indices exceed the maximum count {UINT24_MAX}"
        )

    packer.write_uint24(len(frames))

    previous = 0
    for i, frame in enumerate(frames):
        # bool is an int subclass but never a frame index
        if not isinstance(frame, int) or isinstance(frame, bool):
            raise EncodeError(
                f"Channel {name}[{i}]: expected int, got {type(frame).__name__}"
            )
        if frame < 0 or frame > UINT24_MAX:
            raise ValueOutOfRange(
                f"Channel {name}[{i}]: frame index {frame} out of bounds [0, {UINT24_MAX}]"
            )
        if frame < previous:
            raise NonMonotonicSequence(
                f"Channel {name}[{i}]: frame index {frame} is lower than the previous "
                f"index {previous}"
            )

        # The first entry is the frame itself, the rest are differences
        packer.write_uint24(frame - previous)
        previous = frame
