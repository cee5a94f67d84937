"""Recording size calculation utilities.

This module provides functions to calculate the raw and compressed size of a
movement without going through the full serialization pipeline by hand.
"""

from __future__ import annotations

from ..codec import encode
from ..codec.bytepack import UINT24_SIZE
from ..models import Movement
from ..transport import DEFAULT_COMPRESSION, CompressionConfig, compress


def channel_sizes(movement: Movement) -> dict[str, int]:
    """Get the raw size in bytes of each channel.

    Each channel takes a 3-byte count plus 3 bytes per frame index.

    Args:
        movement: Movement to analyze

    Returns:
        Dictionary mapping channel names to their size in bytes, in wire order

    Example:
        >>> channel_sizes(Movement(up=[10], down=[5, 20]))
        {'up': 6, 'right': 3, 'down': 9, 'left': 3, 'reset': 3}
    """
    return {
        channel.value: UINT24_SIZE * (1 + len(frames)) for channel, frames in movement.channels()
    }


def encoded_size(movement: Movement) -> int:
    """Calculate the raw (uncompressed) buffer size of a movement in bytes.

    Example:
        >>> encoded_size(Movement(up=[10], down=[5, 20]))
        24
    """
    return sum(channel_sizes(movement).values())


def compressed_size(movement: Movement, config: CompressionConfig = DEFAULT_COMPRESSION) -> int:
    """Calculate the compressed size of a movement in bytes.

    Raises:
        EncodeError: If the movement cannot be encoded
    """
    return len(compress(encode(movement), config))
