"""Recording serialization: Movement <-> URL-safe recording string.

These are the two operations used when exchanging recordings with the game
server. The encode path is frame-delta encoding, raw deflate, then unpadded
URL-safe base64; the decode path runs the same stages in reverse.
"""

from __future__ import annotations

import logging

from .codec import decode, encode
from .exceptions import DecodeError
from .models import Movement
from .transport import (
    DEFAULT_COMPRESSION,
    CompressionConfig,
    compress,
    decode_text,
    decompress,
    encode_text,
)

logger = logging.getLogger(__name__)


def serialize_movement(
    movement: Movement, *, config: CompressionConfig = DEFAULT_COMPRESSION
) -> str:
    """Serialize a movement to a recording string.

    Args:
        movement: Movement to serialize
        config: Compression parameters

    Returns:
        URL-safe, unpadded base64 recording string

    Raises:
        ValueOutOfRange: If a channel length or frame index doesn't fit in 24 bits
        NonMonotonicSequence: If a channel's frame indices decrease
        EncodeError: If a frame index is not an integer

    Example:
        ```python
        from polyreplay import Movement, deserialize_movement, serialize_movement

        movement = Movement(up=[10], down=[5, 20])
        recording = serialize_movement(movement)
        assert deserialize_movement(recording) == movement
        ```
    """
    return encode_text(compress(encode(movement), config))


def deserialize_movement(
    text: str,
    *,
    strict: bool = True,
    config: CompressionConfig = DEFAULT_COMPRESSION,
) -> Movement:
    """Deserialize a recording string to a movement.

    Args:
        text: URL-safe base64 recording string
        strict: If True, reject bytes trailing the last channel
        config: Compression parameters (window size and output limit)

    Returns:
        Decoded Movement

    Raises:
        DecodeError: On the first failing stage. The concrete subclass and its
            ``stage`` attribute identify it: InvalidEncoding (text),
            DecompressionError (compression), TruncatedBuffer, TrailingBytes
            or ValueOutOfRange (frames).
    """
    try:
        raw = decompress(decode_text(text), config)
        return decode(raw, strict=strict)
    except DecodeError as e:
        logger.debug("Recording rejected at %s stage: %s", e.stage.value, e)
        raise
