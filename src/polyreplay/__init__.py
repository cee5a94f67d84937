"""polyreplay: Polytrack Replay Codec

A Python library for reading and writing Polytrack replay recordings. A
recording stores, for each of five input channels (up, right, down, left,
reset), the frames at which that input changed state. On the wire it is a
frame-delta binary buffer, compressed with raw deflate and encoded as
unpadded URL-safe base64.

Key Features:
- Byte-exact frame-delta codec with explicit bounds checking
- Raw deflate + URL-safe base64 transport encoding
- Typed errors for every failing stage
- Leaderboard service client and user generation

Quick Start:
    >>> from polyreplay import Movement, serialize_movement, deserialize_movement
    >>>
    >>> movement = Movement(up=[10], down=[5, 20])
    >>> recording = serialize_movement(movement)
    >>> deserialize_movement(recording) == movement
    True
"""

from __future__ import annotations

from .codec import decode, encode
from .exceptions import (
    ApiError,
    CodecError,
    CodecStage,
    DecodeError,
    DecompressionError,
    EncodeError,
    InvalidEncoding,
    InvalidToken,
    NonMonotonicSequence,
    PolyreplayError,
    TrailingBytes,
    TruncatedBuffer,
    ValueOutOfRange,
)
from .models import CHANNEL_ORDER, Channel, Movement
from .serializer import deserialize_movement, serialize_movement
from .transport import (
    DEFAULT_COMPRESSION,
    CompressionConfig,
    compress,
    decode_text,
    decompress,
    encode_text,
)
from .users import User
from .utils import channel_sizes, compressed_size, encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Movement",
    "Channel",
    "CHANNEL_ORDER",
    "serialize_movement",
    "deserialize_movement",
    # Frame codec
    "encode",
    "decode",
    # Transport
    "CompressionConfig",
    "DEFAULT_COMPRESSION",
    "compress",
    "decompress",
    "encode_text",
    "decode_text",
    # Exceptions
    "PolyreplayError",
    "CodecError",
    "CodecStage",
    "EncodeError",
    "DecodeError",
    "ValueOutOfRange",
    "NonMonotonicSequence",
    "TruncatedBuffer",
    "TrailingBytes",
    "DecompressionError",
    "InvalidEncoding",
    "ApiError",
    "InvalidToken",
    # Users
    "User",
    # Sizing
    "channel_sizes",
    "encoded_size",
    "compressed_size",
    # Version
    "__version__",
]
