"""Transport encoding for polyreplay.

This module wraps raw replay buffers with raw deflate compression and
unpadded URL-safe base64, producing the string form exchanged with the
game server.
"""

from __future__ import annotations

from .compression import (
    DEFAULT_COMPRESSION,
    MAX_RAW_BUFFER_SIZE,
    CompressionConfig,
    compress,
    decompress,
)
from .text import decode_text, encode_text

__all__ = [
    "CompressionConfig",
    "DEFAULT_COMPRESSION",
    "MAX_RAW_BUFFER_SIZE",
    "compress",
    "decompress",
    "encode_text",
    "decode_text",
]
