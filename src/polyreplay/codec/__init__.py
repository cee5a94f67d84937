"""Frame-delta codec for polyreplay.

This module converts between Movement values and the raw replay buffer
using per-channel delta encoding with 24-bit little-endian fields.
"""

from __future__ import annotations

from .bytepack import UINT24_MAX, BytePacker, ByteUnpacker
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "BytePacker",
    "ByteUnpacker",
    "UINT24_MAX",
]
