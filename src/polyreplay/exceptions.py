"""Exception hierarchy for polyreplay.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PolyreplayError for easy catching of any polyreplay-specific error.
"""

from __future__ import annotations

import enum


class CodecStage(str, enum.Enum):
    """Pipeline stage a codec error originated from."""

    FRAMES = "frames"
    COMPRESSION = "compression"
    TEXT = "text"


class PolyreplayError(Exception):
    """Base exception for all polyreplay errors."""

    pass


class CodecError(PolyreplayError):
    """Base exception for replay codec failures.

    Attributes:
        stage: Pipeline stage that failed (frames, compression or text)
    """

    stage: CodecStage = CodecStage.FRAMES


class EncodeError(CodecError):
    """Raised when encoding a movement fails.

    Examples:
        - Frame index that is not an integer
        - Value out of the 24-bit range
        - Decreasing frame indices within a channel
    """

    pass


class DecodeError(CodecError):
    """Raised when decoding a recording fails.

    Examples:
        - Malformed base64 text
        - Corrupt or truncated deflate stream
        - Buffer shorter than the declared channel counts
    """

    pass


class ValueOutOfRange(EncodeError, DecodeError):
    """Raised when a count or frame index does not fit in 24 bits.

    The encoder raises it for oversized or negative input values; the decoder
    raises it when accumulated deltas of a crafted buffer overflow.
    """

    pass


class NonMonotonicSequence(EncodeError):
    """Raised when a channel's frame indices decrease."""

    pass


class TruncatedBuffer(DecodeError):
    """Raised when the buffer ends before all declared bytes are read."""

    pass


class TrailingBytes(DecodeError):
    """Raised in strict mode when bytes remain after the fifth channel."""

    pass


class DecompressionError(DecodeError):
    """Raised when a raw deflate stream is malformed, truncated or oversized."""

    stage = CodecStage.COMPRESSION


class InvalidEncoding(DecodeError):
    """Raised when a recording string is not valid URL-safe base64."""

    stage = CodecStage.TEXT


class ApiError(PolyreplayError):
    """Raised when a request to the leaderboard service fails.

    Attributes:
        status_code: HTTP status code, or None for transport failures
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidToken(PolyreplayError, ValueError):
    """Raised when a user token is not 64 lowercase hex characters."""

    pass
