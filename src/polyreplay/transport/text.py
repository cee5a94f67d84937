"""URL-safe base64 text encoding without padding.

Recordings are exchanged as standard base64 with '+' replaced by '-', '/'
replaced by '_' and the trailing '=' padding stripped.
"""

from __future__ import annotations

import base64
import binascii
import re

from ..exceptions import InvalidEncoding

_URLSAFE_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_text(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64.

    Args:
        data: Bytes to encode

    Returns:
        Text using only A-Z, a-z, 0-9, '-' and '_'

    Example:
        >>> encode_text(b"\\xfb\\xff")
        '-_8'
    """
    text = base64.b64encode(bytes(data)).decode("ascii")
    return text.replace("+", "-").replace("/", "_").rstrip("=")


def decode_text(text: str) -> bytes:
    """Decode unpadded URL-safe base64.

    Padding is restored before decoding; input that already carries its
    '=' padding is accepted as well.

    Args:
        text: URL-safe base64 text

    Returns:
        Decoded bytes

    Raises:
        InvalidEncoding: If text contains characters outside the URL-safe
            alphabet or has an impossible length

    Example:
        >>> decode_text("-_8")
        b'\\xfb\\xff'
    """
    if not isinstance(text, str):
        raise InvalidEncoding(f"Expected str, got {type(text).__name__}")

    if not _URLSAFE_PATTERN.fullmatch(text):
        raise InvalidEncoding("Text contains characters outside the URL-safe base64 alphabet")

    unpadded = text.rstrip("=")
    if len(unpadded) % 4 == 1:
        raise InvalidEncoding(f"Invalid base64 length: {len(unpadded)} characters")

    standard = unpadded.replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except binascii.Error as e:
        raise InvalidEncoding(f"Malformed base64: {e}") from e
