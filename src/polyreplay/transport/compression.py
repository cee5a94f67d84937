"""Raw deflate compression for replay buffers.

The replay format uses a bare DEFLATE stream: no zlib or gzip header and no
trailing checksum. Compression parameters only affect the output size; any
valid raw deflate stream decompresses regardless of how it was produced.
"""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass

from ..exceptions import DecompressionError

logger = logging.getLogger(__name__)

# Largest raw buffer a valid movement can produce: five channels, each with a
# 3-byte count and at most 2^24-1 three-byte entries.
MAX_RAW_BUFFER_SIZE = 5 * 3 * (1 << 24)


@dataclass(frozen=True)
class CompressionConfig:
    """Parameters for the raw deflate stream.

    Attributes:
        level: Compression level, 0-9 (default 9, maximum compression)
        window_bits: Base-two logarithm of the window size, 9-15 (default 15, 32 KiB)
        mem_level: Memory used for the internal compression state, 1-9 (default 8)
        strategy: zlib strategy constant (default zlib.Z_DEFAULT_STRATEGY)
        max_output_size: Upper bound on decompressed output in bytes. Larger
            outputs are rejected instead of being inflated in full.

    Examples:
        ```python
        from polyreplay.transport import CompressionConfig, compress

        fast = CompressionConfig(level=1)
        data = compress(b"\\x00" * 15, fast)
        ```
    """

    level: int = 9
    window_bits: int = 15
    mem_level: int = 8
    strategy: int = zlib.Z_DEFAULT_STRATEGY
    max_output_size: int = MAX_RAW_BUFFER_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.level <= 9:
            raise ValueError(f"level must be 0-9, got {self.level}")

        if not 9 <= self.window_bits <= 15:
            raise ValueError(f"window_bits must be 9-15, got {self.window_bits}")

        if not 1 <= self.mem_level <= 9:
            raise ValueError(f"mem_level must be 1-9, got {self.mem_level}")

        if self.max_output_size <= 0:
            raise ValueError(f"max_output_size must be > 0, got {self.max_output_size}")


DEFAULT_COMPRESSION = CompressionConfig()


def compress(data: bytes, config: CompressionConfig = DEFAULT_COMPRESSION) -> bytes:
    """Compress bytes into a raw deflate stream.

    Args:
        data: Bytes to compress
        config: Compression parameters

    Returns:
        Raw deflate stream
    """
    # Negative wbits selects a raw stream without zlib header or checksum
    compressor = zlib.compressobj(
        config.level,
        zlib.DEFLATED,
        -config.window_bits,
        config.mem_level,
        config.strategy,
    )
    compressed = compressor.compress(bytes(data)) + compressor.flush()
    logger.debug("Compressed %d bytes to %d bytes", len(data), len(compressed))
    return compressed


def decompress(data: bytes, config: CompressionConfig = DEFAULT_COMPRESSION) -> bytes:
    """Decompress a raw deflate stream.

    Args:
        data: Raw deflate stream
        config: Compression parameters (window size and output limit are used)

    Returns:
        Decompressed bytes

    Raises:
        DecompressionError: If the stream is malformed, truncated, followed by
            extra data, or inflates beyond config.max_output_size
    """
    decompressor = zlib.decompressobj(-config.window_bits)
    try:
        # One byte over the limit is enough to tell an oversized stream apart
        output = decompressor.decompress(bytes(data), config.max_output_size + 1)
    except zlib.error as e:
        raise DecompressionError(f"Malformed deflate stream: {e}") from e

    if len(output) > config.max_output_size:
        raise DecompressionError(
            f"Decompressed data exceeds the limit of {config.max_output_size} bytes"
        )
    if not decompressor.eof:
        raise DecompressionError(
            f"Truncated deflate stream: no end of stream after {len(data)} bytes"
        )
    if decompressor.unused_data:
        raise DecompressionError(
            f"{len(decompressor.unused_data)} bytes of extra data after the deflate stream"
        )

    logger.debug("Decompressed %d bytes to %d bytes", len(data), len(output))
    return output
