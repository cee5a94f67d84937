"""Recording analysis CLI command."""

from __future__ import annotations

from ..models import Movement
from ..transport import decode_text
from ..utils.sizing import channel_sizes, encoded_size


def analyze_recording(text: str, movement: Movement) -> None:
    """Print a size breakdown of a decoded recording.

    Args:
        text: Recording string the movement was decoded from
        movement: Decoded movement
    """
    compressed_bytes = len(decode_text(text))
    raw_bytes = encoded_size(movement)
    sizes = channel_sizes(movement)

    print("|" * 7, "polyreplay: Polytrack Replay Codec", "|" * 7)
    print(f"{movement.total_frames} frame indices across {len(sizes)} channels.")
    print("Sizes are in bytes unless otherwise noted.")
    print()

    print(f"{'-' * 27} Channels {'-' * 27}")
    for i, (channel, frames) in enumerate(movement.channels(), 1):
        field_desc = f"{i}. {channel.value}"
        size = str(sizes[channel.value])
        info = f"({len(frames)} frames)"
        dots = "." * max(1, 54 - len(field_desc) - len(size) - len(info) - 1)
        print(f"        {field_desc}{dots}{size} {info}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Raw buffer size: {raw_bytes} bytes")
    print(f"Compressed size: {compressed_bytes} bytes")
    print(f"Recording length: {len(text)} characters")
    ratio = raw_bytes / compressed_bytes if compressed_bytes > 0 else 1.0
    print(f"Compression ratio: {ratio:.1f}x")
    if movement.last_frame is not None:
        print(f"Last input frame: {movement.last_frame}")
    print()
