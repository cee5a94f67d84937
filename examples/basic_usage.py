#!/usr/bin/env python3
"""Basic usage example for polyreplay.

This example demonstrates:
1. Building a movement
2. Inspecting the raw frame-delta buffer
3. Serializing to a recording string and back
4. Handling malformed recordings
"""

from __future__ import annotations

from polyreplay import (
    Channel,
    DecodeError,
    Movement,
    channel_sizes,
    compressed_size,
    deserialize_movement,
    encode,
    encoded_size,
    serialize_movement,
)


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("polyreplay Basic Usage Example")
    print("=" * 60)

    # 1. Build a movement: frames at which each input changed state
    movement = Movement(up=[0, 240], right=[60, 90], left=[150, 170], reset=[])
    print(f"\nMovement: {movement}")

    # 2. Raw buffer
    raw = encode(movement)
    print(f"\nRaw buffer ({len(raw)} bytes): {raw.hex(' ')}")
    for name, size in channel_sizes(movement).items():
        print(f"  {name:<6} {size:>3} bytes")

    # 3. Recording string
    recording = serialize_movement(movement)
    print(f"\nRecording: {recording}")
    print(f"Raw size: {encoded_size(movement)} bytes")
    print(f"Compressed size: {compressed_size(movement)} bytes")

    decoded = deserialize_movement(recording)
    assert decoded == movement
    print("Round-trip OK")

    # Movements are immutable; editing returns a copy
    edited = decoded.with_frames(Channel.DOWN, 300, 320)
    print(f"Edited recording: {serialize_movement(edited)}")

    # 4. Malformed input raises a typed error naming the failing stage
    for bad in ["not a recording!", "AAAA", ""]:
        try:
            deserialize_movement(bad)
        except DecodeError as e:
            print(f"\n{bad!r}: {type(e).__name__} at {e.stage.value} stage: {e}")


if __name__ == "__main__":
    main()
