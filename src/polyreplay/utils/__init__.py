"""Utility functions for polyreplay.

This module provides size calculation helpers for recordings.
"""

from __future__ import annotations

from .sizing import channel_sizes, compressed_size, encoded_size

__all__ = [
    "channel_sizes",
    "compressed_size",
    "encoded_size",
]
