"""Pydantic models for polyreplay.

This module provides the Movement model and the channel enumeration that
defines the wire order of a recording.
"""

from __future__ import annotations

from .movement import CHANNEL_ORDER, Channel, Movement

__all__ = [
    "CHANNEL_ORDER",
    "Channel",
    "Movement",
]
