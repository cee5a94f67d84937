"""Leaderboard service client for polyreplay.

This module provides an httpx-based client for fetching leaderboards and
recordings and for submitting users and runs.
"""

from __future__ import annotations

from .client import PolytrackApi
from .config import DEFAULT_BASE_URL, DEFAULT_GAME_VERSION, ApiConfig

__all__ = [
    "ApiConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_GAME_VERSION",
    "PolytrackApi",
]
