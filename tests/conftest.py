"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from polyreplay import Movement


@pytest.fixture
def sample_movement() -> Movement:
    """Sample movement with empty and non-empty channels."""
    return Movement(up=[10], right=[], down=[5, 20], left=[], reset=[])


@pytest.fixture
def sample_track_id() -> str:
    """Sample track ID for testing."""
    return "7a0e04bfe09e1bead36ddd2f7e61d32fd6c1e55e907d60edc6ccd3e17532e1f7"
