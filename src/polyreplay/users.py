"""User identities for the leaderboard service.

A user is identified by a 64-character hex token (a SHA-256 digest of random
data) and carries a display name and a car color string.
"""

from __future__ import annotations

import hashlib
import re
import secrets
import uuid
from dataclasses import dataclass

from .exceptions import InvalidToken

_TOKEN_PATTERN = re.compile(r"[0-9a-f]{64}")

NAME_PREFIX = "user_"
CAR_COLORS_LENGTH = 24


def create_token() -> str:
    """Generate a new user token.

    Returns:
        SHA-256 hex digest over 32 random bytes and a random UUID
    """
    entropy = ",".join(str(b) for b in secrets.token_bytes(32)) + str(uuid.uuid4())
    return hashlib.sha256(entropy.encode("utf-8")).hexdigest()


def is_valid_token(token: str) -> bool:
    """Return True if token is 64 lowercase hex characters."""
    return isinstance(token, str) and _TOKEN_PATTERN.fullmatch(token) is not None


def random_hex(length: int) -> str:
    """Return length random lowercase hex characters."""
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return secrets.token_hex((length + 1) // 2)[:length]


@dataclass
class User:
    """A leaderboard user.

    Attributes:
        token: 64-character lowercase hex token
        name: Display name
        car_colors: Hex string describing the car colors

    Examples:
        ```python
        from polyreplay.users import User

        user = User.random(name="racer")
        assert len(user.token) == 64
        ```
    """

    token: str
    name: str
    car_colors: str

    def __post_init__(self) -> None:
        """Validate the token."""
        if not is_valid_token(self.token):
            raise InvalidToken(f"Invalid user token: {self.token!r}")

    @classmethod
    def random(cls, name: str | None = None) -> User:
        """Create a user with a fresh token and random car colors.

        Args:
            name: Display name; defaults to "user_" followed by 6 hex characters
        """
        return cls(
            token=create_token(),
            name=name if name is not None else NAME_PREFIX + random_hex(6),
            car_colors=random_hex(CAR_COLORS_LENGTH),
        )
