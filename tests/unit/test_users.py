"""Unit tests for user generation."""

from __future__ import annotations

import pytest

from polyreplay import InvalidToken, User
from polyreplay.users import create_token, is_valid_token, random_hex

VALID_TOKEN = "ab" * 32


class TestTokens:
    """Test token helpers."""

    def test_create_token(self) -> None:
        """Test generated tokens are valid and distinct."""
        first = create_token()
        second = create_token()

        assert is_valid_token(first)
        assert is_valid_token(second)
        assert first != second

    @pytest.mark.parametrize(
        "token",
        ["", "ab" * 31, "ab" * 33, "AB" * 32, "zz" * 32, None],
    )
    def test_invalid_tokens(self, token: object) -> None:
        """Test token validation."""
        assert is_valid_token(token) is False  # type: ignore[arg-type]

    def test_random_hex(self) -> None:
        """Test random hex strings."""
        for length in (0, 1, 6, 24):
            value = random_hex(length)
            assert len(value) == length
            assert all(c in "0123456789abcdef" for c in value)

        with pytest.raises(ValueError):
            random_hex(-1)


class TestUser:
    """Test the User dataclass."""

    def test_valid(self) -> None:
        """Test constructing a user."""
        user = User(token=VALID_TOKEN, name="racer", car_colors="0" * 24)

        assert user.name == "racer"

    def test_invalid_token(self) -> None:
        """Test that a bad token is rejected."""
        with pytest.raises(InvalidToken, match="Invalid user token"):
            User(token="nope", name="racer", car_colors="0" * 24)

    def test_random(self) -> None:
        """Test random user generation."""
        user = User.random()

        assert is_valid_token(user.token)
        assert user.name.startswith("user_")
        assert len(user.name) == len("user_") + 6
        assert len(user.car_colors) == 24

    def test_random_with_name(self) -> None:
        """Test random user with an explicit name."""
        assert User.random(name="racer").name == "racer"
