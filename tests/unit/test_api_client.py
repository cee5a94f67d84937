"""Unit tests for the leaderboard API client."""

from __future__ import annotations

import json
from collections.abc import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from polyreplay import ApiError, Movement, User, deserialize_movement, serialize_movement
from polyreplay.api import ApiConfig, PolytrackApi

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def user() -> User:
    """Fixed user for request assertions."""
    return User(token="cd" * 32, name="racer", car_colors="ff0000" * 4)


def make_api(handler: Handler) -> PolytrackApi:
    """Create a client backed by a mock transport."""
    config = ApiConfig(base_url="https://example.test", version="0.5.0")
    return PolytrackApi(config, transport=httpx.MockTransport(handler))


def form(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body."""
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


class TestApiConfig:
    """Test client configuration."""

    def test_defaults(self) -> None:
        """Test the default server and version."""
        config = ApiConfig()

        assert config.base_url == "https://vps.kodub.com:43273"
        assert config.version == "0.5.0"

    @pytest.mark.parametrize(
        "kwargs",
        [{"base_url": "vps.kodub.com"}, {"version": ""}, {"timeout": 0}],
    )
    def test_invalid(self, kwargs: dict[str, object]) -> None:
        """Test configuration validation."""
        with pytest.raises(ValueError):
            ApiConfig(**kwargs)  # type: ignore[arg-type]


class TestRequests:
    """Test request construction and response handling."""

    def test_get_user(self) -> None:
        """Test fetching a user."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"name": "racer"})

        with make_api(handler) as api:
            assert api.get_user("cd" * 32) == {"name": "racer"}

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/user"
        assert request.url.params["version"] == "0.5.0"
        assert request.url.params["userToken"] == "cd" * 32

    def test_submit_user(self, user: User) -> None:
        """Test registering a user."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="")

        with make_api(handler) as api:
            api.submit_user(user)

        request = seen[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert form(request) == {
            "version": "0.5.0",
            "userToken": user.token,
            "name": "racer",
            "carColors": user.car_colors,
        }

    def test_get_leaderboard(self, sample_track_id: str) -> None:
        """Test leaderboard query parameters."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"entries": []})

        with make_api(handler) as api:
            assert api.get_leaderboard(sample_track_id, amount=1, only_verified=False) == {
                "entries": []
            }

        params = seen[0].url.params
        assert params["trackId"] == sample_track_id
        assert params["skip"] == "0"
        assert params["amount"] == "1"
        assert params["onlyVerified"] == "false"

    def test_get_recordings_joins_ids(self) -> None:
        """Test multiple recording ids are comma-separated."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        with make_api(handler) as api:
            api.get_recordings([1, 2, 3])
            api.get_recordings(42)

        assert seen[0].url.params["recordingIds"] == "1,2,3"
        assert seen[1].url.params["recordingIds"] == "42"

    def test_get_recording_movement(self, sample_movement: Movement) -> None:
        """Test fetching and decoding a recording."""
        recording = serialize_movement(sample_movement)

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"recording": recording}])

        with make_api(handler) as api:
            assert api.get_recording_movement(7) == sample_movement

    def test_get_recording_movement_missing(self) -> None:
        """Test an empty recordings response."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[])

        with make_api(handler) as api, pytest.raises(ApiError, match="No recording"):
            api.get_recording_movement(7)

    def test_submit_leaderboard(
        self, user: User, sample_movement: Movement, sample_track_id: str
    ) -> None:
        """Test submitting a run with a Movement."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="1234")

        with make_api(handler) as api:
            upload_id = api.submit_leaderboard(user, sample_track_id, 500, sample_movement)

        assert upload_id == 1234
        body = form(seen[0])
        assert body["trackId"] == sample_track_id
        assert body["frames"] == "500"
        assert deserialize_movement(body["recording"]) == sample_movement

    def test_submit_leaderboard_string_id(self, user: User) -> None:
        """Test an upload id sent as a JSON string."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=json.dumps("99"))

        with make_api(handler) as api:
            assert api.submit_leaderboard(user, "track", 10, "AAAA") == 99


class TestErrors:
    """Test error mapping."""

    def test_http_error(self) -> None:
        """Test non-2xx responses."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with make_api(handler) as api, pytest.raises(ApiError) as exc_info:
            api.get_user("cd" * 32)

        assert exc_info.value.status_code == 500

    def test_transport_error(self) -> None:
        """Test connection failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with make_api(handler) as api, pytest.raises(ApiError, match="failed") as exc_info:
            api.get_leaderboard("track")

        assert exc_info.value.status_code is None

    def test_invalid_json(self) -> None:
        """Test a body that is not JSON."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with make_api(handler) as api, pytest.raises(ApiError, match="JSON"):
            api.get_user("cd" * 32)

    @pytest.mark.parametrize("body", ['"abc"', "null", "true", "{}"])
    def test_invalid_upload_id(self, user: User, body: str) -> None:
        """Test responses that are not an upload id."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=body)

        with make_api(handler) as api, pytest.raises(ApiError, match="Invalid upload id"):
            api.submit_leaderboard(user, "track", 10, "AAAA")
