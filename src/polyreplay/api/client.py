"""HTTP client for the leaderboard and recording service.

The service speaks plain HTTP: GET requests carry their parameters in the
query string, POST requests are form-encoded, and every request includes the
game version. Recordings travel as the URL-safe strings produced by
serialize_movement().
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from ..exceptions import ApiError
from ..models import Movement
from ..serializer import deserialize_movement, serialize_movement
from ..users import User
from .config import ApiConfig

logger = logging.getLogger(__name__)


class PolytrackApi:
    """Client for the leaderboard service.

    Examples:
        ```python
        from polyreplay.api import PolytrackApi

        with PolytrackApi() as api:
            board = api.get_leaderboard(track_id, amount=1)
            best = board["entries"][0]
            movement = api.get_recording_movement(best["id"])
        ```
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a client.

        Args:
            config: Connection settings (defaults to ApiConfig())
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config or ApiConfig()
        self.http_client = httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers={"Accept": "*/*"},
            transport=transport,
        )

    def __enter__(self) -> PolytrackApi:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.http_client.close()

    def get_user(self, user_token: str) -> Any:
        """Fetch the profile stored for a user token."""
        response = self._request(
            "GET", "/user", params={"version": self.config.version, "userToken": user_token}
        )
        return self._json(response)

    def submit_user(self, user: User) -> None:
        """Register or update a user on the server."""
        self._request(
            "POST",
            "/user",
            data={
                "version": self.config.version,
                "userToken": user.token,
                "name": user.name,
                "carColors": user.car_colors,
            },
        )
        logger.info("Submitted user %s", user.name)

    def get_leaderboard(
        self,
        track_id: str,
        *,
        skip: int = 0,
        amount: int = 20,
        only_verified: bool = True,
    ) -> Any:
        """Fetch a page of the leaderboard for a track."""
        response = self._request(
            "GET",
            "/leaderboard",
            params={
                "version": self.config.version,
                "trackId": track_id,
                "skip": skip,
                "amount": amount,
                "onlyVerified": "true" if only_verified else "false",
            },
        )
        return self._json(response)

    def get_recordings(self, recording_ids: int | str | Iterable[int | str]) -> Any:
        """Fetch one or more recordings by id.

        Args:
            recording_ids: A single id or an iterable of ids
        """
        if isinstance(recording_ids, (int, str)):
            ids_param = str(recording_ids)
        else:
            ids_param = ",".join(str(recording_id) for recording_id in recording_ids)

        response = self._request(
            "GET",
            "/recordings",
            params={"version": self.config.version, "recordingIds": ids_param},
        )
        return self._json(response)

    def get_recording_movement(self, recording_id: int | str) -> Movement:
        """Fetch a recording and decode its movement.

        Raises:
            ApiError: If the server returns no recording
            DecodeError: If the recording string cannot be decoded
        """
        recordings = self.get_recordings(recording_id)
        entry = recordings[0] if isinstance(recordings, list) and recordings else None
        if not isinstance(entry, dict) or "recording" not in entry:
            raise ApiError(f"No recording returned for id {recording_id}")
        return deserialize_movement(entry["recording"])

    def submit_leaderboard(
        self,
        user: User,
        track_id: str,
        frames: int,
        recording: str | Movement,
    ) -> int:
        """Submit a run to the leaderboard.

        Args:
            user: Submitting user
            track_id: Track identifier
            frames: Finish time in frames
            recording: Recording string, or a Movement to serialize

        Returns:
            Upload id assigned by the server

        Raises:
            ApiError: If the request fails or the response is not an integer id
            EncodeError: If a Movement cannot be serialized
        """
        if isinstance(recording, Movement):
            recording = serialize_movement(recording)

        response = self._request(
            "POST",
            "/leaderboard",
            data={
                "version": self.config.version,
                "userToken": user.token,
                "name": user.name,
                "carColors": user.car_colors,
                "trackId": track_id,
                "frames": str(frames),
                "recording": recording,
            },
        )

        parsed = self._json(response)
        if isinstance(parsed, bool):
            raise ApiError(f"Invalid upload id: {parsed!r}")
        try:
            upload_id = int(parsed)
        except (TypeError, ValueError) as e:
            raise ApiError(f"Invalid upload id: {parsed!r}") from e

        logger.info("Submitted %d-frame run on track %s as upload %d", frames, track_id, upload_id)
        return upload_id

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.http_client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"{method} {path} failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {path} failed: {e}") from e
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            raise ApiError(f"Error parsing response JSON: {e}") from e
