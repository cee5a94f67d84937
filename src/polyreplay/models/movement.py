"""Movement model: the decoded form of a replay recording.

A movement holds one tuple of frame indices per input channel. Each index is
the simulation frame at which that input changed state.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict


class Channel(str, enum.Enum):
    """Input channels, declared in wire order."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    RESET = "reset"


CHANNEL_ORDER: tuple[Channel, ...] = tuple(Channel)


class Movement(BaseModel):
    """Frame indices for each of the five input channels.

    Range and ordering constraints are checked by the encoder rather than at
    construction, so an invalid movement can be built and reported precisely
    when it is serialized.

    Example:
        >>> movement = Movement(up=[10], down=[5, 20])
        >>> movement.down
        (5, 20)
        >>> movement.with_frames("down", 30).down
        (5, 20, 30)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    up: tuple[int, ...] = ()
    right: tuple[int, ...] = ()
    down: tuple[int, ...] = ()
    left: tuple[int, ...] = ()
    reset: tuple[int, ...] = ()

    def channel(self, channel: Channel | str) -> tuple[int, ...]:
        """Return the frame indices of a channel."""
        return getattr(self, Channel(channel).value)

    def channels(self) -> Iterator[tuple[Channel, tuple[int, ...]]]:
        """Iterate over (channel, frames) pairs in wire order."""
        for channel in CHANNEL_ORDER:
            yield channel, self.channel(channel)

    def with_frames(self, channel: Channel | str, *frames: int) -> Movement:
        """Return a copy with frames appended to one channel.

        Args:
            channel: Channel to extend
            *frames: Frame indices to append

        Returns:
            New Movement; this instance is left unchanged
        """
        name = Channel(channel).value
        # model_copy skips validation
        values = {**self.model_dump(), name: getattr(self, name) + tuple(frames)}
        return self.model_validate(values)

    @property
    def total_frames(self) -> int:
        """Number of frame indices across all channels."""
        return sum(len(frames) for _, frames in self.channels())

    @property
    def last_frame(self) -> int | None:
        """Highest frame index in any channel, or None for an empty movement."""
        return max((max(frames) for _, frames in self.channels() if frames), default=None)
