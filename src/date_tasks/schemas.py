"""Pydantic models for task results.

`TimeSpan` is the field breakdown behind ``HH:mm:ss.sss`` strings and
`ClockHands` is a full analog clock reading.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class TimeSpan(BaseModel):
    """Non-negative duration split into clock fields.

    Attributes:
        hours: Whole hours, unbounded.
        minutes: Minutes past the hour, 0-59.
        seconds: Seconds past the minute, 0-59.
        milliseconds: Milliseconds past the second, 0-999.
    """

    model_config = ConfigDict(frozen=True)

    hours: int = Field(ge=0)
    minutes: int = Field(ge=0, le=59)
    seconds: int = Field(ge=0, le=59)
    milliseconds: int = Field(ge=0, le=999)

    @classmethod
    def from_milliseconds(cls, total: int) -> "TimeSpan":
        total_seconds, milliseconds = divmod(total, 1000)
        hours, rest = divmod(total_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "TimeSpan":
        # Floor division truncates sub-millisecond remainders.
        return cls.from_milliseconds(delta // timedelta(milliseconds=1))

    @property
    def total_milliseconds(self) -> int:
        return (
            (self.hours * 60 + self.minutes) * 60 + self.seconds
        ) * 1000 + self.milliseconds

    def to_string(self) -> str:
        """Format as ``HH:mm:ss.sss``; hours widen past two digits if needed."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}.{self.milliseconds:03d}"
        )

    def __str__(self) -> str:
        return self.to_string()


class ClockHands(BaseModel):
    """Reading of a 12-hour analog clock.

    Hand positions are measured clockwise from 12 o'clock. Only whole
    minutes count; the hour hand advances half a degree per minute.
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=11)
    minute: int = Field(ge=0, le=59)
    hour_hand_degrees: float
    minute_hand_degrees: float
    angle_degrees: float = Field(ge=0, le=180)
    angle_radians: float
