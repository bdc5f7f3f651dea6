"""Angle between the hands of a 12-hour analog clock.

See https://en.wikipedia.org/wiki/Clock_angle_problem. Degrees are kept
exact until the single conversion to radians at the end.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from ..config import AppConfig
from ..schemas import ClockHands
from ..utils import as_aware


def clock_angle_degrees(hour: int, minute: int) -> float:
    """Non-reflex angle in degrees between the hands at ``hour:minute``."""
    hour %= 12
    degrees = abs(0.5 * (60 * hour - 11 * minute))
    if degrees > 180:
        degrees = 360 - degrees
    return degrees


def _utc_hour_minute(instant: datetime, config: Optional[AppConfig]) -> tuple:
    tz = config.tzinfo if config is not None else None
    utc = as_aware(instant, tz).astimezone(timezone.utc)
    return utc.hour, utc.minute


def clock_hands(
    instant: datetime, *, config: Optional[AppConfig] = None
) -> ClockHands:
    """Return the full clock reading for ``instant`` read in UTC."""

    hour, minute = _utc_hour_minute(instant, config)
    hour %= 12
    degrees = clock_angle_degrees(hour, minute)
    return ClockHands(
        hour=hour,
        minute=minute,
        hour_hand_degrees=30 * hour + 0.5 * minute,
        minute_hand_degrees=6 * minute,
        angle_degrees=degrees,
        angle_radians=math.pi * degrees / 180,
    )


def angle_between_clock_hands(
    instant: datetime, *, config: Optional[AppConfig] = None
) -> float:
    """Return the angle in radians between the clock hands at ``instant``.

    The hour and minute are read in UTC; seconds are ignored. The result
    lies in [0, pi].

    Example:
        >>> from datetime import datetime, timezone
        >>> six_pm = datetime(2016, 3, 5, 18, 0, tzinfo=timezone.utc)
        >>> round(angle_between_clock_hands(six_pm), 6)
        3.141593
    """

    hour, minute = _utc_hour_minute(instant, config)
    return math.pi * clock_angle_degrees(hour, minute) / 180
