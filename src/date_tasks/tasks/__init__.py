"""Date calculation tasks.

Each task is a plain, stateless Python function; the ones that interpret
naive datetimes take an optional ``config`` keyword.
"""

from .clock import angle_between_clock_hands, clock_angle_degrees, clock_hands
from .leap_year import is_leap_year
from .timespan import time_span, time_span_to_string

__all__ = [
    "angle_between_clock_hands",
    "clock_angle_degrees",
    "clock_hands",
    "is_leap_year",
    "time_span",
    "time_span_to_string",
]
