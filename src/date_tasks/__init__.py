"""date-tasks package.

Small, stateless date calculations:

- RFC 2822 and ISO 8601 parsing into timezone-aware datetimes.
- Leap-year detection.
- Elapsed time formatted as ``HH:mm:ss.sss``.
- Angle between the hands of an analog clock.

Usage example:
    from date_tasks import parse_iso8601, angle_between_clock_hands
    angle_between_clock_hands(parse_iso8601("2016-04-05T03:00:00Z"))

Naive values are interpreted in the timezone configured through
``DATE_TASKS_DEFAULT_TIMEZONE`` (UTC by default).
"""

import logging

from .config import AppConfig, load_config
from .errors import AppError, BadRequestError, NegativeTimeSpanError, ParseError
from .schemas import ClockHands, TimeSpan
from .tasks import (
    angle_between_clock_hands,
    clock_hands,
    is_leap_year,
    time_span,
    time_span_to_string,
)
from .utils import (
    format_iso8601,
    parse_iso8601,
    parse_rfc2822,
    try_parse_iso8601,
    try_parse_rfc2822,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "AppConfig",
    "AppError",
    "BadRequestError",
    "ClockHands",
    "NegativeTimeSpanError",
    "ParseError",
    "TimeSpan",
    "angle_between_clock_hands",
    "clock_hands",
    "format_iso8601",
    "is_leap_year",
    "load_config",
    "parse_iso8601",
    "parse_rfc2822",
    "time_span",
    "time_span_to_string",
    "try_parse_iso8601",
    "try_parse_rfc2822",
]

__version__ = "0.1.0"
