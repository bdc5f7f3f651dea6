"""Date/time parsing helpers.

Strict RFC 2822 and ISO 8601 parsers that turn strings into
timezone-aware datetimes, plus the inverse ISO 8601 formatter.

RFC 2822 grammar accepted (case-insensitive)::

    [weekday [","]] (day month year | month day [","] year) time [zone] ["(" comment ")"]

where ``time`` is ``h:mm[:ss]`` and ``zone`` is a name (UT, UTC, GMT, Z,
EST, EDT, CST, CDT, MST, MDT, PST, PDT), a numeric offset ``+hh[[:]mm]``,
or a name followed by an offset (``GMT+01`` is one hour east of UTC).
A one-digit offset hour is only accepted alone or before a colon. A
trailing parenthesized comment such as ``(PST)`` is ignored.

ISO 8601 grammar accepted (extended format)::

    YYYY-MM-DD[(T|t|" ")hh:mm[:ss[(.|,)fraction]][Z|+hh[[:]mm]]]

Values without a zone are placed in the configured default timezone.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from ..config import AppConfig, load_config
from ..errors import ParseError

logger = logging.getLogger(__name__)

_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Offsets in hours east of UTC (RFC 2822 section 4.3 obsolete zones).
_ZONE_NAMES = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_RFC2822_RE = re.compile(
    r"""
    ^\s*
    (?:(?P<weekday>[a-z]+)\s*,?\s+)?
    (?:
        (?P<day>\d{1,2})\s+(?P<month>[a-z]+)\.?\s+(?P<year>\d{2,4})
      |
        (?P<month_first>[a-z]+)\.?\s+(?P<day_second>\d{1,2})\s*,?\s+(?P<year_last>\d{4})
    )
    \s+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?
    (?:\s+(?P<zone>[^\s(]+))?
    (?:\s*\([^()]*\))?
    \s*$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_ZONE_RE = re.compile(
    r"^(?P<name>[a-z]+)?(?:(?P<sign>[+-])(?P<hh>\d{2}|\d(?=:|$))(?::?(?P<mm>\d{2}))?)?$",
    re.IGNORECASE,
)

_ISO8601_RE = re.compile(
    r"""
    ^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        [Tt\ ]
        (?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?
        (?P<zone>[Zz]|[+-]\d{2}(?::?\d{2})?)?
    )?$
    """,
    re.VERBOSE,
)


def _default_tz(config: Optional[AppConfig]) -> tzinfo:
    return (config or load_config()).tzinfo


def _reject(value: object, fmt: str, reason: str) -> ParseError:
    logger.debug("Rejected %s value %r: %s", fmt, value, reason)
    return ParseError(
        f"Invalid {fmt} date {value!r}: {reason}",
        {"value": value if isinstance(value, str) else repr(value), "format": fmt},
    )


def _month_number(token: str) -> Optional[int]:
    token = token.lower()
    if len(token) < 3:
        return None
    for index, name in enumerate(_MONTHS, start=1):
        if name.startswith(token):
            return index
    return None


def _is_weekday(token: str) -> bool:
    token = token.lower()
    return len(token) >= 3 and any(name.startswith(token) for name in _WEEKDAYS)


def _offset(sign: str, hh: str, mm: Optional[str]) -> Optional[timedelta]:
    hours, minutes = int(hh), int(mm or 0)
    if hours > 23 or minutes > 59:
        return None
    delta = timedelta(hours=hours, minutes=minutes)
    return -delta if sign == "-" else delta


def _rfc2822_zone(token: str) -> Optional[timezone]:
    """Resolve an RFC 2822 zone token, or return None if it is not one."""

    match = _ZONE_RE.match(token)
    if not match or not (match.group("name") or match.group("sign")):
        return None
    total = timedelta(0)
    name = match.group("name")
    if name:
        if name.upper() not in _ZONE_NAMES:
            return None
        total += timedelta(hours=_ZONE_NAMES[name.upper()])
    if match.group("sign"):
        delta = _offset(match.group("sign"), match.group("hh"), match.group("mm"))
        if delta is None:
            return None
        total += delta
    if abs(total) >= timedelta(hours=24):
        return None
    return timezone.utc if not total else timezone(total)


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(text) == 3:
        return year + 1900
    return year


def parse_rfc2822(value: str, *, config: Optional[AppConfig] = None) -> datetime:
    """Parse an RFC 2822 date string into a timezone-aware datetime.

    Example:
        >>> parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT").isoformat()
        '2016-01-26T13:48:02+00:00'

    Raises:
        ParseError: If the value does not match the grammar or names an
            impossible date or time.
    """

    fmt = "rfc2822"
    if not isinstance(value, str):
        raise _reject(value, fmt, "expected a string")
    match = _RFC2822_RE.match(value)
    if not match:
        raise _reject(value, fmt, "does not match the RFC 2822 grammar")

    weekday = match.group("weekday")
    if weekday is not None and not _is_weekday(weekday):
        raise _reject(value, fmt, f"unknown day name {weekday!r}")

    if match.group("day") is not None:
        day, month_name, year = match.group("day", "month", "year")
    else:
        month_name, day, year = match.group("month_first", "day_second", "year_last")
    month = _month_number(month_name)
    if month is None:
        raise _reject(value, fmt, f"unknown month {month_name!r}")

    zone = match.group("zone")
    if zone is None:
        tz = _default_tz(config)
    else:
        tz = _rfc2822_zone(zone)
        if tz is None:
            raise _reject(value, fmt, f"unknown zone {zone!r}")

    try:
        return datetime(
            _expand_year(year),
            month,
            int(day),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            tzinfo=tz,
        )
    except ValueError as exc:
        raise _reject(value, fmt, str(exc)) from exc


def parse_iso8601(value: str, *, config: Optional[AppConfig] = None) -> datetime:
    """Parse an ISO 8601 string into a timezone-aware datetime.

    Accepts 'Z' and numeric offsets in the forms '+HH', '+HHMM' and
    '+HH:MM'. A time of 24:00 denotes the start of the following day.

    Raises:
        ParseError: If the timestamp cannot be parsed.
    """

    fmt = "iso8601"
    if not isinstance(value, str):
        raise _reject(value, fmt, "expected a string")
    match = _ISO8601_RE.match(value.strip())
    if not match:
        raise _reject(value, fmt, "does not match the ISO 8601 grammar")

    zone = match.group("zone")
    if zone is None:
        tz = _default_tz(config)
    elif zone in ("Z", "z"):
        tz = timezone.utc
    else:
        delta = _offset(zone[0], zone[1:3], zone[3:].lstrip(":") or None)
        if delta is None:
            raise _reject(value, fmt, f"offset {zone!r} out of range")
        tz = timezone(delta)

    hour = int(match.group("hour") or 0)
    minute = int(match.group("minute") or 0)
    second = int(match.group("second") or 0)
    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    end_of_day = hour == 24
    if end_of_day:
        if minute or second or microsecond:
            raise _reject(value, fmt, "24:00 must not carry minutes or seconds")
        hour = 0

    try:
        dt = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            hour,
            minute,
            second,
            microsecond,
            tzinfo=tz,
        )
        if end_of_day:
            dt = datetime.combine(dt.date() + timedelta(days=1), dt.timetz())
    except (ValueError, OverflowError) as exc:
        raise _reject(value, fmt, str(exc)) from exc
    return dt


def try_parse_rfc2822(
    value: str, *, config: Optional[AppConfig] = None
) -> Optional[datetime]:
    """Like `parse_rfc2822` but returns None for malformed input."""
    try:
        return parse_rfc2822(value, config=config)
    except ParseError:
        return None


def try_parse_iso8601(
    value: str, *, config: Optional[AppConfig] = None
) -> Optional[datetime]:
    """Like `parse_iso8601` but returns None for malformed input."""
    try:
        return parse_iso8601(value, config=config)
    except ParseError:
        return None


def as_aware(value: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``value`` with a timezone, attaching the default one if naive."""

    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return value.replace(tzinfo=tz if tz is not None else _default_tz(None))


def format_iso8601(value: datetime) -> str:
    """Render an instant in UTC with millisecond precision.

    Example:
        >>> format_iso8601(datetime(2016, 1, 19, 16, 7, 37, tzinfo=timezone.utc))
        '2016-01-19T16:07:37.000Z'
    """

    utc = as_aware(value).astimezone(timezone.utc)
    return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def ensure_iso8601(value: str) -> str:
    """Return a normalized ISO 8601 string in UTC.

    Example:
        >>> ensure_iso8601("2016-01-19T16:07:37+01:00")
        '2016-01-19T15:07:37.000Z'
    """

    return format_iso8601(parse_iso8601(value))
