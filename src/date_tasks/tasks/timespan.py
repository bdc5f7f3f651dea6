"""Elapsed-time formatting between two instants."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..config import AppConfig, load_config
from ..errors import NegativeTimeSpanError
from ..schemas import TimeSpan
from ..utils import as_aware, format_iso8601

logger = logging.getLogger(__name__)


def time_span(
    start: datetime, end: datetime, *, config: Optional[AppConfig] = None
) -> TimeSpan:
    """Return the duration ``end - start`` as a `TimeSpan`.

    Naive datetimes are placed in the configured default timezone before
    subtracting. Milliseconds come from the span itself, so carries from
    seconds, minutes and hours are accounted for.

    Raises:
        NegativeTimeSpanError: If ``end`` precedes ``start`` and the
            ``negative_span`` setting is ``"error"``.
    """

    tz = config.tzinfo if config is not None else None
    start, end = as_aware(start, tz), as_aware(end, tz)
    delta = end - start
    if delta.total_seconds() < 0:
        if (config or load_config()).negative_span == "error":
            raise NegativeTimeSpanError(
                "Time span ends before it starts",
                {"start": format_iso8601(start), "end": format_iso8601(end)},
            )
        logger.debug("Negative span %s; formatting its absolute value", delta)
        delta = -delta
    return TimeSpan.from_timedelta(delta)


def time_span_to_string(
    start: datetime, end: datetime, *, config: Optional[AppConfig] = None
) -> str:
    """Format the duration between two instants as ``HH:mm:ss.sss``.

    Example:
        >>> from datetime import datetime
        >>> time_span_to_string(
        ...     datetime(2000, 1, 1, 10, 0, 0), datetime(2000, 1, 1, 15, 20, 10, 453000)
        ... )
        '05:20:10.453'
    """

    return time_span(start, end, config=config).to_string()
