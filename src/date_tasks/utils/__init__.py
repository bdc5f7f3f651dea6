"""Utility functions for parsing and formatting.

This package includes the RFC 2822 and ISO 8601 parsers and the ISO 8601
formatter used by the date tasks.
"""

from .date_parser import (
    as_aware,
    ensure_iso8601,
    format_iso8601,
    parse_iso8601,
    parse_rfc2822,
    try_parse_iso8601,
    try_parse_rfc2822,
)

__all__ = [
    "as_aware",
    "ensure_iso8601",
    "format_iso8601",
    "parse_iso8601",
    "parse_rfc2822",
    "try_parse_iso8601",
    "try_parse_rfc2822",
]
