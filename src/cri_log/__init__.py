"""
Parser for CRI (Container Runtime Interface) log lines.

Turns one line of container runtime log output into a structured LogEntry
exposing timestamp, stream, tag and message, or raises a ParseError naming
the first missing or invalid field.

Usage:
    from cri_log import ParseError, parse

    entry = parse("2016-10-06T00:17:09.669794202Z stdout P log content 1")
    entry.is_stdout()   # True
    entry.tag           # "P"
    entry.message       # "log content 1"

    try:
        parse("not-a-timestamp stdout P msg")
    except ParseError as e:
        print(e.kind, e.value)

Reading lines from files or streams and joining partial (P) entries are
left to the caller.
"""

from .constants import TAG_FULL, TAG_PARTIAL
from .exceptions import (
    InvalidStreamTypeError,
    MissingLogTagError,
    MissingStreamTypeError,
    MissingTimestampError,
    ParseError,
    ParseErrorKind,
    TimestampFormatError,
)
from .models import LogEntry, LogTimestamp, StreamType
from .parser import parse, parse_or_none, parse_timestamp

__all__ = [
    # Data models
    "LogEntry",
    "LogTimestamp",
    "StreamType",
    # Parsing
    "parse",
    "parse_or_none",
    "parse_timestamp",
    # Exceptions
    "ParseError",
    "ParseErrorKind",
    "MissingTimestampError",
    "TimestampFormatError",
    "MissingStreamTypeError",
    "InvalidStreamTypeError",
    "MissingLogTagError",
    # Tag codes
    "TAG_FULL",
    "TAG_PARTIAL",
]
