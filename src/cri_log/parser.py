"""
CRI log line parser.

Parses one line of container runtime log output into a LogEntry. Fields are
consumed left to right and the first missing or invalid field raises the
matching ParseError subclass:

    <RFC 3339 timestamp> <stdout|stderr> <tag> <message...>

Fields are separated by runs of whitespace. The message is rebuilt from the
remaining tokens joined by single spaces, so spacing inside the message is
not preserved byte for byte.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .constants import (
    LEAP_SECOND,
    MESSAGE_SEPARATOR,
    NANOS_PER_SECOND,
    NANOSECOND_DIGITS,
)
from .exceptions import (
    InvalidStreamTypeError,
    MissingLogTagError,
    MissingStreamTypeError,
    MissingTimestampError,
    ParseError,
    TimestampFormatError,
)
from .models import LogEntry, LogTimestamp, StreamType

logger = logging.getLogger(__name__)

# RFC 3339 date-time; the offset is mandatory
RFC3339_PATTERN = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]"
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
    r"(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))"
)


def parse_timestamp(value: str) -> LogTimestamp:
    """
    Parse an RFC 3339 timestamp, keeping nanoseconds and the UTC offset.

    Fractions longer than nine digits are truncated to nanoseconds. A leap
    second (":60") is accepted and stored as second 59 with one extra
    second of nanoseconds. Year 0000 cannot be represented and is rejected.

    Args:
        value: Timestamp text, e.g. "2016-10-06T00:17:09.669794202Z"

    Returns:
        LogTimestamp with the offset from the text

    Raises:
        TimestampFormatError: If the text is not a valid RFC 3339 timestamp
    """
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise TimestampFormatError(value)

    (
        year,
        month,
        day,
        hour,
        minute,
        second,
        fraction,
        zulu,
        sign,
        offset_hour,
        offset_minute,
    ) = match.groups()

    if zulu:
        tz = timezone.utc
    elif int(offset_hour) > 23 or int(offset_minute) > 59:
        raise TimestampFormatError(value)
    else:
        offset = timedelta(hours=int(offset_hour), minutes=int(offset_minute))
        tz = timezone(-offset if sign == "-" else offset)

    fraction = (fraction or "")[:NANOSECOND_DIGITS].ljust(NANOSECOND_DIGITS, "0")
    nanosecond = int(fraction)

    second = int(second)
    if second == LEAP_SECOND:
        second -= 1
        nanosecond += NANOS_PER_SECOND

    try:
        # Calendar check (month length, leap years, year >= 1, hour < 24)
        moment = datetime(
            int(year), int(month), int(day), int(hour), int(minute), second, tzinfo=tz
        )
    except ValueError as e:
        raise TimestampFormatError(value) from e

    return LogTimestamp(value=moment, nanosecond=nanosecond)


def parse(line: str) -> LogEntry:
    """
    Parse a single CRI log line.

    Args:
        line: One line of log text, without the line terminator

    Returns:
        LogEntry with timestamp, stream, tag and message

    Raises:
        MissingTimestampError: If the line is empty or only whitespace
        TimestampFormatError: If the first token is not RFC 3339
        MissingStreamTypeError: If there is no second token
        InvalidStreamTypeError: If the second token is not stdout/stderr
        MissingLogTagError: If there is no third token
    """
    tokens = iter(line.split())

    timestamp_str = next(tokens, None)
    if timestamp_str is None:
        raise MissingTimestampError()
    timestamp = parse_timestamp(timestamp_str)

    stream_str = next(tokens, None)
    if stream_str is None:
        raise MissingStreamTypeError()
    try:
        stream = StreamType(stream_str)
    except ValueError:
        raise InvalidStreamTypeError(stream_str) from None

    tag = next(tokens, None)
    if tag is None:
        raise MissingLogTagError()

    message = MESSAGE_SEPARATOR.join(tokens)

    return LogEntry(timestamp=timestamp, stream=stream, tag=tag, message=message)


def parse_or_none(line: str) -> Optional[LogEntry]:
    """
    Parse a CRI log line, returning None instead of raising.

    For callers whose policy is to skip malformed lines. The parse error
    is logged at DEBUG level.
    """
    try:
        return parse(line)
    except ParseError as e:
        logger.debug(f"Skipping malformed CRI log line: {e}")
        return None
