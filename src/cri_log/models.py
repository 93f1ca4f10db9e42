"""
Data models for parsed CRI log entries.

Provides the immutable LogEntry record produced by the parser, the
LogTimestamp value it carries and the closed StreamType enumeration.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

import pandas as pd

from .constants import (
    MESSAGE_SEPARATOR,
    NANOS_PER_SECOND,
    NANOSECOND_DIGITS,
    STREAM_STDERR,
    STREAM_STDOUT,
    TAG_FULL,
    TAG_PARTIAL,
)


class StreamType(Enum):
    """Process stream a log line was written to. Values are the wire tokens."""

    STDOUT = STREAM_STDOUT
    STDERR = STREAM_STDERR


@dataclass(frozen=True, order=True)
class LogTimestamp:
    """
    RFC 3339 timestamp with nanosecond precision and a fixed UTC offset.

    Covers years 0001-9999. The offset is kept as written on the line, not
    normalized to UTC.

    Fields:
        value: Timezone-aware datetime truncated to whole seconds
        nanosecond: Fraction of the second in nanoseconds. A leap second
            (":60") is stored as second 59 with 1_000_000_000 added here.
    """

    value: datetime
    nanosecond: int = 0

    @property
    def is_leap_second(self) -> bool:
        """Returns True if the text carried a leap second (":60")."""
        return self.nanosecond >= NANOS_PER_SECOND

    def utcoffset(self) -> timedelta:
        """Get the UTC offset written on the line."""
        return self.value.utcoffset()

    def to_datetime(self) -> datetime:
        """
        Convert to a timezone-aware datetime.

        Sub-microsecond digits are dropped and a leap second is clamped to
        the last microsecond of second 59.
        """
        microsecond = min(self.nanosecond // 1000, 999_999)
        return self.value.replace(microsecond=microsecond)

    def to_pandas(self) -> pd.Timestamp:
        """
        Convert to a nanosecond pandas Timestamp, for DataFrame work.

        A leap second is clamped to the last nanosecond of second 59.

        Raises:
            pandas.errors.OutOfBoundsDatetime: For years outside the
                nanosecond range of pandas (about 1677-2262)
        """
        nanosecond = min(self.nanosecond, NANOS_PER_SECOND - 1)
        text = self._format(self.value.second, nanosecond, trim=False)
        return pd.Timestamp(text).as_unit("ns")

    def isoformat(self) -> str:
        """Render as RFC 3339 with the original offset and trailing zeros dropped."""
        if self.is_leap_second:
            return self._format(60, self.nanosecond - NANOS_PER_SECOND)
        return self._format(self.value.second, self.nanosecond)

    def _format(self, second: int, nanosecond: int, trim: bool = True) -> str:
        v = self.value
        fraction = f"{nanosecond:0{NANOSECOND_DIGITS}d}"
        if trim:
            fraction = fraction.rstrip("0")
        fraction = f".{fraction}" if fraction else ""

        offset_minutes = int(self.utcoffset().total_seconds()) // 60
        sign = "-" if offset_minutes < 0 else "+"
        hours, minutes = divmod(abs(offset_minutes), 60)

        return (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{second:02d}{fraction}"
            f"{sign}{hours:02d}:{minutes:02d}"
        )

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class LogEntry:
    """
    A single log entry in CRI log format.

    Represents one parsed line such as:
        2016-10-06T00:17:09.669794202Z stdout P log content 1

    Fields:
        timestamp: Timestamp with nanosecond precision and the UTC offset
            as written on the line
        stream: Stream the line was written to
        tag: Opaque tag token (by convention F for full, P for partial)
        message: Remaining tokens joined by single spaces, "" if none
    """

    timestamp: LogTimestamp
    stream: StreamType
    tag: str
    message: str

    @classmethod
    def from_line(cls, line: str) -> "LogEntry":
        """
        Parse a CRI log line into a LogEntry.

        Raises:
            ParseError: If any field is missing or invalid
        """
        from .parser import parse

        return parse(line)

    def is_stdout(self) -> bool:
        """Returns True if the entry was written to stdout."""
        return self.stream is StreamType.STDOUT

    def is_stderr(self) -> bool:
        """Returns True if the entry was written to stderr."""
        return self.stream is StreamType.STDERR

    def is_partial(self) -> bool:
        """Returns True if the tag marks a partial line to be continued."""
        return self.tag == TAG_PARTIAL

    def is_full(self) -> bool:
        """Returns True if the tag marks a complete (or final) line."""
        return self.tag == TAG_FULL

    def to_dict(self) -> dict:
        """
        Convert to dictionary representation.

        Returns:
            Dictionary with the timestamp as an RFC 3339 string (nanoseconds
            and offset included) and the stream as its token
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "stream": self.stream.value,
            "tag": self.tag,
            "message": self.message,
        }

    def to_line(self) -> str:
        """Render the entry back into CRI log format."""
        fields = [self.timestamp.isoformat(), self.stream.value, self.tag]
        if self.message:
            fields.append(self.message)
        return MESSAGE_SEPARATOR.join(fields)
