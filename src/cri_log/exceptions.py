"""
Custom exceptions for CRI log line parsing.

Every failure of the parser is reported as a subclass of ParseError, one
subclass per missing or invalid field. Fields are validated left to right,
so a line with several problems reports only the first one.
"""

from enum import Enum

from .constants import MAX_ERROR_VALUE_LENGTH


class ParseErrorKind(Enum):
    """Closed set of parse failure kinds."""

    MISSING_TIMESTAMP = "missing_timestamp"
    TIMESTAMP_FORMAT = "timestamp_format"
    MISSING_STREAM_TYPE = "missing_stream_type"
    INVALID_STREAM_TYPE = "invalid_stream_type"
    MISSING_LOG_TAG = "missing_log_tag"


class ParseError(ValueError):
    """
    Base exception for all CRI log parsing errors.

    Derives from ValueError so that generic bad-input handlers also catch
    it. Catch ParseError to handle every failure kind at once, or one of
    the subclasses to handle a single kind.

    Attributes:
        kind: The failure kind (None only on the bare base class)
        message: Detailed error message
        value: The offending token, for invalid (not missing) fields
    """

    kind: ParseErrorKind | None = None

    def __init__(self, message: str, value: str | None = None):
        self.message = message
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with the offending value."""
        if self.value is None:
            return self.message
        # Truncate long values for readability
        value = (
            self.value[:MAX_ERROR_VALUE_LENGTH] + "..."
            if len(self.value) > MAX_ERROR_VALUE_LENGTH
            else self.value
        )
        return f"{self.message}: {value}"


class MissingTimestampError(ParseError):
    """Raised when the line has no tokens at all."""

    kind = ParseErrorKind.MISSING_TIMESTAMP

    def __init__(self):
        super().__init__("Missing timestamp in log entry")


class TimestampFormatError(ParseError):
    """
    Raised when the first token is not a valid RFC 3339 timestamp.

    Covers malformed text, out-of-range date or time components and a
    missing UTC offset.
    """

    kind = ParseErrorKind.TIMESTAMP_FORMAT

    def __init__(self, value: str):
        super().__init__("Timestamp format error", value=value)


class MissingStreamTypeError(ParseError):
    """Raised when the line ends after the timestamp."""

    kind = ParseErrorKind.MISSING_STREAM_TYPE

    def __init__(self):
        super().__init__("Missing stream type")


class InvalidStreamTypeError(ParseError):
    """Raised when the second token is neither 'stdout' nor 'stderr'."""

    kind = ParseErrorKind.INVALID_STREAM_TYPE

    def __init__(self, value: str):
        super().__init__("Invalid stream type", value=value)


class MissingLogTagError(ParseError):
    """Raised when the line ends after the stream type."""

    kind = ParseErrorKind.MISSING_LOG_TAG

    def __init__(self):
        super().__init__("Missing log tag")
