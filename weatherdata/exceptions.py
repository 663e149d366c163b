"""
Error types raised while loading and querying weather data.

Parse errors are fatal to a parse call. Query errors are recoverable:
callers report them and carry on.
"""
from typing import Optional


class WeatherDataError(Exception):
    """Base class for all weather data errors."""


class ParseError(WeatherDataError):
    """The CSV file could not be turned into records."""


class DataFileError(ParseError):
    """The input path does not resolve to a readable file."""
    
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot read weather data file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedRowError(ParseError, ValueError):
    """A data line has too few fields or a field of the wrong type."""
    
    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed row at line {line_number}: {line!r} ({reason})")


class QueryError(WeatherDataError):
    """A query could not produce a result for the given arguments."""


class InvalidMonthError(QueryError, ValueError):
    """Month number outside 1..12."""
    
    def __init__(self, month: object):
        self.month = month
        super().__init__(f"Invalid month number: {month!r} (expected 1 to 12)")


class NoDataForMonthError(QueryError, LookupError):
    """Valid month with no matching records."""
    
    def __init__(self, month: int, month_name: str):
        self.month = month
        self.month_name = month_name
        super().__init__(f"No weather data for {month_name}")
