from __future__ import annotations

from typing import Optional


class LimitedDateTimeError(Exception):
    """Base error."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ParseError(LimitedDateTimeError, ValueError):
    """Text is not in the canonical form."""

class InvalidLengthError(ParseError):
    """Text is not exactly the canonical width."""

class InvalidFormatError(ParseError):
    """Wrong separator or structure."""

class InvalidDigitError(ParseError):
    """A character is not an ASCII digit."""


class OutOfRangeError(LimitedDateTimeError, ValueError):
    """Numerically valid but outside the supported span."""


class InvalidDateError(LimitedDateTimeError, ValueError):
    """Fields are individually valid but do not name an existing day."""

class InvalidDayOfYearError(InvalidDateError):
    """Day-of-year past the end of its year."""


class ClockError(LimitedDateTimeError, RuntimeError):
    """Raised when the host clock reads outside 1970..9999."""
