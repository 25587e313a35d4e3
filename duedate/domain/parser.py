"""
Parsing of submit date strings into timestamps.

Two grammars are accepted, tried in this order:

    YYYY-MM-DD HH:MM          24-hour clock, two-digit hour
    YYYY-MM-DD H:MMAM|PM      12-hour clock, one or two digit hour

Digits are ASCII only. Values are never normalized: day 35 is an error,
not a rollover into the next month.
"""

import logging
from typing import Optional, Tuple

from .exceptions import InvalidSubmitDate
from .models import Timestamp

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
MERIDIEMS = ("AM", "PM")


def _is_digits(text: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(text) <= max_length and all(ch in _DIGITS for ch in text)


def scan_date(text: str) -> Optional[Tuple[int, int, int]]:
    """Tokenize YYYY-MM-DD into (year, month, day), or None if it does not match."""
    parts = text.split("-")
    if len(parts) != 3:
        return None

    year, month, day = parts
    if not (_is_digits(year, 4, 4) and _is_digits(month, 2, 2) and _is_digits(day, 2, 2)):
        return None

    return int(year), int(month), int(day)


def scan_24_hour_clock(text: str) -> Optional[Tuple[int, int]]:
    """Tokenize HH:MM into (hour, minute), or None if it does not match."""
    hour, sep, minute = text.partition(":")
    if not sep or not (_is_digits(hour, 2, 2) and _is_digits(minute, 2, 2)):
        return None
    return int(hour), int(minute)


def scan_12_hour_clock(text: str) -> Optional[Tuple[int, int, str]]:
    """Tokenize H:MMAM / HH:MMPM into (hour, minute, meridiem), or None."""
    meridiem = text[-2:]
    if meridiem not in MERIDIEMS:
        return None

    hour, sep, minute = text[:-2].partition(":")
    if not sep or not (_is_digits(hour, 1, 2) and _is_digits(minute, 2, 2)):
        return None
    return int(hour), int(minute), meridiem


def to_24_hour(hour: int, meridiem: str) -> int:
    """
    Convert a 12-hour clock hour to 24-hour.

    12AM is midnight (0), 12PM is noon (12); other PM hours gain 12.
    """
    if not 1 <= hour <= 12:
        raise ValueError(f"12-hour clock hour must be between 1 and 12, got {hour}")
    if meridiem == "AM":
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


def parse_submit_date(text: str) -> Timestamp:
    """
    Parse a submit date string into a Timestamp.

    Args:
        text: Date and time, e.g. "2024-05-15 12:00" or "2024-05-28 2:12PM"

    Returns:
        Timestamp for the given date and time

    Raises:
        InvalidSubmitDate: If no grammar matches or the values are not a real date/time
    """
    if not isinstance(text, str):
        raise InvalidSubmitDate(f"expected a string, got {type(text).__name__}")

    date_text, sep, clock_text = text.partition(" ")
    date_fields = scan_date(date_text) if sep else None
    if date_fields is None:
        logger.debug("Submit date %r does not match YYYY-MM-DD", text)
        raise InvalidSubmitDate(f"unrecognized format: {text!r}")

    clock = scan_24_hour_clock(clock_text)
    if clock is None:
        twelve_hour = scan_12_hour_clock(clock_text)
        if twelve_hour is None:
            logger.debug("Submit time %r matches neither clock format", clock_text)
            raise InvalidSubmitDate(f"unrecognized format: {text!r}")

        hour, minute, meridiem = twelve_hour
        try:
            clock = (to_24_hour(hour, meridiem), minute)
        except ValueError as exc:
            raise InvalidSubmitDate(str(exc)) from exc

    year, month, day = date_fields
    hour, minute = clock
    try:
        return Timestamp(year=year, month=month, day=day, hour=hour, minute=minute)
    except ValueError as exc:
        raise InvalidSubmitDate(f"not a real date/time: {text!r}") from exc
