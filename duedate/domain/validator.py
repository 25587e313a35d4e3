"""
Validation of submitted data before any calendar arithmetic.

Checks run in a fixed order and the first failure wins:
structural date, structural time, turnaround sign, then working hours.
"""

import logging

import pendulum

from .exceptions import InvalidSubmitDate, InvalidTurnaroundTime
from .models import STANDARD_CALENDAR, Timestamp, WorkCalendar
from .parser import MERIDIEMS, scan_12_hour_clock, scan_24_hour_clock, scan_date

logger = logging.getLogger(__name__)

DATE_FORMAT = "YYYY-MM-DD"


def validate_submission(start_time: str, turnaround_time: int) -> None:
    """
    Validate the raw submit string and the turnaround time.

    Args:
        start_time: Raw submit date string
        turnaround_time: Requested turnaround in work-hours

    Raises:
        InvalidSubmitDate: If the date or time part is malformed
        InvalidTurnaroundTime: If the turnaround time is not a non-negative integer
    """
    if not isinstance(start_time, str):
        raise InvalidSubmitDate(f"expected a string, got {type(start_time).__name__}")

    parts = start_time.split(" ")
    if len(parts) != 2:
        raise InvalidSubmitDate(f"expected '<date> <time>', got {start_time!r}")

    date_part, time_part = parts
    _validate_date(date_part)
    _validate_time(time_part)
    _validate_turnaround(turnaround_time)


def validate_working_hours(
    submitted: Timestamp,
    calendar: WorkCalendar = STANDARD_CALENDAR
) -> None:
    """
    Ensure the submit time-of-day lies inside the work window.

    The day of week is not checked here: weekend submissions
    are moved to the next work day by the calculator.
    """
    if not calendar.is_working_time(submitted.time_of_day):
        logger.debug(
            "Submit time %s outside working hours %s-%s",
            submitted, calendar.start_time, calendar.end_time
        )
        raise InvalidSubmitDate(f"{submitted} is outside working hours")


def _validate_date(date_part: str) -> None:
    """The date must survive a strict YYYY-MM-DD round trip unchanged."""
    if scan_date(date_part) is None:
        raise InvalidSubmitDate(f"malformed date: {date_part!r}")

    try:
        formatted = pendulum.from_format(date_part, DATE_FORMAT).format(DATE_FORMAT)
    except ValueError as exc:
        raise InvalidSubmitDate(f"impossible date: {date_part!r}") from exc

    if formatted != date_part:
        raise InvalidSubmitDate(f"impossible date: {date_part!r}")


def _validate_time(time_part: str) -> None:
    if any(meridiem in time_part for meridiem in MERIDIEMS):
        clock = scan_12_hour_clock(time_part)
        if clock is None:
            raise InvalidSubmitDate(f"malformed 12-hour time: {time_part!r}")
        hour, minute, _ = clock
        min_hour, max_hour = 1, 12
    else:
        clock = scan_24_hour_clock(time_part)
        if clock is None:
            raise InvalidSubmitDate(f"malformed 24-hour time: {time_part!r}")
        hour, minute = clock
        min_hour, max_hour = 0, 23

    if not (min_hour <= hour <= max_hour and 0 <= minute <= 59):
        raise InvalidSubmitDate(f"time out of range: {time_part!r}")


def _validate_turnaround(turnaround_time: int) -> None:
    # bool is an int subclass but never a meaningful hour count
    if isinstance(turnaround_time, bool) or not isinstance(turnaround_time, int):
        raise InvalidTurnaroundTime(
            f"expected an integer, got {type(turnaround_time).__name__}"
        )
    if turnaround_time < 0:
        raise InvalidTurnaroundTime(f"must not be negative, got {turnaround_time}")
