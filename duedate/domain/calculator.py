"""
Core business logic for calculating due dates.

Pure domain logic without any external dependencies (no API calls,
no database, no I/O).
"""

import logging

from pendulum import DateTime

from .exceptions import DueDateOutOfRange
from .models import STANDARD_CALENDAR, Timestamp, WorkCalendar

logger = logging.getLogger(__name__)


class DueDateCalculator:
    """
    Advances a submit timestamp by a turnaround measured in work-hours.

    Algorithm:
    1. Split the turnaround into whole work days and remaining hours
    2. Move a submission made on a non-work day to the next work day's start hour
    3. Add the whole work days, skipping non-work days
    4. Add the remaining hours one at a time, counting only those that land
       inside the working time-of-day window
    """

    def __init__(self, calendar: WorkCalendar = STANDARD_CALENDAR):
        self.calendar = calendar

    def calculate(self, submitted: Timestamp, turnaround_time: int) -> Timestamp:
        """
        Calculate the due date for a validated submission.

        Args:
            submitted: Submit timestamp, already validated against working hours
            turnaround_time: Non-negative turnaround in work-hours

        Returns:
            New Timestamp for the due date; the submitted value is left untouched

        Raises:
            DueDateOutOfRange: If the due date would fall after year 9999
        """
        days_to_add, remaining_hours = divmod(turnaround_time, self.calendar.hours_per_day)
        logger.debug(
            "Turnaround %sh from %s: %s work day(s) + %s hour(s)",
            turnaround_time, submitted, days_to_add, remaining_hours
        )

        current = submitted.to_datetime()
        try:
            current = self._move_off_non_working_day(current)
            current = self._add_working_days(current, days_to_add)
            current = self._add_working_hours(current, remaining_hours)
        except OverflowError as exc:
            raise DueDateOutOfRange(f"{submitted} + {turnaround_time}h") from exc

        return Timestamp.from_datetime(current)

    def _move_off_non_working_day(self, dt: DateTime) -> DateTime:
        """
        Treat a weekend submission as made on the next work day.

        The hour is reset to the work day start hour while the original
        minute is kept (2024-05-25 12:34 -> 2024-05-27 09:34).
        """
        if self.calendar.is_working_day(dt):
            return dt

        moved = self._next_working_day(dt).set(hour=self.calendar.start_time.hour)
        logger.debug("Submitted on a non-work day, moved %s -> %s", dt, moved)
        return moved

    def _add_working_days(self, dt: DateTime, days: int) -> DateTime:
        """Add work days one by one; non-work days do not count."""
        for _ in range(days):
            dt = self._next_working_day(dt)
        return dt

    def _add_working_hours(self, dt: DateTime, hours: int) -> DateTime:
        """
        Step forward an hour at a time until enough working hours passed.

        Only the time-of-day is checked, so an hour landing exactly on the
        opening time is not counted while one on the closing time is.
        """
        while hours > 0:
            dt = dt.add(hours=1)

            if self.calendar.is_working_time(dt.time()):
                hours -= 1

        return dt

    def _next_working_day(self, dt: DateTime) -> DateTime:
        dt = dt.add(days=1)
        while not self.calendar.is_working_day(dt):
            dt = dt.add(days=1)
        return dt
