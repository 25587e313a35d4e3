"""
Domain models for timestamps and the work calendar.
"""

from dataclasses import dataclass, field
from datetime import time
from typing import FrozenSet

import pendulum
from pendulum import DateTime

CANONICAL_FORMAT = "YYYY-MM-DD HH:mm"


@dataclass(frozen=True)
class Timestamp:
    """
    Represents an immutable calendar date and time-of-day without timezone.

    Invariant: the fields form a real date and time (no month 13, no hour 25).
    """
    year: int
    month: int
    day: int
    hour: int
    minute: int

    def __post_init__(self):
        # Raises ValueError for impossible dates or times
        self.to_datetime()

    @classmethod
    def from_datetime(cls, dt: DateTime) -> "Timestamp":
        """Build a timestamp from a datetime, dropping seconds."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
        )

    def to_datetime(self) -> DateTime:
        """Return a naive pendulum DateTime for arithmetic."""
        return pendulum.naive(self.year, self.month, self.day, self.hour, self.minute)

    @property
    def day_of_week(self) -> int:
        """ISO day of week, 1=Monday through 7=Sunday."""
        return self.to_datetime().isoweekday()

    @property
    def time_of_day(self) -> time:
        return time(hour=self.hour, minute=self.minute)

    def format(self) -> str:
        """Canonical rendering: YYYY-MM-DD HH:MM (24-hour)."""
        return self.to_datetime().format(CANONICAL_FORMAT)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class WorkCalendar:
    """
    Fixed policy describing when work happens.

    Working time-of-day is the half-open window (start_time, end_time]:
    the opening minute itself does not count, the closing minute does.
    """
    start_time: time = time(9, 0)
    end_time: time = time(17, 0)
    hours_per_day: int = 8
    work_weekdays: FrozenSet[int] = field(
        default_factory=lambda: frozenset({1, 2, 3, 4, 5})  # ISO Monday..Friday
    )

    def __post_init__(self):
        if self.start_time >= self.end_time:
            raise ValueError(
                f"Work day start {self.start_time} must be before end {self.end_time}"
            )
        if self.hours_per_day <= 0:
            raise ValueError(f"hours_per_day must be positive, got {self.hours_per_day}")
        invalid_days = sorted(day for day in self.work_weekdays if day not in range(1, 8))
        if invalid_days:
            raise ValueError(f"work_weekdays must be between 1 and 7, got {invalid_days}")
        if not self.work_weekdays:
            raise ValueError("At least one work weekday is required")

    def is_working_day(self, dt: DateTime) -> bool:
        """Check if a given datetime falls on a work day."""
        return dt.isoweekday() in self.work_weekdays

    def is_working_time(self, time_of_day: time) -> bool:
        """Check if a time-of-day lies inside (start_time, end_time]."""
        return self.start_time < time_of_day <= self.end_time


STANDARD_CALENDAR = WorkCalendar()
