"""
Due date calculator for tasks measured in work-hours.
"""

from .domain.exceptions import (
    DueDateError,
    DueDateOutOfRange,
    InvalidSubmitDate,
    InvalidTurnaroundTime,
)
from .domain.models import STANDARD_CALENDAR, Timestamp, WorkCalendar
from .services.due_date import DueDateService, calculate_due_date

__version__ = "1.0.0"

__all__ = [
    "DueDateError",
    "DueDateOutOfRange",
    "InvalidSubmitDate",
    "InvalidTurnaroundTime",
    "STANDARD_CALENDAR",
    "Timestamp",
    "WorkCalendar",
    "DueDateService",
    "calculate_due_date",
]
