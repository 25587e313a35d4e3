"""
Domain layer - Pure business logic without external dependencies.
"""

from .calculator import DueDateCalculator
from .models import STANDARD_CALENDAR, Timestamp, WorkCalendar
from .parser import parse_submit_date
from .validator import validate_submission, validate_working_hours

__all__ = [
    "DueDateCalculator",
    "STANDARD_CALENDAR",
    "Timestamp",
    "WorkCalendar",
    "parse_submit_date",
    "validate_submission",
    "validate_working_hours",
]
