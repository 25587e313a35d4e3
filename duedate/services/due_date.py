"""
Application service for calculating due dates from raw submissions.

The service runs structural validation, parsing and the working-hours check
before delegating the arithmetic to the domain-level ``DueDateCalculator``.
Any failure aborts before arithmetic begins, so no partial result is returned.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain.calculator import DueDateCalculator
from ..domain.models import Timestamp
from ..domain.parser import parse_submit_date
from ..domain.validator import validate_submission, validate_working_hours

logger = logging.getLogger(__name__)


class DueDateService:
    """Orchestrates validation and due date calculation."""

    def __init__(self, calculator: Optional[DueDateCalculator] = None) -> None:
        self._calculator = calculator or DueDateCalculator()

    @property
    def calendar(self):
        return self._calculator.calendar

    def calculate_due_date(self, start_time: str, turnaround_time: int) -> Timestamp:
        """
        Calculate the due date for a task.

        Args:
            start_time: Submit date, "YYYY-MM-DD HH:MM" or "YYYY-MM-DD H:MMAM|PM"
            turnaround_time: Turnaround in work-hours

        Returns:
            Timestamp of the due date

        Raises:
            InvalidSubmitDate: If the submit date is malformed or outside working hours
            InvalidTurnaroundTime: If the turnaround time is negative or not an integer
        """
        validate_submission(start_time, turnaround_time)

        submitted = parse_submit_date(start_time)
        validate_working_hours(submitted, self.calendar)

        due_date = self._calculator.calculate(submitted, turnaround_time)
        logger.debug("Due date for %r + %sh: %s", start_time, turnaround_time, due_date)
        return due_date


_default_service = DueDateService()


def calculate_due_date(start_time: str, turnaround_time: int) -> Timestamp:
    """Calculate a due date using the standard work calendar."""
    return _default_service.calculate_due_date(start_time, turnaround_time)
