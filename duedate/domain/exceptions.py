"""
Domain-specific exception hierarchy for the due date calculator.
"""

SUBMIT_DATE_MESSAGE = "Invalid submit date provided!"
TURNAROUND_TIME_MESSAGE = "Invalid turnaround time provided!"


class DueDateError(Exception):
    """Base class for all calculation errors."""

    message = "Due date could not be calculated."

    def __init__(self, reason: str | None = None):
        self.reason = reason
        text = self.message if reason is None else f"{self.message} ({reason})"
        super().__init__(text)


class InvalidSubmitDate(DueDateError):
    """Raised when the submit date is malformed, impossible or outside working hours."""

    message = SUBMIT_DATE_MESSAGE


class InvalidTurnaroundTime(DueDateError):
    """Raised when the turnaround time is not a non-negative integer."""

    message = TURNAROUND_TIME_MESSAGE


class DueDateOutOfRange(DueDateError):
    """Raised when the due date falls past the last representable date."""

    message = "Due date is out of the supported date range!"
