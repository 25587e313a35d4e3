"""
Service layer helpers that orchestrate validation, parsing and calculation.
"""

from .due_date import DueDateService, calculate_due_date

__all__ = ["DueDateService", "calculate_due_date"]
