"""
Tests for the due date service and public API.
"""

import pytest

from duedate import (
    DueDateOutOfRange,
    DueDateService,
    InvalidSubmitDate,
    InvalidTurnaroundTime,
    calculate_due_date,
)
from duedate.domain.calculator import DueDateCalculator
from duedate.domain.parser import parse_submit_date
from duedate.domain.validator import validate_working_hours


class StubCalculator(DueDateCalculator):
    """Calculator that records calls."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def calculate(self, submitted, turnaround_time):
        self.calls.append((submitted, turnaround_time))
        return super().calculate(submitted, turnaround_time)


@pytest.mark.parametrize(
    "start_time, turnaround, expected",
    [
        ("2024-05-15 12:00", 40, "2024-05-22 12:00"),
        ("2024-05-28 2:12PM", 16, "2024-05-30 14:12"),
        ("2024-05-15 12:00", 2, "2024-05-15 14:00"),
        ("2024-05-15 12:00", 13, "2024-05-16 17:00"),
        ("2024-05-15 15:59", 2, "2024-05-16 09:59"),
        ("2024-05-15 9:30AM", 3, "2024-05-15 12:30"),
        ("2024-05-15 2:30PM", 6, "2024-05-16 12:30"),
        ("2024-05-24 12:00", 10, "2024-05-27 14:00"),
        ("2024-05-25 12:00", 11, "2024-05-28 12:00"),
        ("2024-05-26 16:00", 5, "2024-05-27 14:00"),
        ("2024-05-15 17:00", 0, "2024-05-15 17:00"),
    ],
)
def test_calculate_due_date(start_time, turnaround, expected):
    assert calculate_due_date(start_time, turnaround).format() == expected


@pytest.mark.parametrize(
    "start_time",
    ["2024-05-15 08:59", "2024-05-15 17:01", "2024-05-15 09:00", "2024-05-15 8:00AM"],
)
def test_outside_working_hours(start_time):
    with pytest.raises(InvalidSubmitDate, match="Invalid submit date provided!"):
        calculate_due_date(start_time, 1)


def test_invalid_date_and_time():
    with pytest.raises(InvalidSubmitDate, match="Invalid submit date provided!"):
        calculate_due_date("2024-13-35 17:01", 8)

    with pytest.raises(InvalidSubmitDate, match="Invalid submit date provided!"):
        calculate_due_date("2024-13-35 17:90", 8)


def test_negative_turnaround():
    with pytest.raises(InvalidTurnaroundTime, match="Invalid turnaround time provided!"):
        calculate_due_date("2024-05-15 15:30", -1)


def test_negative_turnaround_wins_over_working_hours():
    """The turnaround check runs before the working-hours check."""
    with pytest.raises(InvalidTurnaroundTime):
        calculate_due_date("2024-05-15 08:00", -1)


def test_failure_never_reaches_calculator():
    calculator = StubCalculator()
    service = DueDateService(calculator=calculator)

    with pytest.raises(InvalidSubmitDate):
        service.calculate_due_date("2024-05-15 18:00", 4)

    assert calculator.calls == []


def test_service_delegates_to_calculator():
    calculator = StubCalculator()
    service = DueDateService(calculator=calculator)

    due = service.calculate_due_date("2024-05-15 12:00", 4)

    assert due.format() == "2024-05-15 16:00"
    assert len(calculator.calls) == 1
    assert calculator.calls[0][0].format() == "2024-05-15 12:00"


@pytest.mark.parametrize("turnaround", [1, 7, 8, 13, 41])
def test_due_date_rendering_is_a_valid_start_time(turnaround):
    """The canonical rendering of a due date parses and validates again."""
    due = calculate_due_date("2024-05-15 15:59", turnaround)

    reparsed = parse_submit_date(due.format())
    validate_working_hours(reparsed)

    assert reparsed == due
    calculate_due_date(due.format(), turnaround)


def test_due_date_out_of_range():
    with pytest.raises(DueDateOutOfRange):
        calculate_due_date("9999-12-31 16:00", 8)
