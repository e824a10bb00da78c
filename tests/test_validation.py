import pytest

from todo_agenda.errors import InvalidCategory, InvalidDueDate, InvalidPriority, InvalidStatus
from todo_agenda.validation import validate_fields


def test_absent_fields_are_not_checked():
    validate_fields()


def test_valid_values_pass():
    validate_fields(status="IN PROGRESS", priority="MEDIUM", category="LEARNING", due_date="2021-03-04")


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"status": "in progress"}, InvalidStatus),
        ({"status": ""}, InvalidStatus),
        ({"priority": "CRITICAL"}, InvalidPriority),
        ({"category": "work"}, InvalidCategory),
        ({"due_date": "2021-02-30"}, InvalidDueDate),
    ],
)
def test_invalid_values_raise(kwargs, error):
    with pytest.raises(error):
        validate_fields(**kwargs)


def test_first_failing_field_wins():
    with pytest.raises(InvalidPriority):
        validate_fields(priority="X", category="Y", due_date="Z")


def test_errors_carry_http_status_and_message():
    err = InvalidDueDate()
    assert err.status_code == 400
    assert err.error_code == "InvalidDueDate"
    assert err.message == "Invalid Due Date"
