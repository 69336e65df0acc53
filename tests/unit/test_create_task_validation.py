"""validate_create_task_payload: each rule, and the order the rules run in."""

from datetime import datetime, timezone

import pytest

from app.application.use_cases.tasks import validate_create_task_payload
from app.domain.enums import TaskType
from app.domain.exceptions import ValidationException

NOW = datetime(2025, 3, 10, 12, 0, 0, tzinfo=timezone.utc)
APP_ID = "3f2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d"
FUTURE = "2025-03-11T09:30:00Z"

MISSING = "Missing required fields: application_id, task_type, due_at"
BAD_TYPE = "Invalid task_type. Must be one of: call, email, review"
BAD_DUE = "Invalid due_at timestamp format"
PAST_DUE = "due_at must be a future timestamp"
BAD_UUID = "Invalid application_id format (must be UUID)"


def _payload(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "application_id": APP_ID,
        "task_type": "call",
        "due_at": FUTURE,
    }
    data.update(overrides)
    return data


def _message(payload: object) -> str:
    with pytest.raises(ValidationException) as exc_info:
        validate_create_task_payload(payload, NOW)
    return exc_info.value.message


def test_valid_payload_returns_command() -> None:
    """A valid payload yields parsed due_at and keeps the raw string."""
    command = validate_create_task_payload(_payload(task_type="review"), NOW)
    assert command.application_id == APP_ID
    assert command.task_type is TaskType.REVIEW
    assert command.due_at == datetime(2025, 3, 11, 9, 30, tzinfo=timezone.utc)
    assert command.due_at_raw == FUTURE


@pytest.mark.parametrize("field", ["application_id", "task_type", "due_at"])
def test_missing_field_rejected(field: str) -> None:
    payload = _payload()
    del payload[field]
    assert _message(payload) == MISSING


@pytest.mark.parametrize("field", ["application_id", "task_type", "due_at"])
def test_empty_field_counts_as_missing(field: str) -> None:
    assert _message(_payload(**{field: ""})) == MISSING


@pytest.mark.parametrize("payload", [[], "text", 42, None])
def test_non_object_body_counts_as_missing_fields(payload: object) -> None:
    assert _message(payload) == MISSING


@pytest.mark.parametrize("task_type", ["meeting", "CALL", "Email", 3])
def test_unknown_task_type_rejected(task_type: object) -> None:
    """task_type is case-sensitive and limited to call, email, review."""
    exc_message = _message(_payload(task_type=task_type))
    assert exc_message == BAD_TYPE


@pytest.mark.parametrize("due_at", ["tomorrow", "2025-13-01T00:00:00Z", "not-a-date", 1741600000])
def test_unparseable_due_at_rejected(due_at: object) -> None:
    assert _message(_payload(due_at=due_at)) == BAD_DUE


def test_due_at_equal_to_now_rejected() -> None:
    """due_at must be strictly after the validation instant."""
    assert _message(_payload(due_at="2025-03-10T12:00:00Z")) == PAST_DUE


def test_due_at_in_past_rejected() -> None:
    assert _message(_payload(due_at="2020-01-01T00:00:00Z")) == PAST_DUE


def test_due_at_with_offset_compared_in_utc() -> None:
    """13:00+02:00 is 11:00Z, before NOW."""
    assert _message(_payload(due_at="2025-03-10T13:00:00+02:00")) == PAST_DUE


def test_due_at_without_offset_taken_as_utc() -> None:
    command = validate_create_task_payload(_payload(due_at="2025-03-10T12:00:01"), NOW)
    assert command.due_at == datetime(2025, 3, 10, 12, 0, 1, tzinfo=timezone.utc)


def test_due_at_at_start_of_calendar_rejected_as_past() -> None:
    """0001-01-01T00:00+01:00 has no UTC form; it is still in the past."""
    assert _message(_payload(due_at="0001-01-01T00:00:00+01:00")) == PAST_DUE


def test_due_at_at_end_of_calendar_accepted() -> None:
    """9999-12-31T23:59:59-01:00 has no UTC form; it is still in the future."""
    command = validate_create_task_payload(_payload(due_at="9999-12-31T23:59:59-01:00"), NOW)
    assert command.due_at > NOW
    assert command.due_at_raw == "9999-12-31T23:59:59-01:00"


@pytest.mark.parametrize(
    "application_id",
    [
        "not-a-uuid",
        "3f2b8c1e9a4d4e7b8c215d6f7a8b9c0d",
        "3f2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d-extra",
        "zf2b8c1e-9a4d-4e7b-8c21-5d6f7a8b9c0d",
    ],
)
def test_malformed_application_id_rejected(application_id: str) -> None:
    assert _message(_payload(application_id=application_id)) == BAD_UUID


def test_uppercase_uuid_accepted() -> None:
    command = validate_create_task_payload(_payload(application_id=APP_ID.upper()), NOW)
    assert command.application_id == APP_ID.upper()


def test_validation_error_carries_field() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_create_task_payload(_payload(task_type="fax"), NOW)
    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details == {"field": "task_type"}


def test_task_type_checked_before_due_at() -> None:
    assert _message(_payload(task_type="fax", due_at="garbage")) == BAD_TYPE


def test_due_at_format_checked_before_uuid() -> None:
    assert _message(_payload(application_id="nope", due_at="garbage")) == BAD_DUE


def test_past_due_at_checked_before_uuid() -> None:
    """A past due_at wins over a malformed application_id."""
    payload = _payload(application_id="nope", due_at="2020-01-01T00:00:00Z")
    assert _message(payload) == PAST_DUE


def test_missing_fields_checked_first() -> None:
    assert _message({"task_type": "fax", "due_at": "garbage"}) == MISSING
