"""Tests for the error taxonomy."""

import pytest

from task_tracker.errors import (
    LoadError,
    NotFoundError,
    SaveError,
    TaskTrackerError,
    ValidationError,
)


class TestTaskTrackerError:
    def test_defaults(self):
        err = TaskTrackerError("boom")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.error_code == "TASK_TRACKER_ERROR"
        assert err.exit_code == 1
        assert err.details == {}

    def test_details(self):
        err = ValidationError("bad input", details={"field": "id"})
        assert err.error_code == "VALIDATION_ERROR"
        assert err.details == {"field": "id"}

    def test_custom_code_and_exit(self):
        err = TaskTrackerError("boom", error_code="CUSTOM", exit_code=2)
        assert err.error_code == "CUSTOM"
        assert err.exit_code == 2

    @pytest.mark.parametrize(
        "cls,code",
        [
            (ValidationError, "VALIDATION_ERROR"),
            (LoadError, "LOAD_ERROR"),
            (SaveError, "SAVE_ERROR"),
        ],
    )
    def test_subclass_codes(self, cls, code):
        err = cls("x")
        assert isinstance(err, TaskTrackerError)
        assert err.error_code == code


class TestNotFoundError:
    def test_message_and_details(self):
        err = NotFoundError(42)
        assert err.message == "Task with ID 42 not found."
        assert err.error_code == "NOT_FOUND"
        assert err.task_id == 42
        assert err.details == {"task_id": 42}
