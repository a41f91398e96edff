"""
Tests for the validation helpers and the centralized error handler.
"""

import logging

import pytest
from core.constants import created_message
from core.error_handling import (
    ERROR_HANDLER,
    ErrorSeverity,
    log_critical,
    require_count_in_range,
    require_enum_member,
    require_non_blank,
    require_not_none,
)
from core.errors import InvalidArgumentError, ResolutionFailureError, RosterError
from core.validation import ValidationResult
from ui.commands import SurfaceCommand


@pytest.fixture(autouse=True)
def clean_history():
    ERROR_HANDLER.clear()
    yield
    ERROR_HANDLER.clear()


def test_error_taxonomy():
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(ResolutionFailureError, LookupError)
    assert issubclass(InvalidArgumentError, RosterError)
    assert issubclass(ResolutionFailureError, RosterError)


def test_require_not_none():
    assert require_not_none(0, "count") == 0
    with pytest.raises(InvalidArgumentError, match="player cannot be null"):
        require_not_none(None, "player")
    (issue,) = ERROR_HANDLER.error_history
    assert issue.severity is ErrorSeverity.LOW
    assert issue.context["param_name"] == "player"


@pytest.mark.parametrize("value", [None, "", "  ", 42])
def test_require_non_blank_rejects(value):
    with pytest.raises(InvalidArgumentError):
        require_non_blank(value, "name")


def test_require_non_blank_keeps_value():
    assert require_non_blank(" Thorin ", "name") == " Thorin "


def test_require_enum_member():
    assert require_enum_member(SurfaceCommand.CREATE, SurfaceCommand, "command") is (
        SurfaceCommand.CREATE
    )
    with pytest.raises(InvalidArgumentError, match="Invalid command"):
        require_enum_member("CREATE", SurfaceCommand, "command")


def test_require_count_in_range():
    assert require_count_in_range([1, 2], "items", 1, 3) == [1, 2]
    for value in ([], [1, 2, 3, 4], None):
        with pytest.raises(InvalidArgumentError):
            require_count_in_range(value, "items", 1, 3)


def test_critical_issue_logs_traceback(caplog):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        with caplog.at_level(logging.CRITICAL, logger="roster.errors"):
            log_critical("Unexpected failure", {"screen": "Test"}, e)
    assert ERROR_HANDLER.error_history[-1].exception is not None
    assert "RuntimeError: boom" in caplog.text


def test_validation_result():
    ok = ValidationResult.success("Thorin")
    assert ok.is_valid
    assert ok.message == ""
    assert ok.unwrap() == "Thorin"

    failed = ValidationResult.failure(InvalidArgumentError("name cannot be null."))
    assert not failed.is_valid
    assert failed.message == "name cannot be null."
    with pytest.raises(InvalidArgumentError):
        failed.unwrap()


def test_created_message():
    assert created_message("Thorin") == 'Character "Thorin" created successfully.'
    assert created_message("Thorin", exclaim=True) == 'Character "Thorin" created successfully!'
