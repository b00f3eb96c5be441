from collections.abc import Set
import logging
from typing import Callable, Final
import pytest
from unittest.mock import patch
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success

from utils.logger import FailureLevel, log_railway_function


SUCCESS_MESSAGE: Final[str] = "Image written"
FAILURE_MESSAGE: Final[str] = "Image not written"
ERROR_VALUE: Final[Exception] = OSError("disk full")


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def write_io(should_succeed: bool):
    if should_succeed:
        return IOSuccess(42)
    return IOFailure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def write(should_succeed: bool):
    if should_succeed:
        return Success(42)
    return Failure(ERROR_VALUE)


@log_railway_function(
    failure_message=FAILURE_MESSAGE, failure_level=FailureLevel.WARNING
)
def write_with_warning():
    return Failure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def plain_function(a, *, b, c=3):
    """Returns a plain value."""
    return {"a": a, "x": [b, c]}


@pytest.mark.parametrize(
    "function, should_succeed, message, level",
    (
        pytest.param(write, True, SUCCESS_MESSAGE, {"INFO"}, id="Success"),
        pytest.param(write, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="Failure"),
        pytest.param(write_io, True, SUCCESS_MESSAGE, {"INFO"}, id="IOSuccess"),
        pytest.param(
            write_io, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="IOFailure"
        ),
    ),
)
def test_log_railway_function_capture_log_message(
    function: Callable[[bool], Result | IOResult],
    should_succeed: bool,
    message: str,
    level: Set[str],
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.DEBUG):
        _ = function(should_succeed)

    assert message in caplog.text
    assert {record.levelname for record in caplog.records} == level


def test_failure_level(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        _ = write_with_warning()

    assert {record.levelname for record in caplog.records} == {"DEBUG", "WARNING"}
    assert f"{FAILURE_MESSAGE}: disk full" in caplog.text


def test_plain_return_value_is_not_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        result = plain_function(1, b=2, c=5)

    assert result == {"a": 1, "x": [2, 5]}
    assert not caplog.records


def test_decorator_preserves_function_metadata():
    assert plain_function.__name__ == "plain_function"
    assert plain_function.__doc__ == "Returns a plain value."


@patch("utils.logger.VERBOSE", True)
def test_verbose_mode_logs_function_signature(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        _ = plain_function(1, b=2, c=5)

    assert "Calling plain_function(1, b=2, c=5)" in caplog.text
