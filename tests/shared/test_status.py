"""Tests for the closed status lifecycle and its predicates."""

from __future__ import annotations

import logging

import pytest

from packages.msreqresp.status import Status


@pytest.mark.parametrize("status", list(Status))
def test_each_status_belongs_to_exactly_one_class(status: Status) -> None:
    """Success, failure and in-progress classes should partition all values."""
    memberships = [status.is_success, status.is_failure, status.is_in_progress]

    assert memberships.count(True) == 1
    assert status.is_final is (not status.is_in_progress)


def test_status_classes_match_lifecycle_table() -> None:
    """Class partitions should hold the documented values."""
    assert Status.in_progress_values() == {Status.PENDING, Status.PROCESSING}
    assert Status.success_values() == {Status.SUCCESS, Status.COMPLETED}
    assert Status.failure_values() == {
        Status.FAILURE,
        Status.ERROR,
        Status.TIMEOUT,
        Status.CANCELLED,
        Status.ABORTED,
    }
    assert len(Status) == 9


def test_timeout_and_cancelled_are_final_failures() -> None:
    """Caller-applied timeout/cancellation labels should be final failures."""
    assert Status.TIMEOUT.is_final is True
    assert Status.TIMEOUT.is_failure is True
    assert Status.CANCELLED.is_final is True
    assert Status.CANCELLED.is_success is False


def test_status_values_serialize_as_upper_case_names() -> None:
    """Status values should equal their names for wire stability."""
    assert all(status.value == status.name for status in Status)
    assert Status("PROCESSING") is Status.PROCESSING


def test_describe_returns_name_and_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    """describe should return the name and emit one DEBUG record."""
    with caplog.at_level(logging.DEBUG, logger="packages.msreqresp.status"):
        name = Status.TIMEOUT.describe()

    assert name == "TIMEOUT"
    records = [item for item in caplog.records if item.name == "packages.msreqresp.status"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert records[0].structured["status"] == "TIMEOUT"


def test_describe_survives_a_failing_logger() -> None:
    """describe should swallow logger failures and still return the name."""

    class ExplodingLogger:
        def debug(self, *args: object, **kwargs: object) -> None:
            raise RuntimeError("log sink down")

    assert Status.SUCCESS.describe(logger=ExplodingLogger()) == "SUCCESS"
