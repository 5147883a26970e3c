"""Tests for response envelopes, the guaranteed-error variant and builders."""

from __future__ import annotations

import logging

import pytest

from packages.msreqresp.envelope import (
    GuaranteedErrorResponse,
    RequestEnvelope,
    ResponseEnvelope,
    failure,
    pending,
    respond,
    success,
)
from packages.msreqresp.errors import ApplicationError, StandardErrorCode
from packages.msreqresp.status import Status


def _request() -> RequestEnvelope:
    return RequestEnvelope(client_id="checkout", transaction_id="tx-77")


def _error() -> ApplicationError:
    return ApplicationError(
        "Card declined",
        StandardErrorCode.PAYMENT_INSUFFICIENT_FUNDS,
        "gateway: code 51",
    )


def test_response_exposes_construction_fields() -> None:
    """Accessors should return construction values and no error."""
    response = ResponseEnvelope("checkout", "tx-77", Status.SUCCESS)

    assert response.client_id == "checkout"
    assert response.transaction_id == "tx-77"
    assert response.status is Status.SUCCESS
    assert response.message is None
    assert response.error is None
    assert response.has_error is False


def test_correlation_fields_and_status_are_read_only() -> None:
    """Fixed fields should reject assignment."""
    response = ResponseEnvelope("checkout", "tx-77", Status.SUCCESS)

    with pytest.raises(AttributeError):
        response.status = Status.FAILURE  # type: ignore[misc]


def test_attach_error_sets_and_replaces_error() -> None:
    """attach_error should set, replace and clear the error in place."""
    response = ResponseEnvelope("checkout", "tx-77", Status.FAILURE)
    first = _error()
    second = ApplicationError("Gateway down", StandardErrorCode.SYSTEM_EXTERNAL_SERVICE_ERROR)

    response.attach_error(first)
    assert response.error is first

    response.attach_error(second)
    assert response.error is second

    response.attach_error(None)
    assert response.has_error is False


def test_with_error_is_copy_on_write() -> None:
    """with_error should return a new response and leave the original alone."""
    original = ResponseEnvelope("checkout", "tx-77", Status.FAILURE, message="declined")
    updated = original.with_error(_error())

    assert original.error is None
    assert updated.error == _error()
    assert updated.core == original.core


def test_equality_covers_all_fields_and_responses_are_unhashable() -> None:
    """Equal fields compare equal; a differing error breaks equality."""
    first = ResponseEnvelope("checkout", "tx-77", Status.FAILURE, error=_error())
    second = ResponseEnvelope("checkout", "tx-77", Status.FAILURE, error=_error())

    assert first == second
    second.error.attach_native_text("gateway: code 05")  # type: ignore[union-attr]
    assert first != second
    with pytest.raises(TypeError):
        hash(first)


def test_guaranteed_error_response_carries_message_and_error() -> None:
    """The guaranteed variant should populate message and error."""
    response = GuaranteedErrorResponse(
        "checkout", "tx-77", Status.FAILURE, "Payment failed", _error()
    )

    assert isinstance(response, ResponseEnvelope)
    assert response.message == "Payment failed"
    assert response.error == _error()


def test_guaranteed_error_response_does_not_reject_none_at_runtime() -> None:
    """Mandatory fields are declarative only; None is accepted here."""
    response = GuaranteedErrorResponse(
        "checkout", "tx-77", Status.FAILURE, None, None  # type: ignore[arg-type]
    )

    assert response.message is None
    assert response.error is None


def test_builders_copy_correlation_ids_from_request() -> None:
    """respond/success/pending should answer with the request ids."""
    request = _request()

    answered = respond(request, Status.PROCESSING, message="working")
    assert (answered.client_id, answered.transaction_id) == ("checkout", "tx-77")
    assert answered.status is Status.PROCESSING
    assert success(request).status is Status.SUCCESS
    assert pending(request).status.is_in_progress is True  # type: ignore[union-attr]


def test_failure_builder_defaults_message_to_error_description() -> None:
    """failure should build a guaranteed response from the error."""
    response = failure(_request(), _error())

    assert isinstance(response, GuaranteedErrorResponse)
    assert response.status is Status.FAILURE
    assert response.message == "Card declined"

    timed_out = failure(_request(), _error(), status=Status.TIMEOUT, message="Gateway timeout")
    assert timed_out.status is Status.TIMEOUT
    assert timed_out.message == "Gateway timeout"


def test_describe_includes_status_and_error(caplog: pytest.LogCaptureFixture) -> None:
    """describe should log status, message and error fields at DEBUG."""
    response = failure(_request(), _error())

    with caplog.at_level(logging.DEBUG, logger="packages.msreqresp.envelope.response"):
        response.describe()

    records = [
        item for item in caplog.records if item.name == "packages.msreqresp.envelope.response"
    ]
    assert len(records) == 1
    structured = records[0].structured
    assert structured["status"] == "FAILURE"
    assert structured["error_code"] == "PAYGN001"
    assert structured["native_text"] == "gateway: code 51"
    assert structured["response_message"] == "Card declined"


def test_describe_tolerates_null_fields_and_odd_errors(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """describe should still write its line for nonsense field values."""

    class Unprintable:
        def __str__(self) -> str:
            raise RuntimeError("cannot render")

    class OddError:
        description = Unprintable()

    response = ResponseEnvelope(None, None, None)
    response.attach_error(OddError())  # type: ignore[arg-type]

    with caplog.at_level(logging.DEBUG, logger="packages.msreqresp.envelope.response"):
        response.describe()

    records = [
        item for item in caplog.records if item.name == "packages.msreqresp.envelope.response"
    ]
    assert len(records) == 1
    structured = records[0].structured
    assert structured["status"] is None
    assert structured["error_code"] is None
    assert "Unprintable" in structured["error_description"]
