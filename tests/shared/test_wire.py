"""Tests for the wire mapping of envelopes and errors."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from packages.msreqresp.envelope import GuaranteedErrorResponse, RequestEnvelope, ResponseEnvelope
from packages.msreqresp.errors import ApplicationError, ServiceErrorCode, StandardErrorCode
from packages.msreqresp.status import Status
from packages.msreqresp.wire import (
    error_from_wire,
    error_to_wire,
    request_from_json,
    request_from_wire,
    request_to_wire,
    response_from_json,
    response_from_wire,
    response_to_wire,
    to_json,
)


def _error() -> ApplicationError:
    return ApplicationError(
        "Inventory service unreachable",
        StandardErrorCode.SYSTEM_EXTERNAL_SERVICE_ERROR,
        "httpx.ConnectError: [Errno 111]",
    )


def test_response_uses_camel_case_field_names() -> None:
    """Encoded responses should use the fixed wire names."""
    response = ResponseEnvelope("shop", "tx-5", Status.ERROR, message="down", error=_error())

    data = response_to_wire(response)

    assert data == {
        "clientId": "shop",
        "transactionId": "tx-5",
        "status": "ERROR",
        "message": "down",
        "error": {
            "description": "Inventory service unreachable",
            "code": {
                "code": "SYSGN004",
                "description": "An external service returned an error",
            },
            "nativeText": "httpx.ConnectError: [Errno 111]",
        },
    }


def test_request_round_trip() -> None:
    """Requests should round-trip field for field."""
    request = RequestEnvelope(client_id="shop", transaction_id="tx-5")

    assert request_to_wire(request) == {"clientId": "shop", "transactionId": "tx-5"}
    assert request_from_wire(request_to_wire(request)) == request
    assert request_from_json(to_json(request)) == request


def test_response_round_trip_with_null_error() -> None:
    """A response without an error should decode with error None."""
    response = ResponseEnvelope("shop", "tx-5", Status.COMPLETED)

    decoded = response_from_wire(response_to_wire(response))

    assert decoded == response
    assert decoded.error is None


def test_response_round_trip_through_json_resolves_catalog_codes() -> None:
    """Catalog codes should decode back to their catalog members."""
    response = ResponseEnvelope("shop", "tx-5", Status.ERROR, error=_error())

    decoded = response_from_json(to_json(response))

    assert decoded == response
    assert decoded.error is not None
    assert decoded.error.code is StandardErrorCode.SYSTEM_EXTERNAL_SERVICE_ERROR


def test_guaranteed_response_decodes_as_guaranteed_on_request() -> None:
    """guaranteed=True should rebuild the guaranteed variant."""
    response = GuaranteedErrorResponse("shop", "tx-5", Status.FAILURE, "failed", _error())

    decoded = response_from_wire(response_to_wire(response), guaranteed=True)

    assert isinstance(decoded, GuaranteedErrorResponse)
    assert decoded == response


def test_service_codes_decode_as_custom_codes() -> None:
    """Codes outside the catalog should decode as ServiceErrorCode."""
    code = ServiceErrorCode(code="ORDMS003", description="Order is locked")
    error = ApplicationError("Order locked", code)

    decoded = error_from_wire(error_to_wire(error))

    assert decoded == error
    assert decoded.code == code


def test_encoded_json_is_compact_and_parseable() -> None:
    """to_json should produce JSON keyed by wire names."""
    payload = json.loads(to_json(_error()))

    assert set(payload) == {"description", "code", "nativeText"}


def test_legacy_field_names_are_rejected() -> None:
    """errorDescription/errorCode/nativeErrorText are not accepted."""
    with pytest.raises(ValidationError):
        error_from_wire(
            {
                "errorDescription": "Inventory service unreachable",
                "errorCode": {"code": "SYSGN004", "description": "x"},
                "nativeErrorText": None,
            }
        )


def test_to_json_rejects_unknown_targets() -> None:
    """Only envelopes and errors can be encoded."""
    with pytest.raises(TypeError):
        to_json("not an envelope")  # type: ignore[arg-type]
