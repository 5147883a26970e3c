"""Wire mapping for envelopes and errors.

Field names on the wire are fixed: ``clientId``, ``transactionId``,
``status``, ``message`` and ``error``; an error is ``description``, ``code``
and ``nativeText``; a code is ``code`` and ``description``. The legacy
``errorDescription``/``errorCode``/``nativeErrorText`` names are rejected.

Decoding is structural only. Run ``validate`` on the decoded object to check
the contract.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from packages.msreqresp.envelope import (
    GuaranteedErrorResponse,
    RequestEnvelope,
    ResponseEnvelope,
)
from packages.msreqresp.errors import (
    ApplicationError,
    ErrorCode,
    ServiceErrorCode,
    StandardErrorCode,
)
from packages.msreqresp.status import Status


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class WireErrorCode(_WireModel):
    code: str | None = None
    description: str | None = None


class WireError(_WireModel):
    description: str | None = None
    code: WireErrorCode | None = None
    native_text: str | None = None


class WireRequest(_WireModel):
    client_id: str | None = None
    transaction_id: str | None = None


class WireResponse(WireRequest):
    status: Status | None = None
    message: str | None = None
    error: WireError | None = None


def error_to_wire(error: ApplicationError) -> dict[str, Any]:
    return _error_model(error).model_dump(mode="json", by_alias=True)


def error_from_wire(data: Mapping[str, Any]) -> ApplicationError:
    return _error_from_model(WireError.model_validate(data))


def request_to_wire(request: RequestEnvelope) -> dict[str, Any]:
    return _request_model(request).model_dump(mode="json", by_alias=True)


def request_from_wire(data: Mapping[str, Any]) -> RequestEnvelope:
    model = WireRequest.model_validate(data)
    return RequestEnvelope(client_id=model.client_id, transaction_id=model.transaction_id)


def response_to_wire(response: ResponseEnvelope) -> dict[str, Any]:
    return _response_model(response).model_dump(mode="json", by_alias=True)


def response_from_wire(
    data: Mapping[str, Any], *, guaranteed: bool = False
) -> ResponseEnvelope:
    """Decode a response; ``guaranteed`` yields a ``GuaranteedErrorResponse``."""
    return _response_from_model(WireResponse.model_validate(data), guaranteed=guaranteed)


def to_json(target: RequestEnvelope | ResponseEnvelope | ApplicationError) -> str:
    """Encode an envelope or error as compact JSON."""
    if isinstance(target, ResponseEnvelope):
        model: _WireModel = _response_model(target)
    elif isinstance(target, RequestEnvelope):
        model = _request_model(target)
    elif isinstance(target, ApplicationError):
        model = _error_model(target)
    else:
        raise TypeError(f"cannot encode {type(target).__name__}")
    return model.model_dump_json(by_alias=True)


def request_from_json(text: str | bytes) -> RequestEnvelope:
    model = WireRequest.model_validate_json(text)
    return RequestEnvelope(client_id=model.client_id, transaction_id=model.transaction_id)


def response_from_json(text: str | bytes, *, guaranteed: bool = False) -> ResponseEnvelope:
    return _response_from_model(
        WireResponse.model_validate_json(text), guaranteed=guaranteed
    )


def _request_model(request: RequestEnvelope) -> WireRequest:
    return WireRequest(client_id=request.client_id, transaction_id=request.transaction_id)


def _response_model(response: ResponseEnvelope) -> WireResponse:
    error = response.error
    return WireResponse(
        client_id=response.client_id,
        transaction_id=response.transaction_id,
        status=response.status,
        message=response.message,
        error=None if error is None else _error_model(error),
    )


def _error_model(error: ApplicationError) -> WireError:
    code = error.code
    return WireError(
        description=error.description,
        code=None
        if code is None
        else WireErrorCode(code=code.code, description=code.description),
        native_text=error.native_text,
    )


def _response_from_model(model: WireResponse, *, guaranteed: bool) -> ResponseEnvelope:
    error = None if model.error is None else _error_from_model(model.error)
    if guaranteed:
        return GuaranteedErrorResponse(
            model.client_id,
            model.transaction_id,
            model.status,
            model.message,  # type: ignore[arg-type]
            error,  # type: ignore[arg-type]
        )
    return ResponseEnvelope(
        model.client_id,
        model.transaction_id,
        model.status,
        message=model.message,
        error=error,
    )


def _error_from_model(model: WireError) -> ApplicationError:
    return ApplicationError(
        model.description,  # type: ignore[arg-type]
        _code_from_model(model.code),  # type: ignore[arg-type]
        model.native_text,
    )


def _code_from_model(model: WireErrorCode | None) -> ErrorCode | None:
    """Resolve catalog codes to their members; anything else stays custom."""
    if model is None:
        return None
    try:
        member = StandardErrorCode.from_code(model.code)  # type: ignore[arg-type]
    except KeyError:
        member = None
    if member is not None and member.description == model.description:
        return member
    return ServiceErrorCode(code=model.code, description=model.description)  # type: ignore[arg-type]
