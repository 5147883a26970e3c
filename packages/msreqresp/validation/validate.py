"""Contract validation for envelopes, errors and error codes.

Constructors in this package never reject input. This module is the only
enforcement point: it reports every field failing its declared constraint as
a ``Violation``, using wire field names as paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Mapping

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    StringConstraints,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from packages.msreqresp.envelope import (
    GuaranteedErrorResponse,
    RequestEnvelope,
    ResponseEnvelope,
)
from packages.msreqresp.errors import ApplicationError, ErrorCode
from packages.msreqresp.status import Status

from .violations import ContractViolationError, Violation

if TYPE_CHECKING:
    from packages.msreqresp.config import MsReqRespSettings

MUST_NOT_BE_BLANK = "must not be blank"
MUST_NOT_BE_NULL = "must not be null"
MUST_BE_STRING = "must be a string"

_REQUIRED_MESSAGES: Mapping[str, str] = {
    "clientId": "clientId is required",
    "transactionId": "transactionId is required",
    "status": "status is required",
}


def _require_not_none(value: Any) -> Any:
    if value is None:
        raise ValueError(MUST_NOT_BE_NULL)
    return value


NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NonNull = Annotated[Any, AfterValidator(_require_not_none)]


class _ContractModel(BaseModel):
    """Validation-only base model keyed by wire field names."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


class _ValidatedRequest(_ContractModel):
    client_id: NonBlank
    transaction_id: NonBlank


class _ValidatedResponse(_ValidatedRequest):
    status: Status


class _ValidatedGuaranteedResponse(_ValidatedResponse):
    message: NonBlank
    error: NonNull


class _ValidatedError(_ContractModel):
    description: NonBlank
    code: NonNull


class _ValidatedErrorCode(_ContractModel):
    code: NonBlank
    description: NonBlank


class ContractValidator:
    """Validate contract targets and collect all violations.

    Constraints are flat by default: an error attached to a response is not
    checked, nor is the code of an error. With ``cascade`` enabled they are
    validated too, under the ``error.`` and ``code.`` path prefixes. Optional
    fields never produce violations.
    """

    def __init__(self, *, cascade: bool = False) -> None:
        self._cascade = cascade

    @classmethod
    def from_settings(cls, settings: MsReqRespSettings) -> ContractValidator:
        return cls(cascade=settings.validation.cascade)

    @property
    def cascade(self) -> bool:
        return self._cascade

    def validate(self, target: object) -> list[Violation]:
        """Return violations for ``target`` in field declaration order.

        Raises ``TypeError`` for objects that are not part of the contract.
        """
        if isinstance(target, ResponseEnvelope):
            return self._validate_response(target)
        if isinstance(target, RequestEnvelope):
            return _check(
                _ValidatedRequest,
                {
                    "clientId": target.client_id,
                    "transactionId": target.transaction_id,
                },
            )
        # ApplicationError also exposes code/description, so check it first.
        if isinstance(target, ApplicationError):
            return self._validate_error(target)
        if isinstance(target, ErrorCode):
            return _validate_code(target)
        raise TypeError(f"cannot validate {type(target).__name__} against the contract")

    def require_valid(self, target: object) -> None:
        """Raise ``ContractViolationError`` when ``target`` has violations."""
        violations = self.validate(target)
        if violations:
            raise ContractViolationError(violations)

    def _validate_response(self, response: ResponseEnvelope) -> list[Violation]:
        error = response.error
        payload: dict[str, object] = {
            "clientId": response.client_id,
            "transactionId": response.transaction_id,
            "status": response.status,
        }
        model: type[_ContractModel] = _ValidatedResponse
        if isinstance(response, GuaranteedErrorResponse):
            payload["message"] = response.message
            payload["error"] = error
            model = _ValidatedGuaranteedResponse

        violations = _check(model, payload)
        if self._cascade and isinstance(error, ApplicationError):
            violations.extend(self._validate_error(error, prefix="error."))
        return violations

    def _validate_error(
        self, error: ApplicationError, *, prefix: str = ""
    ) -> list[Violation]:
        code = error.code
        violations = _check(
            _ValidatedError,
            {"description": error.description, "code": code},
            prefix=prefix,
        )
        if self._cascade and code is not None:
            violations.extend(_validate_code(code, prefix=f"{prefix}code."))
        return violations


def _validate_code(code: object, *, prefix: str = "") -> list[Violation]:
    return _check(
        _ValidatedErrorCode,
        {
            "code": getattr(code, "code", None),
            "description": getattr(code, "description", None),
        },
        prefix=prefix,
    )


def _check(
    model: type[_ContractModel],
    payload: Mapping[str, object],
    *,
    prefix: str = "",
) -> list[Violation]:
    """Run one validation-only model and map failures to violations."""
    try:
        model.model_validate(dict(payload))
    except ValidationError as exc:
        return [_to_violation(item, prefix) for item in exc.errors()]
    return []


def _to_violation(item: Mapping[str, Any], prefix: str) -> Violation:
    """Map one Pydantic error entry to a stable public violation."""
    location = item.get("loc", ())
    field_name = ".".join(str(part) for part in location) or "__root__"
    return Violation(field_path=f"{prefix}{field_name}", message=_message(field_name, item))


def _message(field_name: str, item: Mapping[str, Any]) -> str:
    value = item.get("input")
    blank = value is None or (isinstance(value, str) and not value.strip())

    if field_name in _REQUIRED_MESSAGES:
        if blank:
            return _REQUIRED_MESSAGES[field_name]
        if field_name == "status":
            return "status must be a valid Status"
    if item.get("type") == "value_error":
        return MUST_NOT_BE_NULL
    if blank:
        return MUST_NOT_BE_BLANK
    return MUST_BE_STRING


_DEFAULT_VALIDATOR = ContractValidator()


def validate(target: object) -> list[Violation]:
    """Validate ``target`` with the default, non-cascading validator."""
    return _DEFAULT_VALIDATOR.validate(target)


def require_valid(target: object) -> None:
    """Raise ``ContractViolationError`` when ``target`` violates the contract."""
    _DEFAULT_VALIDATOR.require_valid(target)
