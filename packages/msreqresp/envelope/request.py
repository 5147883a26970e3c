"""Request envelope carrying the correlation identifiers of one operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from packages.msreqresp.logging import emit_debug, fields, get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class RequestEnvelope:
    """Correlation identifiers shared by every inbound message.

    ``client_id`` names the originating caller and ``transaction_id`` the
    logical operation; both are fixed for the whole request lifecycle.
    Services subclass this dataclass to add their payload fields.

    Construction accepts ``None`` and blank values silently; run ``validate``
    before the envelope crosses a boundary.
    """

    client_id: str | None
    transaction_id: str | None

    def describe(self, logger: Any | None = None) -> None:
        """Write one DEBUG line with both identifiers; never raises."""
        emit_debug(
            logger or _LOGGER,
            "Request",
            lambda: {
                fields.EVENT: fields.REQUEST_DESCRIBED_EVENT,
                fields.CLIENT_ID: self.client_id,
                fields.TRANSACTION_ID: self.transaction_id,
            },
        )


def new_request(client_id: str, transaction_id: str | None = None) -> RequestEnvelope:
    """Build a request, generating a compact transaction id when omitted."""
    return RequestEnvelope(
        client_id=client_id,
        transaction_id=transaction_id or uuid4().hex,
    )
