"""Canonical logging field names for cross-service consistency.

These constants define a stable key set for structured logs and context
propagation. Keeping names centralized prevents accidental drift between
services that share the request/response contract.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Record attribute carrying the structured fields of one log call.
STRUCTURED = "structured"

# Correlation fields.
CLIENT_ID = "client_id"
TRANSACTION_ID = "transaction_id"

# Outcome fields.
STATUS = "status"
RESPONSE_MESSAGE = "response_message"
ERROR_CODE = "error_code"
ERROR_DESCRIPTION = "error_description"
NATIVE_TEXT = "native_text"

# Describe events.
REQUEST_DESCRIBED_EVENT = "request_described"
RESPONSE_DESCRIBED_EVENT = "response_described"
STATUS_DESCRIBED_EVENT = "status_described"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
