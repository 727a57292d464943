"""Error kinds, their caller-facing messages and the kind → HTTP status table."""
from enum import Enum

from photo_describer.constants import (
    MSG_ERR_IMAGE_NOT_FOUND,
    MSG_ERR_PARSE,
    MSG_ERR_TRANSPORT,
    MSG_ERR_UPSTREAM_STATUS,
)


class ErrorKind(Enum):
    INVALID_METHOD = "invalid_method"
    EMPTY_PAYLOAD = "empty_payload"
    STORAGE_WRITE_FAILURE = "storage_write_failure"
    SOURCE_NOT_FOUND = "source_not_found"
    TRANSPORT_FAILURE = "transport_failure"
    UPSTREAM_STATUS_FAILURE = "upstream_status_failure"
    RESPONSE_PARSE_FAILURE = "response_parse_failure"
    INTERNAL_FAILURE = "internal_failure"


# Only request validation gets its own status; service failures answer 200
# with an "error" field, so callers branch on the JSON shape.
_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_METHOD: 405,
    ErrorKind.EMPTY_PAYLOAD: 400,
    ErrorKind.STORAGE_WRITE_FAILURE: 500,
}


def status_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND.get(kind, 200)


# ── exceptions ────────────────────────────────────────────────────────────────


class DescriptionError(Exception):
    """Base for failures that end a request with an error result."""

    kind: ErrorKind = ErrorKind.INTERNAL_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StorageWriteFailure(DescriptionError):
    kind = ErrorKind.STORAGE_WRITE_FAILURE


class SourceNotFound(DescriptionError):
    kind = ErrorKind.SOURCE_NOT_FOUND

    def __init__(self) -> None:
        super().__init__(MSG_ERR_IMAGE_NOT_FOUND)


class TransportFailure(DescriptionError):
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, reason: str) -> None:
        super().__init__(MSG_ERR_TRANSPORT % reason)


class UpstreamStatusFailure(DescriptionError):
    kind = ErrorKind.UPSTREAM_STATUS_FAILURE

    def __init__(self, status_code: int) -> None:
        super().__init__(MSG_ERR_UPSTREAM_STATUS % status_code)
        self.status_code = status_code


class ResponseParseFailure(DescriptionError):
    kind = ErrorKind.RESPONSE_PARSE_FAILURE

    def __init__(self) -> None:
        super().__init__(MSG_ERR_PARSE)
