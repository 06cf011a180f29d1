# cayenne_lpp/core/errors.py
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric decode outcome, stable across releases."""
    NONE = 0
    UNEXPECTED = 1
    UNKNOWN_DATA_TYPE = 2
    BAD_PAYLOAD_FORMAT = 3
    PAYLOAD_EMPTY = 4


class LppError(Exception):
    """
    Base class for all expected operational errors in cayenne_lpp.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, APIs, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Decode errors (raised by Decoder.decode, never partially committed)
# ---------------------------------------------------------------------------

class DecodeError(LppError):
    """Base for payload decode failures."""
    code = "decode_error"
    error_code: ErrorCode = ErrorCode.UNEXPECTED


class PayloadEmptyError(DecodeError):
    """The payload buffer had zero length."""
    code = "payload_empty"
    error_code = ErrorCode.PAYLOAD_EMPTY

    def __init__(self) -> None:
        super().__init__("Payload is empty", hint="An LPP payload holds at least one channel/type header.")


class UnknownDataTypeError(DecodeError):
    """
    A type identifier in the payload has no registry entry.

    Examples:
      - vendor-specific type id that was never registered
      - custom type that was removed before decoding
      - corrupted payload where a data byte is read as a header
    """
    code = "unknown_data_type"
    error_code = ErrorCode.UNKNOWN_DATA_TYPE

    def __init__(self, type_id: int, *, offset: int | None = None):
        super().__init__(
            f"Unknown data type 0x{type_id:02X}",
            hint="Register the type with add_custom_type() or a types catalog.",
            details={"type_id": type_id, "offset": offset},
        )
        self.type_id = type_id
        self.offset = offset


class BadPayloadFormatError(DecodeError):
    """
    Payload framing does not line up with the declared type widths.

    Examples:
      - a field would overrun the end of the buffer
      - one trailing byte remains after the last complete field
    """
    code = "bad_payload_format"
    error_code = ErrorCode.BAD_PAYLOAD_FORMAT

    def __init__(self, reason: str, *, offset: int | None = None, details: dict | None = None):
        d = {"reason": reason, "offset": offset}
        d.update(details or {})
        super().__init__(f"Bad payload format: {reason}", details=d)
        self.reason = reason
        self.offset = offset


class UnexpectedDecodeError(DecodeError):
    """
    Internal invariant violation while decoding.

    Examples:
      - custom type descriptor without a decode rule
      - custom decode rule raised an exception
    """
    code = "unexpected"
    error_code = ErrorCode.UNEXPECTED


# ---------------------------------------------------------------------------
# Application-layer errors
# ---------------------------------------------------------------------------

class CatalogError(LppError):
    """
    Custom type catalog could not be loaded or applied.

    Examples:
      - file missing or not valid YAML
      - entry collides with a standard or already registered type
    """
    code = "catalog_error"
