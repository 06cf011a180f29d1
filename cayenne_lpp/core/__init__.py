from .errors import (
    ErrorCode,
    LppError,
    DecodeError,
    PayloadEmptyError,
    UnknownDataTypeError,
    BadPayloadFormatError,
    UnexpectedDecodeError,
    CatalogError,
)

__all__ = [
    "ErrorCode", "LppError", "DecodeError",
    "PayloadEmptyError", "UnknownDataTypeError",
    "BadPayloadFormatError", "UnexpectedDecodeError",
    "CatalogError",
]
