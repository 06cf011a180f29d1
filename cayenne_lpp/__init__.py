# cayenne_lpp/__init__.py

from .core.errors import (
    ErrorCode,
    LppError,
    DecodeError,
    PayloadEmptyError,
    UnknownDataTypeError,
    BadPayloadFormatError,
    UnexpectedDecodeError,
    CatalogError,
)
from .model import TypeDescriptor, TypeCatalogLoader
from .protocol import Decoder, TypeRegistry, decode

__all__ = [
    "Decoder", "TypeRegistry", "TypeDescriptor", "decode",
    "TypeCatalogLoader",
    "ErrorCode", "LppError", "DecodeError",
    "PayloadEmptyError", "UnknownDataTypeError",
    "BadPayloadFormatError", "UnexpectedDecodeError",
    "CatalogError",
]

__version__ = "0.1.0"
