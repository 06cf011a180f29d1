# cayenne_lpp/model/codec.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union
import struct


@dataclass(frozen=True)
class PrimitiveCodec:
    fmt: Optional[str]  # big-endian struct format, None for 24-bit
    size: int
    signed: bool = False
    is_float: bool = False


# LPP is big-endian on the wire
PRIMITIVES: Dict[str, PrimitiveCodec] = {
    "uint8":  PrimitiveCodec(fmt="B",  size=1),
    "int8":   PrimitiveCodec(fmt="b",  size=1, signed=True),
    "uint16": PrimitiveCodec(fmt=">H", size=2),
    "int16":  PrimitiveCodec(fmt=">h", size=2, signed=True),
    "uint24": PrimitiveCodec(fmt=None, size=3),
    "int24":  PrimitiveCodec(fmt=None, size=3, signed=True),
    "uint32": PrimitiveCodec(fmt=">I", size=4),
    "int32":  PrimitiveCodec(fmt=">i", size=4, signed=True),
    "float":  PrimitiveCodec(fmt=">f", size=4, signed=True, is_float=True),
    "double": PrimitiveCodec(fmt=">d", size=8, signed=True, is_float=True),
}


def _codec(encode: str) -> PrimitiveCodec:
    enc = encode.lower()
    if enc not in PRIMITIVES:
        raise NotImplementedError(f"Unknown encode type '{encode}'")
    return PRIMITIVES[enc]


def decode_primitive(encode: str, raw_bytes: bytes) -> Union[int, float]:
    codec = _codec(encode)
    if len(raw_bytes) != codec.size:
        raise ValueError(f"Raw bytes length {len(raw_bytes)} != expected {codec.size} for '{encode}'")

    if codec.fmt is None:
        value = bytes_to_uint24(raw_bytes)
        return to_signed(value, 24) if codec.signed else value
    return struct.unpack(codec.fmt, raw_bytes)[0]


def primitive_size(encode: str) -> int:
    return _codec(encode).size


def is_integer_encode(encode: str) -> bool:
    return not _codec(encode).is_float


# ---------------------------------------------------------------------------
# Fixed-width helpers used by the standard rules
# ---------------------------------------------------------------------------

def to_signed(value: int, bits: int) -> int:
    """Two's-complement sign extension of an unsigned `bits`-wide value."""
    if value > (1 << (bits - 1)) - 1:
        return value - (1 << bits)
    return value


def bytes_to_uint16(data: bytes) -> int:
    return (data[0] << 8) | data[1]


def bytes_to_int16(data: bytes) -> int:
    return to_signed(bytes_to_uint16(data), 16)


def bytes_to_uint24(data: bytes) -> int:
    return ((data[0] << 16) | (data[1] << 8) | data[2]) & 0xFFFFFF


def bytes_to_int24(data: bytes) -> int:
    return to_signed(bytes_to_uint24(data), 24)
