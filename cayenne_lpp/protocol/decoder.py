# cayenne_lpp/protocol/decoder.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Union

from cayenne_lpp.core.errors import (
    BadPayloadFormatError,
    PayloadEmptyError,
    UnexpectedDecodeError,
    UnknownDataTypeError,
)
from cayenne_lpp.model.data_type import DecodeRule, TypeDescriptor
from .registry import TypeRegistry
from .rules import STANDARD_RULES

Buffer = Union[bytes, bytearray, memoryview, Iterable[int]]

HEADER_SIZE = 2  # channel + type_id

_log = logging.getLogger(__name__)


def decode(buffer: Buffer, registry: TypeRegistry, *, logger: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """
    Decode a whole LPP payload into {"<Name>_<channel>": value}.

    Frames are read sequentially as [channel][type_id][data...]; the width
    of data comes from the registry. Any error aborts the whole payload and
    nothing is returned. A repeated (name, channel) key keeps the last value.
    """
    log = logger or _log
    payload = bytes(buffer)

    if not payload:
        log.debug("DECODE_FAILED code=payload_empty")
        raise PayloadEmptyError()

    result: Dict[str, Any] = {}
    pos = 0
    total = len(payload)

    while pos + HEADER_SIZE <= total:
        channel = payload[pos]
        type_id = payload[pos + 1]
        pos += HEADER_SIZE

        dt = registry.lookup(type_id)
        if dt is None:
            log.debug("DECODE_FAILED code=unknown_data_type type_id=0x%02X offset=%d", type_id, pos - 1)
            raise UnknownDataTypeError(type_id, offset=pos - 1)

        width = dt.byte_width
        if pos + width > total:
            log.debug(
                "DECODE_FAILED code=bad_payload_format type=%s need=%d have=%d",
                dt.name,
                width,
                total - pos,
            )
            raise BadPayloadFormatError(
                "insufficient bytes",
                offset=pos,
                details={"type_id": type_id, "needed": width, "available": total - pos},
            )

        data = payload[pos: pos + width]
        result[dt.key_for(channel)] = _apply_rule(dt, data)

        log.debug("Decoded frame channel=%d type=0x%02X width=%d offset=%d", channel, type_id, width, pos)
        pos += width

    if pos != total:
        log.debug("DECODE_FAILED code=bad_payload_format trailing=%d", total - pos)
        raise BadPayloadFormatError(
            "unprocessed trailing bytes",
            offset=pos,
            details={"trailing": total - pos},
        )

    return result


def _apply_rule(dt: TypeDescriptor, data: bytes) -> Any:
    if dt.is_standard:
        fn = STANDARD_RULES.get(dt.type_id)
        if fn is None:
            raise UnknownDataTypeError(dt.type_id)
        return fn(data)

    if dt.decode_rule is None:
        raise UnexpectedDecodeError(
            f"Custom type '{dt.name}' (0x{dt.type_id:02X}) has no decode rule",
            details={"type_id": dt.type_id},
        )
    try:
        return dt.decode_rule(data)
    except Exception as e:
        raise UnexpectedDecodeError(
            f"Decode rule for custom type '{dt.name}' (0x{dt.type_id:02X}) failed: {e}",
            details={"type_id": dt.type_id},
        ) from e


class Decoder:
    """
    Cayenne LPP decoder owning its own TypeRegistry.

    Decoding is a pure function of (payload, registry); registration is not
    thread-safe and must be serialized by the owner.
    """

    def __init__(self, registry: Optional[TypeRegistry] = None, *, logger: Optional[logging.Logger] = None):
        self._log = logger or logging.getLogger(__name__)
        self.registry = registry if registry is not None else TypeRegistry(logger=self._log)

    def decode(self, buffer: Buffer) -> Dict[str, Any]:
        return decode(buffer, self.registry, logger=self._log)

    # --- custom types ---
    def add_custom_type(self, type_id: int, name: str, byte_width: int, decode_rule: DecodeRule) -> bool:
        return self.registry.register_custom(type_id, name, byte_width, decode_rule)

    def has_type(self, type_id: int) -> bool:
        return self.registry.contains(type_id)

    def remove_custom_type(self, type_id: int) -> bool:
        return self.registry.unregister_custom(type_id)

    def __repr__(self) -> str:
        return f"Decoder({self.registry!r})"
