# cayenne_lpp/model/data_type.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

#: Custom decode rule: exactly `byte_width` bytes in, JSON-compatible value out.
DecodeRule = Callable[[bytes], Any]


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Static description of one LPP data type (registry entry).

    Standard descriptors carry no decode_rule; their conversion is selected
    by type_id through the fixed table in protocol.rules. Custom descriptors
    must carry a callable rule.
    """
    type_id: int
    name: str
    byte_width: int
    is_standard: bool = True
    decode_rule: Optional[DecodeRule] = field(default=None, compare=False, repr=False)

    def key_for(self, channel: int) -> str:
        return f"{self.name}_{channel}"

    def as_dict(self) -> dict:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "byte_width": self.byte_width,
            "is_standard": self.is_standard,
        }
