# cayenne_lpp/protocol/registry.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from cayenne_lpp.model.data_type import DecodeRule, TypeDescriptor
from .definitions import v1_standard_types


class TypeRegistry:
    """
    Per-decoder map of type_id -> TypeDescriptor.

    - Seeded with the standard LPP v1 types, which can never be removed
      or overwritten.
    - Custom types are added/removed at runtime; failures are reported as
      a False return, never raised.
    - NO module-level state: two registries never share entries.
    """

    def __init__(
        self,
        standard_types: Optional[Iterable[TypeDescriptor]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._log = logger or logging.getLogger(__name__)
        seed = v1_standard_types() if standard_types is None else standard_types
        self._types: Dict[int, TypeDescriptor] = {dt.type_id: dt for dt in seed}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def lookup(self, type_id: int) -> Optional[TypeDescriptor]:
        return self._types.get(type_id)

    def contains(self, type_id: int) -> bool:
        return type_id in self._types

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    def descriptors(self) -> List[TypeDescriptor]:
        return [self._types[tid] for tid in sorted(self._types)]

    def custom_ids(self) -> List[int]:
        return sorted(tid for tid, dt in self._types.items() if not dt.is_standard)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def register_custom(
        self,
        type_id: int,
        name: str,
        byte_width: int,
        decode_rule: Optional[DecodeRule],
    ) -> bool:
        reason = self._reject_reason(type_id, byte_width, decode_rule)
        if reason:
            self._log.warning("CUSTOM_TYPE_REJECTED type_id=%r reason=%s", type_id, reason)
            return False

        self._types[type_id] = TypeDescriptor(
            type_id=type_id,
            name=str(name),
            byte_width=byte_width,
            is_standard=False,
            decode_rule=decode_rule,
        )
        self._log.info("CUSTOM_TYPE_REGISTERED type_id=0x%02X name=%s width=%d", type_id, name, byte_width)
        return True

    def unregister_custom(self, type_id: int) -> bool:
        dt = self._types.get(type_id)
        if dt is None:
            return False
        if dt.is_standard:
            self._log.warning("STANDARD_TYPE_REMOVE_REJECTED type_id=0x%02X", type_id)
            return False

        del self._types[type_id]
        self._log.info("CUSTOM_TYPE_REMOVED type_id=0x%02X", type_id)
        return True

    def _reject_reason(self, type_id, byte_width, decode_rule) -> Optional[str]:
        # bool is an int subclass; a flag is never a valid id or width
        if not isinstance(type_id, int) or isinstance(type_id, bool) or not 0 <= type_id <= 0xFF:
            return "type_id_out_of_range"
        if type_id in self._types:
            return "standard_type" if self._types[type_id].is_standard else "duplicate"
        if not isinstance(byte_width, int) or isinstance(byte_width, bool) or byte_width < 1:
            return "invalid_width"
        if decode_rule is None or not callable(decode_rule):
            return "missing_decode_rule"
        return None

    def __repr__(self) -> str:
        return f"TypeRegistry(types={len(self._types)}, custom={len(self.custom_ids())})"
