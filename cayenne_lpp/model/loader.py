# cayenne_lpp/model/loader.py
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .codec import decode_primitive, is_integer_encode, primitive_size


@dataclass(frozen=True)
class FieldSpec:
    name: Optional[str]
    encode: str
    divisor: float = 1

    @property
    def size(self) -> int:
        return primitive_size(self.encode)

    def decode(self, raw_bytes: bytes) -> Union[int, float]:
        raw = decode_primitive(self.encode, raw_bytes)
        if self.divisor == 1 and is_integer_encode(self.encode):
            return int(raw)
        return raw / float(self.divisor)


@dataclass(frozen=True)
class CustomTypeSpec:
    """
    Declarative custom type: fields packed back to back, big-endian.

    A single unnamed field decodes to a scalar; otherwise the value is a
    mapping of field name -> decoded value.
    """
    type_id: int
    name: str
    fields: Tuple[FieldSpec, ...]

    @property
    def byte_width(self) -> int:
        return sum(f.size for f in self.fields)

    def decode(self, data: bytes) -> Any:
        if len(self.fields) == 1 and self.fields[0].name is None:
            return self.fields[0].decode(data)

        out: Dict[str, Any] = {}
        offset = 0
        for f in self.fields:
            out[str(f.name)] = f.decode(data[offset: offset + f.size])
            offset += f.size
        return out


class TypeCatalogLoader:
    """
    Loads custom LPP type definitions from a YAML catalog.

    Layout:
        types:
          0xF0:
            name: Battery
            fields:
              - {name: voltage, encode: uint16, divisor: 1000}

    After calling load(), exposes:
        self.specs     : dict[int, CustomTypeSpec]
        self.file_hash : sha256 of the catalog file
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.specs: Dict[int, CustomTypeSpec] = {}
        self.file_hash: Optional[str] = None

    # ---------------------------------------------------------------------
    # Public entry points
    # ---------------------------------------------------------------------
    def load(self) -> List[CustomTypeSpec]:
        if not self.path.exists():
            raise FileNotFoundError(f"Missing types catalog: {self.path}")

        raw = self.path.read_bytes()
        self.file_hash = hashlib.sha256(raw).hexdigest()
        data = yaml.safe_load(raw) or {}

        self.specs.clear()
        types = data.get("types") if isinstance(data, dict) else None
        if not isinstance(types, dict):
            raise ValueError(f"{self.path.name} is missing 'types' root node")

        for tid_raw, tinfo in types.items():
            spec = self._parse_type(tid_raw, tinfo)
            if spec.type_id in self.specs:
                raise ValueError(f"Type 0x{spec.type_id:02X} defined twice")
            self.specs[spec.type_id] = spec

        return list(self.specs.values())

    def apply(self, registry) -> Dict[int, bool]:
        """Register every loaded type; returns type_id -> registration result."""
        return {
            tid: registry.register_custom(tid, spec.name, spec.byte_width, spec.decode)
            for tid, spec in self.specs.items()
        }

    # ---------------------------------------------------------------------
    # Parsing
    # ---------------------------------------------------------------------
    @staticmethod
    def _parse_type_id(tid_raw: Any) -> int:
        try:
            tid = int(tid_raw, 0) if isinstance(tid_raw, str) else int(tid_raw)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid type id {tid_raw!r}") from None
        if not 0 <= tid <= 0xFF:
            raise ValueError(f"Type id {tid} out of range 0..255")
        return tid

    def _parse_type(self, tid_raw: Any, tinfo: Any) -> CustomTypeSpec:
        tid = self._parse_type_id(tid_raw)
        if not isinstance(tinfo, dict):
            raise ValueError(f"Type 0x{tid:02X} entry must be a mapping")

        name = tinfo.get("name")
        if not name:
            raise ValueError(f"Type 0x{tid:02X} is missing 'name'")

        fields_raw = tinfo.get("fields")
        if not isinstance(fields_raw, list) or not fields_raw:
            raise ValueError(f"Type 0x{tid:02X} 'fields' must be a non-empty list")

        fields = tuple(self._parse_field(tid, i, f) for i, f in enumerate(fields_raw))

        names = [f.name for f in fields]
        if len(fields) > 1 and any(n is None for n in names):
            raise ValueError(f"Type 0x{tid:02X} has several fields; every field needs a 'name'")
        if len(set(names)) != len(names):
            raise ValueError(f"Type 0x{tid:02X} has duplicate field names")

        return CustomTypeSpec(type_id=tid, name=str(name), fields=fields)

    @staticmethod
    def _parse_field(tid: int, idx: int, finfo: Any) -> FieldSpec:
        if not isinstance(finfo, dict):
            raise ValueError(f"Type 0x{tid:02X} field {idx} must be a mapping")

        encode = finfo.get("encode")
        if not encode:
            raise ValueError(f"Type 0x{tid:02X} field {idx} is missing 'encode'")
        try:
            primitive_size(str(encode))
        except NotImplementedError as e:
            raise ValueError(f"Type 0x{tid:02X} field {idx}: {e}") from None

        divisor = finfo.get("divisor", 1)
        if isinstance(divisor, bool) or not isinstance(divisor, (int, float)) or divisor == 0:
            raise ValueError(f"Type 0x{tid:02X} field {idx} divisor must be a non-zero number")

        name = finfo.get("name")
        return FieldSpec(
            name=str(name) if name is not None else None,
            encode=str(encode).lower(),
            divisor=divisor,
        )
