# cayenne_lpp/app/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DecoderConfig:
    types_file: Optional[str] = None
    strict_catalog: bool = True  # raise if a catalog entry cannot be registered
