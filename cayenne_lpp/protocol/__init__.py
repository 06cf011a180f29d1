# protocol/__init__.py

from .decoder import Decoder, decode
from .registry import TypeRegistry
from .definitions import v1_standard_types

__all__ = [
    "Decoder", "decode",
    "TypeRegistry",
    "v1_standard_types",
]
