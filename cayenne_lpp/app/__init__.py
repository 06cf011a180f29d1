from .config import DecoderConfig
from .factory import build_decoder

__all__ = ["DecoderConfig", "build_decoder"]
