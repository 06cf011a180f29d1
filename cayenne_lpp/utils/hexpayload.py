# cayenne_lpp/utils/hexpayload.py
from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s,:;-]+")


def parse_hex_payload(text: str) -> bytes:
    """
    Parse a hex payload as typed by a user.

    Accepts "0167 0110", "01:67:01:10", "0x01,0x67,0x01,0x10".
    Raises ValueError on anything that is not whole bytes of hex.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    parts = []
    for tok in tokens:
        if tok[:2].lower() == "0x":
            tok = tok[2:]
            # "0x1" style tokens are single bytes
            if len(tok) == 1:
                tok = "0" + tok
        parts.append(tok)

    joined = "".join(parts)
    if len(joined) % 2:
        raise ValueError(f"Hex payload has an odd number of digits ({len(joined)})")
    try:
        return bytes.fromhex(joined)
    except ValueError:
        raise ValueError(f"Invalid hex payload '{text}'") from None
