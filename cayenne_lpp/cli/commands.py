# cayenne_lpp/cli/commands.py
from __future__ import annotations

import argparse
import json
import logging
import sys

from cayenne_lpp.app.config import DecoderConfig
from cayenne_lpp.app.factory import build_decoder
from cayenne_lpp.core.errors import LppError
from cayenne_lpp.utils.hexpayload import parse_hex_payload


# ---------------- Logging ----------------

def configure_logging(verbosity: int) -> None:
    """
    Add a stderr handler to the root logger (idempotent).
    Kept in CLI (presentation-layer concern).
    """
    if verbosity <= 0:
        return

    level = logging.INFO if verbosity == 1 else logging.DEBUG
    root = logging.getLogger()

    for h in root.handlers:
        if getattr(h, "_cayenne_lpp_cli", False):
            h.setLevel(level)
            break
    else:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        sh._cayenne_lpp_cli = True  # type: ignore[attr-defined]
        root.addHandler(sh)

    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)


# ---------------- Commands ----------------

def cmd_decode(args: argparse.Namespace) -> int:
    config = DecoderConfig(types_file=args.types, strict_catalog=not args.lenient)
    decoder = build_decoder(config)

    try:
        payload = parse_hex_payload(args.payload)
    except ValueError as e:
        raise LppError(str(e), hint="Pass the payload as hex bytes, e.g. '01 67 01 10'.") from None

    result = decoder.decode(payload)
    indent = args.indent if args.indent > 0 else None
    print(json.dumps(result, indent=indent, ensure_ascii=False))
    return 0


def cmd_types(args: argparse.Namespace) -> int:
    decoder = build_decoder(DecoderConfig(types_file=args.types))

    for dt in decoder.registry.descriptors():
        kind = "standard" if dt.is_standard else "custom"
        print(f"  0x{dt.type_id:02X}  {dt.name:<16} width={dt.byte_width:<3} {kind}")
    return 0
