# cayenne_lpp/cli/args.py
from __future__ import annotations

import argparse
from typing import Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cayenne-lpp", description="Decode Cayenne LPP payloads.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v: info, -vv: debug).",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--types", default=None, help="YAML catalog of custom types.")

    pd = sub.add_parser("decode", parents=[common], help="Decode a hex payload to JSON.")
    pd.add_argument("payload", help="Hex bytes, e.g. '01 67 01 10' or 0x01,0x67,0x01,0x10.")
    pd.add_argument("--indent", type=int, default=2, help="JSON indent (0 = compact).")
    pd.add_argument(
        "--lenient",
        action="store_true",
        help="Skip catalog types that cannot be registered instead of failing.",
    )

    sub.add_parser("types", parents=[common], help="List registered data types.")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
