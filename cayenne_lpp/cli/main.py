# cayenne_lpp/cli/main.py
from __future__ import annotations

import sys
from typing import Optional

from cayenne_lpp.core.errors import DecodeError, LppError

from cayenne_lpp.cli.args import parse_args
from cayenne_lpp.cli.commands import cmd_decode, cmd_types, configure_logging


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "decode":
            return cmd_decode(args)
        if args.cmd == "types":
            return cmd_types(args)

        return 2
    except LppError as e:
        if isinstance(e, DecodeError):
            print(f"ERROR: {e.message} (code={int(e.error_code)})")
        else:
            print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
