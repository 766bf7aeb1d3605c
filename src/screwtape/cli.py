from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, run_file, run_string
from .errors import ProgramLoadError
from .interpreter import DEFAULT_OPCODES

logger = logging.getLogger(__name__)


def _format_tape(tape) -> str:
    return " ".join(f"[{value}]" if current else str(value) for value, current in tape)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="screwtape",
        description="Run a Screwtape program ('[' never skips, ']' jumps back while nonzero).",
    )
    parser.add_argument("program", nargs="?", default="-", help="program file, or - for stdin")
    parser.add_argument("--max-steps", type=int, default=None, help="stop after this many steps")
    parser.add_argument("--jit", action="store_true", help="use the numba-compiled batch loop")
    parser.add_argument("--delay", type=float, default=0.0, help="seconds to wait between steps")
    parser.add_argument("--opcodes", action="store_true", help="load the program's opcodes onto the tape first")
    parser.add_argument("--tape", action="store_true", help="print the final tape")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = RunOptions(
        max_steps=args.max_steps,
        use_jit=args.jit,
        delay=args.delay,
        opcodes=DEFAULT_OPCODES if args.opcodes else None,
    )

    try:
        if args.program == "-":
            result = run_string(sys.stdin.read(), options=options)
        else:
            result = run_file(args.program, options=options)
    except ProgramLoadError as e:
        print(e, file=sys.stderr)
        return 1

    sys.stdout.write(result.text)
    if result.text:
        sys.stdout.write("\n")
    if args.tape:
        print(_format_tape(result.tape))
    logger.debug("%d steps, terminated=%s", result.steps, result.terminated)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
