#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from securepass.core.error_dialect import exit_code_for, format_error_text, make_error
from securepass.core.strength import evaluate


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Classify passwords read from stdin (one per line) into weak/medium/strong/very-strong. "
            "Passwords are never accepted as arguments so they stay out of shell history."
        )
    )
    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print the heuristic score next to each tier.",
    )
    return parser.parse_args(argv)


def classify_lines(stream: TextIO, *, show_meta: bool = False) -> list[str]:
    out: list[str] = []
    for raw_line in stream:
        password = raw_line.rstrip("\r\n")
        if not password:
            continue
        report = evaluate(password)
        if show_meta:
            out.append(f"{report.tier.value}\tscore={report.score}")
        else:
            out.append(report.tier.value)
    if not out:
        raise make_error("invalid_request", "no password provided on stdin")
    return out


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    args = parse_args(argv)
    stream = sys.stdin if stdin is None else stdin
    try:
        lines = classify_lines(stream, show_meta=args.show_meta)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return exit_code_for(exc)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
