#!/usr/bin/env python3
from __future__ import annotations

import sys

from securepass.cli.pwgen_cli import main as generate_main
from securepass.cli.strength_cli import main as check_main

_GENERATE_ALIASES = frozenset({"generate", "gen", "password", "pw"})
_CHECK_ALIASES = frozenset({"check", "strength"})


def _print_help() -> None:
    print(
        "SecurePass CLI\n"
        "\n"
        "Usage:\n"
        "  securepass [generate flags]\n"
        "  securepass generate [generate flags]\n"
        "  securepass check [--show-meta] < passwords.txt\n"
        "\n"
        "Examples:\n"
        "  securepass -n 5 -l 24\n"
        "  securepass -l 12 --no-symbols --show-meta\n"
    )


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return generate_main([])

    command = args[0].lower()
    tail = args[1:]

    if command in ("-h", "--help", "help"):
        _print_help()
        return 0
    if command in _GENERATE_ALIASES:
        return generate_main(tail)
    if command in _CHECK_ALIASES:
        return check_main(tail)
    if command.startswith("-"):
        return generate_main(args)
    print(
        f"unknown command: {args[0]!r}. Use 'securepass --help' for usage.",
        file=sys.stderr,
    )
    return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
