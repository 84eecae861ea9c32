#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import Mapping

from securepass.cli.adapters import layered_request
from securepass.core.charset import CATEGORY_ORDER
from securepass.core.error_dialect import exit_code_for, format_error_text
from securepass.core.models import MAX_LENGTH, MIN_LENGTH, PasswordRequest
from securepass.core.password_service import generate_passwords

EMPTY_ALPHABET_PLACEHOLDER = (
    "no character categories selected; enable at least one of: " + ", ".join(CATEGORY_ORDER)
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Password generator using os.urandom")

    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=None,
        help=f"password length, {MIN_LENGTH}-{MAX_LENGTH} (default: $SECUREPASS_LENGTH or 16)",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=None,
        help="number of passwords to print (default: $SECUREPASS_COUNT or 1)",
    )
    parser.add_argument("--uppercase", action=argparse.BooleanOptionalAction, default=None, help="include A-Z")
    parser.add_argument("--lowercase", action=argparse.BooleanOptionalAction, default=None, help="include a-z")
    parser.add_argument("--numbers", action=argparse.BooleanOptionalAction, default=None, help="include 0-9")
    parser.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None, help="include symbols")
    parser.add_argument(
        "--config",
        default="",
        help="JSON settings file (overrides $SECUREPASS_CONFIG)",
    )
    parser.add_argument(
        "--show-meta",
        "--meta",
        action="store_true",
        help="Print strength tier and score per password.",
    )

    return parser.parse_args(argv)


def build_request(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> PasswordRequest:
    overrides: dict[str, object] = {}
    if args.length is not None:
        overrides["length"] = args.length
    if args.count is not None:
        overrides["count"] = args.count
    for flag, name in (
        ("uppercase", "use_uppercase"),
        ("lowercase", "use_lowercase"),
        ("numbers", "use_numbers"),
        ("symbols", "use_symbols"),
    ):
        value = getattr(args, flag)
        if value is not None:
            overrides[name] = value
    return layered_request(settings_path=args.config, overrides=overrides, environ=environ)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        request = build_request(args)
        result = generate_passwords(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return exit_code_for(exc)
    if result.empty_alphabet:
        print(EMPTY_ALPHABET_PLACEHOLDER, file=sys.stderr)
        return 0
    for line in result.as_lines(show_meta=args.show_meta):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
