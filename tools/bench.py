from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Allow running as `python tools/bench.py` without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from securepass.core.models import PasswordRequest
from securepass.core.password_service import generate_passwords
from securepass.core.strength import classify


def _bench_passwords(count: int, length: int) -> tuple[str, ...]:
    req = PasswordRequest(count=count, length=length)
    t0 = time.perf_counter()
    result = generate_passwords(req)
    dt = time.perf_counter() - t0
    rate = (len(result.outputs) / dt) if dt > 0 else 0.0
    print(f"[passwords] count={len(result.outputs)} length={length} seconds={dt:.4f} rate={rate:.1f}/s")
    return result.outputs


def _bench_classify(values: tuple[str, ...], rounds: int) -> None:
    t0 = time.perf_counter()
    for _ in range(rounds):
        for value in values:
            classify(value)
    dt = time.perf_counter() - t0
    total = len(values) * rounds
    rate = (total / dt) if dt > 0 else 0.0
    print(f"[classify] count={total} seconds={dt:.4f} rate={rate:.1f}/s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SecurePass baseline benchmark (stdlib-only).")
    parser.add_argument("--passwords", type=int, default=0, help="Number of passwords to generate.")
    parser.add_argument("--length", type=int, default=16, help="Password length for password bench.")
    parser.add_argument(
        "--classify-rounds",
        type=int,
        default=0,
        help="Re-classify the generated passwords this many times.",
    )
    args = parser.parse_args(argv)

    if args.passwords <= 0:
        parser.error("Set --passwords to a value > 0")

    outputs = _bench_passwords(count=args.passwords, length=args.length)
    if args.classify_rounds > 0:
        _bench_classify(outputs, rounds=args.classify_rounds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
