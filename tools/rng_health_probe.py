#!/usr/bin/env python3
from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from securepass.core.charset import build_alphabet
from securepass.core.models import GenerationConfig
from securepass.core.password_engine import assert_csprng_ready, generate_password


def _chi_square(counts: Counter[str], alphabet: str, total: int) -> float:
    expected = total / len(alphabet)
    return sum((counts.get(ch, 0) - expected) ** 2 / expected for ch in alphabet)


def _run_probe(
    *,
    samples: int,
    config: GenerationConfig,
    max_chi2_ratio: float,
    min_unique_ratio: float,
) -> tuple[float, float, int]:
    assert_csprng_ready()

    if samples <= 0:
        raise ValueError("samples must be > 0")
    if config.length <= 0:
        raise ValueError("length must be > 0")
    if max_chi2_ratio <= 0.0:
        raise ValueError("max-chi2-ratio must be > 0")
    if not (0.0 < min_unique_ratio <= 1.0):
        raise ValueError("min-unique-ratio must be within (0, 1]")
    alphabet = build_alphabet(config)
    if len(alphabet) < 2:
        raise ValueError("probe needs an alphabet of at least 2 characters")

    per_position: list[Counter[str]] = [Counter() for _ in range(config.length)]
    outputs: set[str] = set()
    for _ in range(samples):
        value = generate_password(config)
        if len(value) != config.length:
            raise RuntimeError(
                f"RNG health probe failed: password length {len(value)} != requested {config.length}"
            )
        outputs.add(value)
        for position, ch in enumerate(value):
            per_position[position][ch] += 1

    stray = set().union(*per_position) - set(alphabet)
    if stray:
        raise RuntimeError(f"RNG health probe failed: characters outside alphabet: {''.join(sorted(stray))!r}")

    # Chi-square over degrees of freedom is ~1.0 for a uniform source; the worst position is reported.
    dof = len(alphabet) - 1
    ratios = [_chi_square(counts, alphabet, samples) / dof for counts in per_position]
    worst_position = max(range(config.length), key=ratios.__getitem__)
    chi2_ratio = ratios[worst_position]
    unique_ratio = len(outputs) / samples

    if chi2_ratio > max_chi2_ratio:
        raise RuntimeError(
            f"RNG health probe failed: chi-square ratio {chi2_ratio:.4f} at position {worst_position} "
            f"above threshold {max_chi2_ratio:.4f}"
        )
    if unique_ratio < min_unique_ratio:
        raise RuntimeError(
            f"RNG health probe failed: unique ratio {unique_ratio:.6f} below threshold {min_unique_ratio:.6f}"
        )
    return chi2_ratio, unique_ratio, len(alphabet)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Local uniformity probe for password character sampling. "
            "This is a sanity check, not a cryptographic certification."
        )
    )
    parser.add_argument("--samples", type=int, default=4096, help="Number of passwords to generate (default: 4096).")
    parser.add_argument("--length", type=int, default=16, help="Password length per sample (default: 16).")
    parser.add_argument(
        "--max-chi2-ratio",
        type=float,
        default=1.75,
        help="Maximum per-position chi-square / degrees-of-freedom ratio (default: 1.75).",
    )
    parser.add_argument(
        "--min-unique-ratio",
        type=float,
        default=0.999,
        help="Minimum required distinct password ratio (default: 0.999).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = GenerationConfig(length=args.length)
    try:
        chi2_ratio, unique_ratio, alphabet_size = _run_probe(
            samples=args.samples,
            config=config,
            max_chi2_ratio=args.max_chi2_ratio,
            min_unique_ratio=args.min_unique_ratio,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"[rng] probe failed: {exc}", file=sys.stderr)
        return 1

    print(f"[rng] samples={args.samples} length={args.length} alphabet_size={alphabet_size}")
    print(f"[rng] worst_position_chi2_ratio={chi2_ratio:.4f}")
    print(f"[rng] unique_ratio={unique_ratio:.6f}")
    print("[rng] probe ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
