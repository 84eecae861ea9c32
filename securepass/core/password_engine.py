#!/usr/bin/env python3
r"""
password_engine.py - character-class password sampler (os.urandom)

Every position is an independent draw: a 32-bit unsigned sample from the OS
CSPRNG reduced modulo the alphabet size. Characters may repeat. The residual
modulo bias for alphabets of <= 90 characters is below 2**-25 per symbol and
is accepted; there is no rejection loop.

There is no fallback to the `random` module. If the OS cannot supply bytes,
generation fails with RandomnessUnavailable.
"""
from __future__ import annotations

import os
from typing import Sequence, Tuple

from securepass.core.charset import build_alphabet
from securepass.core.error_dialect import RandomnessUnavailable
from securepass.core.models import GenerationConfig

SAMPLE_BYTES = 4
_PROBE_BYTES = 16


def secure_random_bytes(n: int) -> bytes:
    if n < 0:
        raise ValueError("byte count must be >= 0")
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailable(f"OS CSPRNG failure requesting {n} byte(s): {exc}") from exc
    if len(data) != n:
        raise RandomnessUnavailable(
            f"OS CSPRNG returned unexpected byte count ({len(data)} != {n})"
        )
    return data


def assert_csprng_ready() -> None:
    secure_random_bytes(_PROBE_BYTES)


def secure_random_uint32s(count: int) -> Tuple[int, ...]:
    if count <= 0:
        return ()
    raw = secure_random_bytes(count * SAMPLE_BYTES)
    return tuple(
        int.from_bytes(raw[i : i + SAMPLE_BYTES], "big", signed=False)
        for i in range(0, len(raw), SAMPLE_BYTES)
    )


def select_indices(samples: Sequence[int], alphabet_size: int) -> Tuple[int, ...]:
    if alphabet_size <= 0:
        raise ValueError("alphabet size must be > 0")
    return tuple(r % alphabet_size for r in samples)


def generate_password(config: GenerationConfig) -> str:
    alphabet = build_alphabet(config)
    if not alphabet:
        # Nothing to generate; callers render a placeholder.
        return ""
    samples = secure_random_uint32s(config.length)
    return "".join(alphabet[i] for i in select_indices(samples, len(alphabet)))
