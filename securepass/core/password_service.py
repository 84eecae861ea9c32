from __future__ import annotations

from securepass.core import password_engine as engine
from securepass.core.charset import build_alphabet
from securepass.core.models import GeneratedPassword, PasswordRequest, PasswordResult
from securepass.core.strength import evaluate


def generate_passwords(request: PasswordRequest) -> PasswordResult:
    if request.count <= 0:
        raise ValueError("count must be > 0")
    if request.length <= 0:
        raise ValueError("length must be > 0")

    config = request.to_config()
    alphabet = build_alphabet(config)
    if not alphabet:
        return PasswordResult(records=(), alphabet_size=0)

    # Fail before the batch rather than part-way through it.
    engine.assert_csprng_ready()

    records = []
    for _ in range(request.count):
        value = engine.generate_password(config)
        report = evaluate(value)
        records.append(GeneratedPassword(value=value, score=report.score, tier=report.tier))
    return PasswordResult(records=tuple(records), alphabet_size=len(alphabet))
