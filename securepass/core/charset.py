from __future__ import annotations

from typing import Tuple

from securepass.core.models import GenerationConfig

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Alphabet concatenation order is fixed regardless of how the toggles were set.
CATEGORY_ORDER: Tuple[str, ...] = ("lowercase", "uppercase", "numbers", "symbols")
CATEGORY_CHARS = {
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "numbers": NUMBERS,
    "symbols": SYMBOLS,
}


def enabled_categories(config: GenerationConfig) -> Tuple[str, ...]:
    flags = {
        "lowercase": config.use_lowercase,
        "uppercase": config.use_uppercase,
        "numbers": config.use_numbers,
        "symbols": config.use_symbols,
    }
    return tuple(name for name in CATEGORY_ORDER if flags[name])


def build_alphabet(config: GenerationConfig) -> str:
    """Return the sample space for `config`, or "" when no category is enabled."""
    return "".join(CATEGORY_CHARS[name] for name in enabled_categories(config))
