from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


MIN_LENGTH = 6
MAX_LENGTH = 50
DEFAULT_LENGTH = 16
DEFAULT_COUNT = 1
MAX_COUNT = 1000


@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULT_LENGTH
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_numbers: bool = True
    use_symbols: bool = True


class StrengthTier(Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def rank(self) -> int:
        return _TIER_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_RANKS = {
    StrengthTier.WEAK: 0,
    StrengthTier.MEDIUM: 1,
    StrengthTier.STRONG: 2,
    StrengthTier.VERY_STRONG: 3,
}


@dataclass(frozen=True)
class StrengthReport:
    score: int
    tier: StrengthTier


@dataclass(frozen=True)
class PasswordRequest:
    count: int = DEFAULT_COUNT
    length: int = DEFAULT_LENGTH
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_numbers: bool = True
    use_symbols: bool = True

    def to_config(self) -> GenerationConfig:
        return GenerationConfig(
            length=self.length,
            use_uppercase=self.use_uppercase,
            use_lowercase=self.use_lowercase,
            use_numbers=self.use_numbers,
            use_symbols=self.use_symbols,
        )


@dataclass(frozen=True)
class GeneratedPassword:
    value: str
    score: int
    tier: StrengthTier


@dataclass(frozen=True)
class PasswordResult:
    records: Tuple[GeneratedPassword, ...]
    alphabet_size: int

    @property
    def empty_alphabet(self) -> bool:
        return self.alphabet_size == 0

    @property
    def outputs(self) -> Tuple[str, ...]:
        return tuple(record.value for record in self.records)

    def as_lines(self, show_meta: bool = False) -> Tuple[str, ...]:
        if not show_meta:
            return self.outputs
        return tuple(
            f"{record.value}\t[strength={record.tier.value} score={record.score}]"
            for record in self.records
        )
