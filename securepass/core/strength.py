"""Heuristic password strength tiers.

The score is a fixed five-point checklist, not an entropy estimate. Lowercase
letters earn nothing on their own; that asymmetry is part of the published
scoring and is kept for output compatibility. Length is measured in UTF-16
code units, so a character outside the Basic Multilingual Plane counts twice.
"""
from __future__ import annotations

import re

from securepass.core.models import StrengthReport, StrengthTier

_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_OTHER_RE = re.compile(r"[^A-Za-z0-9]")


def utf16_length(password: str) -> int:
    # surrogatepass keeps lone surrogates from stdin countable instead of raising.
    return len(password.encode("utf-16-le", "surrogatepass")) // 2


def score_password(password: str) -> int:
    score = 0
    length = utf16_length(password)
    if length > 8:
        score += 1
    if length > 12:
        score += 1
    if _UPPER_RE.search(password):
        score += 1
    if _DIGIT_RE.search(password):
        score += 1
    if _OTHER_RE.search(password):
        score += 1
    return score


def tier_for_score(score: int) -> StrengthTier:
    if score <= 2:
        return StrengthTier.WEAK
    if score == 3:
        return StrengthTier.MEDIUM
    if score == 4:
        return StrengthTier.STRONG
    return StrengthTier.VERY_STRONG


def classify(password: str) -> StrengthTier:
    return tier_for_score(score_password(password))


def evaluate(password: str) -> StrengthReport:
    score = score_password(password)
    return StrengthReport(score=score, tier=tier_for_score(score))
