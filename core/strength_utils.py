# core/strength_utils.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Tuple

from core.config import DEFAULT_SPECIAL

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
# 3+ identical characters in a row
_REPEAT = re.compile(r"(.)\1\1", re.DOTALL)

SEQUENTIAL_RUNS: Tuple[str, ...] = (
    "123", "234", "345", "456", "567", "678", "789", "890",
    "abc", "bcd", "cde", "def",
)

LABELS: Tuple[Tuple[int, str], ...] = (
    (6, "Very Strong"),
    (4, "Strong"),
    (2, "Medium"),
)


@dataclass(frozen=True)
class StrengthAssessment:
    score: int
    label: str
    suggestions: Tuple[str, ...] = ()


def label_for(score: int) -> str:
    for threshold, label in LABELS:
        if score >= threshold:
            return label
    return "Weak"


def has_sequential_run(password: str) -> bool:
    return any(run in password for run in SEQUENTIAL_RUNS)


def assess_strength(password: str, special_chars: str = DEFAULT_SPECIAL) -> StrengthAssessment:
    """
    Additive heuristic score:
      length >=12 +2 / >=8 +1, upper +1, lower +1, digit +1, special +2,
      repeated run (aaa) -1, sequential run (123, abc) -1.
    Labels: >=6 Very Strong, >=4 Strong, >=2 Medium, else Weak.
    """
    score = 0
    tips: List[str] = []

    if len(password) >= 12:
        score += 2
    elif len(password) >= 8:
        score += 1
    else:
        tips.append("Increase length (at least 8 characters, 12+ recommended)")

    if _UPPER.search(password):
        score += 1
    else:
        tips.append("Add uppercase letters")
    if _LOWER.search(password):
        score += 1
    else:
        tips.append("Add lowercase letters")
    if _DIGIT.search(password):
        score += 1
    else:
        tips.append("Add digits")
    if any(ch in special_chars for ch in password):
        score += 2
    else:
        tips.append("Add special characters")

    if _REPEAT.search(password):
        score -= 1
        tips.append("Avoid repeated characters")
    if has_sequential_run(password):
        score -= 1
        tips.append("Avoid sequential characters")

    return StrengthAssessment(score, label_for(score), tuple(tips))
