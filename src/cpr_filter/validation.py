"""Validation rules deciding which candidates are real CPR numbers.

Three rules, consulted in order, first approval wins:

  1. replace_all_dash — any literal containing "-" (broadest, cheapest)
  2. modulus11        — weighted control-digit check
  3. date             — DDMMYY plus century digit forms a real date

Each rule carries its own enablement, so a disabled rule never approves.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from .types import CprCandidate, FilterConfig

MODULUS11_WEIGHTS = (4, 3, 2, 7, 6, 5, 4, 3, 2)


def is_valid_modulus11(digits: str) -> bool:
    """Check the control digit (position 9) of a 10-digit stream."""
    if len(digits) != 10 or not (digits.isascii() and digits.isdigit()):
        return False
    total = sum(int(d) * w for d, w in zip(digits, MODULUS11_WEIGHTS))
    expected = 11 - total % 11
    if expected == 11:
        expected = 0
    # expected == 10 never matches a single digit
    return expected == int(digits[9])


def _century(selector: int, year: int) -> int | None:
    if selector in (0, 1, 2, 3):
        return 1900
    if selector == 4:
        return 1900 if year > 36 else 2000
    if selector in (5, 6, 7, 8):
        return 1800 if year > 57 else 2000
    if selector == 9:
        return 1900 if year > 37 else 2000
    return None


def birth_date(digits: str) -> date | None:
    """Resolve the birth date encoded in a 10-digit stream.

    The first serial digit selects the century of the two-digit year.
    Returns None when the digits do not form a real calendar date.
    """
    if len(digits) != 10 or not (digits.isascii() and digits.isdigit()):
        return None
    day, month, year = int(digits[0:2]), int(digits[2:4]), int(digits[4:6])
    century = _century(int(digits[6]), year)
    if century is None:
        return None
    try:
        return date(century + year, month, day)
    except ValueError:
        return None


def is_valid_date(digits: str) -> bool:
    return birth_date(digits) is not None


# ── Rules ────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DashRule:
    name = "replace_all_dash"
    enabled: bool = True

    def __call__(self, candidate: CprCandidate) -> bool:
        return self.enabled and "-" in candidate.text


@dataclass(frozen=True, slots=True)
class Modulus11Rule:
    name = "modulus11"
    enabled: bool = True

    def __call__(self, candidate: CprCandidate) -> bool:
        return self.enabled and is_valid_modulus11(candidate.digits)


@dataclass(frozen=True, slots=True)
class DateRule:
    name = "date"
    enabled: bool = True

    def __call__(self, candidate: CprCandidate) -> bool:
        return self.enabled and is_valid_date(candidate.digits)


Rule = DashRule | Modulus11Rule | DateRule


def build_rules(config: FilterConfig) -> tuple[Rule, ...]:
    """Build the ordered rule chain for a configuration."""
    return (
        DashRule(enabled=config.replace_all_dashed),
        Modulus11Rule(enabled=config.enable_checksum_validation),
        DateRule(enabled=config.enable_date_validation),
    )


def approve(candidate: CprCandidate, rules: Sequence[Rule]) -> str | None:
    """Return the name of the first rule approving the candidate, or None."""
    for rule in rules:
        if rule(candidate):
            return rule.name
    return None
