"""Candidate matching for CPR-shaped substrings.

The grammar is a 6-digit DDMMYY date followed by a 4-digit serial:

    010203-1234    01.02.03-1234    01 02 03 1234    010203 / 1234

To prevent false positives a match must not be preceded by a digit and
must be followed by a word boundary.
"""

from __future__ import annotations
import re
from typing import Iterator

from .types import CprCandidate

CPR_REGEX = (
    r"(?<!\d)"
    r"\d{2}([\s/.\-]?)\d{2}\1\d{2}"     # date part, same separator twice (or none)
    r"(?:\s{0,2}[/.\-]\s{0,2}|\s{0,2})"  # gap between date and serial
    r"\d{4}\b"
)

# ASCII: only 0-9 count as digits, and \b treats non-ASCII letters as
# non-word characters.
CPR_PATTERN: re.Pattern[str] = re.compile(CPR_REGEX, re.ASCII)


def find_candidates(text: str) -> Iterator[CprCandidate]:
    """Yield CPR-shaped substrings left to right, non-overlapping."""
    for m in CPR_PATTERN.finditer(text):
        yield CprCandidate(text=m.group(), start=m.start(), end=m.end())
