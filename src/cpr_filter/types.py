"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Configuration for the CPR filter. Never mutated by the core."""
    enable_checksum_validation: bool = True   # "modulus11_check"
    enable_date_validation: bool = True       # "date_check"
    replace_all_dashed: bool = True           # "replace_all_dash"
    placeholder: str = "XXXXXX-XXXX"          # "dummy_value", max 32 chars


@dataclass(frozen=True, slots=True)
class CprCandidate:
    """A substring shaped like a CPR number, prior to validation."""
    text: str       # literal match, separators included
    start: int
    end: int

    @property
    def digits(self) -> str:
        """The 10-digit stream with every separator stripped."""
        return "".join(c for c in self.text if "0" <= c <= "9")


@dataclass(frozen=True, slots=True)
class CprMatch:
    """A candidate together with its verdict."""
    candidate: CprCandidate
    approved_by: str | None   # rule name, e.g. "modulus11"; None = left untouched

    @property
    def approved(self) -> bool:
        return self.approved_by is not None


@dataclass(slots=True)
class RedactedText:
    """Result of redacting a text."""
    text: str                                              # redacted text
    matches: list[CprMatch] = field(default_factory=list)
    replacements: dict[str, str] = field(default_factory=dict)  # literal → placeholder
