"""Presidio integration — CPR detection as a Presidio recognizer.

For hosts that already run a Presidio AnalyzerEngine: register the
recognizer and CPR numbers come back as DK_CPR results, filtered by the
same rule chain the Redactor uses.

    from presidio_analyzer import AnalyzerEngine
    from cpr_filter.presidio_layer import get_cpr_recognizers

    engine = AnalyzerEngine(supported_languages=["da"])
    for recognizer in get_cpr_recognizers():
        engine.registry.add_recognizer(recognizer)
"""

from __future__ import annotations
import re

from presidio_analyzer import Pattern, PatternRecognizer

from .patterns import CPR_REGEX
from .types import CprCandidate, FilterConfig
from .validation import approve, build_rules

ENTITY_TYPE = "DK_CPR"


class CprRecognizer(PatternRecognizer):
    """Recognize Danish CPR numbers.

    Matches are scored MAX when a rule approves them and dropped
    otherwise, so Presidio never reports an unvalidated candidate.
    """

    PATTERNS = [
        Pattern("CPR", CPR_REGEX, 0.5),
    ]

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        supported_language: str = "da",
    ) -> None:
        self._rules = build_rules(config or FilterConfig())
        super().__init__(
            supported_entity=ENTITY_TYPE,
            patterns=self.PATTERNS,
            name="CprRecognizer",
            supported_language=supported_language,
            context=["cpr", "cpr-nr", "cprnr", "personnummer"],
            global_regex_flags=re.ASCII,
        )

    def validate_result(self, pattern_text: str) -> bool:
        candidate = CprCandidate(text=pattern_text, start=0, end=len(pattern_text))
        return approve(candidate, self._rules) is not None


def get_cpr_recognizers(
    config: FilterConfig | None = None,
    languages: tuple[str, ...] = ("da", "en"),
) -> list[PatternRecognizer]:
    """Return one CPR recognizer per language for registration with Presidio."""
    return [CprRecognizer(config, supported_language=lang) for lang in languages]
