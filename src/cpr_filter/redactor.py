"""Redactor — the main API.  Match, validate, then replace by literal text.

Usage:
    from cpr_filter import Redactor, FilterConfig

    redactor = Redactor()        # reusable, thread-safe
    result = redactor.redact("CPR: 070761-4285")
    print(result.text)           # "CPR: XXXXXX-XXXX"

    # or, when only the text is needed
    from cpr_filter import redact
    redact("070761 4285", FilterConfig(placeholder="[CPR]"))
"""

from __future__ import annotations
import logging
import re

from .patterns import find_candidates
from .types import CprMatch, FilterConfig, RedactedText
from .validation import approve, build_rules

logger = logging.getLogger(__name__)


class Redactor:
    """CPR-number redactor.

    Every candidate found by the pattern is run through the rule chain
    (replace_all_dash → modulus11 → date).  Approved literals are then
    replaced everywhere they occur in the text, not just at the offset
    where they were found.
    """

    def __init__(self, config: FilterConfig | None = None) -> None:
        self.config = config or FilterConfig()
        self._rules = build_rules(self.config)

    def redact(self, text: str) -> RedactedText:
        """Redact CPR numbers from text.

        Returns a RedactedText with the sanitized text and metadata about
        every candidate that was considered.
        """
        matches: list[CprMatch] = []
        verdicts: dict[str, str | None] = {}

        for candidate in find_candidates(text):
            # Identical literals share one verdict
            if candidate.text not in verdicts:
                verdicts[candidate.text] = approve(candidate, self._rules)
            matches.append(CprMatch(candidate=candidate, approved_by=verdicts[candidate.text]))

        replacements = {
            literal: self.config.placeholder
            for literal, rule in verdicts.items()
            if rule is not None
        }
        logger.debug(
            "cpr filter: %d candidates, %d distinct replaced",
            len(matches), len(replacements),
        )
        if not replacements:
            return RedactedText(text=text, matches=matches)

        return RedactedText(
            text=_replace_literals(text, replacements),
            matches=matches,
            replacements=replacements,
        )

    def redact_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Redact CPR numbers from a list of chat-style message dicts.

        Returns new message dicts with content redacted.  Does NOT
        mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.redact(content).text})
            else:
                out.append(msg)
        return out


def redact(text: str, config: FilterConfig | None = None) -> str:
    """Redact CPR numbers from text and return only the new text."""
    return Redactor(config).redact(text).text


def _replace_literals(text: str, replacements: dict[str, str]) -> str:
    """Replace every occurrence of each key in a single pass."""
    # Longest first so a key never loses to one of its own prefixes
    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(k) for k in keys))
    return pattern.sub(lambda m: replacements[m.group()], text)
