# article_analyzer/services/bias_scan/matcher.py
"""
Lexicon Matcher: candidate generation for one lexicon.

Every term is compiled once into a case-insensitive regex:
- Term edges must not touch a word character, so "believable" never
  matches inside "unbelievable". Phrase edges are checked the same way.
- Words of a phrase may be separated by any run of whitespace
  ("most\\n  important" matches "most important").

The text is treated as opaque character data; markup and control characters
are never interpreted.
"""

import re

from article_analyzer.lexicon import Category, Lexicon
from .types import Match, validate_text


def compile_term(term: str) -> re.Pattern:
    """Build the case-insensitive, boundary-checked pattern for a term."""
    words = term.split()
    body = r"\s+".join(re.escape(word) for word in words)
    return re.compile(rf"(?<!\w){body}(?!\w)", re.IGNORECASE)


class LexiconMatcher:
    """
    Finds every occurrence of every term in one lexicon.

    Overlaps between different terms are kept; resolving them is the
    resolver's job.
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon
        self._compiled: list[tuple[Category, str, re.Pattern]] = [
            (category, term, compile_term(term)) for category, term in lexicon
        ]

    def find(self, text: str) -> list[Match]:
        """
        Scan text for all terms.

        Args:
            text: The text to scan

        Returns:
            Candidate matches ordered by category, then term declaration
            order, then position. Each term contributes its non-overlapping
            occurrences left to right.
        """
        validate_text(text)
        if not text:
            return []

        group = self.lexicon.group
        candidates: list[Match] = []
        for category, term, pattern in self._compiled:
            for found in pattern.finditer(text):
                candidates.append(
                    Match(
                        term=term,
                        category=category,
                        group=group,
                        start=found.start(),
                        end=found.end(),
                        surface=found.group(),
                    )
                )
        return candidates

    @property
    def pattern_count(self) -> int:
        return len(self._compiled)

    def get_pattern(self, term: str) -> str | None:
        """Regex source for a term, or None if the term is not in the lexicon."""
        for _, candidate, pattern in self._compiled:
            if candidate == term:
                return pattern.pattern
        return None


def find_matches(text: str, lexicon: Lexicon) -> list[Match]:
    """Candidate matches of one lexicon in text."""
    return LexiconMatcher(lexicon).find(text)
