"""
Pytest configuration and fixtures.
"""

import os

import pytest

# Set test environment
os.environ.setdefault("ENVIRONMENT", "test")

from article_analyzer.lexicon import Category, DetectorGroup, Lexicon, LexiconSet
from article_analyzer.services.bias_scan import BiasAnnotator, Match


@pytest.fixture
def annotator():
    """Annotator over the default lexicons."""
    return BiasAnnotator()


@pytest.fixture
def overlapping_lexicons():
    """Intensifier phrase that contains a factive verb."""
    return LexiconSet(
        lexicons=(
            Lexicon(DetectorGroup.SUBJECTIVE_INTENSIFIERS, {Category.MEDIUM: ("clearly revealed", "proven")}),
            Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed", "proven")}),
        )
    )


@pytest.fixture
def make_match():
    """Factory for Matches with a placeholder surface of the right length."""

    def _make(start, end, term="term", category=Category.MEDIUM, group=DetectorGroup.SUBJECTIVE_INTENSIFIERS):
        return Match(
            term=term,
            category=category,
            group=group,
            start=start,
            end=end,
            surface="x" * (end - start),
        )

    return _make
