# article_analyzer/services/bias_scan/__init__.py
"""
Lexical bias scanning.

Finds subjective intensifiers and factive verbs in article text and reports
non-overlapping, position-accurate matches.

Usage:
    from article_analyzer.services.bias_scan import BiasAnnotator, DetectorGroup

    annotator = BiasAnnotator()
    report = annotator.annotate(
        "The study clearly revealed an unprecedented shift.",
        detectors={DetectorGroup.SUBJECTIVE_INTENSIFIERS, DetectorGroup.FACTIVE_VERBS},
    )
    report.to_dict()

    # Render highlights for display
    html = build_highlighted_html(text, report)
"""

from article_analyzer.lexicon import Category, DetectorGroup
from .annotator import BiasAnnotator, annotate_text, get_bias_annotator
from .highlight import build_highlighted_html
from .matcher import LexiconMatcher, compile_term, find_matches
from .report import build_report
from .resolver import resolve_overlaps
from .types import (
    BiasReport,
    FactiveReport,
    GroupReport,
    IntensifierReport,
    Match,
    validate_text,
)

__all__ = [
    # Types
    "BiasReport",
    "IntensifierReport",
    "FactiveReport",
    "GroupReport",
    "Match",
    "Category",
    "DetectorGroup",
    "validate_text",
    # Phases
    "LexiconMatcher",
    "compile_term",
    "find_matches",
    "resolve_overlaps",
    "build_report",
    # Annotator (main entry point)
    "BiasAnnotator",
    "get_bias_annotator",
    "annotate_text",
    # Rendering
    "build_highlighted_html",
]
