# article_analyzer/services/bias_scan/annotator.py
"""
Bias Annotator: runs the enabled lexicons over a text and builds the report.

Three phases, each a separate function:
1. Candidate generation per lexicon (matcher)
2. Cross-lexicon overlap resolution (resolver)
3. Aggregation into per-detector reports (report builder)

Lexicons and compiled patterns are read-only after construction, so one
annotator can serve concurrent scans without locking.
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional, Union

from article_analyzer.lexicon import DetectorGroup, LexiconSet, get_default_lexicons
from article_analyzer.logging_config import log_scan
from .matcher import LexiconMatcher
from .report import build_report
from .resolver import resolve_overlaps
from .types import BiasReport, Match, validate_text

logger = logging.getLogger(__name__)

DetectorSpec = Union[DetectorGroup, str]


class BiasAnnotator:
    """
    Lexical bias annotator.

    Usage:
        annotator = BiasAnnotator()
        report = annotator.annotate(text, {DetectorGroup.SUBJECTIVE_INTENSIFIERS})
        report.to_dict()
    """

    def __init__(self, lexicons: Optional[LexiconSet] = None):
        """
        Args:
            lexicons: Lexicons to load. If None, uses the default lexicons.
        """
        self.lexicons = lexicons if lexicons is not None else get_default_lexicons()
        self._matchers: dict[DetectorGroup, LexiconMatcher] = {
            lexicon.group: LexiconMatcher(lexicon) for lexicon in self.lexicons
        }

    @property
    def detectors(self) -> tuple[DetectorGroup, ...]:
        """Loaded detectors in declaration order."""
        return self.lexicons.groups

    def resolve_detectors(
        self,
        detectors: Optional[Union[DetectorSpec, Iterable[DetectorSpec]]] = None,
    ) -> tuple[DetectorGroup, ...]:
        """
        Normalize a requested detector set.

        None selects every loaded detector. Names that are unknown or not
        loaded are ignored. The result is always in declaration order, so
        the order a caller lists detectors in never changes the report.
        """
        if detectors is None:
            return self.detectors
        if isinstance(detectors, str):
            detectors = [detectors]

        requested: set[DetectorGroup] = set()
        for name in detectors:
            group = DetectorGroup.from_name(name)
            if group is None or group not in self._matchers:
                logger.debug(f"Ignoring unknown detector: {name!r}")
                continue
            requested.add(group)

        return tuple(group for group in self.detectors if group in requested)

    def candidates(
        self,
        text: str,
        detectors: Optional[Union[DetectorSpec, Iterable[DetectorSpec]]] = None,
    ) -> list[Match]:
        """Pooled candidate matches before overlap resolution."""
        validate_text(text)
        return self._collect(text, self.resolve_detectors(detectors))

    def _collect(self, text: str, groups: tuple[DetectorGroup, ...]) -> list[Match]:
        pool: list[Match] = []
        for group in groups:
            pool.extend(self._matchers[group].find(text))
        return pool

    def annotate(
        self,
        text: str,
        detectors: Optional[Union[DetectorSpec, Iterable[DetectorSpec]]] = None,
    ) -> BiasReport:
        """
        Scan text with the requested detectors.

        Args:
            text: The full document to scan
            detectors: Detectors to run. None runs all; an empty set runs none.

        Returns:
            BiasReport with one group report per active detector

        Raises:
            InvalidInputError: if text is None or not a string
        """
        validate_text(text)
        groups = self.resolve_detectors(detectors)

        with log_scan(groups, len(text)) as metrics:
            pool = self._collect(text, groups)
            retained = resolve_overlaps(pool)
            report = build_report(retained, groups, len(text))
            metrics["candidates"] = len(pool)
            metrics["retained"] = len(retained)

        return report


@lru_cache(maxsize=1)
def get_bias_annotator() -> BiasAnnotator:
    """Get or create the singleton annotator over the default lexicons."""
    return BiasAnnotator()


def annotate_text(
    text: str,
    detectors: Optional[Union[DetectorSpec, Iterable[DetectorSpec]]] = None,
) -> BiasReport:
    """Quick scan of text using the shared annotator."""
    return get_bias_annotator().annotate(text, detectors)
