# article_analyzer/services/bias_scan/report.py
"""
Report Builder: group retained matches into per-detector reports.
"""

from typing import Iterable

from article_analyzer.exceptions import BiasScanError
from article_analyzer.lexicon import Category, DetectorGroup
from .types import BiasReport, FactiveReport, GroupReport, IntensifierReport, Match


def _build_intensifier_report(matches: list[Match]) -> IntensifierReport:
    by_category: dict[Category, list[Match]] = {Category.HIGH: [], Category.MEDIUM: [], Category.LOW: []}
    for match in matches:
        by_category[match.category].append(match)
    return IntensifierReport(
        high=tuple(by_category[Category.HIGH]),
        medium=tuple(by_category[Category.MEDIUM]),
        low=tuple(by_category[Category.LOW]),
    )


def _build_factive_report(matches: list[Match]) -> FactiveReport:
    return FactiveReport(instances=tuple(matches))


_GROUP_BUILDERS = {
    DetectorGroup.SUBJECTIVE_INTENSIFIERS: _build_intensifier_report,
    DetectorGroup.FACTIVE_VERBS: _build_factive_report,
}


def build_report(
    retained: Iterable[Match],
    groups: Iterable[DetectorGroup],
    text_length: int,
) -> BiasReport:
    """
    Aggregate retained matches into a BiasReport.

    Args:
        retained: Non-overlapping matches from the resolver
        groups: Active detectors; each gets a report even with zero matches
        text_length: Length of the scanned text

    Returns:
        BiasReport with groups in the given order

    Raises:
        BiasScanError: if a match belongs to a detector that is not active
    """
    active = list(dict.fromkeys(DetectorGroup(g) for g in groups))
    buckets: dict[DetectorGroup, list[Match]] = {group: [] for group in active}

    for match in sorted(retained, key=lambda m: m.start):
        if match.group not in buckets:
            raise BiasScanError(f"Match '{match.surface}' belongs to inactive detector '{match.group.value}'")
        buckets[match.group].append(match)

    reports: dict[DetectorGroup, GroupReport] = {
        group: _GROUP_BUILDERS[group](buckets[group]) for group in active
    }
    return BiasReport(groups=reports, text_length=text_length)
