# article_analyzer/services/bias_scan/types.py
"""
Data types for the bias scanning engine.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Mapping, Optional, Union

from article_analyzer.exceptions import InvalidInputError
from article_analyzer.lexicon import Category, DetectorGroup


def validate_text(text: object) -> str:
    """Fail fast on text that is not a string. Empty strings are valid."""
    if text is None:
        raise InvalidInputError("Text to scan is required, got None")
    if not isinstance(text, str):
        raise InvalidInputError(f"Text to scan must be a string, got {type(text).__name__}")
    return text


@dataclass(frozen=True)
class Match:
    """
    A single located occurrence of a lexicon term.

    Attributes:
        term: The lexicon entry that matched (normalized)
        category: Category of the term (e.g., high, factive)
        group: Detector the term belongs to
        start: Character start position in the scanned text
        end: Character end position (exclusive)
        surface: The exact text matched, text[start:end]
    """

    term: str
    category: Category
    group: DetectorGroup
    start: int
    end: int
    surface: str

    def overlaps(self, other: "Match") -> bool:
        """True if the two [start, end) ranges share any character."""
        return self.start < other.end and other.start < self.end

    def to_dict(self, include_intensity: bool = False) -> dict:
        data = {
            "term": self.surface,
            "position": self.start,
            "end": self.end,
            "lexiconTerm": self.term,
        }
        if include_intensity:
            data["intensity"] = self.category.value
        return data


def _by_position(matches) -> tuple[Match, ...]:
    return tuple(sorted(matches, key=lambda m: m.start))


@dataclass(frozen=True)
class IntensifierReport:
    """Subjective intensifiers found in a scan, split by intensity."""

    group: ClassVar[DetectorGroup] = DetectorGroup.SUBJECTIVE_INTENSIFIERS

    high: tuple[Match, ...] = ()
    medium: tuple[Match, ...] = ()
    low: tuple[Match, ...] = ()

    @property
    def count_high(self) -> int:
        return len(self.high)

    @property
    def count_medium(self) -> int:
        return len(self.medium)

    @property
    def count_low(self) -> int:
        return len(self.low)

    @property
    def total(self) -> int:
        return self.count_high + self.count_medium + self.count_low

    @property
    def matches(self) -> tuple[Match, ...]:
        return _by_position(self.high + self.medium + self.low)

    def to_dict(self) -> dict:
        return {
            "high": [m.to_dict(include_intensity=True) for m in self.high],
            "medium": [m.to_dict(include_intensity=True) for m in self.medium],
            "low": [m.to_dict(include_intensity=True) for m in self.low],
            "countHigh": self.count_high,
            "countMedium": self.count_medium,
            "countLow": self.count_low,
            "total": self.total,
        }


@dataclass(frozen=True)
class FactiveReport:
    """Factive verbs found in a scan."""

    group: ClassVar[DetectorGroup] = DetectorGroup.FACTIVE_VERBS

    instances: tuple[Match, ...] = ()

    @property
    def count(self) -> int:
        return len(self.instances)

    @property
    def total(self) -> int:
        return self.count

    @property
    def matches(self) -> tuple[Match, ...]:
        return self.instances

    def to_dict(self) -> dict:
        return {
            "instances": [m.to_dict() for m in self.instances],
            "count": self.count,
        }


GroupReport = Union[IntensifierReport, FactiveReport]


@dataclass(frozen=True)
class BiasReport:
    """
    Result of one scan: one group report per active detector.

    Detectors that were not enabled are absent from `groups`, so consumers
    can dispatch on which group reports are present.

    Attributes:
        groups: Detector -> its report, in lexicon declaration order
        text_length: Length of the scanned text
    """

    groups: Mapping[DetectorGroup, GroupReport] = field(default_factory=dict)
    text_length: int = 0

    def __post_init__(self):
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))

    def get(self, group: DetectorGroup) -> Optional[GroupReport]:
        return self.groups.get(group)

    @property
    def intensifiers(self) -> Optional[IntensifierReport]:
        return self.groups.get(DetectorGroup.SUBJECTIVE_INTENSIFIERS)

    @property
    def factives(self) -> Optional[FactiveReport]:
        return self.groups.get(DetectorGroup.FACTIVE_VERBS)

    @property
    def total(self) -> int:
        """Retained matches across all active detectors."""
        return sum(report.total for report in self.groups.values())

    @property
    def matches(self) -> tuple[Match, ...]:
        """All retained matches, ordered by position."""
        return _by_position(m for report in self.groups.values() for m in report.matches)

    def to_dict(self) -> dict:
        data = {group.value: report.to_dict() for group, report in self.groups.items()}
        data["total"] = self.total
        return data
