# article_analyzer/lexicon.py
"""
Bias Lexicons (v1)

Static term tables for the lexical bias detectors. This is the single source
of truth for which words and phrases are flagged.

Detector groups:
    subjectiveIntensifiers - words that amplify a claim, graded high/medium/low
    factiveVerbs           - verbs that presuppose the truth of their complement

Terms are literal, case-insensitive words or phrases. Declaration order is
significant: when two matches start at the same character, the one whose
lexicon, category and term were declared first is kept.

Based on Recasens et al. (2013) framing/epistemological bias markers and
LIWC intensity categories.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from article_analyzer.exceptions import LexiconError

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class DetectorGroup(str, Enum):
    """Detectors a caller can enable. Values are the report keys."""

    SUBJECTIVE_INTENSIFIERS = "subjectiveIntensifiers"
    FACTIVE_VERBS = "factiveVerbs"

    @classmethod
    def from_name(cls, name: str) -> Optional["DetectorGroup"]:
        """Resolve a detector name or alias. Returns None for unknown names."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip()
        try:
            return cls(key)
        except ValueError:
            return DETECTOR_ALIASES.get(key.lower())


class Category(str, Enum):
    """Classification bucket a term belongs to."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    FACTIVE = "factive"


DETECTOR_ALIASES = {
    "intensifiers": DetectorGroup.SUBJECTIVE_INTENSIFIERS,
    "subjective_intensifiers": DetectorGroup.SUBJECTIVE_INTENSIFIERS,
    "factives": DetectorGroup.FACTIVE_VERBS,
    "factive_verbs": DetectorGroup.FACTIVE_VERBS,
}

# Categories each group may declare, in report order
GROUP_CATEGORIES = {
    DetectorGroup.SUBJECTIVE_INTENSIFIERS: (Category.HIGH, Category.MEDIUM, Category.LOW),
    DetectorGroup.FACTIVE_VERBS: (Category.FACTIVE,),
}


def normalize_term(term: str) -> str:
    """Lowercase a term and collapse its internal whitespace to single spaces."""
    if not isinstance(term, str):
        raise LexiconError(f"Lexicon terms must be strings, got {type(term).__name__}")
    normalized = " ".join(term.split()).lower()
    if not normalized:
        raise LexiconError("Lexicon contains an empty term")
    return normalized


# -----------------------------------------------------------------------------
# Lexicon containers
# -----------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Lexicon:
    """
    All terms for one detector, grouped by category.

    Attributes:
        group: Detector this lexicon belongs to
        categories: Category -> ordered tuple of normalized terms
    """

    group: DetectorGroup
    categories: Mapping[Category, tuple[str, ...]]

    def __post_init__(self):
        try:
            group = DetectorGroup(self.group)
        except ValueError:
            raise LexiconError(f"Unknown detector group: {self.group!r}") from None

        allowed = GROUP_CATEGORIES[group]
        frozen: dict[Category, tuple[str, ...]] = {}
        for raw_category, terms in self.categories.items():
            try:
                category = Category(raw_category)
            except ValueError:
                raise LexiconError(f"Unknown category: {raw_category!r}") from None
            if category not in allowed:
                raise LexiconError(f"Category '{category.value}' is not valid for detector '{group.value}'")
            if isinstance(terms, str):
                raise LexiconError(f"Terms for '{category.value}' must be a sequence of strings, not a string")
            # dict.fromkeys drops duplicates but keeps first-declared order
            frozen[category] = tuple(dict.fromkeys(normalize_term(t) for t in terms))

        object.__setattr__(self, "group", group)
        object.__setattr__(self, "categories", MappingProxyType(frozen))

    def __iter__(self) -> Iterator[tuple[Category, str]]:
        """Yield (category, term) pairs in declaration order."""
        for category, terms in self.categories.items():
            for term in terms:
                yield category, term

    def terms(self, category: Category) -> tuple[str, ...]:
        """Terms declared for a category (empty if none)."""
        return self.categories.get(Category(category), ())

    @property
    def term_count(self) -> int:
        return sum(len(terms) for terms in self.categories.values())

    def to_dict(self) -> dict[str, list[str]]:
        return {category.value: list(terms) for category, terms in self.categories.items()}


@dataclass(frozen=True, eq=False)
class LexiconSet:
    """Ordered, read-only collection of lexicons, at most one per detector."""

    lexicons: tuple[Lexicon, ...]

    def __post_init__(self):
        lexicons = tuple(self.lexicons)
        seen: set[DetectorGroup] = set()
        for lexicon in lexicons:
            if not isinstance(lexicon, Lexicon):
                raise LexiconError(f"Expected Lexicon, got {type(lexicon).__name__}")
            if lexicon.group in seen:
                raise LexiconError(f"Duplicate lexicon for detector '{lexicon.group.value}'")
            seen.add(lexicon.group)
        object.__setattr__(self, "lexicons", lexicons)

    def __iter__(self) -> Iterator[Lexicon]:
        return iter(self.lexicons)

    def __len__(self) -> int:
        return len(self.lexicons)

    def __contains__(self, group: object) -> bool:
        return any(lexicon.group == group for lexicon in self.lexicons)

    def get(self, group: DetectorGroup) -> Optional[Lexicon]:
        for lexicon in self.lexicons:
            if lexicon.group == group:
                return lexicon
        return None

    @property
    def groups(self) -> tuple[DetectorGroup, ...]:
        return tuple(lexicon.group for lexicon in self.lexicons)

    def to_dict(self) -> dict[str, dict[str, list[str]]]:
        return {lexicon.group.value: lexicon.to_dict() for lexicon in self.lexicons}


# -----------------------------------------------------------------------------
# Term tables
# -----------------------------------------------------------------------------

# Phrases precede the single words they contain so they win same-start ties.
SUBJECTIVE_INTENSIFIERS = {
    Category.HIGH: (
        "highly significant",
        "without a doubt",
        "beyond any doubt",
        "of all time",
        "absolutely",
        "completely",
        "totally",
        "utterly",
        "entirely",
        "extremely",
        "incredibly",
        "unbelievably",
        "amazingly",
        "exceptionally",
        "extraordinarily",
        "phenomenally",
        "overwhelmingly",
        "staggeringly",
        "devastatingly",
        "shockingly",
        "outrageously",
        "horrifically",
        "massively",
        "hugely",
        "vastly",
        "unprecedented",
        "catastrophic",
        "disastrous",
        "horrific",
        "outrageous",
        "staggering",
    ),
    Category.MEDIUM: (
        "most important",
        "by far",
        "of course",
        "clearly",
        "obviously",
        "highly",
        "deeply",
        "remarkably",
        "strongly",
        "truly",
        "really",
        "seriously",
        "significantly",
        "significant",
        "substantially",
        "dramatically",
        "undoubtedly",
        "certainly",
        "definitely",
        "particularly",
        "especially",
        "very",
    ),
    Category.LOW: (
        "pretty much",
        "a bit",
        "kind of",
        "sort of",
        "quite",
        "rather",
        "fairly",
        "somewhat",
        "slightly",
        "relatively",
        "largely",
        "mostly",
        "arguably",
        "notably",
    ),
}

FACTIVE_VERBS = {
    Category.FACTIVE: (
        "found out",
        "made clear",
        "pointed out",
        "revealed",
        "reveals",
        "uncovered",
        "uncovers",
        "exposed",
        "exposes",
        "discovered",
        "discovers",
        "confirmed",
        "confirms",
        "proved",
        "proves",
        "proven",
        "demonstrated",
        "demonstrates",
        "showed",
        "established",
        "acknowledged",
        "acknowledges",
        "admitted",
        "admits",
        "conceded",
        "concedes",
        "realized",
        "realizes",
        "recognized",
        "recognizes",
        "learned",
        "noticed",
        "knew",
        "regrets",
        "regretted",
        "found",
    ),
}


@lru_cache(maxsize=1)
def get_default_lexicons() -> LexiconSet:
    """Get the process-wide default lexicons (intensifiers, then factives)."""
    return LexiconSet(
        lexicons=(
            Lexicon(DetectorGroup.SUBJECTIVE_INTENSIFIERS, SUBJECTIVE_INTENSIFIERS),
            Lexicon(DetectorGroup.FACTIVE_VERBS, FACTIVE_VERBS),
        )
    )
