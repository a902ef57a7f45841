"""
Tests for the bias lexicons.
"""

import dataclasses

import pytest

from article_analyzer.exceptions import LexiconError
from article_analyzer.lexicon import (
    FACTIVE_VERBS,
    SUBJECTIVE_INTENSIFIERS,
    Category,
    DetectorGroup,
    Lexicon,
    LexiconSet,
    get_default_lexicons,
    normalize_term,
)


class TestDetectorGroup:
    """Tests for detector name resolution."""

    def test_values_are_report_keys(self):
        assert DetectorGroup.SUBJECTIVE_INTENSIFIERS.value == "subjectiveIntensifiers"
        assert DetectorGroup.FACTIVE_VERBS.value == "factiveVerbs"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("subjectiveIntensifiers", DetectorGroup.SUBJECTIVE_INTENSIFIERS),
            ("intensifiers", DetectorGroup.SUBJECTIVE_INTENSIFIERS),
            ("Factives", DetectorGroup.FACTIVE_VERBS),
            ("factive_verbs", DetectorGroup.FACTIVE_VERBS),
            (DetectorGroup.FACTIVE_VERBS, DetectorGroup.FACTIVE_VERBS),
        ],
    )
    def test_from_name_known(self, name, expected):
        assert DetectorGroup.from_name(name) is expected

    @pytest.mark.parametrize("name", ["hedges", "", None, 3])
    def test_from_name_unknown_returns_none(self, name):
        assert DetectorGroup.from_name(name) is None


class TestNormalizeTerm:
    """Tests for term normalization."""

    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_term("  Most \t Important ") == "most important"

    @pytest.mark.parametrize("term", ["", "   ", "\n"])
    def test_empty_term_rejected(self, term):
        with pytest.raises(LexiconError):
            normalize_term(term)

    def test_non_string_rejected(self):
        with pytest.raises(LexiconError):
            normalize_term(42)


class TestLexicon:
    """Tests for Lexicon construction and validation."""

    def test_terms_are_normalized_and_deduplicated(self):
        lexicon = Lexicon(
            DetectorGroup.SUBJECTIVE_INTENSIFIERS,
            {Category.HIGH: ("Absolutely", "absolutely", "Beyond  Any doubt")},
        )
        assert lexicon.terms(Category.HIGH) == ("absolutely", "beyond any doubt")

    def test_accepts_string_keys(self):
        lexicon = Lexicon("factiveVerbs", {"factive": ("revealed",)})
        assert lexicon.group is DetectorGroup.FACTIVE_VERBS
        assert lexicon.terms(Category.FACTIVE) == ("revealed",)

    def test_iteration_preserves_declaration_order(self):
        lexicon = Lexicon(
            DetectorGroup.SUBJECTIVE_INTENSIFIERS,
            {Category.LOW: ("quite",), Category.HIGH: ("utterly", "totally")},
        )
        assert list(lexicon) == [
            (Category.LOW, "quite"),
            (Category.HIGH, "utterly"),
            (Category.HIGH, "totally"),
        ]

    def test_category_not_allowed_for_group(self):
        with pytest.raises(LexiconError, match="not valid"):
            Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.HIGH: ("revealed",)})

    def test_unknown_category(self):
        with pytest.raises(LexiconError, match="Unknown category"):
            Lexicon(DetectorGroup.FACTIVE_VERBS, {"extreme": ("revealed",)})

    def test_unknown_group(self):
        with pytest.raises(LexiconError, match="Unknown detector"):
            Lexicon("hedges", {Category.FACTIVE: ("revealed",)})

    def test_string_instead_of_sequence(self):
        with pytest.raises(LexiconError, match="sequence"):
            Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: "revealed"})

    def test_empty_term_in_lexicon(self):
        with pytest.raises(LexiconError):
            Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed", " ")})

    def test_empty_lexicon_allowed(self):
        lexicon = Lexicon(DetectorGroup.FACTIVE_VERBS, {})
        assert lexicon.term_count == 0
        assert list(lexicon) == []

    def test_immutable(self):
        lexicon = Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed",)})
        with pytest.raises(TypeError):
            lexicon.categories[Category.FACTIVE] = ("knew",)
        with pytest.raises(dataclasses.FrozenInstanceError):
            lexicon.group = DetectorGroup.SUBJECTIVE_INTENSIFIERS

    def test_to_dict(self):
        lexicon = Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed", "knew")})
        assert lexicon.to_dict() == {"factive": ["revealed", "knew"]}


class TestLexiconSet:
    """Tests for LexiconSet."""

    def test_duplicate_group_rejected(self):
        lexicon = Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed",)})
        with pytest.raises(LexiconError, match="Duplicate"):
            LexiconSet(lexicons=(lexicon, lexicon))

    def test_non_lexicon_rejected(self):
        with pytest.raises(LexiconError):
            LexiconSet(lexicons=({"factive": ["revealed"]},))

    def test_lookup(self):
        lexicon = Lexicon(DetectorGroup.FACTIVE_VERBS, {Category.FACTIVE: ("revealed",)})
        lexicons = LexiconSet(lexicons=[lexicon])
        assert lexicons.get(DetectorGroup.FACTIVE_VERBS) is lexicon
        assert lexicons.get(DetectorGroup.SUBJECTIVE_INTENSIFIERS) is None
        assert DetectorGroup.FACTIVE_VERBS in lexicons
        assert DetectorGroup.SUBJECTIVE_INTENSIFIERS not in lexicons
        assert len(lexicons) == 1


class TestDefaultLexicons:
    """Tests for the shipped term tables."""

    def test_singleton(self):
        assert get_default_lexicons() is get_default_lexicons()

    def test_declaration_order(self):
        assert get_default_lexicons().groups == (
            DetectorGroup.SUBJECTIVE_INTENSIFIERS,
            DetectorGroup.FACTIVE_VERBS,
        )

    def test_intensifier_levels(self):
        lexicon = get_default_lexicons().get(DetectorGroup.SUBJECTIVE_INTENSIFIERS)
        assert tuple(lexicon.categories) == (Category.HIGH, Category.MEDIUM, Category.LOW)
        assert "absolutely" in lexicon.terms(Category.HIGH)
        assert "devastatingly" in lexicon.terms(Category.HIGH)
        assert "unprecedented" in lexicon.terms(Category.HIGH)
        assert "clearly" in lexicon.terms(Category.MEDIUM)
        assert "somewhat" in lexicon.terms(Category.LOW)

    def test_devastating_is_not_a_term(self):
        lexicon = get_default_lexicons().get(DetectorGroup.SUBJECTIVE_INTENSIFIERS)
        assert all(term != "devastating" for _, term in lexicon)

    def test_factive_verbs(self):
        lexicon = get_default_lexicons().get(DetectorGroup.FACTIVE_VERBS)
        assert "revealed" in lexicon.terms(Category.FACTIVE)
        assert "discovered" in lexicon.terms(Category.FACTIVE)

    def test_tables_have_no_duplicates(self):
        for table in (SUBJECTIVE_INTENSIFIERS, FACTIVE_VERBS):
            terms = [term for category_terms in table.values() for term in category_terms]
            assert len(terms) == len(set(terms))

    def test_phrases_declared_before_their_leading_word(self):
        """A phrase must precede a term equal to its first word so it wins same-start ties."""
        for lexicon in get_default_lexicons():
            order = {term: i for i, (_, term) in enumerate(lexicon)}
            for term, index in order.items():
                first_word = term.split()[0]
                if " " in term and first_word in order:
                    assert index < order[first_word], f"'{term}' should be declared before '{first_word}'"
