"""Tests for the four coherence sub-score calculators."""

from reftruth.probes.models import CounterItem, EvidenceItem
from reftruth.scoring.coherence import (
    score_contradiction,
    score_identity,
    score_logic,
    score_time,
)


def _evidence(*texts: str) -> list[EvidenceItem]:
    return [EvidenceItem(text=t) for t in texts]


def _counters(*texts: str) -> list[CounterItem]:
    return [CounterItem(text=t) for t in texts]


class TestContradictionScore:
    """Tests for evidence vs counters."""

    def test_three_evidence_one_counter(self):
        assert score_contradiction(_evidence("a", "b", "c"), _counters("x")) == 75

    def test_no_material_is_weak(self):
        """Silence either way scores 40, not 50."""
        assert score_contradiction([], []) == 40

    def test_blank_items_ignored(self):
        assert score_contradiction(_evidence("  ", ""), _counters("\t")) == 40
        assert score_contradiction(_evidence("a", " "), _counters(" ")) == 100

    def test_balanced(self):
        assert score_contradiction(_evidence("a"), _counters("x")) == 50

    def test_counters_only(self):
        assert score_contradiction([], _counters("x", "y")) == 0

    def test_rounds_half_up(self):
        """1 of 8 is 12.5%, which rounds to 13."""
        counters = _counters(*"abcdefg")
        assert score_contradiction(_evidence("a"), counters) == 13

    def test_rounds_to_nearest(self):
        assert score_contradiction(_evidence("a"), _counters("x", "y")) == 33
        assert score_contradiction(_evidence("a", "b"), _counters("x")) == 67


class TestTimeScore:
    """Tests for dating precision."""

    def test_month_and_year_without_relative(self):
        assert score_time(["march", "2024"], "Happened in March 2024", "Claim") == 80

    def test_relative_only_penalized(self):
        assert score_time(["yesterday"], "", "It rained yesterday") == 45

    def test_relative_with_year_is_neutral(self):
        assert score_time(["last year", "2023"], "since 2023", "last year") == 70

    def test_no_references(self):
        assert score_time([], "", "Sales grew") == 70

    def test_year_read_from_text_not_refs(self):
        """A year in the context counts even if absent from the refs."""
        assert score_time([], "Since 2020", "Sales grew") == 80

    def test_year_in_other_text_ignored(self):
        """Only context and claim are searched for years."""
        assert score_time(["recently"], "", "Sales grew recently") == 45


class TestIdentityScore:
    """Tests for subject clarity."""

    def test_blank_subject_with_pronoun(self):
        assert score_identity("", "They always win") == 45

    def test_named_subject_clean_claim(self):
        assert score_identity("Ana", "Sales grew") == 85

    def test_whitespace_subject_is_blank(self):
        assert score_identity("   ", "Sales grew") == 55

    def test_pronoun_penalty_capped(self):
        assert score_identity("Team", "they they they they they") == 55

    def test_several_pronouns(self):
        assert score_identity("", "We think people say they care") == 25


class TestLogicScore:
    """Tests for absolutes and assumption load."""

    def test_absolutes_and_assumptions(self):
        assert score_logic("Everyone always fails", ["a", "b", "c", "d"]) == 44

    def test_blank_assumptions_not_counted(self):
        assert score_logic("Sales grew", ["a", "", "  ", "b", "c"]) == 82

    def test_two_assumptions_free(self):
        assert score_logic("Sales grew", ["a", "b"]) == 90

    def test_clamped_at_zero(self):
        claim = "always never everyone no one all none"
        assert score_logic(claim, ["a", "b", "c"]) == 0
