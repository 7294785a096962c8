"""Tests for the evaluate pipeline."""

from __future__ import annotations

from dataclasses import replace

import pytest

from reftruth.engine import evaluate
from reftruth.probes.models import (
    ClaimRecord,
    CounterItem,
    EvidenceItem,
    Resonance,
    Toggles,
)
from reftruth.scoring.rigor import ProbeStatus, RigorLevel
from reftruth.scoring.weights import DEFAULT_WEIGHTS, WeightProfile


@pytest.fixture
def burnout_record():
    """The worked example record."""
    return ClaimRecord(
        claim="People are burning out more than ever.",
        context=(
            "Observed in conversations and media; seems higher since 2023. "
            "Want to understand if it's broadly true or my bubble."
        ),
        subject="Jeremy (observer)",
        stakes=60,
        evidence=(EvidenceItem(text="3 friends recently reported burnout at work"),),
        counters=(CounterItem(text="Might be selection bias in my circle"),),
        assumptions=("My interactions are representative",),
        resonance=Resonance(clarity=65, tension=55, openness=70),
        toggles=Toggles(),
    )


class TestEvaluate:
    """End-to-end evaluation tests."""

    def test_worked_example(self, burnout_record):
        result = evaluate(burnout_record, DEFAULT_WEIGHTS)

        assert result.coherence.to_dict() == {
            "contradiction": 50,
            "time": 80,
            "identity": 75,
            "logic": 90,
        }
        assert result.contribs.base_before_resonance == 72
        assert result.contribs.resonance_nudge == -7
        assert result.depth == 65
        assert result.status is ProbeStatus.RESONANT
        assert result.rigor.level is RigorLevel.MEDIUM

    def test_worked_example_explanations(self, burnout_record):
        result = evaluate(burnout_record)

        assert result.why == (
            "Evidence vs counters: 1 vs 1 → contradiction score 50.",
            "Time grounding is acceptable (80).",
            'Identity clarity: subject "Jeremy (observer)" → score 75.',
        )
        assert result.notes == (
            "Collect stronger evidence or address counters more directly.",
        )

    def test_worked_example_audit(self, burnout_record):
        audit = evaluate(burnout_record).audit

        assert audit.to_dict() == {
            "evidenceCount": 1,
            "counterCount": 1,
            "assumptionCount": 1,
            "absolutes": [],
            "vaguePronouns": 1,
            "timeRefs": ["2023"],
            "hasExplicitMonth": False,
            "hasYear": True,
        }

    def test_idempotent(self, burnout_record):
        first = evaluate(burnout_record, DEFAULT_WEIGHTS)
        second = evaluate(burnout_record, DEFAULT_WEIGHTS)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_result_sequences_are_immutable(self, burnout_record):
        result = evaluate(burnout_record)

        assert isinstance(result.why, tuple)
        assert isinstance(result.notes, tuple)
        assert isinstance(result.audit.time_refs, tuple)
        assert isinstance(result.audit.absolutes, tuple)
        assert isinstance(result.rigor.guidance, tuple)
        assert isinstance(result.to_dict()["why"], list)

    def test_record_not_mutated(self, burnout_record):
        before = burnout_record.to_dict()
        evaluate(burnout_record)

        assert burnout_record.to_dict() == before

    def test_empty_record_is_total(self):
        result = evaluate(ClaimRecord.from_dict({}))

        assert 0 <= result.depth <= 100
        assert result.coherence.contradiction == 40
        assert result.why[2].startswith("Subject is vague.")

    def test_weights_change_result(self, burnout_record):
        logic_heavy = WeightProfile(contradiction=0, time=0, identity=0, logic=1)

        result = evaluate(
            replace(burnout_record, toggles=Toggles(resonance_forecaster=False)),
            logic_heavy,
        )

        assert result.contribs.logic == 90
        assert result.depth == 90

    def test_year_only_in_evidence_not_detected(self):
        record = ClaimRecord(
            claim="Prices rose",
            subject="Shop",
            evidence=(EvidenceItem(text="Receipt from 2021"),),
        )

        result = evaluate(record)

        assert result.audit.has_year is False
        assert result.coherence.time == 70

    def test_blank_assumptions_not_counted(self):
        record = ClaimRecord(claim="x", assumptions=("a", "", " ", "b", "c", "d"))

        result = evaluate(record)

        assert result.audit.assumption_count == 4
        assert result.contribs.assumption_penalty == 4
        assert result.why[-1].startswith("Too many assumptions (4).")

    def test_to_dict_shape(self, burnout_record):
        data = evaluate(burnout_record).to_dict()

        assert set(data) == {
            "depth",
            "coherence",
            "contribs",
            "notes",
            "why",
            "audit",
            "rigor",
            "status",
        }
        assert data["status"] == "⟁~"
        assert data["contribs"]["finalDepth"] == data["depth"]


class TestClaimRecordFromDict:
    """Tests for permissive record construction."""

    def test_defaults(self):
        record = ClaimRecord.from_dict({})

        assert record.stakes == 40
        assert record.resonance == Resonance(50, 50, 50)
        assert record.toggles == Toggles(True, True, True)

    def test_present_toggles_read_literally(self):
        record = ClaimRecord.from_dict({"toggles": {"depthIntegrityScan": True}})

        assert record.toggles == Toggles(
            resonance_forecaster=False, depth_integrity_scan=True, witness_mode=False
        )

    def test_malformed_fields(self):
        record = ClaimRecord.from_dict(
            {
                "claim": 12,
                "stakes": "high",
                "evidence": "not a list",
                "counters": [None, {"text": "c"}],
                "assumptions": ["a", 3],
                "resonance": {"clarity": float("nan"), "tension": 10},
            }
        )

        assert record.claim == ""
        assert record.stakes == 40
        assert record.evidence == ()
        assert record.counter_count == 1
        assert record.assumptions == ("a",)
        assert record.resonance == Resonance(clarity=50, tension=10, openness=50)

    def test_evidence_without_source(self):
        record = ClaimRecord.from_dict({"evidence": [{"text": "saw it"}]})

        assert record.evidence[0].source is None
        assert record.evidence_count == 1
