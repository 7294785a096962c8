"""Claim evaluation engine.

``evaluate`` runs the whole pipeline over one immutable claim record:

    lexical signals -> coherence sub-scores -> normalized weights
    -> depth composition -> status / rigor -> explanations

It is a pure function of its two arguments. It reads no configuration,
clock or randomness, so repeated calls return equal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reftruth.probes.models import ClaimRecord
from reftruth.scoring.coherence import (
    CoherenceScores,
    score_contradiction,
    score_identity,
    score_logic,
    score_time,
)
from reftruth.scoring.depth import Contributions, compose_depth
from reftruth.scoring.explain import build_notes, build_why
from reftruth.scoring.rigor import ProbeStatus, Rigor, rigor_from_stakes, status_from_depth
from reftruth.scoring.weights import DEFAULT_WEIGHTS, WeightProfile, normalize
from reftruth.signals.lexical import scan_signals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeAudit:
    """Counts and extracted signals behind a result."""

    evidence_count: int
    counter_count: int
    assumption_count: int
    absolutes: tuple[str, ...] = ()
    vague_pronouns: int = 0
    time_refs: tuple[str, ...] = ()
    has_explicit_month: bool = False
    has_year: bool = False

    def to_dict(self) -> dict:
        return {
            "evidenceCount": self.evidence_count,
            "counterCount": self.counter_count,
            "assumptionCount": self.assumption_count,
            "absolutes": list(self.absolutes),
            "vaguePronouns": self.vague_pronouns,
            "timeRefs": list(self.time_refs),
            "hasExplicitMonth": self.has_explicit_month,
            "hasYear": self.has_year,
        }


@dataclass(frozen=True)
class ProbeResult:
    """Everything one evaluation produces.

    A result is never updated; the next evaluation supersedes it.
    """

    depth: int
    coherence: CoherenceScores
    contribs: Contributions
    notes: tuple[str, ...]
    why: tuple[str, ...]
    audit: ProbeAudit
    rigor: Rigor
    status: ProbeStatus

    def to_dict(self) -> dict:
        return {
            "depth": self.depth,
            "coherence": self.coherence.to_dict(),
            "contribs": self.contribs.to_dict(),
            "notes": list(self.notes),
            "why": list(self.why),
            "audit": self.audit.to_dict(),
            "rigor": self.rigor.to_dict(),
            "status": self.status.value,
        }


def evaluate(record: ClaimRecord, weights: WeightProfile = DEFAULT_WEIGHTS) -> ProbeResult:
    """Evaluate a claim record against a weight profile."""
    signals = scan_signals(record.claim, record.context)
    assumptions = record.filled_assumptions
    evidence_count = record.evidence_count
    counter_count = record.counter_count
    assumption_count = len(assumptions)

    coherence = CoherenceScores(
        contradiction=score_contradiction(record.evidence, record.counters),
        time=score_time(signals.time_refs, record.context, record.claim),
        identity=score_identity(record.subject, record.claim),
        logic=score_logic(record.claim, assumptions),
    )

    normalized = normalize(weights)
    contribs = compose_depth(
        coherence,
        evidence_count,
        assumption_count,
        record.toggles,
        record.resonance,
        normalized,
    )
    depth = contribs.final_depth
    status = status_from_depth(depth, record.toggles)

    why = build_why(
        coherence,
        evidence_count=evidence_count,
        counter_count=counter_count,
        assumption_count=assumption_count,
        time_refs=signals.time_refs,
        absolutes=signals.absolutes,
        subject=record.subject,
        assumption_threshold=weights.assumption_penalty_threshold,
    )
    notes = build_notes(coherence, assumption_count, weights.assumption_penalty_threshold)

    audit = ProbeAudit(
        evidence_count=evidence_count,
        counter_count=counter_count,
        assumption_count=assumption_count,
        absolutes=signals.absolutes,
        vague_pronouns=signals.vague_pronouns,
        time_refs=signals.time_refs,
        has_explicit_month=signals.has_explicit_month,
        has_year=signals.has_year,
    )

    logger.debug(f"Evaluated claim: depth={depth} status={status.label}")

    return ProbeResult(
        depth=depth,
        coherence=coherence,
        contribs=contribs,
        notes=tuple(notes),
        why=tuple(why),
        audit=audit,
        rigor=rigor_from_stakes(record.stakes),
        status=status,
    )
