"""Depth composition.

Blends the coherence sub-scores with normalized weights, applies the
evidence bonus and assumption penalty, then the optional resonance
nudge, and clamps. The order is fixed: the nudge is computed from the
unclamped pre-nudge value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from reftruth.probes.models import Resonance, Toggles
from reftruth.scoring.coherence import CoherenceScores
from reftruth.scoring.weights import CORE_COMPONENTS, WeightProfile


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Contributions:
    """Audit of how the final depth was derived.

    Every field is rounded independently, so the parts need not sum
    exactly to ``final_depth``.
    """

    contradiction: int
    time: int
    identity: int
    logic: int
    evidence_bonus: int
    assumption_penalty: int
    resonance_nudge: int
    base_before_resonance: int
    final_depth: int

    def to_dict(self) -> dict[str, int]:
        return {
            "contradiction": self.contradiction,
            "time": self.time,
            "identity": self.identity,
            "logic": self.logic,
            "evidenceBonus": self.evidence_bonus,
            "assumptionPenalty": self.assumption_penalty,
            "resonanceNudge": self.resonance_nudge,
            "baseBeforeResonance": self.base_before_resonance,
            "finalDepth": self.final_depth,
        }


def evidence_bonus(evidence_count: int, weights: WeightProfile) -> float:
    """First item earns nothing; each further item earns the per-item bonus, capped."""
    return min(
        weights.evidence_bonus_max,
        max(0, (evidence_count - 1) * weights.evidence_bonus_per),
    )


def assumption_penalty(assumption_count: int, weights: WeightProfile) -> float:
    over = max(0, assumption_count - weights.assumption_penalty_threshold)
    return over * weights.assumption_penalty_per


def resonance_nudge(
    before_resonance: float,
    toggles: Toggles,
    resonance: Resonance | None,
    weights: WeightProfile,
) -> float:
    """Pull depth toward the resonance midpoint by the influence percentage."""
    if not toggles.resonance_forecaster or resonance is None:
        return 0.0
    return (weights.resonance_influence / 100) * (resonance.midpoint - before_resonance)


def compose_depth(
    coherence: CoherenceScores,
    evidence_count: int,
    assumption_count: int,
    toggles: Toggles,
    resonance: Resonance | None,
    weights: WeightProfile,
) -> Contributions:
    """Compose the final depth score.

    ``weights`` must already be normalized (see ``normalize``).
    """
    scores = coherence.to_dict()
    core = weights.core()
    weighted = {name: scores[name] * core[name] for name in CORE_COMPONENTS}
    base = sum(weighted[name] for name in CORE_COMPONENTS)

    bonus = evidence_bonus(evidence_count, weights)
    penalty = assumption_penalty(assumption_count, weights)
    before_resonance = base + bonus - penalty
    nudge = resonance_nudge(before_resonance, toggles, resonance, weights)
    final_depth = round_half_up(max(0, min(100, before_resonance + nudge)))

    return Contributions(
        contradiction=round_half_up(weighted["contradiction"]),
        time=round_half_up(weighted["time"]),
        identity=round_half_up(weighted["identity"]),
        logic=round_half_up(weighted["logic"]),
        evidence_bonus=round_half_up(bonus),
        assumption_penalty=round_half_up(penalty),
        resonance_nudge=round_half_up(nudge),
        base_before_resonance=round_half_up(before_resonance),
        final_depth=final_depth,
    )
