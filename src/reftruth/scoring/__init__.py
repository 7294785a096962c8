"""Scoring module: sub-scores, weights, depth, status and explanations.

The depth score is a weighted blend of four coherence sub-scores:
- Contradiction: evidence vs counter-evidence
- Time: dating precision
- Identity: subject clarity
- Logic: absolutes and assumption load

followed by an evidence bonus, an assumption penalty and an optional
resonance nudge.
"""

from reftruth.scoring.coherence import (
    CoherenceScores,
    score_contradiction,
    score_identity,
    score_logic,
    score_time,
)
from reftruth.scoring.depth import Contributions, compose_depth, round_half_up
from reftruth.scoring.explain import build_notes, build_why
from reftruth.scoring.rigor import (
    ProbeStatus,
    Rigor,
    RigorLevel,
    rigor_from_stakes,
    status_from_depth,
)
from reftruth.scoring.weights import (
    DEFAULT_WEIGHTS,
    WeightProfile,
    WeightProfileError,
    load_weight_profile,
    normalize,
)

__all__ = [
    # Sub-scores
    "CoherenceScores",
    "score_contradiction",
    "score_identity",
    "score_logic",
    "score_time",
    # Depth
    "Contributions",
    "compose_depth",
    "round_half_up",
    # Explanations
    "build_notes",
    "build_why",
    # Status / rigor
    "ProbeStatus",
    "Rigor",
    "RigorLevel",
    "rigor_from_stakes",
    "status_from_depth",
    # Weights
    "DEFAULT_WEIGHTS",
    "WeightProfile",
    "WeightProfileError",
    "load_weight_profile",
    "normalize",
]
