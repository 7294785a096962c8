"""Coherence sub-score calculators.

Each calculator maps one aspect of a claim record to an integer in
[0, 100] using fixed heuristics:

- Contradiction: share of evidence among evidence + counters
- Time: how precisely the claim is dated
- Identity: whether a subject is named and how vague the pronouns are
- Logic: absolute language and assumption load
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from reftruth.probes.models import CounterItem, EvidenceItem, is_blank
from reftruth.signals.lexical import (
    count_vague_pronouns,
    find_absolutes,
    has_year,
    is_month,
    is_relative_time,
)

# No evidence and no counters: unsupported either way, weak not neutral
UNSUPPORTED_CONTRADICTION_SCORE = 40

TIME_BASE = 70
TIME_RELATIVE_ONLY_PENALTY = 25
TIME_PRECISE_BONUS = 10

IDENTITY_NAMED_BASE = 85
IDENTITY_UNNAMED_BASE = 55
IDENTITY_PRONOUN_PENALTY = 10
IDENTITY_PRONOUN_PENALTY_CAP = 30

LOGIC_BASE = 90
LOGIC_ABSOLUTE_PENALTY = 15
LOGIC_ASSUMPTION_PENALTY = 8
LOGIC_FREE_ASSUMPTIONS = 2


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and return an int."""
    return int(max(0, min(100, value)))


@dataclass(frozen=True)
class CoherenceScores:
    """The four unweighted sub-scores, each 0-100."""

    contradiction: int
    time: int
    identity: int
    logic: int

    def to_dict(self) -> dict[str, int]:
        return {
            "contradiction": self.contradiction,
            "time": self.time,
            "identity": self.identity,
            "logic": self.logic,
        }


def score_contradiction(
    evidence: Iterable[EvidenceItem], counters: Iterable[CounterItem]
) -> int:
    """Evidence share of all non-blank evidence and counter items."""
    e = sum(1 for item in evidence if not is_blank(item.text))
    c = sum(1 for item in counters if not is_blank(item.text))
    if e + c == 0:
        return UNSUPPORTED_CONTRADICTION_SCORE
    return clamp_score(math.floor(100 * e / (e + c) + 0.5))


def score_time(time_refs: Sequence[str], context: str, claim: str) -> int:
    """Reward explicit dating, penalize relative-only dating.

    Year detection reads context and claim directly, not ``time_refs``.
    """
    has_relative = any(is_relative_time(t) for t in time_refs)
    has_explicit_month = any(is_month(t) for t in time_refs)
    year = has_year(context, claim)

    base = TIME_BASE
    if has_relative and not has_explicit_month and not year:
        base -= TIME_RELATIVE_ONLY_PENALTY
    elif not has_relative and (has_explicit_month or year):
        base += TIME_PRECISE_BONUS
    return clamp_score(base)


def score_identity(subject: str, claim: str) -> int:
    """Named subject scores high; each vague pronoun in the claim costs 10."""
    base = IDENTITY_NAMED_BASE if not is_blank(subject) else IDENTITY_UNNAMED_BASE
    vague = count_vague_pronouns(claim)
    base -= min(IDENTITY_PRONOUN_PENALTY_CAP, IDENTITY_PRONOUN_PENALTY * vague)
    return clamp_score(base)


def score_logic(claim: str, assumptions: Iterable[str]) -> int:
    """Penalize absolutes in the claim and more than two assumptions."""
    absolutes = len(find_absolutes(claim))
    filled = sum(1 for a in assumptions if not is_blank(a))
    base = (
        LOGIC_BASE
        - LOGIC_ABSOLUTE_PENALTY * absolutes
        - LOGIC_ASSUMPTION_PENALTY * max(0, filled - LOGIC_FREE_ASSUMPTIONS)
    )
    return clamp_score(base)
