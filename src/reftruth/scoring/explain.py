"""Explanation builder.

Assembles the "why" and "notes" strings from values already computed by
the calculators. No scoring happens here.
"""

from __future__ import annotations

from collections.abc import Sequence

from reftruth.probes.models import is_blank
from reftruth.scoring.coherence import CoherenceScores

TIME_ACCEPTABLE_FROM = 70
TIME_NOTE_BELOW = 60
LOGIC_NOTE_BELOW = 70
CONTRADICTION_NOTE_BELOW = 60

NOTE_FUZZY_TIME = "Time is fuzzy. Replace relative words with dates (e.g., 'since 2025-06')."
NOTE_LOGIC = "Watch absolutist terms or unsupported jumps. Rephrase as testable claims."
NOTE_CONTRADICTION = "Collect stronger evidence or address counters more directly."
NOTE_ASSUMPTIONS = "Too many assumptions. Convert some into questions and go gather data."


def assumption_overload(assumption_count: int, threshold: float) -> bool:
    return assumption_count > threshold


def build_why(
    coherence: CoherenceScores,
    *,
    evidence_count: int,
    counter_count: int,
    assumption_count: int,
    time_refs: Sequence[str],
    absolutes: Sequence[str],
    subject: str,
    assumption_threshold: float,
) -> list[str]:
    """Explain each sub-score in plain language, in a fixed order."""
    why = [
        f"Evidence vs counters: {evidence_count} vs {counter_count} "
        f"→ contradiction score {coherence.contradiction}."
    ]

    if coherence.time < TIME_ACCEPTABLE_FROM:
        found = f"refs: {', '.join(time_refs)}" if time_refs else "no explicit refs"
        why.append(
            f"Time grounding is weak ({coherence.time}). Found {found}. "
            "Add months/years or exact dates."
        )
    else:
        why.append(f"Time grounding is acceptable ({coherence.time}).")

    if is_blank(subject):
        why.append(
            "Subject is vague. Name the agent responsible for the claim "
            "(you, a team, a population)."
        )
    else:
        why.append(f'Identity clarity: subject "{subject}" → score {coherence.identity}.')

    if absolutes:
        why.append(
            f"Logic penalty for absolutes: {', '.join(absolutes)}. "
            'Consider quantifiers (e.g., "often", "in my sample").'
        )

    if assumption_overload(assumption_count, assumption_threshold):
        why.append(
            f"Too many assumptions ({assumption_count}). Convert some into "
            "questions and collect data to replace them."
        )

    return why


def build_notes(
    coherence: CoherenceScores, assumption_count: int, assumption_threshold: float
) -> list[str]:
    """Remediation notes gated on weak sub-scores."""
    notes: list[str] = []
    if coherence.time < TIME_NOTE_BELOW:
        notes.append(NOTE_FUZZY_TIME)
    if coherence.logic < LOGIC_NOTE_BELOW:
        notes.append(NOTE_LOGIC)
    if coherence.contradiction < CONTRADICTION_NOTE_BELOW:
        notes.append(NOTE_CONTRADICTION)
    if assumption_overload(assumption_count, assumption_threshold):
        notes.append(NOTE_ASSUMPTIONS)
    return notes
