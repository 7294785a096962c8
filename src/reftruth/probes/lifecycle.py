"""Probe lifecycle: identifiers, scans and loop snapshots.

A Probe wraps a ClaimRecord with what the caller owns: an identifier, a
creation timestamp, the last serialized result and a list of loop
snapshots. Loops are independent copies, newest first, and never carry
loops of their own.

Identifier minting and timestamps live here, outside the scoring path.
Both can be injected for reproducible output.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from reftruth.engine import evaluate
from reftruth.probes.models import (
    ClaimRecord,
    CounterItem,
    EvidenceItem,
    Resonance,
    Toggles,
)
from reftruth.scoring.weights import DEFAULT_WEIGHTS, WeightProfile

TITLE_MAX_CHARS = 42

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@dataclass(frozen=True)
class Probe:
    """A claim record plus its caller-owned history."""

    id: str
    created_at: str
    record: ClaimRecord = field(default_factory=ClaimRecord)
    time_refs: tuple[str, ...] = ()
    result: dict | None = None
    loops: tuple["Probe", ...] = ()

    @property
    def title(self) -> str:
        return title_from_claim(self.record.claim)

    def update(self, **changes: Any) -> "Probe":
        """Return a copy with record fields replaced."""
        return replace(self, record=replace(self.record, **changes))

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "id": self.id,
            "createdAt": self.created_at,
        }
        data.update(self.record.to_dict())
        data["timeRefs"] = list(self.time_refs)
        if self.result is not None:
            data["result"] = self.result
        data["loops"] = [loop.to_dict() for loop in self.loops]
        return data


def title_from_claim(claim: str | None) -> str:
    """Short display title: the claim, cut at 42 characters."""
    if not claim:
        return "Untitled"
    if len(claim) > TITLE_MAX_CHARS:
        return f"{claim[:TITLE_MAX_CHARS]}…"
    return claim


def new_probe(
    id_factory: IdFactory = new_id, clock: Clock = utc_now
) -> Probe:
    """A blank probe with neutral resonance and all toggles on."""
    return Probe(
        id=id_factory(),
        created_at=format_timestamp(clock()),
        record=ClaimRecord(),
    )


def starter_probe(id_factory: IdFactory = new_id, clock: Clock = utc_now) -> Probe:
    """The worked example shown when no probes exist yet."""
    record = ClaimRecord(
        claim="People are burning out more than ever.",
        context=(
            "Observed in conversations and media; seems higher since 2023. "
            "Want to understand if it's broadly true or my bubble."
        ),
        subject="Jeremy (observer)",
        stakes=60,
        evidence=(
            EvidenceItem(
                text="3 friends recently reported burnout at work",
                source="personal",
                id=id_factory(),
            ),
        ),
        counters=(
            CounterItem(text="Might be selection bias in my circle", id=id_factory()),
        ),
        assumptions=("My interactions are representative",),
        resonance=Resonance(clarity=65, tension=55, openness=70),
        toggles=Toggles(),
    )
    return Probe(
        id=id_factory(),
        created_at=format_timestamp(clock()),
        record=record,
        time_refs=("since 2023",),
    )


def run_scan(probe: Probe, weights: WeightProfile = DEFAULT_WEIGHTS) -> Probe:
    """Evaluate the probe and attach the result, replacing any earlier one."""
    result = evaluate(probe.record, weights)
    return replace(
        probe,
        time_refs=tuple(result.audit.time_refs),
        result=result.to_dict(),
    )


def save_as_loop(
    probe: Probe, id_factory: IdFactory = new_id, clock: Clock = utc_now
) -> Probe:
    """Prepend a snapshot of the probe's current state to its loops."""
    snapshot = replace(
        probe,
        id=id_factory(),
        created_at=format_timestamp(clock()),
        loops=(),
    )
    return replace(probe, loops=(snapshot, *probe.loops))


def sanitize_probe(
    raw: Any, id_factory: IdFactory = new_id, clock: Clock = utc_now
) -> Probe:
    """Rebuild a probe from arbitrary JSON, defaulting whatever is malformed."""
    data = raw if isinstance(raw, dict) else {}
    probe_id = data.get("id")
    created_at = data.get("createdAt")
    time_refs = data.get("timeRefs")
    result = data.get("result")
    loops = data.get("loops")
    return Probe(
        id=probe_id if isinstance(probe_id, str) else id_factory(),
        created_at=(
            created_at if isinstance(created_at, str) else format_timestamp(clock())
        ),
        record=ClaimRecord.from_dict(data),
        time_refs=tuple(
            t for t in (time_refs if isinstance(time_refs, list) else [])
            if isinstance(t, str)
        ),
        result=result if isinstance(result, dict) else None,
        loops=tuple(
            sanitize_probe(loop, id_factory, clock)
            for loop in (loops if isinstance(loops, list) else [])
        ),
    )
