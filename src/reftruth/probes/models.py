"""Claim record data structures.

A ClaimRecord is the immutable input snapshot the engine reads. Records
are built by the caller, usually from JSON via ``from_dict``, which is
permissive: missing or malformed fields fall back to neutral defaults
instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

DEFAULT_STAKES = 40
NEUTRAL_RESONANCE = 50


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_number(value: Any, default: float) -> float:
    # bool is an int subclass; a toggle leaking into a number field is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not math.isfinite(value):
        return default
    return value


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def is_blank(text: str | None) -> bool:
    return not (text or "").strip()


@dataclass(frozen=True)
class EvidenceItem:
    """A piece of supporting evidence."""

    text: str = ""
    source: str | None = None
    id: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "EvidenceItem":
        if isinstance(data, str):
            return cls(text=data)
        if not isinstance(data, dict):
            return cls()
        source = data.get("source")
        item_id = data.get("id")
        return cls(
            text=_as_str(data.get("text")),
            source=source if isinstance(source, str) else None,
            id=item_id if isinstance(item_id, str) else None,
        )

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"text": self.text}
        if self.id is not None:
            result["id"] = self.id
        if self.source is not None:
            result["source"] = self.source
        return result


@dataclass(frozen=True)
class CounterItem:
    """A piece of counter-evidence."""

    text: str = ""
    id: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "CounterItem":
        if isinstance(data, str):
            return cls(text=data)
        if not isinstance(data, dict):
            return cls()
        item_id = data.get("id")
        return cls(
            text=_as_str(data.get("text")),
            id=item_id if isinstance(item_id, str) else None,
        )

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"text": self.text}
        if self.id is not None:
            result["id"] = self.id
        return result


@dataclass(frozen=True)
class Resonance:
    """Subjective clarity / tension / openness reading, each 0-100."""

    clarity: float = NEUTRAL_RESONANCE
    tension: float = NEUTRAL_RESONANCE
    openness: float = NEUTRAL_RESONANCE

    @property
    def midpoint(self) -> float:
        """The somatic-read value the resonance nudge pulls toward."""
        return (self.clarity + self.openness - self.tension) / 3

    @classmethod
    def from_dict(cls, data: Any) -> "Resonance":
        if not isinstance(data, dict):
            return cls()
        return cls(
            clarity=_as_number(data.get("clarity"), NEUTRAL_RESONANCE),
            tension=_as_number(data.get("tension"), NEUTRAL_RESONANCE),
            openness=_as_number(data.get("openness"), NEUTRAL_RESONANCE),
        )

    def to_dict(self) -> dict:
        return {
            "clarity": self.clarity,
            "tension": self.tension,
            "openness": self.openness,
        }


@dataclass(frozen=True)
class Toggles:
    """Feature switches carried on each record."""

    resonance_forecaster: bool = True
    depth_integrity_scan: bool = True
    witness_mode: bool = True

    @classmethod
    def from_dict(cls, data: Any) -> "Toggles":
        # An absent mapping means all on; a present one is read literally.
        if not isinstance(data, dict):
            return cls()
        return cls(
            resonance_forecaster=bool(data.get("resonanceForecaster")),
            depth_integrity_scan=bool(data.get("depthIntegrityScan")),
            witness_mode=bool(data.get("witnessMode")),
        )

    def to_dict(self) -> dict:
        return {
            "resonanceForecaster": self.resonance_forecaster,
            "depthIntegrityScan": self.depth_integrity_scan,
            "witnessMode": self.witness_mode,
        }


@dataclass(frozen=True)
class ClaimRecord:
    """A claim with its supporting material, as read by the engine.

    The engine never mutates a record. Callers change a record between
    runs with ``dataclasses.replace``.
    """

    claim: str = ""
    context: str = ""
    subject: str = ""
    stakes: float = DEFAULT_STAKES
    evidence: tuple[EvidenceItem, ...] = ()
    counters: tuple[CounterItem, ...] = ()
    assumptions: tuple[str, ...] = ()
    resonance: Resonance | None = field(default_factory=Resonance)
    toggles: Toggles = field(default_factory=Toggles)

    @property
    def evidence_count(self) -> int:
        """Evidence items with non-blank text."""
        return sum(1 for item in self.evidence if not is_blank(item.text))

    @property
    def counter_count(self) -> int:
        """Counter items with non-blank text."""
        return sum(1 for item in self.counters if not is_blank(item.text))

    @property
    def filled_assumptions(self) -> list[str]:
        """Assumption entries with non-blank text."""
        return [a for a in self.assumptions if not is_blank(a)]

    @classmethod
    def from_dict(cls, data: Any) -> "ClaimRecord":
        """Build a record from a JSON-like mapping, defaulting bad fields."""
        if not isinstance(data, dict):
            data = {}
        resonance = data.get("resonance")
        return cls(
            claim=_as_str(data.get("claim")),
            context=_as_str(data.get("context")),
            subject=_as_str(data.get("subject")),
            stakes=_as_number(data.get("stakes"), DEFAULT_STAKES),
            evidence=tuple(
                EvidenceItem.from_dict(e) for e in _as_list(data.get("evidence"))
            ),
            counters=tuple(
                CounterItem.from_dict(c) for c in _as_list(data.get("counters"))
            ),
            assumptions=tuple(
                a for a in _as_list(data.get("assumptions")) if isinstance(a, str)
            ),
            resonance=Resonance.from_dict(resonance),
            toggles=Toggles.from_dict(data.get("toggles")),
        )

    def to_dict(self) -> dict:
        return {
            "claim": self.claim,
            "context": self.context,
            "subject": self.subject,
            "stakes": self.stakes,
            "evidence": [e.to_dict() for e in self.evidence],
            "counters": [c.to_dict() for c in self.counters],
            "assumptions": list(self.assumptions),
            "resonance": self.resonance.to_dict() if self.resonance else None,
            "toggles": self.toggles.to_dict(),
        }
