"""Status marker and rigor tier classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reftruth.probes.models import Toggles

SHALLOW_BELOW = 50
STRONG_FROM = 80

LIGHT_BELOW = 34
MEDIUM_BELOW = 67


class ProbeStatus(Enum):
    """Three-way status marker derived from depth."""

    SHALLOW = "△∅"
    RESONANT = "⟁~"
    STRONG = "OK"

    @property
    def label(self) -> str:
        return self.name.lower()


class RigorLevel(Enum):
    """Stakes-driven recommendation strength."""

    LIGHT = "Light"
    MEDIUM = "Medium"
    HIGH = "High"


RIGOR_GUIDANCE: dict[RigorLevel, str] = {
    RigorLevel.LIGHT: "2+ concrete pieces of evidence, 1 counterexample, date at least month+year.",
    RigorLevel.MEDIUM: "3–5 sources (mix personal + external), explicit dates, run 1 falsification test.",
    RigorLevel.HIGH: (
        "5+ sources incl. base rates, opposing sources, precise dating, "
        "pre-register what would change your mind."
    ),
}


@dataclass(frozen=True)
class Rigor:
    """Rigor tier with its guidance sentences."""

    level: RigorLevel
    guidance: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"level": self.level.value, "guidance": list(self.guidance)}


def status_from_depth(depth: float, toggles: Toggles) -> ProbeStatus:
    """Classify depth. The mid band is resonant only under an integrity scan."""
    if depth < SHALLOW_BELOW:
        return ProbeStatus.SHALLOW
    if depth < STRONG_FROM:
        return ProbeStatus.RESONANT if toggles.depth_integrity_scan else ProbeStatus.STRONG
    return ProbeStatus.STRONG


def rigor_level(stakes: float) -> RigorLevel:
    if stakes < LIGHT_BELOW:
        return RigorLevel.LIGHT
    if stakes < MEDIUM_BELOW:
        return RigorLevel.MEDIUM
    return RigorLevel.HIGH


def rigor_from_stakes(stakes: float) -> Rigor:
    level = rigor_level(stakes)
    return Rigor(level=level, guidance=(RIGOR_GUIDANCE[level],))
