"""Probes module: claim records and their caller-side lifecycle.

``reftruth.probes.models`` holds the input records read by the engine.
``reftruth.probes.lifecycle`` and ``reftruth.probes.files`` cover what the
engine leaves to its caller: identifiers, loop snapshots and JSON files.
"""

from reftruth.probes.models import (
    ClaimRecord,
    CounterItem,
    EvidenceItem,
    Resonance,
    Toggles,
)

__all__ = [
    "ClaimRecord",
    "CounterItem",
    "EvidenceItem",
    "Resonance",
    "Toggles",
]
