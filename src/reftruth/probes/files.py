"""JSON files of probes.

The engine never persists anything; this is the caller-side store used
by the CLI. A file holds either a single probe object or a list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from reftruth.probes.lifecycle import Probe, sanitize_probe

logger = logging.getLogger(__name__)


class ProbeFileError(Exception):
    """Raised when a probe file cannot be read."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = path
        full_message = f"[{path}] {message}" if path else message
        super().__init__(full_message)


def load_probes(path: Path | str) -> list[Probe]:
    """Load probes from a JSON file.

    Returns an empty list when the file does not exist.

    Raises:
        ProbeFileError: If the file cannot be read or is not valid JSON
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Probe file not found: {path}")
        return []

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProbeFileError(f"Cannot read probe file: {e}", path) from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProbeFileError(f"Invalid JSON: {e}", path) from e

    items = raw if isinstance(raw, list) else [raw]
    probes = [sanitize_probe(item) for item in items]
    logger.info(f"Loaded {len(probes)} probe(s) from {path}")
    return probes


def find_probe(probes: list[Probe], probe_id: str | None) -> Probe | None:
    """The probe with the given id, or the first one when no id is given."""
    if probe_id is None:
        return probes[0] if probes else None
    for probe in probes:
        if probe.id == probe_id:
            return probe
    return None


def replace_probe(probes: list[Probe], updated: Probe) -> list[Probe]:
    """Swap in ``updated`` by id, leaving the other probes untouched."""
    return [updated if p.id == updated.id else p for p in probes]


def export_probe_json(probe: Probe) -> str:
    """Serialize one probe as indented JSON."""
    return json.dumps(probe.to_dict(), indent=2, ensure_ascii=False)


def export_filename(probe: Probe) -> str:
    return f"ref-truth-probe-{probe.id}.json"


def save_probes(probes: list[Probe], path: Path | str) -> Path:
    """Write probes to a JSON file as a list."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [p.to_dict() for p in probes]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Saved {len(probes)} probe(s) to {path}")
    return path
