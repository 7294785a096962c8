"""Weight profiles and normalization.

The four core weights are raw non-negative numbers; only their ratios
matter. ``normalize`` rescales them to sum to 1 at use time. The other
fields pass through unchanged.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CORE_COMPONENTS: tuple[str, ...] = ("contradiction", "time", "identity", "logic")

RESONANCE_INFLUENCE_MAX = 30

# Wire (camelCase) key -> attribute name
_FIELD_KEYS: dict[str, str] = {
    "contradiction": "contradiction",
    "time": "time",
    "identity": "identity",
    "logic": "logic",
    "resonanceInfluence": "resonance_influence",
    "evidenceBonusMax": "evidence_bonus_max",
    "evidenceBonusPer": "evidence_bonus_per",
    "assumptionPenaltyPer": "assumption_penalty_per",
    "assumptionPenaltyThreshold": "assumption_penalty_threshold",
}


class WeightProfileError(Exception):
    """Raised when a weight profile cannot be loaded."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = path
        full_message = f"[{path}] {message}" if path else message
        super().__init__(full_message)


@dataclass(frozen=True)
class WeightProfile:
    """Blend weights and bonus/penalty parameters for depth composition."""

    contradiction: float = 0.3
    time: float = 0.2
    identity: float = 0.25
    logic: float = 0.25
    resonance_influence: float = 15
    evidence_bonus_max: float = 10
    evidence_bonus_per: float = 4
    assumption_penalty_per: float = 4
    assumption_penalty_threshold: float = 3

    @property
    def core_sum(self) -> float:
        return sum(getattr(self, name) for name in CORE_COMPONENTS)

    def core(self) -> dict[str, float]:
        """The four core weights keyed by component name."""
        return {name: getattr(self, name) for name in CORE_COMPONENTS}

    def with_overrides(self, **overrides: float) -> "WeightProfile":
        """Return a copy with the given attributes replaced."""
        return replace(self, **overrides)

    def percentages(self) -> dict[str, int]:
        """Normalized core weights as whole percentages, for display."""
        normalized = normalize(self)
        return {
            name: math.floor(value * 100 + 0.5)
            for name, value in normalized.core().items()
        }

    @classmethod
    def from_dict(cls, data: dict, strict: bool = False) -> "WeightProfile":
        """Build a profile from a camelCase mapping.

        Unknown keys are ignored and missing keys keep their defaults.
        With ``strict``, non-numeric or negative values raise
        WeightProfileError; otherwise they are skipped.
        """
        values: dict[str, float] = {}
        for key, attr in _FIELD_KEYS.items():
            if key not in data and attr not in data:
                continue
            raw = data.get(key, data.get(attr))
            if (
                isinstance(raw, bool)
                or not isinstance(raw, (int, float))
                or not math.isfinite(raw)
                or raw < 0
            ):
                if strict:
                    raise WeightProfileError(
                        f"Weight '{key}' must be a non-negative number, got {raw!r}"
                    )
                continue
            values[attr] = raw
        if "resonance_influence" in values:
            values["resonance_influence"] = min(
                values["resonance_influence"], RESONANCE_INFLUENCE_MAX
            )
        return cls(**values)

    def to_dict(self) -> dict:
        attrs = asdict(self)
        return {key: attrs[attr] for key, attr in _FIELD_KEYS.items()}


DEFAULT_WEIGHTS = WeightProfile()


def normalize(weights: WeightProfile) -> WeightProfile:
    """Rescale the core weights to sum to 1.

    When all four core weights are 0 the divisor is 1 and the result
    keeps all-zero core weights.
    """
    total = weights.core_sum
    k = 1 if total == 0 else 1 / total
    return replace(
        weights,
        contradiction=weights.contradiction * k,
        time=weights.time * k,
        identity=weights.identity * k,
        logic=weights.logic * k,
    )


def load_weight_profile(path: Path | str | None = None) -> WeightProfile:
    """Load a weight profile from a YAML mapping.

    Args:
        path: Path to a weights YAML file. If None, uses the
              REFTRUTH_WEIGHTS_PATH env var when set.

    Returns:
        The loaded profile, or DEFAULT_WEIGHTS when no path is given
        or the env-configured file does not exist.

    Raises:
        WeightProfileError: If the file cannot be read or is not a mapping
            of valid weights
        FileNotFoundError: If an explicit path does not exist
    """
    explicit = path is not None
    if path is None:
        env_path = os.environ.get("REFTRUTH_WEIGHTS_PATH")
        if not env_path:
            return DEFAULT_WEIGHTS
        path = env_path

    path = Path(path)
    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Weights file not found: {path}")
        logger.warning(f"Weights file {path} not found, using defaults")
        return DEFAULT_WEIGHTS

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WeightProfileError(f"Cannot read weights file: {e}", path) from e

    try:
        raw_data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WeightProfileError(f"Invalid YAML: {e}", path) from e

    if raw_data is None:
        return DEFAULT_WEIGHTS
    if not isinstance(raw_data, dict):
        raise WeightProfileError("Weights file must be a YAML mapping", path)

    try:
        profile = WeightProfile.from_dict(raw_data, strict=True)
    except WeightProfileError as e:
        raise WeightProfileError(str(e), path) from e

    logger.info(f"Loaded weight profile from {path}")
    return profile


def save_weight_profile(weights: WeightProfile, path: Path | str) -> Path:
    """Write a weight profile as YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(weights.to_dict(), f, sort_keys=False)
    logger.info(f"Saved weight profile to {path}")
    return path
