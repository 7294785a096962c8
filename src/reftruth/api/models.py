"""Pydantic models for API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EvidenceModel(BaseModel):
    """A supporting evidence item."""

    id: Optional[str] = None
    text: str = ""
    source: Optional[str] = None


class CounterModel(BaseModel):
    """A counter-evidence item."""

    id: Optional[str] = None
    text: str = ""


class ResonanceModel(BaseModel):
    """Subjective resonance reading."""

    clarity: float = Field(50, ge=0, le=100)
    tension: float = Field(50, ge=0, le=100)
    openness: float = Field(50, ge=0, le=100)


class TogglesModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resonance_forecaster: bool = Field(True, alias="resonanceForecaster")
    depth_integrity_scan: bool = Field(True, alias="depthIntegrityScan")
    witness_mode: bool = Field(True, alias="witnessMode")


class ClaimRecordModel(BaseModel):
    """Claim with its supporting material."""

    claim: str = ""
    context: str = ""
    subject: str = ""
    stakes: float = Field(40, ge=0, le=100, description="How much is riding on the claim")
    evidence: List[EvidenceModel] = Field(default_factory=list)
    counters: List[CounterModel] = Field(default_factory=list)
    assumptions: List[str] = Field(default_factory=list)
    resonance: Optional[ResonanceModel] = Field(default_factory=ResonanceModel)
    toggles: TogglesModel = Field(default_factory=TogglesModel)


class WeightProfileModel(BaseModel):
    """Raw weight profile. Core weights are normalized server-side."""

    model_config = ConfigDict(populate_by_name=True)

    contradiction: float = Field(0.3, ge=0)
    time: float = Field(0.2, ge=0)
    identity: float = Field(0.25, ge=0)
    logic: float = Field(0.25, ge=0)
    resonance_influence: float = Field(15, ge=0, le=30, alias="resonanceInfluence")
    evidence_bonus_max: float = Field(10, ge=0, alias="evidenceBonusMax")
    evidence_bonus_per: float = Field(4, ge=0, alias="evidenceBonusPer")
    assumption_penalty_per: float = Field(4, ge=0, alias="assumptionPenaltyPer")
    assumption_penalty_threshold: float = Field(
        3, ge=0, alias="assumptionPenaltyThreshold"
    )


class EvaluateRequest(BaseModel):
    """Request body for evaluation."""

    record: ClaimRecordModel
    weights: Optional[WeightProfileModel] = None


class CoherenceModel(BaseModel):
    contradiction: int
    time: int
    identity: int
    logic: int


class ContribsModel(BaseModel):
    contradiction: int
    time: int
    identity: int
    logic: int
    evidenceBonus: int
    assumptionPenalty: int
    resonanceNudge: int
    baseBeforeResonance: int
    finalDepth: int


class AuditModel(BaseModel):
    evidenceCount: int
    counterCount: int
    assumptionCount: int
    absolutes: List[str]
    vaguePronouns: int
    timeRefs: List[str]
    hasExplicitMonth: bool
    hasYear: bool


class RigorModel(BaseModel):
    level: str = Field(..., description="Light, Medium or High")
    guidance: List[str]


class ProbeResultModel(BaseModel):
    """Full evaluation result."""

    depth: int = Field(..., description="Final depth score 0-100")
    coherence: CoherenceModel
    contribs: ContribsModel
    notes: List[str]
    why: List[str]
    audit: AuditModel
    rigor: RigorModel
    status: str = Field(..., description="Status marker")


class NormalizedWeightsModel(BaseModel):
    """Normalized profile plus display percentages."""

    weights: dict
    percentages: dict


class HealthModel(BaseModel):
    """Health check response."""

    status: str
    version: str
