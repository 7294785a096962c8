"""API route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from reftruth import __version__
from reftruth.api.models import (
    ClaimRecordModel,
    EvaluateRequest,
    HealthModel,
    NormalizedWeightsModel,
    ProbeResultModel,
    WeightProfileModel,
)
from reftruth.engine import evaluate
from reftruth.probes.models import ClaimRecord
from reftruth.scoring.weights import DEFAULT_WEIGHTS, WeightProfile, normalize

router = APIRouter()


def _to_profile(model: WeightProfileModel | None) -> WeightProfile:
    if model is None:
        return DEFAULT_WEIGHTS
    return WeightProfile(**model.model_dump())


def _to_record(model: ClaimRecordModel) -> ClaimRecord:
    return ClaimRecord.from_dict(model.model_dump(by_alias=True))


@router.get("/health", response_model=HealthModel)
async def health_check():
    """Health check endpoint."""
    return HealthModel(status="ok", version=__version__)


@router.get("/weights/default")
async def default_weights():
    """Process-wide default weight profile."""
    return DEFAULT_WEIGHTS.to_dict()


@router.post("/normalize", response_model=NormalizedWeightsModel)
async def normalize_weights(weights: WeightProfileModel):
    """Normalize core weights so they sum to 1."""
    profile = _to_profile(weights)
    return NormalizedWeightsModel(
        weights=normalize(profile).to_dict(),
        percentages=profile.percentages(),
    )


@router.post("/evaluate", response_model=ProbeResultModel)
async def evaluate_claim(request: EvaluateRequest):
    """
    Evaluate a claim record.

    Returns depth, coherence sub-scores, contributions, explanations,
    rigor guidance and the status marker.
    """
    result = evaluate(_to_record(request.record), _to_profile(request.weights))
    return result.to_dict()
