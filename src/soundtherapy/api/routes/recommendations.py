"""Stateless recommendation endpoint; the caller keeps the current value."""

from fastapi import APIRouter, Depends

from soundtherapy.config import get_settings
from soundtherapy.schemas.recommendation import (
    DEFAULT_RECOMMENDATION,
    RecommendationRequest,
    SoundRecommendation,
)
from soundtherapy.therapy.mapper import recommend
from soundtherapy.therapy.predictor import ModelLoader, get_model_loader

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.post("", response_model=SoundRecommendation)
async def create_recommendation(
    body: RecommendationRequest,
    loader: ModelLoader = Depends(get_model_loader),
) -> SoundRecommendation:
    """Map a mood and biometric snapshot to a soundscape.

    Pass the previous response back as `prior` on the next call. Unknown
    moods use the relaxation template; an unavailable model is skipped.
    """
    return recommend(
        body.mood,
        body.biometrics,
        body.prior or DEFAULT_RECOMMENDATION,
        loader.model,
        blend_weight=get_settings().predictor_blend_weight,
    )
