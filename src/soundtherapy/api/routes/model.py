"""Predictive model status endpoint."""

from fastapi import APIRouter, Depends

from soundtherapy.schemas.system import ModelStatus
from soundtherapy.therapy.predictor import ModelLoader, get_model_loader

router = APIRouter(prefix="/api/model", tags=["model"])


@router.get("/status", response_model=ModelStatus)
async def get_model_status(
    loader: ModelLoader = Depends(get_model_loader),
) -> ModelStatus:
    return ModelStatus.model_validate(loader.status())
