"""Therapy mode catalog endpoints."""

from fastapi import APIRouter, HTTPException

from soundtherapy.config import get_settings
from soundtherapy.schemas.mode import TherapyModeRead
from soundtherapy.therapy.modes import MODE_CATALOG, TherapyMode, get_mode, is_unlocked

router = APIRouter(prefix="/api/modes", tags=["modes"])


def _to_read(mode: TherapyMode, premium_unlocked: bool) -> TherapyModeRead:
    return TherapyModeRead(
        mode=mode.mode,
        label=mode.label,
        description=mode.description,
        requires_unlock=mode.requires_unlock,
        unlocked=is_unlocked(mode, premium_unlocked),
    )


@router.get("", response_model=list[TherapyModeRead])
async def list_modes() -> list[TherapyModeRead]:
    """List all therapy modes in display order."""
    premium_unlocked = get_settings().premium_unlocked
    return [_to_read(m, premium_unlocked) for m in MODE_CATALOG]


@router.get("/{mode}", response_model=TherapyModeRead)
async def get_therapy_mode(mode: str) -> TherapyModeRead:
    try:
        found = get_mode(mode)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    return _to_read(found, get_settings().premium_unlocked)
