"""Therapy session endpoints. Each trigger re-maps and overwrites the recommendation."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from soundtherapy.config import get_settings
from soundtherapy.database import get_db
from soundtherapy.models.session import TherapySession
from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.schemas.session import MoodUpdate, TherapySessionCreate, TherapySessionRead
from soundtherapy.sources.base import BiometricSource, SourceDisconnected
from soundtherapy.sources.registry import get_biometric_source
from soundtherapy.therapy.modes import get_mode, is_unlocked
from soundtherapy.therapy.predictor import ModelLoader, get_model_loader
from soundtherapy.therapy.sessions import create_session, to_read, update_session

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


async def _get_or_404(session: AsyncSession, session_id: int) -> TherapySession:
    row = await session.get(TherapySession, session_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"No therapy session {session_id}")
    return row


@router.post("", response_model=TherapySessionRead, status_code=201)
async def start_session(
    body: TherapySessionCreate,
    session: AsyncSession = Depends(get_db),
    loader: ModelLoader = Depends(get_model_loader),
) -> TherapySessionRead:
    """Start a therapy session in the given mode.

    Returns 403 for locked modes (premium without an unlock).
    """
    settings = get_settings()
    mode = get_mode(body.mode)
    if not is_unlocked(mode, settings.premium_unlocked):
        raise HTTPException(status_code=403, detail=f"Mode '{mode.mode}' is locked")

    row = await create_session(
        session, mode.mode, loader.model, settings.predictor_blend_weight
    )
    return to_read(row)


@router.get("/{session_id}", response_model=TherapySessionRead)
async def get_session(
    session_id: int,
    session: AsyncSession = Depends(get_db),
) -> TherapySessionRead:
    return to_read(await _get_or_404(session, session_id))


@router.put("/{session_id}/mood", response_model=TherapySessionRead)
async def change_mood(
    session_id: int,
    body: MoodUpdate,
    session: AsyncSession = Depends(get_db),
    loader: ModelLoader = Depends(get_model_loader),
) -> TherapySessionRead:
    """Switch the session's mood and recompute the recommendation."""
    row = await _get_or_404(session, session_id)
    row = await update_session(
        session,
        row,
        mood=body.mood,
        model=loader.model,
        blend_weight=get_settings().predictor_blend_weight,
    )
    return to_read(row)


@router.post("/{session_id}/biometrics", response_model=TherapySessionRead)
async def push_biometrics(
    session_id: int,
    body: BiometricSnapshot,
    session: AsyncSession = Depends(get_db),
    loader: ModelLoader = Depends(get_model_loader),
) -> TherapySessionRead:
    """Record a client-supplied reading and recompute the recommendation."""
    row = await _get_or_404(session, session_id)
    row = await update_session(
        session,
        row,
        biometrics=body,
        biometrics_source="client",
        model=loader.model,
        blend_weight=get_settings().predictor_blend_weight,
    )
    return to_read(row)


@router.post("/{session_id}/generate", response_model=TherapySessionRead)
async def generate(
    session_id: int,
    session: AsyncSession = Depends(get_db),
    loader: ModelLoader = Depends(get_model_loader),
    source: BiometricSource = Depends(get_biometric_source),
) -> TherapySessionRead:
    """Read the connected wearable and recompute the recommendation.

    Returns 409 if the wearable is not connected.
    """
    row = await _get_or_404(session, session_id)
    try:
        reading = await source.read()
    except SourceDisconnected as e:
        raise HTTPException(status_code=409, detail=str(e)) from None

    row = await update_session(
        session,
        row,
        biometrics=reading,
        biometrics_source=source.source_type,
        model=loader.model,
        blend_weight=get_settings().predictor_blend_weight,
    )
    return to_read(row)


@router.delete("/{session_id}", status_code=204)
async def end_session(
    session_id: int,
    session: AsyncSession = Depends(get_db),
) -> None:
    row = await _get_or_404(session, session_id)
    await session.delete(row)
    await session.commit()
