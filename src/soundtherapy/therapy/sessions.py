"""Therapy session state: load, re-map, and overwrite the current recommendation."""

import json
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from soundtherapy.models.session import TherapySession
from soundtherapy.schemas.biometrics import NEUTRAL_SNAPSHOT, BiometricSnapshot
from soundtherapy.schemas.recommendation import (
    DEFAULT_RECOMMENDATION,
    IntensityMap,
    SoundRecommendation,
)
from soundtherapy.schemas.session import TherapySessionRead
from soundtherapy.therapy.mapper import DEFAULT_BLEND_WEIGHT, recommend
from soundtherapy.therapy.predictor import PredictiveModel

logger = logging.getLogger(__name__)


def session_biometrics(row: TherapySession) -> BiometricSnapshot:
    return BiometricSnapshot(
        heart_rate=row.heart_rate,
        stress_level=row.stress_level,
        sleep_quality=row.sleep_quality,
        activity_level=row.activity_level,
    )


def session_recommendation(row: TherapySession) -> SoundRecommendation:
    return SoundRecommendation(
        frequency_range=(row.frequency_low, row.frequency_high),
        binaural_beat_type=row.binaural_beat_type,  # type: ignore[arg-type]
        noise_profile=json.loads(row.noise_profile),
        intensity_map=IntensityMap(
            bass=row.bass_intensity,
            treble=row.treble_intensity,
            nature=row.nature_intensity,
        ),
    )


def to_read(row: TherapySession) -> TherapySessionRead:
    return TherapySessionRead(
        id=row.id,
        mode=row.mode,
        mood=row.mood,
        biometrics=session_biometrics(row),
        recommendation=session_recommendation(row),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _store_biometrics(row: TherapySession, snapshot: BiometricSnapshot, source: str) -> None:
    row.heart_rate = snapshot.heart_rate
    row.stress_level = snapshot.stress_level
    row.sleep_quality = snapshot.sleep_quality
    row.activity_level = snapshot.activity_level
    row.biometrics_source = source


def _store_recommendation(row: TherapySession, rec: SoundRecommendation) -> None:
    row.frequency_low, row.frequency_high = rec.frequency_range
    row.binaural_beat_type = rec.binaural_beat_type
    row.noise_profile = json.dumps(rec.noise_profile)
    row.bass_intensity = rec.intensity_map.bass
    row.treble_intensity = rec.intensity_map.treble
    row.nature_intensity = rec.intensity_map.nature


async def create_session(
    session: AsyncSession,
    mode: str,
    model: PredictiveModel | None = None,
    blend_weight: float = DEFAULT_BLEND_WEIGHT,
) -> TherapySession:
    """Start a session from the neutral reading and the default recommendation."""
    row = TherapySession(mode=mode, mood=mode)
    _store_biometrics(row, NEUTRAL_SNAPSHOT, "default")
    rec = recommend(
        mode, NEUTRAL_SNAPSHOT, DEFAULT_RECOMMENDATION, model, blend_weight=blend_weight
    )
    _store_recommendation(row, rec)

    session.add(row)
    await session.commit()
    await session.refresh(row)
    logger.info("Started %s session %s", mode, row.id)
    return row


async def update_session(
    session: AsyncSession,
    row: TherapySession,
    *,
    mood: str | None = None,
    biometrics: BiometricSnapshot | None = None,
    biometrics_source: str = "client",
    model: PredictiveModel | None = None,
    blend_weight: float = DEFAULT_BLEND_WEIGHT,
) -> TherapySession:
    """Re-map the session after a trigger and overwrite its recommendation.

    The stored recommendation is the prior; the previous value is not kept.
    """
    if mood is not None:
        row.mood = mood
    if biometrics is not None:
        _store_biometrics(row, biometrics, biometrics_source)

    rec = recommend(
        row.mood,
        session_biometrics(row),
        session_recommendation(row),
        model,
        blend_weight=blend_weight,
    )
    _store_recommendation(row, rec)

    await session.commit()
    await session.refresh(row)
    return row
