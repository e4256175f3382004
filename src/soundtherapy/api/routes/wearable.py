"""Wearable connection endpoints: connect, disconnect, read."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.schemas.wearable import WearableStatus
from soundtherapy.sources.base import BiometricSource, SourceDisconnected
from soundtherapy.sources.registry import get_biometric_source

router = APIRouter(prefix="/api/wearable", tags=["wearable"])
logger = logging.getLogger(__name__)


def _status(source: BiometricSource) -> WearableStatus:
    return WearableStatus(source_type=source.source_type, connected=source.connected)


@router.get("/status", response_model=WearableStatus)
async def get_wearable_status(
    source: BiometricSource = Depends(get_biometric_source),
) -> WearableStatus:
    return _status(source)


@router.post("/connect", response_model=WearableStatus)
async def connect_wearable(
    source: BiometricSource = Depends(get_biometric_source),
) -> WearableStatus:
    """Connect the configured wearable. Safe to call again after a failure."""
    if not await source.connect():
        logger.warning("Wearable %s failed to connect", source.source_type)
        raise HTTPException(
            status_code=503,
            detail=f"Failed to connect to {source.source_type} wearable.",
        )
    return _status(source)


@router.post("/disconnect", response_model=WearableStatus)
async def disconnect_wearable(
    source: BiometricSource = Depends(get_biometric_source),
) -> WearableStatus:
    await source.disconnect()
    return _status(source)


@router.get("/reading", response_model=BiometricSnapshot)
async def read_wearable(
    source: BiometricSource = Depends(get_biometric_source),
) -> BiometricSnapshot:
    """Take a single reading from the connected wearable."""
    try:
        return await source.read()
    except SourceDisconnected as e:
        raise HTTPException(status_code=409, detail=str(e)) from None
