from soundtherapy.schemas.biometrics import NEUTRAL_SNAPSHOT, BiometricSnapshot
from soundtherapy.schemas.mode import TherapyModeRead
from soundtherapy.schemas.recommendation import (
    DEFAULT_RECOMMENDATION,
    BinauralBeatType,
    IntensityMap,
    RecommendationRequest,
    SoundRecommendation,
)
from soundtherapy.schemas.session import (
    MoodUpdate,
    TherapySessionCreate,
    TherapySessionRead,
)
from soundtherapy.schemas.system import ModelStatus, StatusResponse
from soundtherapy.schemas.wearable import WearableStatus

__all__ = [
    "DEFAULT_RECOMMENDATION",
    "NEUTRAL_SNAPSHOT",
    "BinauralBeatType",
    "BiometricSnapshot",
    "IntensityMap",
    "ModelStatus",
    "MoodUpdate",
    "RecommendationRequest",
    "SoundRecommendation",
    "StatusResponse",
    "TherapyModeRead",
    "TherapySessionCreate",
    "TherapySessionRead",
    "WearableStatus",
]
