from datetime import datetime

from pydantic import BaseModel, Field

from soundtherapy.schemas.biometrics import BiometricSnapshot
from soundtherapy.schemas.recommendation import SoundRecommendation


class TherapySessionCreate(BaseModel):
    mode: str = Field(pattern=r"^(relaxation|focus|sleep|premium)$")


class MoodUpdate(BaseModel):
    mood: str = Field(min_length=1, max_length=50)


class TherapySessionRead(BaseModel):
    id: int
    mode: str
    mood: str
    biometrics: BiometricSnapshot
    recommendation: SoundRecommendation
    created_at: datetime
    updated_at: datetime
