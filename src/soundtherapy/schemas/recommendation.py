from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from soundtherapy.schemas.biometrics import BiometricSnapshot

BinauralBeatType = Literal["theta", "delta", "alpha", "beta"]


class IntensityMap(BaseModel):
    model_config = ConfigDict(frozen=True)

    bass: float = Field(default=0.5, ge=0.0, le=1.0)
    treble: float = Field(default=0.5, ge=0.0, le=1.0)
    nature: float = Field(default=0.5, ge=0.0, le=1.0)


class SoundRecommendation(BaseModel):
    """Soundscape descriptor consumed by the playback layer."""

    model_config = ConfigDict(frozen=True)

    frequency_range: tuple[float, float] = (8.0, 12.0)  # Hz
    noise_profile: list[str] = Field(default_factory=list)  # mix-layering order
    binaural_beat_type: BinauralBeatType = "alpha"
    intensity_map: IntensityMap = Field(default_factory=IntensityMap)

    @model_validator(mode="after")
    def _check_range(self) -> "SoundRecommendation":
        low, high = self.frequency_range
        if low > high:
            raise ValueError(f"frequency_range low {low} exceeds high {high}")
        return self


DEFAULT_RECOMMENDATION = SoundRecommendation()


class RecommendationRequest(BaseModel):
    mood: str
    biometrics: BiometricSnapshot
    prior: SoundRecommendation | None = None
