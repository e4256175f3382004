from pydantic import BaseModel, ConfigDict


class BiometricSnapshot(BaseModel):
    """One reading from a wearable; values are trusted as supplied."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    heart_rate: float  # bpm
    stress_level: float  # 0-100
    sleep_quality: float  # 0-100
    activity_level: float  # 0-100

    def features(self) -> list[float]:
        return [self.heart_rate, self.stress_level, self.sleep_quality, self.activity_level]


NEUTRAL_SNAPSHOT = BiometricSnapshot(
    heart_rate=70.0, stress_level=50.0, sleep_quality=50.0, activity_level=50.0
)
