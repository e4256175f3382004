from datetime import datetime

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from soundtherapy.database import Base


class TherapySession(Base):
    """A listening session and its single current recommendation (no history)."""

    __tablename__ = "therapy_sessions"

    id: Mapped[int] = mapped_column(primary_key=True)
    mode: Mapped[str] = mapped_column(String(20))  # relaxation, focus, sleep, premium
    mood: Mapped[str] = mapped_column(String(50))

    # Last biometric snapshot
    heart_rate: Mapped[float] = mapped_column(Float)
    stress_level: Mapped[float] = mapped_column(Float)
    sleep_quality: Mapped[float] = mapped_column(Float)
    activity_level: Mapped[float] = mapped_column(Float)
    biometrics_source: Mapped[str] = mapped_column(
        String(20), default="default"
    )  # default, client, simulated, garmin

    # Current recommendation
    frequency_low: Mapped[float] = mapped_column(Float)
    frequency_high: Mapped[float] = mapped_column(Float)
    binaural_beat_type: Mapped[str] = mapped_column(String(10))
    noise_profile: Mapped[str] = mapped_column(Text, default="[]")  # JSON list
    bass_intensity: Mapped[float] = mapped_column(Float)
    treble_intensity: Mapped[float] = mapped_column(Float)
    nature_intensity: Mapped[float] = mapped_column(Float)

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)
