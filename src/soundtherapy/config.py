from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SOUNDTHERAPY_",
        case_sensitive=False,
    )

    # App
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    db_url: str = "sqlite+aiosqlite:///./soundtherapy.db"

    # Predictive model (NumPy .npz with "weights" and "bias")
    predictor_path: Path | None = None
    predictor_blend_weight: float = Field(default=0.25, ge=0.0, le=1.0)

    # Modes
    premium_unlocked: bool = False

    # Wearable
    wearable_source: str = Field(default="simulated", pattern=r"^(simulated|garmin)$")
    simulated_seed: int | None = None

    # Garmin
    garmin_email: str = ""
    garmin_password: str = ""
    garmin_token_dir: Path = Field(default=Path(".garmin_tokens"))


def get_settings() -> Settings:
    return Settings()
