"""Process-wide wearable source, selected by settings."""

from soundtherapy.config import get_settings
from soundtherapy.sources.base import BiometricSource

_source: BiometricSource | None = None


def build_source(source_type: str) -> BiometricSource:
    if source_type == "simulated":
        from soundtherapy.sources.simulated import SimulatedSource

        return SimulatedSource(seed=get_settings().simulated_seed)
    if source_type == "garmin":
        from soundtherapy.sources.garmin.source import GarminSource

        return GarminSource()
    raise ValueError(f"Unknown wearable source '{source_type}'")


def get_biometric_source() -> BiometricSource:
    global _source
    if _source is None:
        _source = build_source(get_settings().wearable_source)
    return _source
